"""Button dispatch for the calculator front end."""
from typing import FrozenSet, List

from basic_calculator.common.logger import logger
from basic_calculator.common.models import CalculatorState
from basic_calculator.common.parser import ExpressionParser

CLEAR = "C"
EQUALS = "="
ERROR_TEXT = "Error"

# Keypad layout, top row first
BUTTON_ROWS: List[List[str]] = [
    ["7", "8", "9", "/"],
    ["4", "5", "6", "*"],
    ["1", "2", "3", "-"],
    [CLEAR, "0", EQUALS, "+"],
]

# Every accepted label; the evaluator also understands parentheses
BUTTON_LABELS: FrozenSet[str] = frozenset(
    [label for row in BUTTON_ROWS for label in row] + ["(", ")"]
)


def format_result(value: float) -> str:
    """
    Convert a computed value to the text shown on screen.

    :param float value: Evaluated result

    :return: Default decimal representation (5.0 for five)
    :rtype: str
    """
    return str(value)


def apply_button(label: str, current_input: str) -> CalculatorState:
    """
    Compute the calculator state after a button press.

    - "C" clears both the input and the shown result
    - "=" evaluates the input and shows the result, or "Error"
    - any other label is appended to the input and clears the shown result

    :param str label: Label of the pressed button
    :param str current_input: Expression typed so far

    :return: New calculator state
    :rtype: CalculatorState
    """
    logger.debug(f"🔘 Button {label!r} pressed with input {current_input!r}")

    if label == CLEAR:
        return CalculatorState()

    if label == EQUALS:
        outcome = ExpressionParser.evaluate(current_input)
        if outcome.ok:
            return CalculatorState(input_text=current_input, display_text=format_result(outcome.result))
        return CalculatorState(input_text=current_input, display_text=ERROR_TEXT)

    return CalculatorState(input_text=current_input + label)
