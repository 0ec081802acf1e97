"""
Command-line front end for the calculator.

This script either:
- replays a sequence of button presses and prints the final screen, or
- evaluates a single expression directly

Examples
--------
basic-calculator "2+3*4="     -> 14.0
basic-calculator -e "(2+3)*4" -> 20.0
basic-calculator "1/0="       -> Error
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from basic_calculator.common.logger import configure_logging, logger
from basic_calculator.common.models import CalculatorState
from basic_calculator.common.parser import ExpressionParser
from basic_calculator.keypad.buttons import BUTTON_LABELS, ERROR_TEXT, apply_button, format_result

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    keys : Optional[str]
        Button labels to press in order, spaces ignored.
    expression : Optional[str]
        Expression to evaluate directly.
    log_level : str
        Logging level name.
    """

    keys: Optional[str] = Field(default=None, description="Button presses to replay")
    expression: Optional[str] = Field(default=None, description="Expression to evaluate")
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("keys")
    def keys_must_be_buttons(cls, v: Optional[str]) -> Optional[str]:
        """Ensure that every key is a label found on the keypad."""
        if v is None:
            return v
        unknown = sorted({key for key in v if not key.isspace() and key not in BUTTON_LABELS})
        if unknown:
            raise ValueError(f"Unknown buttons: {' '.join(unknown)}")
        return v

    @field_validator("log_level")
    def log_level_must_exist(cls, v: str) -> str:
        """Normalize the level name and ensure logging knows it."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def exactly_one_input(self) -> "CliArgs":
        """Ensure that either keys or an expression is given, not both."""
        if (self.keys is None) == (self.expression is None):
            raise ValueError("Provide either button keys or --expression, not both")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Basic arithmetic calculator"
    )

    parser.add_argument(
        "keys",
        nargs="?",
        help="Button presses to replay, e.g. '12+3*4='",
    )
    parser.add_argument(
        "-e",
        "--expression",
        help="Evaluate an expression directly instead of pressing buttons",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(keys=args.keys, expression=args.expression, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def press_keys(keys: str, state: Optional[CalculatorState] = None) -> CalculatorState:
    """
    Replay button presses, one per non-space character.

    :param str keys: Button labels in order
    :param state: Starting state, empty calculator by default

    :return: State after the last press
    :rtype: CalculatorState
    """
    state = state or CalculatorState()
    for key in keys:
        if key.isspace():
            continue
        state = apply_button(key, state.input_text)
    return state


def run(cli_args: CliArgs) -> str:
    """
    Compute the text to print for validated arguments.

    :param CliArgs cli_args: Validated CLI arguments

    :return: Screen text, a formatted result or "Error"
    :rtype: str
    """
    if cli_args.expression is not None:
        outcome = ExpressionParser.evaluate(cli_args.expression)
        return format_result(outcome.result) if outcome.ok else ERROR_TEXT

    return press_keys(cli_args.keys).screen


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function used by the console script.

    :return: 0 when a result was printed, 1 when "Error" was printed
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)
    logger.info(f"🖥️ Calculator started with {cli_args.model_dump(exclude_none=True)}")

    screen = run(cli_args)
    print(screen)
    return 1 if screen == ERROR_TEXT else 0


if __name__ == "__main__":
    sys.exit(main())
