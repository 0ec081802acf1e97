"""Parse and evaluate arithmetic expressions safely."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Iterator, List, Tuple

from basic_calculator.common.errors import ErrorKind, EvaluationError
from basic_calculator.common.logger import logger
from basic_calculator.common.models import (
    EvaluationFailure,
    EvaluationOutcome,
    EvaluationSuccess,
)


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

DIGITS = "0123456789"
PARENTHESES = "()"


def _divide(a: float, b: float) -> float:
    """Divide a by b, refusing an exact zero divisor instead of returning infinity."""
    if b == 0.0:
        raise ZeroDivisionError("Cannot divide by zero")
    return operator.truediv(a, b)


# Mapping of operator symbols to (precedence, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, _divide),
}


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state kept between calls: both stacks live inside one evaluation
        - Malformed input is reported, never left to crash an empty pop

    Algorithm (two stacks, single left-to-right scan):
        1. Digits are grouped into integer literals and pushed on the value stack
        2. Operators wait on the operator stack until an operator of lower or
           equal precedence, a closing parenthesis or the end of input forces
           them to be applied
        3. Applying an operator pops the right operand, then the left one,
           and pushes the result

    Examples:
        - 2 + 3 * 4   -> 14.0
        - (2 + 3) * 4 -> 20.0
        - 8 - 3 - 2   -> 3.0 (left-associative)
    """

    @staticmethod
    def tokenize(expr: str) -> Iterator[str]:
        """
        Lazily split an arithmetic expression into tokens.

        Whitespace is skipped, consecutive digits form one number literal,
        and every operator or parenthesis is a token of its own.

        :param str expr: Arithmetic expression as a string

        :return: Iterator over tokens
        :rtype: Iterator[str]
        :raises EvaluationError: On a character outside the supported alphabet
        """
        i = 0
        while i < len(expr):
            char = expr[i]
            if char.isspace():
                i += 1
            elif char in DIGITS:
                start = i
                while i < len(expr) and expr[i] in DIGITS:
                    i += 1
                yield expr[start:i]
            elif char in OPERATORS or char in PARENTHESES:
                i += 1
                yield char
            else:
                raise EvaluationError(
                    ErrorKind.INVALID_CHARACTER,
                    expr,
                    f"Unexpected character {char!r} at position {i}",
                    position=i,
                )

    @staticmethod
    def has_precedence(incoming: str, top: str) -> bool:
        """
        Tell whether the operator on top of the stack must be applied before pushing `incoming`.

        :param str incoming: Operator about to be pushed
        :param str top: Operator currently on top of the stack

        :return: True if `top` should be reduced first
        :rtype: bool
        """
        if top in PARENTHESES:
            return False
        # Only a strictly higher-precedence incoming operator skips the reduction
        return OPERATORS[incoming][0] <= OPERATORS[top][0]

    @staticmethod
    def apply_operator(op: str, values: List[float], expr: str = "") -> None:
        """
        Pop two operands, apply `op` and push the result back.

        :param str op: Operator symbol
        :param List[float] values: Value stack, modified in place
        :param str expr: Expression being evaluated, for error reporting

        :return: None
        :raises EvaluationError: If an operand is missing or the divisor is zero
        """
        if len(values) < 2:
            raise EvaluationError(
                ErrorKind.MALFORMED_EXPRESSION,
                expr,
                f"Operator {op!r} is missing an operand",
            )
        b: float = values.pop()
        a: float = values.pop()
        try:
            values.append(OPERATORS[op][1](a, b))
        except ZeroDivisionError as exc:
            raise EvaluationError(ErrorKind.DIVISION_BY_ZERO, expr, str(exc)) from exc

    @staticmethod
    def compute(expr: str) -> float:
        """
        Evaluate an arithmetic expression, raising on failure.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises EvaluationError: If the expression is invalid or malformed
        """
        values: List[float] = []
        operators: List[str] = []

        for token in ExpressionParser.tokenize(expr):
            if token[0] in DIGITS:
                values.append(float(token))
            elif token == "(":
                operators.append(token)
            elif token == ")":
                while True:
                    if not operators:
                        raise EvaluationError(
                            ErrorKind.UNBALANCED_PARENTHESES,
                            expr,
                            "Closing parenthesis without a matching '('",
                        )
                    op = operators.pop()
                    if op == "(":
                        break
                    ExpressionParser.apply_operator(op, values, expr)
            else:
                while operators and ExpressionParser.has_precedence(token, operators[-1]):
                    ExpressionParser.apply_operator(operators.pop(), values, expr)
                operators.append(token)

        if "(" in operators:
            raise EvaluationError(
                ErrorKind.UNBALANCED_PARENTHESES,
                expr,
                "Opening parenthesis is never closed",
            )

        while operators:
            ExpressionParser.apply_operator(operators.pop(), values, expr)

        if len(values) != 1:
            detail = "Empty expression" if not values else "Operands left without an operator"
            raise EvaluationError(ErrorKind.MALFORMED_EXPRESSION, expr, detail)

        return values[0]

    @staticmethod
    def evaluate(expr: str) -> EvaluationOutcome:
        """
        Evaluate an arithmetic expression and report the value or the reason it failed.

        :param str expr: Arithmetic expression string

        :return: EvaluationSuccess with the result, or EvaluationFailure with its error kind
        :rtype: EvaluationOutcome
        """
        logger.debug(f"🧮🏁 Evaluating {expr!r}")
        try:
            result: float = ExpressionParser.compute(expr)
        except EvaluationError as exc:
            logger.info(f"🧮❌ Rejected {expr!r}: {exc}")
            return EvaluationFailure(expression=expr, error=exc.kind, message=exc.detail)

        logger.debug(f"🧮✅ {expr!r} = {result}")
        return EvaluationSuccess(expression=expr, result=result)
