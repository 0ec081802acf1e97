"""Error kinds reported by the expression evaluator."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Reasons an expression can fail to evaluate."""

    DIVISION_BY_ZERO = "DivisionByZero"
    UNBALANCED_PARENTHESES = "UnbalancedParentheses"
    MALFORMED_EXPRESSION = "MalformedExpression"
    INVALID_CHARACTER = "InvalidCharacter"


class EvaluationError(ValueError):
    """
    Raised inside the evaluator when an expression cannot be computed.

    :param ErrorKind kind: Category of the failure
    :param str expression: Expression being evaluated
    :param str detail: Human readable description
    :param Optional[int] position: Index of the offending character, when known
    """

    def __init__(
        self,
        kind: ErrorKind,
        expression: str,
        detail: str,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(f"{kind.value}: {detail}")
        self.kind = kind
        self.expression = expression
        self.detail = detail
        self.position = position
