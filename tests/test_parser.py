"""Test class ExpressionParser."""

import pytest

from basic_calculator.common.errors import ErrorKind, EvaluationError
from basic_calculator.common.models import EvaluationFailure, EvaluationSuccess
from basic_calculator.common.parser import ExpressionParser


def test_tokenize_basic():
    """Tokenize splits a compact expression into correct tokens."""
    tokens = list(ExpressionParser.tokenize("12+(3*45)"))
    assert tokens == ["12", "+", "(", "3", "*", "45", ")"]


def test_tokenize_skips_whitespace():
    """Whitespace between and around tokens is ignored."""
    tokens = list(ExpressionParser.tokenize("  7 -\t2 "))
    assert tokens == ["7", "-", "2"]


def test_tokenize_invalid_character_reports_position():
    """A character outside the alphabet raises with its position."""
    with pytest.raises(EvaluationError) as exc_info:
        list(ExpressionParser.tokenize("2+a"))
    assert exc_info.value.kind is ErrorKind.INVALID_CHARACTER
    assert exc_info.value.position == 2


@pytest.mark.parametrize("incoming,top,expected", [
    ("+", "+", True),
    ("-", "+", True),
    ("+", "*", True),
    ("/", "*", True),
    ("*", "+", False),
    ("/", "-", False),
    ("+", "(", False),
    ("*", "(", False),
])
def test_has_precedence(incoming, top, expected):
    """has_precedence only lets higher-precedence operators skip the reduction."""
    assert ExpressionParser.has_precedence(incoming, top) == expected


def test_apply_operator_pops_right_operand_first():
    """The top of the value stack is the right operand."""
    values = [10.0, 4.0]
    ExpressionParser.apply_operator("-", values)
    assert values == [6.0]


def test_apply_operator_missing_operand():
    """Applying an operator to a single value is malformed, not an IndexError."""
    with pytest.raises(EvaluationError) as exc_info:
        ExpressionParser.apply_operator("+", [1.0])
    assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION


@pytest.mark.parametrize("expr,expected", [
    ("2+3", 5.0),
    ("10-2", 8.0),
    ("3*5", 15.0),
    ("8/2", 4.0),
    ("7/2", 3.5),
    ("2+3*4", 14.0),  # tests precedence
    ("(2+3)*4", 20.0),  # parentheses override precedence
    ("8-3-2", 3.0),  # left-associative
    ("16/4/2", 2.0),
    ("2*(3+(4-1))*2", 24.0),
    ("7 + 3 * 2 - 4 / 2", 11.0),
    ("((42))", 42.0),
    ("007", 7.0),
    ("0/5", 0.0),
])
def test_compute_valid(expr, expected):
    """compute returns correct result for valid expressions."""
    assert ExpressionParser.compute(expr) == expected


def test_compute_whitespace_tolerance():
    """Spaces do not change the result."""
    assert ExpressionParser.compute("2 + 3") == ExpressionParser.compute("2+3")


@pytest.mark.parametrize("expr,kind", [
    ("10/0", ErrorKind.DIVISION_BY_ZERO),
    ("1/(2-2)", ErrorKind.DIVISION_BY_ZERO),
    ("", ErrorKind.MALFORMED_EXPRESSION),
    ("   ", ErrorKind.MALFORMED_EXPRESSION),
    ("2+", ErrorKind.MALFORMED_EXPRESSION),
    ("*3", ErrorKind.MALFORMED_EXPRESSION),
    ("2**3", ErrorKind.MALFORMED_EXPRESSION),
    ("2 3", ErrorKind.MALFORMED_EXPRESSION),
    ("2(3)", ErrorKind.MALFORMED_EXPRESSION),
    ("()", ErrorKind.MALFORMED_EXPRESSION),
    ("(1+2", ErrorKind.UNBALANCED_PARENTHESES),
    ("((1)", ErrorKind.UNBALANCED_PARENTHESES),
    ("1+2)", ErrorKind.UNBALANCED_PARENTHESES),
    (")", ErrorKind.UNBALANCED_PARENTHESES),
    ("2+x", ErrorKind.INVALID_CHARACTER),
    ("1.5+1", ErrorKind.INVALID_CHARACTER),
    ("2^3", ErrorKind.INVALID_CHARACTER),
])
def test_compute_invalid_expression(expr, kind):
    """compute raises EvaluationError with the matching kind for bad input."""
    with pytest.raises(EvaluationError) as exc_info:
        ExpressionParser.compute(expr)
    assert exc_info.value.kind is kind
    assert exc_info.value.expression == expr


def test_evaluation_error_is_value_error():
    """EvaluationError can be handled as a ValueError."""
    with pytest.raises(ValueError):
        ExpressionParser.compute("10/0")


def test_evaluate_success():
    """evaluate wraps a computed value in EvaluationSuccess."""
    outcome = ExpressionParser.evaluate("2+3*4")
    assert isinstance(outcome, EvaluationSuccess)
    assert outcome.ok is True
    assert outcome.expression == "2+3*4"
    assert outcome.result == 14.0


def test_evaluate_failure_does_not_return_infinity():
    """Division by zero is reported, never returned as infinity."""
    outcome = ExpressionParser.evaluate("10/0")
    assert isinstance(outcome, EvaluationFailure)
    assert outcome.ok is False
    assert outcome.error is ErrorKind.DIVISION_BY_ZERO
    assert outcome.message


def test_evaluate_unclosed_parenthesis_is_not_auto_closed():
    """A pending '(' is an error rather than an implicitly closed group."""
    outcome = ExpressionParser.evaluate("(1+2")
    assert not outcome.ok
    assert outcome.error is ErrorKind.UNBALANCED_PARENTHESES


@pytest.mark.parametrize("expr", ["2+3*4", "(1+2", "10/0"])
def test_evaluate_is_idempotent(expr):
    """Evaluating the same string repeatedly gives the same outcome."""
    outcomes = [ExpressionParser.evaluate(expr) for _ in range(3)]
    assert outcomes[0] == outcomes[1] == outcomes[2]
