"""Pydantic models for evaluation outcomes and calculator state."""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from basic_calculator.common.errors import ErrorKind


class EvaluationSuccess(BaseModel):
    """Represents an expression that evaluated to a number."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")


class EvaluationFailure(BaseModel):
    """Represents an expression the evaluator rejected."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    expression: str = Field(..., description="Original arithmetic expression")
    error: ErrorKind = Field(..., description="Category of the failure")
    message: str = Field(default="", description="Human readable description of the failure")


# Either a computed value or the reason there is none
EvaluationOutcome = Union[EvaluationSuccess, EvaluationFailure]


class CalculatorState(BaseModel):
    """
    Text shown by the calculator front end.

    The state is immutable: every button press produces a new instance.
    """

    model_config = ConfigDict(frozen=True)

    input_text: str = Field(default="", description="Expression typed so far")
    display_text: str = Field(default="", description="Last result, or 'Error'")

    @property
    def screen(self) -> str:
        """Text on the calculator screen: the result if there is one, else the input."""
        return self.display_text or self.input_text
