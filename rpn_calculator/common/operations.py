"""Pydantic model for RPN evaluation results."""
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class OperationResult(BaseModel):
    """Represents the outcome of an evaluated RPN expression: a value or an error."""

    expression: str = Field(..., description="Original RPN expression")
    line: Optional[int] = Field(default=None, ge=1, description="Caller-assigned line number of the expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")
    error_kind: Optional[str] = Field(default=None, description="Name of the error class")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_line(self) -> str:
        """Format the outcome as one line of the results file."""
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
