"""Token types produced by the tokenizer and consumed by the reducer."""
from enum import Enum
from typing import Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_float32(value: float) -> float:
    """
    Round a value to single precision.

    Values beyond the float32 range saturate to infinity instead of warning.

    :param float value: Value to round

    :return: Python float holding the float32 value
    :rtype: float
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


class OperatorKind(str, Enum):
    """Binary operators understood by the calculator, keyed by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class Number(BaseModel):
    """Numeric literal token."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Literal value, rounded to float32")

    @field_validator("value")
    def round_to_float32(cls, v: float) -> float:
        """Keep the literal inside the single precision domain."""
        return to_float32(v)


class Operator(BaseModel):
    """Operator token."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Which binary operation to apply")

    @property
    def symbol(self) -> str:
        return self.kind.value


Token = Union[Number, Operator]
