"""Errors raised while evaluating an RPN expression."""
from typing import Optional


def _at(position: Optional[int]) -> str:
    return f" at position {position}" if position is not None else ""


class RPNError(ValueError):
    """Base class for every evaluation failure."""


class MalformedTokenError(RPNError):
    """A token is neither an operator symbol nor a number."""

    def __init__(self, token: str, position: Optional[int] = None):
        self.token = token
        self.position = position
        super().__init__(f"Malformed token {token!r}{_at(position)}")


class StackUnderflowError(RPNError):
    """An operator was reached with fewer than two values on the stack."""

    def __init__(self, symbol: str, position: Optional[int], available: int):
        self.symbol = symbol
        self.position = position
        self.available = available
        super().__init__(
            f"Operator {symbol!r}{_at(position)} needs 2 operands, found {available}"
        )


class EmptyResultError(RPNError):
    """Reduction finished without any value on the stack."""

    def __init__(self):
        super().__init__("Expression produced no value")
