"""Stack machine reducing a token sequence to a single value."""
from collections.abc import Iterable
import operator
from typing import Callable, List, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from rpn_calculator.common.errors import EmptyResultError, StackUnderflowError
from rpn_calculator.common.logger import logger
from rpn_calculator.common.tokens import Number, Operator, OperatorKind, Token


# Type alias for operator functions (taking two float32 values, returning one)
OperatorFn = Callable[[np.float32, np.float32], np.float32]

OPERATORS: dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: operator.truediv,
}


class BinaryOperation(BaseModel):
    """One operator applied to the two topmost stack values."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind
    left: float = Field(..., description="Second value from the top of the stack")
    right: float = Field(..., description="Top value of the stack")

    def eval(self) -> float:
        """
        Compute ``left <op> right`` in single precision.

        Division by zero yields infinity or NaN following IEEE-754.

        :return: Result of the operation
        :rtype: float
        """
        with np.errstate(all="ignore"):
            result = OPERATORS[self.kind](np.float32(self.left), np.float32(self.right))
        return float(result)


class RPNStack:
    """
    LIFO value stack driven by tokens.

    Numbers are pushed; an operator pops two values and pushes its result,
    so the stack shrinks by one for every operator.
    """

    def __init__(self):
        self._values: List[float] = []

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> List[float]:
        """Copy of the stack contents, bottom first."""
        return list(self._values)

    def push(self, token: Token, position: Optional[int] = None) -> None:
        """
        Apply one token to the stack.

        :param Token token: Number or operator
        :param int position: Optional 1-based position of the token, used in error messages

        :return: None
        :raises StackUnderflowError: If an operator finds fewer than two values
        :raises TypeError: If the token is not a ``Number`` or an ``Operator``
        """
        if isinstance(token, Number):
            self._values.append(token.value)
        elif isinstance(token, Operator):
            if len(self._values) < 2:
                raise StackUnderflowError(token.symbol, position, len(self._values))
            right = self._values.pop()
            left = self._values.pop()
            self._values.append(BinaryOperation(kind=token.kind, left=left, right=right).eval())
        else:
            raise TypeError(f"Unsupported token type: {type(token).__name__}")

    def result(self) -> float:
        """
        Return the topmost value.

        Values below the top are ignored, so "1 2 3" evaluates to 3.

        :return: Top of the stack
        :rtype: float
        :raises EmptyResultError: If the stack is empty
        """
        if not self._values:
            raise EmptyResultError()
        if len(self._values) > 1:
            logger.debug(f"Ignoring {len(self._values) - 1} leftover value(s) below the top")
        return self._values[-1]


def reduce(tokens: Iterable[Token]) -> float:
    """
    Reduce a token sequence on a fresh stack and return the final value.

    :param Iterable[Token] tokens: Tokens in evaluation order

    :return: Top of the stack once all tokens are consumed
    :rtype: float
    :raises StackUnderflowError: If an operator lacks operands
    :raises EmptyResultError: If no value remains
    """
    stack = RPNStack()
    for position, token in enumerate(tokens, start=1):
        stack.push(token, position)
    return stack.result()
