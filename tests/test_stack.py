"""Test class RPNStack, BinaryOperation and reduce."""
import math

import pytest

from rpn_calculator.common.errors import EmptyResultError, StackUnderflowError
from rpn_calculator.common.stack import BinaryOperation, RPNStack, reduce
from rpn_calculator.common.tokens import Number, Operator, OperatorKind


@pytest.mark.parametrize("kind,left,right,expected", [
    (OperatorKind.ADD, 1.0, 3.0, 4.0),
    (OperatorKind.SUB, 1.0, 3.0, -2.0),
    (OperatorKind.MUL, 1.0, 3.0, 3.0),
    (OperatorKind.DIV, 4.0, 2.0, 2.0),
])
def test_binary_operation_eval(kind, left, right, expected):
    """BinaryOperation computes left <op> right."""
    op = BinaryOperation(kind=kind, left=left, right=right)
    assert op.eval() == pytest.approx(expected, abs=1e-7)


def test_division_by_zero_is_infinite():
    """Dividing by zero follows IEEE-754 instead of raising."""
    assert BinaryOperation(kind=OperatorKind.DIV, left=1.0, right=0.0).eval() == math.inf
    assert BinaryOperation(kind=OperatorKind.DIV, left=-1.0, right=0.0).eval() == -math.inf
    assert math.isnan(BinaryOperation(kind=OperatorKind.DIV, left=0.0, right=0.0).eval())


def test_single_precision_arithmetic():
    """Results are rounded to float32."""
    result = BinaryOperation(kind=OperatorKind.DIV, left=1.0, right=3.0).eval()
    assert result != 1.0 / 3.0
    assert result == pytest.approx(1.0 / 3.0, abs=1e-7)


def test_operator_shrinks_stack_by_one():
    """An operator replaces the two topmost values with its result."""
    stack = RPNStack()
    for value in (5.0, 1.0, 3.0):
        stack.push(Number(value=value))
    stack.push(Operator(kind=OperatorKind.SUB))
    assert len(stack) == 2
    assert stack.values == [5.0, -2.0]


def test_push_underflow():
    """An operator with a single value on the stack raises StackUnderflowError."""
    stack = RPNStack()
    stack.push(Number(value=1.0), 1)
    with pytest.raises(StackUnderflowError) as exc_info:
        stack.push(Operator(kind=OperatorKind.ADD), 2)
    assert exc_info.value.symbol == "+"
    assert exc_info.value.position == 2
    assert exc_info.value.available == 1


def test_push_underflow_without_position():
    """Without a position, the error message leaves it out."""
    with pytest.raises(StackUnderflowError) as exc_info:
        RPNStack().push(Operator(kind=OperatorKind.MUL))
    assert exc_info.value.position is None
    assert "position" not in str(exc_info.value)
    assert exc_info.value.available == 0


def test_push_rejects_unknown_token():
    """Only Number and Operator tokens are accepted."""
    with pytest.raises(TypeError):
        RPNStack().push("1")


def test_result_returns_top():
    """Leftover values below the top are ignored."""
    stack = RPNStack()
    for value in (1.0, 2.0, 3.0):
        stack.push(Number(value=value))
    assert stack.result() == 3.0


def test_result_on_empty_stack():
    """An empty stack has no result."""
    with pytest.raises(EmptyResultError):
        RPNStack().result()


def test_reduce_empty_sequence():
    """Reducing no tokens raises EmptyResultError."""
    with pytest.raises(EmptyResultError):
        reduce([])


def test_reduce_uses_fresh_stack():
    """Consecutive reductions do not share state."""
    tokens = [Number(value=2.0), Number(value=3.0), Operator(kind=OperatorKind.MUL)]
    assert reduce(tokens) == 6.0
    assert reduce(tokens) == 6.0
