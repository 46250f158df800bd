"""Evaluate RPN expressions: tokenize, then reduce."""
from typing import Optional

from rpn_calculator.common.errors import RPNError
from rpn_calculator.common.operations import OperationResult
from rpn_calculator.common.parser import ExpressionParser
from rpn_calculator.common.stack import reduce


def evaluate(expression: str) -> float:
    """
    Evaluate an RPN expression.

    :param str expression: Space-separated RPN expression, e.g. "1 3 +"

    :return: Final stack value in single precision
    :rtype: float
    :raises MalformedTokenError: If a token is neither an operator nor a number
    :raises StackUnderflowError: If an operator lacks operands
    :raises EmptyResultError: If no value remains after reduction
    """
    return reduce(ExpressionParser.tokenize(expression))


def try_evaluate(expression: str, line: Optional[int] = None) -> OperationResult:
    """
    Evaluate an RPN expression, capturing evaluation errors in the result.

    :param str expression: Space-separated RPN expression
    :param int line: Optional line number carried into the result

    :return: Result holding either the value or the error
    :rtype: OperationResult
    """
    try:
        value = evaluate(expression)
    except RPNError as exc:
        return OperationResult(
            expression=expression,
            line=line,
            error=str(exc),
            error_kind=type(exc).__name__,
        )
    return OperationResult(expression=expression, line=line, result=value)
