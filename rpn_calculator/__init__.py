"""Reverse Polish Notation calculator."""
from rpn_calculator.common.calculator import evaluate, try_evaluate
from rpn_calculator.common.errors import (
    EmptyResultError,
    MalformedTokenError,
    RPNError,
    StackUnderflowError,
)
from rpn_calculator.common.parser import tokenize
from rpn_calculator.common.stack import reduce

__all__ = [
    "EmptyResultError",
    "MalformedTokenError",
    "RPNError",
    "StackUnderflowError",
    "evaluate",
    "reduce",
    "tokenize",
    "try_evaluate",
]
