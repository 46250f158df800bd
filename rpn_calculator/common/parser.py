"""Split RPN expressions into typed tokens."""
import re
from typing import List

from rpn_calculator.common.errors import MalformedTokenError
from rpn_calculator.common.tokens import Number, Operator, OperatorKind, Token


# Symbol lookup for the fixed operator set
SYMBOLS: dict[str, OperatorKind] = {kind.value: kind for kind in OperatorKind}

# ASCII float literals: "3", "-2.5", ".5", "1e-3", "inf", "NaN"
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


class ExpressionParser:
    """
    Tokenize Reverse Polish Notation expressions.

    Tokens are separated by single spaces (e.g. "3 4 2 * +"). There is no
    precedence and no grouping: token order is evaluation order.

    Examples:
        - "1 3 +" -> [Number(1.0), Number(3.0), Operator(ADD)]
        - "" -> [Number(0.0)]
    """

    @staticmethod
    def split(expr: str) -> List[str]:
        """
        Split an expression on single spaces, dropping empty pieces.

        :param str expr: RPN expression

        :return: Raw token strings in input order
        :rtype: List[str]
        """
        return [raw for raw in expr.split(" ") if raw]

    @staticmethod
    def _is_number(raw: str) -> bool:
        """
        Determine if a raw token represents a numeric value.

        Only plain ASCII literals count: no digit separators, no surrounding
        whitespace and no non-ASCII digits.

        :param str raw: Raw token string

        :return: True if token is a float literal, else False
        :rtype: bool
        """
        return NUMBER_PATTERN.fullmatch(raw) is not None

    @staticmethod
    def classify(raw: str, position: int) -> Token:
        """
        Turn one raw token into an operator or a number.

        :param str raw: Raw token string
        :param int position: 1-based position of the token in the expression

        :return: Classified token
        :rtype: Token
        :raises MalformedTokenError: If the token is neither an operator nor a number
        """
        if raw in SYMBOLS:
            return Operator(kind=SYMBOLS[raw])
        if not ExpressionParser._is_number(raw):
            raise MalformedTokenError(raw, position)
        return Number(value=float(raw))

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Convert an expression into an ordered list of tokens.

        An empty (or blank) expression yields a single ``Number(0.0)``.

        :param str expr: RPN expression

        :return: List of tokens
        :rtype: List[Token]
        :raises MalformedTokenError: If a token cannot be classified
        """
        if not expr.strip():
            return [Number(value=0.0)]

        return [
            ExpressionParser.classify(raw, position)
            for position, raw in enumerate(ExpressionParser.split(expr), start=1)
        ]


tokenize = ExpressionParser.tokenize
