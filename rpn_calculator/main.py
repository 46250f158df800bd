"""
Command-line entrypoint.

Prints the result of a fixed set of sample expressions, one per line, in order.
"""

from typing import List

import numpy as np

from rpn_calculator.common.calculator import evaluate


SAMPLE_EXPRESSIONS: List[str] = [
    "1 2 +",
    "4 2 /",
    "1 1 + 2 +",
] + ["1 1 +" + " 1 +" * count for count in range(1, 8)]


def format_result(value: float) -> str:
    """
    Format a result with the shortest digits that round-trip in single precision.

    Integral values print without a fractional part ("3", not "3.0").

    :param float value: Evaluation result
    :return: Printable result
    :rtype: str
    """
    return np.format_float_positional(np.float32(value), trim="-")


def main() -> None:
    """
    Main function of the ``rpn-calculator`` command.
    """
    for expression in SAMPLE_EXPRESSIONS:
        print(format_result(evaluate(expression)))


if __name__ == "__main__":
    main()
