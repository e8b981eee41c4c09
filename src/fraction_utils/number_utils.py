from decimal import Decimal
from typing import Tuple

import numpy as np

from fraction_utils.errors import ArithmeticOverflow

# --- Constants ---

# Components are stored as 64-bit signed integers
INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

# Number of decimal places kept when converting a float
FLOAT_PRECISION = 8

# --- Functions ---


def greatest_common_divisor(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers.

    Euclid's algorithm on the absolute values. ``gcd(a, 0)`` is ``a``.

    Examples:
        >>> greatest_common_divisor(12, -18)
        6
        >>> greatest_common_divisor(0, 7)
        7
    """
    a, b = abs(a), abs(b)

    # make sure a is the larger value
    if a < b:
        a, b = b, a

    if b == 0:
        return a

    r = a % b
    while r > 0:
        a, b = b, r
        r = a % b

    return b


def _check_int64(value: int) -> int:
    """Check that an integer fits in a 64-bit signed integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflow(
            f"{value} is outside the 64-bit signed range [{INT64_MIN}, {INT64_MAX}]"
        )
    return value


def _reduce_pair(numerator: int, denominator: int) -> Tuple[int, int]:
    """Divide a numerator/denominator pair by their greatest common divisor."""
    gcd = greatest_common_divisor(numerator, denominator)
    if gcd == 0:
        return numerator, denominator
    return numerator // gcd, denominator // gcd


def _sign(value: int) -> int:
    """Return -1 for negative integers and 1 otherwise."""
    return -1 if value < 0 else 1


def _format_decimal(value: float) -> str:
    """Format a float with FLOAT_PRECISION decimal places, trailing zeros removed.

    Examples:
        >>> _format_decimal(1.25)
        '1.25'
        >>> _format_decimal(-0.000001)
        '-0.000001'
    """
    return f"{value:.{FLOAT_PRECISION}f}".rstrip("0")


def _decimal_to_pair(text: str) -> Tuple[int, int]:
    """Turn a decimal string (e.g. '-1.25') into an unreduced numerator/denominator pair."""
    _, _, decimals = text.partition(".")
    denominator = 10 ** len(decimals)
    numerator = int(Decimal(text) * denominator)
    return numerator, denominator
