"""Fraction parsing from strings and floats."""

import logging
import math
import numbers
import re

from fraction_utils.errors import CannotParseFraction, NotNumeric
from fraction_utils.fraction import Fraction, _simplify_pair
from fraction_utils.number_utils import (
    FLOAT_PRECISION,
    _decimal_to_pair,
    _format_decimal,
)

logger = logging.getLogger(__name__)

# --- Constants ---

# whole number, optionally followed by "/denominator" or " numerator/denominator"
FRACTION_PATTERN = re.compile(r"(-?[0-9]+)(?:(?: (-?[0-9]+))?/(-?[0-9]+))?")

# --- Functions ---


def fraction_from_string(text: str) -> Fraction:
    """Parse a Fraction from its string form.

    Surrounding whitespace is ignored. Values are not simplified, so the
    result prints back as the input text.

    Args:
        text: A whole number ("40"), a fraction ("1/3", "-1/-2") or a mixed
            number ("3 4/5").

    Returns:
        The Fraction described by the string.

    Raises:
        CannotParseFraction: If the string doesn't match the grammar.
        DenominatorCannotBeZero: If the denominator is 0.
        FractionCannotBeBothMixedAndImproper: If a mixed number has an
            improper fractional part, e.g. "1 4/3".
        TypeError: If ``text`` is not a string.

    Examples:
        >>> str(fraction_from_string("3 4/5"))
        '3 4/5'
        >>> fraction_from_string("1/3").is_proper()
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")

    match = FRACTION_PATTERN.fullmatch(text.strip())
    if match is None:
        logger.debug(f"Rejected fraction string {text!r}")
        raise CannotParseFraction(text)

    first, second, third = match.groups()

    if third is None:
        # whole number
        return Fraction(int(first))

    if second is not None:
        # x y/z
        return Fraction(int(first), int(second), int(third))

    # x/y
    return Fraction(int(first), int(third))


def fraction_from_float(value: float) -> Fraction:
    """Convert a float to a simplified Fraction.

    The conversion keeps FLOAT_PRECISION (8) decimal places: the value is
    formatted with that many places, trailing zeros are dropped and the
    remaining digits become the numerator over a power of ten. Anything
    beyond the eighth decimal place is rounded away.

    Args:
        value: Any real number, including NumPy float scalars.

    Returns:
        The simplified Fraction.

    Raises:
        NotNumeric: If ``value`` is not a finite real number.

    Examples:
        >>> str(fraction_from_float(1.25))
        '1 1/4'
        >>> str(fraction_from_float(-0.5))
        '-1/2'
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NotNumeric(value)

    if isinstance(value, numbers.Integral):
        return Fraction(int(value))

    value = float(value)
    if not math.isfinite(value):
        raise NotNumeric(value)

    if value.is_integer():
        return Fraction(int(value))

    text = _format_decimal(value)
    if float(text) != value:
        logger.debug(f"Rounded {value!r} to {FLOAT_PRECISION} decimal places: {text}")

    return _simplify_pair(*_decimal_to_pair(text))
