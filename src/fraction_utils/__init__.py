"""Fraction Utils - Exact fractions, mixed numbers and their string forms."""

__version__ = "0.1.0"
__author__ = "Kurt Thorn"
__email__ = "kurt.thorn@gmail.com"

from .errors import (
    ArithmeticOverflow,
    CannotParseFraction,
    DenominatorCannotBeZero,
    FractionCannotBeBothMixedAndImproper,
    FractionError,
    InvalidDenominator,
    NotNumeric,
)
from .fraction import Fraction
from .number_utils import greatest_common_divisor
from .parsing import fraction_from_float, fraction_from_string

__all__ = [
    "Fraction",
    "fraction_from_float",
    "fraction_from_string",
    "greatest_common_divisor",
    "FractionError",
    "InvalidDenominator",
    "DenominatorCannotBeZero",
    "FractionCannotBeBothMixedAndImproper",
    "CannotParseFraction",
    "NotNumeric",
    "ArithmeticOverflow",
]
