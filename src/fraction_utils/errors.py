"""Exceptions raised when a Fraction cannot be built."""


class FractionError(ValueError):
    """Base class for all fraction errors."""


class InvalidDenominator(FractionError):
    """Raised when a denominator is not allowed."""


class DenominatorCannotBeZero(InvalidDenominator):
    """Raised when a denominator is 0."""

    def __init__(self, message: str = "Denominator cannot be zero"):
        super().__init__(message)


class FractionCannotBeBothMixedAndImproper(FractionError):
    """Raised when a mixed number is given an improper fractional part."""

    def __init__(self, numerator: int, denominator: int):
        super().__init__(
            f"A mixed number needs a proper fractional part, got {numerator}/{denominator}"
        )


class CannotParseFraction(FractionError):
    """Raised when a string does not follow the fraction grammar.

    Args:
        text: The string that failed to parse.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'Cannot parse fraction from string "{text}"')


class NotNumeric(FractionError):
    """Raised when a float conversion is given something that isn't a real number."""

    def __init__(self, value: object):
        super().__init__(f"Argument passed is not a numeric value: {value!r}")


class ArithmeticOverflow(FractionError, OverflowError):
    """Raised when a component does not fit in a 64-bit signed integer."""
