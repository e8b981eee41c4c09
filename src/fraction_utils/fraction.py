"""The Fraction value type."""

import numbers
from typing import Optional, Tuple, Union

from fraction_utils.errors import (
    DenominatorCannotBeZero,
    FractionCannotBeBothMixedAndImproper,
)
from fraction_utils.number_utils import (
    _check_int64,
    _reduce_pair,
    _sign,
)


def _as_int(value: object, name: str) -> int:
    """Validate a constructor argument and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return _check_int64(int(value))


class Fraction:
    """Representation of a fraction, e.g. 3/4, 76/123, 2 3/4 etc.

    A Fraction holds up to three components: a whole number, a numerator and
    a denominator. Which of them are set depends on how it was built:

    - ``Fraction(3)`` is the whole number 3
    - ``Fraction(3, 4)`` is the fraction 3/4
    - ``Fraction(2, 3, 4)`` is the mixed number 2 3/4

    Construction never reduces and never moves signs, so ``Fraction(-1, -2)``
    prints as ``-1/-2``. Use :meth:`simplify` to get the canonical form.
    Instances are immutable; every operation returns a new Fraction.

    Raises:
        DenominatorCannotBeZero: If the denominator is 0.
        FractionCannotBeBothMixedAndImproper: If a mixed number is given a
            fractional part with ``|numerator| >= |denominator|``.
        ArithmeticOverflow: If a component does not fit in 64 bits.
        TypeError: If a component is not an integer.
    """

    __slots__ = ("_whole_number", "_numerator", "_denominator")

    def __init__(
        self, first: int, second: Optional[int] = None, third: Optional[int] = None
    ):
        whole_number = numerator = denominator = None

        if second is None and third is None:
            # only first was set
            whole_number = _as_int(first, "whole number")
        elif third is None:
            numerator = _as_int(first, "numerator")
            denominator = _as_int(second, "denominator")
        elif second is None:
            raise TypeError("A mixed number needs a numerator")
        else:
            whole_number = _as_int(first, "whole number")
            numerator = _as_int(second, "numerator")
            denominator = _as_int(third, "denominator")

        if denominator == 0:
            raise DenominatorCannotBeZero()

        if whole_number is not None and numerator is not None:
            if abs(numerator) >= abs(denominator):
                raise FractionCannotBeBothMixedAndImproper(numerator, denominator)

        self._whole_number = whole_number
        self._numerator = numerator
        self._denominator = denominator

    # --- Factories ---

    @classmethod
    def from_string(cls, text: str) -> "Fraction":
        """Create a Fraction from a string like '40', '1/3' or '3 4/5'."""
        from fraction_utils.parsing import fraction_from_string

        return fraction_from_string(text)

    @classmethod
    def from_float(cls, value: float) -> "Fraction":
        """Create a simplified Fraction from a float, to 8 decimal places."""
        from fraction_utils.parsing import fraction_from_float

        return fraction_from_float(value)

    # --- Accessors ---

    @property
    def whole_number(self) -> Optional[int]:
        return self._whole_number

    @property
    def numerator(self) -> Optional[int]:
        return self._numerator

    @property
    def denominator(self) -> Optional[int]:
        return self._denominator

    def _components(self) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        return self._whole_number, self._numerator, self._denominator

    # --- Classification ---

    def is_whole_number(self) -> bool:
        return self._numerator is None

    def is_proper(self) -> bool:
        return (
            self._whole_number is None
            and abs(self._numerator) < abs(self._denominator)
        )

    def is_improper(self) -> bool:
        return (
            self._whole_number is None
            and abs(self._numerator) >= abs(self._denominator)
        )

    def is_mixed(self) -> bool:
        return self._whole_number is not None and self._numerator is not None

    def is_integer(self) -> bool:
        """Check if the value of this fraction is a whole number, e.g. 4/2."""
        return self.simplify().is_whole_number()

    def is_same_value_as(self, other: "Fraction") -> bool:
        """Check if two fractions have the same value once simplified.

        Unlike ``==``, which compares the stored components, this treats
        ``1/2`` and ``2/4`` as equal.
        """
        return self.simplify()._components() == other.simplify()._components()

    # --- Transforms ---

    def simplify(self) -> "Fraction":
        """Return the simplest representation of this fraction.

        The result is a whole number, a proper fraction in lowest terms
        with a positive denominator, or a mixed number whose sign lives
        on the whole part.

        Examples:
            >>> str(Fraction(2, 4).simplify())
            '1/2'
            >>> str(Fraction(21, 4).simplify())
            '5 1/4'
            >>> str(Fraction(1, -2).simplify())
            '-1/2'
        """
        if self.is_whole_number():
            # can't be simplified any further
            return self

        return _simplify_pair(*self._improper_pair())

    def reduce(self) -> "Fraction":
        """Divide numerator and denominator by their greatest common divisor.

        Signs are left where they are. A mixed number keeps its whole part
        and has its fractional part reduced.
        """
        if self.is_whole_number():
            return self

        numerator, denominator = _reduce_pair(self._numerator, self._denominator)

        if self.is_mixed():
            return Fraction(self._whole_number, numerator, denominator)

        return Fraction(numerator, denominator)

    def to_improper(self) -> "Fraction":
        """Convert to a single numerator/denominator pair, e.g. 1 1/2 => 3/2.

        Whole numbers become ``w/1``. Proper and improper fractions are
        returned as they are.
        """
        if self.is_whole_number() or self.is_mixed():
            return Fraction(*self._improper_pair())

        return self

    def to_mixed(self) -> "Fraction":
        """Convert an improper fraction to a mixed number, e.g. 5/3 => 1 2/3.

        A negative denominator is first moved onto the numerator. Whole
        numbers, proper fractions and mixed numbers are returned as they are.
        """
        if not self.is_improper():
            return self

        numerator, denominator = self._numerator, self._denominator
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        whole_number = _sign(numerator) * (abs(numerator) // denominator)
        remainder = abs(numerator) % denominator

        return Fraction(whole_number, remainder, denominator)

    # --- Arithmetic ---

    def _improper_pair(self) -> Tuple[int, int]:
        """Return the value as a plain numerator/denominator int pair.

        The numerator of a mixed number may not fit in 64 bits, so no
        Fraction is built here.
        """
        if self.is_whole_number():
            return self._whole_number, 1

        if not self.is_mixed():
            return self._numerator, self._denominator

        whole_number, numerator, denominator = self._components()

        # an odd number of negative components gives a negative numerator
        negatives = sum(1 for c in (whole_number, numerator, denominator) if c < 0)

        improper_numerator = abs(numerator) + abs(whole_number) * abs(denominator)
        if negatives % 2:
            improper_numerator = -improper_numerator

        return improper_numerator, denominator

    @staticmethod
    def _from_pair(numerator: int, denominator: int) -> "Fraction":
        """Build a simplified Fraction from a wide numerator/denominator pair.

        Products are computed with Python ints and only the components of
        the simplified result are range checked, so ArithmeticOverflow is
        raised only when the whole number, numerator or denominator of the
        simplest form doesn't fit in 64 bits.
        """
        return _simplify_pair(numerator, denominator)

    def multiply(self, other: "Fraction") -> "Fraction":
        a, b = self._improper_pair()
        c, d = other._improper_pair()
        return self._from_pair(a * c, b * d)

    def divide(self, other: "Fraction") -> "Fraction":
        """Divide by another fraction.

        Raises:
            DenominatorCannotBeZero: If ``other`` has a value of zero.
        """
        a, b = self._improper_pair()
        c, d = other._improper_pair()

        numerator = a * d
        denominator = b * c

        if denominator == 0:
            raise DenominatorCannotBeZero("Cannot divide by a fraction equal to zero")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        return self._from_pair(numerator, denominator)

    def add(self, other: "Fraction") -> "Fraction":
        a, b = self._improper_pair()
        c, d = other._improper_pair()
        return self._from_pair(a * d + c * b, b * d)

    def subtract(self, other: "Fraction") -> "Fraction":
        a, b = self._improper_pair()
        c, d = other._improper_pair()
        return self._from_pair(a * d - c * b, b * d)

    # --- Conversions ---

    def to_float(self) -> float:
        if self.is_whole_number():
            return float(self._whole_number)
        numerator, denominator = self._improper_pair()
        return numerator / denominator

    def to_string(self) -> str:
        """Format as '3', '3/4' or '2 3/4', the inverse of :meth:`from_string`."""
        if self._numerator is None:
            return str(self._whole_number)

        if self._whole_number is None:
            return f"{self._numerator}/{self._denominator}"

        return f"{self._whole_number} {self._numerator}/{self._denominator}"

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction('{self.to_string()}')"

    def __float__(self) -> float:
        return self.to_float()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __add__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: int) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: int) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)


def _simplify_pair(numerator: int, denominator: int) -> Fraction:
    """Build the simplest Fraction for a numerator/denominator int pair.

    The pair may hold values wider than 64 bits; only the components of
    the returned Fraction are range checked.
    """
    if numerator == 0:
        return Fraction(0)

    if numerator == denominator:
        return Fraction(1)

    if abs(numerator) == abs(denominator):
        return Fraction(-1)

    numerator, denominator = _reduce_pair(numerator, denominator)

    # make sure the negative sign is on the numerator
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    if denominator == 1:
        return Fraction(numerator)

    if abs(numerator) >= denominator:
        whole_number = _sign(numerator) * (abs(numerator) // denominator)
        return Fraction(whole_number, abs(numerator) % denominator, denominator)

    return Fraction(numerator, denominator)


def _coerce(value: object) -> Optional[Fraction]:
    """Turn an operand into a Fraction, or None if it isn't supported."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return Fraction(int(value))
    return None
