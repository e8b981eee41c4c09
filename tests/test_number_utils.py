import pytest

from fraction_utils.errors import ArithmeticOverflow
from fraction_utils.number_utils import (
    INT64_MAX,
    INT64_MIN,
    _check_int64,
    _decimal_to_pair,
    _format_decimal,
    _reduce_pair,
    greatest_common_divisor,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (12, 18, 6),
        (18, 12, 6),
        (-12, 18, 6),
        (12, -18, 6),
        (17, 5, 1),
        (7, 0, 7),
        (0, 7, 7),
        (0, 0, 0),
        (2605020, 159780620, 20),
        (INT64_MIN, 2, 2),
    ],
)
def test_greatest_common_divisor(a, b, expected):
    assert greatest_common_divisor(a, b) == expected


def test_int64_bounds():
    assert INT64_MAX == 2**63 - 1
    assert INT64_MIN == -(2**63)
    assert _check_int64(INT64_MAX) == INT64_MAX
    assert _check_int64(INT64_MIN) == INT64_MIN


@pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1, 10**30])
def test_check_int64_rejects_out_of_range(value):
    with pytest.raises(ArithmeticOverflow):
        _check_int64(value)


@pytest.mark.parametrize(
    "numerator, denominator, expected",
    [
        (2, 4, (1, 2)),
        (-6, 4, (-3, 2)),
        (6, -4, (3, -2)),
        (0, -2, (0, -1)),
        (5, 7, (5, 7)),
    ],
)
def test_reduce_pair(numerator, denominator, expected):
    assert _reduce_pair(numerator, denominator) == expected


@pytest.mark.parametrize(
    "value, expected_text",
    [
        (1.25, "1.25"),
        (-0.5, "-0.5"),
        (0.000001, "0.000001"),
        (0.123456789, "0.12345679"),
        (1e-9, "0."),
    ],
)
def test_format_decimal(value, expected_text):
    assert _format_decimal(value) == expected_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.25", (125, 100)),
        ("-0.5", (-5, 10)),
        ("12345.1234", (123451234, 10000)),
        ("0.", (0, 1)),
    ],
)
def test_decimal_to_pair(text, expected):
    assert _decimal_to_pair(text) == expected
