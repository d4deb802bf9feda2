# topmark:header:start
#
#   project      : UtilKit
#   file         : test_numbers.py
#   file_relpath : tests/formatting/test_numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for number formatting (separators, fixed decimals, currency, percentages)."""

from __future__ import annotations

import math

import pytest
from babel.core import UnknownLocaleError

from tests.conftest import parametrize
from utilkit.formatting import (
    format_currency,
    format_decimal,
    format_number,
    format_percentage,
    to_fixed,
)
from utilkit.formatting.numbers import canonical_number, group_thousands


@parametrize(
    "value, separator, expected",
    [
        (1234567, ",", "1,234,567"),
        (1234567.891, ",", "1,234,567.891"),
        (1234567.891, " ", "1 234 567.891"),
        (-1234.5, ",", "-1,234.5"),
        (999, ",", "999"),
        (1000, ".", "1.000"),
        (0, ",", "0"),
        (1234.0, ",", "1,234"),
    ],
)
def test_format_number(value: float, separator: str, expected: str) -> None:
    """It should group the integer part in threes and keep the rest."""
    assert format_number(value, separator) == expected


def test_format_number_non_finite() -> None:
    """It should pass NaN and infinities through unchanged."""
    assert format_number(math.inf) == "inf"
    assert format_number(-math.inf) == "-inf"
    assert format_number(math.nan) == "nan"


def test_group_thousands_and_canonical_number() -> None:
    """Helpers should insert separators from the right and drop a trailing '.0'."""
    assert group_thousands("1234567") == "1,234,567"
    assert group_thousands("123") == "123"
    assert canonical_number(1234.0) == "1234"
    assert canonical_number(0.1) == "0.1"
    assert canonical_number(7) == "7"


@parametrize(
    "value, decimals, expected",
    [
        (3.14159, 2, "3.14"),
        (10, 2, "10.00"),
        (2.5, 0, "3"),
        (-2.5, 0, "-3"),
        (1.005, 2, "1.00"),
        (0.125, 2, "0.13"),
        (-0.001, 2, "-0.00"),
        (-0.0, 2, "0.00"),
        (123.456, -1, "123"),
        (1e22, 1, "10000000000000000000000.0"),
    ],
)
def test_to_fixed(value: float, decimals: int, expected: str) -> None:
    """It should round the exact binary value half away from zero."""
    assert to_fixed(value, decimals) == expected
    assert format_decimal(value, decimals) == expected


def test_to_fixed_non_finite() -> None:
    """It should render non-finite values with Python's spelling."""
    assert to_fixed(math.nan, 2) == "nan"
    assert to_fixed(-math.inf, 2) == "-inf"


@parametrize(
    "value, decimals, expected",
    [
        (0.15, 0, "15%"),
        (0.1534, 2, "15.34%"),
        (1, 0, "100%"),
        (0, 1, "0.0%"),
        (-0.5, 0, "-50%"),
    ],
)
def test_format_percentage(value: float, decimals: int, expected: str) -> None:
    """It should multiply by 100 and append a percent sign."""
    assert format_percentage(value, decimals) == expected


def test_format_currency_en_us() -> None:
    """It should follow the en_US conventions by default."""
    assert format_currency(1234.56) == "$1,234.56"
    assert format_currency(1234.56, "USD", "en-US") == "$1,234.56"
    assert format_currency(0) == "$0.00"


def test_format_currency_other_locale() -> None:
    """It should use the locale's decimal separator and currency symbol."""
    result: str = format_currency(1234.56, "EUR", "de_DE")

    assert "1.234,56" in result
    assert "€" in result


def test_format_currency_non_finite() -> None:
    """It should not hand non-finite values to the locale formatter."""
    assert format_currency(math.inf) == "inf"


def test_format_currency_unknown_locale() -> None:
    """It should raise for a locale without CLDR data."""
    with pytest.raises(UnknownLocaleError):
        format_currency(1, "USD", "xx_YY")
