# topmark:header:start
#
#   project      : UtilKit
#   file         : numbers.py
#   file_relpath : src/utilkit/formatting/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Number formatting: thousands separators, currency, percentages and fixed decimals.

Rounding:
    Fixed-point conversion rounds the *exact* binary value of a float half away
    from zero, so ``format_decimal(2.5, 0) == "3"`` and
    ``format_decimal(-2.5, 0) == "-3"``, while ``format_decimal(1.005, 2)`` is
    ``"1.00"`` because 1.005 is stored as 1.00499999...

Non-finite values:
    NaN and infinities are rendered with Python's spelling (``"nan"``, ``"inf"``,
    ``"-inf"``) and are never grouped or rounded.

Currency formatting is delegated to Babel (CLDR locale data); its output
(symbol placement, separators, non-breaking spaces) is Babel's contract.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

from babel import Locale
from babel.numbers import format_currency as _babel_format_currency

_INTEGER_PART_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?)(\d+)(.*)", re.ASCII | re.DOTALL)

# Integral floats below this bound are written without exponent or ".0".
_PLAIN_INTEGER_LIMIT: Final[float] = 1e21


def _is_non_finite(value: float) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def to_fixed(value: float, decimals: int) -> str:
    """Return ``value`` with exactly ``decimals`` digits after the decimal point.

    Args:
        value (float): The number to convert.
        decimals (int): Digits after the point; negative values are treated as 0.

    Returns:
        str: e.g. ``to_fixed(3.14159, 2) == "3.14"``, ``to_fixed(10, 2) == "10.00"``.
    """
    if _is_non_finite(value):
        return str(value)
    places: int = max(decimals, 0)
    # Negative zero prints without a sign; small negatives keep theirs ("-0.00").
    exact = Decimal(value) if value != 0 else Decimal(0)
    # Enough precision for the integer digits of any float plus the fraction.
    ctx = Context(prec=max(len(str(abs(int(exact)))), 1) + places + 2, rounding=ROUND_HALF_UP)
    quantized: Decimal = exact.quantize(Decimal(1).scaleb(-places), context=ctx)
    return format(quantized, "f")


def canonical_number(value: float) -> str:
    """Return the shortest decimal string that round-trips ``value``.

    Integral floats are written like integers (``1234.0`` -> ``"1234"``).
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return str(value)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def group_thousands(digits: str, separator: str = ",") -> str:
    """Insert ``separator`` between groups of three digits, counting from the right."""
    head: int = len(digits) % 3 or 3
    groups: list[str] = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_number(value: float, separator: str = ",") -> str:
    """Format ``value`` with a thousands separator in its integer part.

    The sign and the fractional part (or exponent) are passed through unchanged.

    Args:
        value (float): The number to format.
        separator (str): Group separator. Defaults to ``","``.

    Returns:
        str: ``format_number(1234567) == "1,234,567"``,
        ``format_number(1234567.891, " ") == "1 234 567.891"``.
    """
    text: str = canonical_number(value)
    match: re.Match[str] | None = _INTEGER_PART_RE.fullmatch(text)
    if match is None:
        return text
    sign, digits, rest = match.groups()
    return f"{sign}{group_thousands(digits, separator)}{rest}"


def normalize_locale(locale: str | Locale) -> Locale:
    """Parse a BCP 47 (``en-US``) or POSIX (``en_US``) locale identifier.

    Raises:
        babel.UnknownLocaleError: If no CLDR data exists for the locale.
        ValueError: If the identifier is malformed.
    """
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale.replace("-", "_"))


def format_currency(value: float, currency: str = "USD", locale: str | Locale = "en_US") -> str:
    """Format ``value`` as an amount of ``currency`` using ``locale`` conventions.

    Args:
        value (float): The amount.
        currency (str): ISO 4217 currency code. Defaults to ``"USD"``.
        locale (str | Locale): Locale identifier, ``en_US`` or ``en-US`` style.

    Returns:
        str: e.g. ``"$1,234.56"`` for ``en_US``; ``"1\\u202f234,56\\xa0€"`` for ``fr_FR``.
    """
    if _is_non_finite(value):
        return str(value)
    return _babel_format_currency(value, currency, locale=normalize_locale(locale))


def format_percentage(value: float, decimals: int = 0) -> str:
    """Format a ratio as a percentage (``0.15`` -> ``"15%"``).

    Args:
        value (float): The ratio; multiplied by 100.
        decimals (int): Digits after the decimal point. Defaults to 0.

    Returns:
        str: ``format_percentage(0.1534, 2) == "15.34%"``.
    """
    return f"{to_fixed(value * 100, decimals)}%"


def format_decimal(value: float, decimals: int) -> str:
    """Format ``value`` with a fixed number of decimal places.

    Returns:
        str: ``format_decimal(3.14159, 2) == "3.14"``, ``format_decimal(10, 2) == "10.00"``.
    """
    return to_fixed(value, decimals)
