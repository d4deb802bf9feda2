# topmark:header:start
#
#   project      : UtilKit
#   file         : values.py
#   file_relpath : src/utilkit/validation/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validators for generic values: numbers, letters, emptiness, patterns, dates and JSON."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Sized
from datetime import date
from typing import TYPE_CHECKING, Any, Final

from utilkit.config.logging import get_logger
from utilkit.dates.formatting import parse_iso_datetime

if TYPE_CHECKING:
    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)

# Plain decimal notation with optional sign, fraction and exponent.
_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)
_ALPHA_RE: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z]+")
_ALPHANUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z0-9]+")


def is_numeric(value: str) -> bool:
    """Return True if ``value`` is a finite number in decimal notation.

    Surrounding whitespace is ignored. ``"123"``, ``"12.34"``, ``"-1e3"`` and
    ``".5"`` are numeric; ``"abc"``, ``""``, ``"inf"`` and ``"nan"`` are not.
    """
    candidate: str = value.strip()
    if _NUMERIC_RE.fullmatch(candidate) is None:
        return False
    return math.isfinite(float(candidate))


def is_alpha(value: str) -> bool:
    """Return True if ``value`` is made of ASCII letters only (and is not empty)."""
    return _ALPHA_RE.fullmatch(value) is not None


def is_alphanumeric(value: str) -> bool:
    """Return True if ``value`` is made of ASCII letters and digits only (and is not empty)."""
    return _ALPHANUMERIC_RE.fullmatch(value) is not None


def is_empty(value: Any) -> bool:
    """Return True for ``None`` and for any sized value of length zero.

    Strings, lists, tuples, sets and mappings are "empty" when they hold nothing.
    Any other value (numbers, booleans, objects) is never empty.

    Args:
        value (Any): The value to check.

    Returns:
        bool: True for ``None``, ``""``, ``[]`` and ``{}``; False for ``"text"`` or ``0``.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    """Return True if ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum


def matches_pattern(value: str, pattern: str | re.Pattern[str]) -> bool:
    """Return True if ``pattern`` matches anywhere in ``value``.

    Anchor the pattern (``^...$``) to require a full match. A pattern string that
    does not compile yields False instead of raising.

    Args:
        value (str): The string to check.
        pattern (str | re.Pattern[str]): A regular expression or its source.

    Returns:
        bool: True for ``matches_pattern("ABC123", r"^[A-Z]{3}\\d{3}$")``.
    """
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error as exc:
            logger.trace("Pattern %r does not compile: %s", pattern, exc)
            return False
    return pattern.search(value) is not None


def is_valid_date(value: str | date) -> bool:
    """Return True for a `date`/`datetime` object or an ISO 8601 date string.

    Strings are probed with `parse_iso_datetime` (``datetime.fromisoformat`` with a
    trailing ``Z`` read as UTC); anything it rejects is not a valid date.

    Args:
        value (str | date): The candidate.

    Returns:
        bool: True for ``"2024-01-15"`` and ``datetime.now()``, False for ``"invalid"``.
    """
    if isinstance(value, date):
        return True
    try:
        parse_iso_datetime(value)
    except ValueError as exc:
        logger.trace("Date probe failed for %r: %s", value, exc)
        return False
    return True


def is_valid_json(value: str) -> bool:
    """Return True if ``value`` is a JSON document.

    Args:
        value (str): The JSON text.

    Returns:
        bool: True for ``'{"key": "value"}'``, False for ``"invalid json"``.
    """
    try:
        json.loads(value)
    except ValueError as exc:
        logger.trace("JSON probe failed: %s", exc)
        return False
    return True
