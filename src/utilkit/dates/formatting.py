# topmark:header:start
#
#   project      : UtilKit
#   file         : formatting.py
#   file_relpath : src/utilkit/dates/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of dates: token patterns and relative times."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Final

DEFAULT_DATE_FORMAT: Final[str] = "YYYY-MM-DD"
JUST_NOW: Final[str] = "just now"

# Fixed unit lengths in seconds, largest first; months and years ignore the calendar.
RELATIVE_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("year", 31536000),
    ("month", 2592000),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def parse_iso_datetime(text: str) -> datetime:
    """Parse an ISO 8601 date or date-time string.

    A trailing ``Z`` is read as ``+00:00`` on every supported Python version.

    Raises:
        ValueError: If ``text`` is not an ISO 8601 date or date-time.
    """
    stripped: str = text.strip()
    if stripped[-1:] in ("Z", "z"):
        stripped = stripped[:-1] + "+00:00"
    return datetime.fromisoformat(stripped)


def format_date(value: date, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Render ``value`` by substituting the tokens of ``pattern``.

    Tokens: ``YYYY`` (year), ``MM`` (month), ``DD`` (day), ``HH`` (hour, 24h),
    ``mm`` (minute), ``ss`` (second). Every token except ``YYYY`` is zero-padded
    to two digits and every occurrence of a token is replaced. Time tokens of a
    plain `date` render as ``00``.

    Args:
        value (date): Date or datetime to render.
        pattern (str): Token pattern. Defaults to ``"YYYY-MM-DD"``.

    Returns:
        str: ``format_date(datetime(2024, 1, 15, 10, 30, 45), "YYYY-MM-DD HH:mm:ss")``
        is ``"2024-01-15 10:30:45"``.
    """
    replacements: tuple[tuple[str, str], ...] = (
        ("YYYY", str(value.year)),
        ("MM", f"{value.month:02d}"),
        ("DD", f"{value.day:02d}"),
        ("HH", f"{getattr(value, 'hour', 0):02d}"),
        ("mm", f"{getattr(value, 'minute', 0):02d}"),
        ("ss", f"{getattr(value, 'second', 0):02d}"),
    )
    result: str = pattern
    for token, text in replacements:
        result = result.replace(token, text)
    return result


def get_relative_time(value: datetime, base: datetime | None = None) -> str:
    """Describe ``value`` relative to ``base`` (default: now), e.g. ``"2 hours ago"``.

    The difference is bucketed into the largest unit it holds at least once;
    anything under a minute is ``"just now"``. Future instants read
    ``"in 5 days"``.
    """
    if base is None:
        base = datetime.now(value.tzinfo)
    seconds: int = math.floor((base - value).total_seconds())
    magnitude: int = abs(seconds)
    if magnitude < 60:
        return JUST_NOW

    for label, unit_seconds in RELATIVE_UNITS:
        count: int = magnitude // unit_seconds
        if count >= 1:
            unit: str = label + ("s" if count > 1 else "")
            return f"{count} {unit} ago" if seconds > 0 else f"in {count} {unit}"
    return JUST_NOW
