# topmark:header:start
#
#   project      : UtilKit
#   file         : calendar.py
#   file_relpath : src/utilkit/dates/calendar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Calendar predicates: relative days, leap years and range membership."""

from __future__ import annotations

from datetime import date, datetime, timedelta


def _calendar_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _today(value: date, now: datetime | None) -> date:
    if now is not None:
        return _calendar_day(now)
    if isinstance(value, datetime) and value.tzinfo is not None:
        return datetime.now(value.tzinfo).date()
    return date.today()


def is_today(value: date, now: datetime | None = None) -> bool:
    """Return True if ``value`` falls on the current calendar day.

    Args:
        value (date): Date or datetime to test.
        now (datetime | None): Reference instant; the local current time if None.
            Aware values are compared against the current time in their own zone.

    Returns:
        bool: True for any time of today.
    """
    return _calendar_day(value) == _today(value, now)


def is_yesterday(value: date, now: datetime | None = None) -> bool:
    """Return True if ``value`` falls on the calendar day before ``now``."""
    return _calendar_day(value) == _today(value, now) - timedelta(days=1)


def is_tomorrow(value: date, now: datetime | None = None) -> bool:
    """Return True if ``value`` falls on the calendar day after ``now``."""
    return _calendar_day(value) == _today(value, now) + timedelta(days=1)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years (2024, 2000 but not 1900)."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_between(
    value: datetime,
    start: datetime,
    end: datetime,
    inclusive: bool = True,
) -> bool:
    """Return True if ``value`` lies between ``start`` and ``end``.

    Args:
        value (datetime): Instant to test.
        start (datetime): Lower bound.
        end (datetime): Upper bound.
        inclusive (bool): Whether the bounds themselves are inside the range.
            Defaults to True.

    Returns:
        bool: Range membership.
    """
    if inclusive:
        return start <= value <= end
    return start < value < end
