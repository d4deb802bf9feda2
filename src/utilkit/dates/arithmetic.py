# topmark:header:start
#
#   project      : UtilKit
#   file         : arithmetic.py
#   file_relpath : src/utilkit/dates/arithmetic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Calendar arithmetic on `datetime` values.

Month and year arithmetic rolls over instead of clamping: the day of month is
kept and any surplus days spill into the following month, so January 31 plus one
month is March 3 (March 2 in a leap year). The time of day and ``tzinfo`` are
preserved by every helper.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import TypeVar

D = TypeVar("D", date, datetime)

_ONE_HOUR = timedelta(hours=1)
_ONE_MINUTE = timedelta(minutes=1)


def _with_rollover(value: D, year: int, month: int) -> D:
    # Day 1 always exists; the original day is then added as an offset.
    return value.replace(year=year, month=month, day=1) + timedelta(days=value.day - 1)


def add_days(value: D, days: int) -> D:
    """Return ``value`` shifted by ``days`` calendar days (negative moves back)."""
    return value + timedelta(days=days)


def add_months(value: D, months: int) -> D:
    """Return ``value`` shifted by ``months`` months, rolling over short months.

    Returns:
        D: ``add_months(datetime(2023, 1, 31), 1) == datetime(2023, 3, 3)``.
    """
    year, month0 = divmod(value.year * 12 + (value.month - 1) + months, 12)
    return _with_rollover(value, year, month0 + 1)


def add_years(value: D, years: int) -> D:
    """Return ``value`` shifted by ``years`` years; February 29 rolls to March 1."""
    return _with_rollover(value, value.year + years, value.month)


def diff_in_days(first: date, second: date) -> int:
    """Return the number of calendar days from ``second`` to ``first``.

    Only the calendar dates count: the time of day (and with it any DST shift)
    is ignored, so the result is antisymmetric.

    Returns:
        int: Positive when ``first`` is the later day.
    """
    return first.toordinal() - second.toordinal()


def diff_in_hours(first: datetime, second: datetime) -> int:
    """Return ``first - second`` in whole hours, rounded towards negative infinity."""
    return (first - second) // _ONE_HOUR


def diff_in_minutes(first: datetime, second: datetime) -> int:
    """Return ``first - second`` in whole minutes, rounded towards negative infinity."""
    return (first - second) // _ONE_MINUTE


def start_of_day(value: datetime) -> datetime:
    """Return ``value`` at 00:00:00.000000."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """Return ``value`` at 23:59:59.999999."""
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)


def start_of_month(value: datetime) -> datetime:
    """Return the first day of ``value``'s month at 00:00."""
    return start_of_day(value.replace(day=1))


def end_of_month(value: datetime) -> datetime:
    """Return the last day of ``value``'s month at 23:59:59.999999."""
    last_day: int = calendar.monthrange(value.year, value.month)[1]
    return end_of_day(value.replace(day=last_day))
