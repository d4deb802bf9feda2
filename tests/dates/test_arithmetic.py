# topmark:header:start
#
#   project      : UtilKit
#   file         : test_arithmetic.py
#   file_relpath : tests/dates/test_arithmetic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for date arithmetic and day/month boundaries."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from hypothesis import given

from tests.conftest import parametrize
from tests.strategies_utilkit import s_datetimes
from utilkit.dates import (
    add_days,
    add_months,
    add_years,
    diff_in_days,
    diff_in_hours,
    diff_in_minutes,
    end_of_day,
    end_of_month,
    start_of_day,
    start_of_month,
)

BASE: datetime = datetime(2024, 1, 15, 10, 30, 45)


def test_add_days() -> None:
    """It should move across month and year boundaries."""
    assert add_days(BASE, 7) == datetime(2024, 1, 22, 10, 30, 45)
    assert add_days(BASE, -15) == datetime(2023, 12, 31, 10, 30, 45)
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)


@parametrize(
    "start, months, expected",
    [
        (datetime(2024, 1, 15), 1, datetime(2024, 2, 15)),
        (datetime(2024, 1, 15), 12, datetime(2025, 1, 15)),
        (datetime(2024, 1, 15), -1, datetime(2023, 12, 15)),
        (datetime(2023, 1, 31), 1, datetime(2023, 3, 3)),
        (datetime(2024, 1, 31), 1, datetime(2024, 3, 2)),
        (datetime(2024, 3, 31), -1, datetime(2024, 3, 2)),
        (datetime(2024, 11, 30), 3, datetime(2025, 3, 2)),
    ],
)
def test_add_months_rolls_over(start: datetime, months: int, expected: datetime) -> None:
    """It should keep the day of month and spill surplus days forward."""
    assert add_months(start, months) == expected


def test_add_years() -> None:
    """February 29 should roll to March 1 in a common year."""
    assert add_years(datetime(2024, 2, 29), 1) == datetime(2025, 3, 1)
    assert add_years(datetime(2024, 2, 29), 4) == datetime(2028, 2, 29)
    assert add_years(BASE, -4) == datetime(2020, 1, 15, 10, 30, 45)


def test_arithmetic_preserves_time_and_tzinfo() -> None:
    """The time of day and the time zone should survive every shift."""
    aware = datetime(2024, 5, 31, 8, 15, tzinfo=timezone.utc)

    shifted: datetime = add_months(aware, 1)

    assert shifted == datetime(2024, 7, 1, 8, 15, tzinfo=timezone.utc)
    assert shifted.tzinfo is timezone.utc


def test_diffs() -> None:
    """Differences should count whole units from the second to the first value."""
    later: datetime = datetime(2024, 1, 20, 9, 0)

    assert diff_in_days(later, BASE) == 5
    assert diff_in_days(BASE, later) == -5
    assert diff_in_days(date(2024, 3, 1), date(2024, 2, 1)) == 29
    assert diff_in_hours(datetime(2024, 1, 1, 12), datetime(2024, 1, 1, 9, 30)) == 2
    assert diff_in_hours(datetime(2024, 1, 1, 9, 30), datetime(2024, 1, 1, 12)) == -3
    assert diff_in_minutes(datetime(2024, 1, 1, 0, 10), datetime(2024, 1, 1)) == 10


@given(first=s_datetimes(), second=s_datetimes())
def test_diff_in_days_is_antisymmetric(first: datetime, second: datetime) -> None:
    """Swapping the arguments should negate the result."""
    assert diff_in_days(first, second) == -diff_in_days(second, first)


@given(value=s_datetimes())
def test_add_days_round_trip(value: datetime) -> None:
    """Adding then subtracting the same number of days should be the identity."""
    assert add_days(add_days(value, 40), -40) == value
    assert diff_in_days(add_days(value, 40), value) == 40


def test_day_boundaries() -> None:
    """Start and end of day should bracket the value."""
    assert start_of_day(BASE) == datetime(2024, 1, 15)
    assert end_of_day(BASE) == datetime(2024, 1, 15, 23, 59, 59, 999999)
    assert end_of_day(BASE) - start_of_day(BASE) == timedelta(days=1, microseconds=-1)


@parametrize(
    "value, last_day",
    [
        (datetime(2024, 2, 10), 29),
        (datetime(2023, 2, 10), 28),
        (datetime(2024, 4, 30, 12), 30),
        (datetime(2024, 12, 1), 31),
    ],
)
def test_month_boundaries(value: datetime, last_day: int) -> None:
    """Month boundaries should follow the calendar, leap years included."""
    assert start_of_month(value) == datetime(value.year, value.month, 1)
    assert end_of_month(value) == datetime(value.year, value.month, last_day, 23, 59, 59, 999999)
