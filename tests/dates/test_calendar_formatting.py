# topmark:header:start
#
#   project      : UtilKit
#   file         : test_calendar_formatting.py
#   file_relpath : tests/dates/test_calendar_formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for calendar predicates, token formatting and relative times."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from tests.conftest import parametrize
from utilkit.dates import (
    format_date,
    get_relative_time,
    is_between,
    is_leap_year,
    is_today,
    is_tomorrow,
    is_yesterday,
    parse_iso_datetime,
)

NOW: datetime = datetime(2024, 1, 15, 12, 0, 0)


def test_relative_day_predicates_with_reference() -> None:
    """It should compare calendar days against the reference instant."""
    assert is_today(datetime(2024, 1, 15, 0, 0), now=NOW)
    assert is_today(date(2024, 1, 15), now=NOW)
    assert is_yesterday(datetime(2024, 1, 14, 23, 59), now=NOW)
    assert is_tomorrow(date(2024, 1, 16), now=NOW)
    assert not is_today(datetime(2024, 1, 16), now=NOW)
    assert not is_yesterday(NOW, now=NOW)


def test_relative_day_predicates_default_to_now() -> None:
    """Without a reference, the current local day is used."""
    today: datetime = datetime.now()

    assert is_today(today)
    assert is_yesterday(today - timedelta(days=1))
    assert is_tomorrow(today + timedelta(days=1))


def test_aware_values_use_their_own_zone() -> None:
    """An aware value should be compared with the current day in its zone."""
    assert is_today(datetime.now(timezone.utc))


@parametrize(
    "year, expected",
    [(2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (2400, True)],
)
def test_is_leap_year(year: int, expected: bool) -> None:
    """It should implement the Gregorian rules."""
    assert is_leap_year(year) is expected


def test_is_between_bounds() -> None:
    """Bounds should be included unless `inclusive` is False."""
    start: datetime = datetime(2024, 1, 1)
    end: datetime = datetime(2024, 12, 31)

    assert is_between(datetime(2024, 6, 15), start, end)
    assert is_between(start, start, end)
    assert is_between(end, start, end)
    assert not is_between(start, start, end, inclusive=False)
    assert not is_between(end, start, end, inclusive=False)
    assert is_between(datetime(2024, 6, 15), start, end, inclusive=False)
    assert not is_between(datetime(2025, 1, 1), start, end)


@parametrize(
    "value, pattern, expected",
    [
        (datetime(2024, 1, 15, 10, 30, 45), "YYYY-MM-DD", "2024-01-15"),
        (datetime(2024, 1, 15, 10, 30, 45), "YYYY-MM-DD HH:mm:ss", "2024-01-15 10:30:45"),
        (datetime(2024, 1, 5, 7, 3, 9), "DD/MM/YYYY HH:mm", "05/01/2024 07:03"),
        (date(2024, 3, 9), "YYYY.MM.DD HH:mm:ss", "2024.03.09 00:00:00"),
        (datetime(2024, 1, 15), "DD-DD", "15-15"),
        (datetime(2024, 1, 15), "no tokens", "no tokens"),
    ],
)
def test_format_date(value: date, pattern: str, expected: str) -> None:
    """It should substitute every token occurrence with zero-padded fields."""
    assert format_date(value, pattern) == expected


def test_format_date_default_pattern() -> None:
    """The default pattern should be ISO-like."""
    assert format_date(datetime(2024, 12, 1)) == "2024-12-01"


def test_parse_iso_datetime_reads_trailing_z_as_utc() -> None:
    """A trailing Z should parse as UTC on every Python version."""
    parsed: datetime = parse_iso_datetime(" 2024-01-15T10:30:00Z ")

    assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    assert parse_iso_datetime("2024-01-15") == datetime(2024, 1, 15)


def test_parse_iso_datetime_rejects_garbage() -> None:
    """Non-ISO text should raise ValueError."""
    with pytest.raises(ValueError):
        parse_iso_datetime("15/01/2024")


@parametrize(
    "delta, expected",
    [
        (timedelta(seconds=30), "just now"),
        (timedelta(seconds=59), "just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(hours=2), "2 hours ago"),
        (timedelta(days=1, hours=3), "1 day ago"),
        (timedelta(days=45), "1 month ago"),
        (timedelta(days=800), "2 years ago"),
        (-timedelta(days=5), "in 5 days"),
        (-timedelta(minutes=1, seconds=30), "in 1 minute"),
    ],
)
def test_get_relative_time(delta: timedelta, expected: str) -> None:
    """It should bucket the difference into the largest whole unit."""
    assert get_relative_time(NOW - delta, base=NOW) == expected


def test_get_relative_time_defaults_to_now() -> None:
    """Without a base, the current time is used."""
    assert get_relative_time(datetime.now()) == "just now"
    assert get_relative_time(datetime.now(timezone.utc) - timedelta(hours=3)) == "3 hours ago"
