# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/dates/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Date helpers over `datetime.datetime` (and `datetime.date` where only the day matters)."""

from __future__ import annotations

from utilkit.dates.arithmetic import (
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
from utilkit.dates.calendar import is_between, is_leap_year, is_today, is_tomorrow, is_yesterday
from utilkit.dates.formatting import (
    DEFAULT_DATE_FORMAT,
    format_date,
    get_relative_time,
    parse_iso_datetime,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "add_days",
    "add_months",
    "add_years",
    "diff_in_days",
    "diff_in_hours",
    "diff_in_minutes",
    "end_of_day",
    "end_of_month",
    "format_date",
    "get_relative_time",
    "is_between",
    "is_leap_year",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "parse_iso_datetime",
    "start_of_day",
    "start_of_month",
]
