# topmark:header:start
#
#   project      : UtilKit
#   file         : strategies_utilkit.py
#   file_relpath : tests/strategies_utilkit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for UtilKit property tests.

The generators stay close to real-world inputs (card numbers, user records,
naive datetimes) so property tests exercise the same shapes as the examples in
the documentation.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from hypothesis import strategies as st

from utilkit.validation.identifiers import luhn_checksum

Draw = Callable[[st.SearchStrategy[Any]], Any]

ROLES: tuple[str, ...] = ("admin", "user", "guest")

# Naive datetimes in a range every helper can shift by a few years.
MIN_DATETIME: datetime = datetime(1900, 1, 1)
MAX_DATETIME: datetime = datetime(2200, 12, 31, 23, 59, 59)


def luhn_complete(payload: str) -> str:
    """Append the Luhn check digit to ``payload``."""
    check: int = (10 - luhn_checksum(payload + "0")) % 10
    return f"{payload}{check}"


@st.composite
def s_card_number(draw: Draw) -> str:
    """Draw a Luhn-valid card number of 13 to 19 digits."""
    length: int = draw(st.integers(min_value=13, max_value=19))
    payload: str = draw(st.text(alphabet="0123456789", min_size=length - 1, max_size=length - 1))
    return luhn_complete(payload)


@st.composite
def s_user_record(draw: Draw) -> dict[str, Any]:
    """Draw a small user record with ``id``, ``name`` and ``role``."""
    return {
        "id": draw(st.integers(min_value=1, max_value=10_000)),
        "name": draw(st.text(alphabet="abcdefghij ", min_size=1, max_size=12)),
        "role": draw(st.sampled_from(ROLES)),
    }


def s_datetimes() -> st.SearchStrategy[datetime]:
    """Naive datetimes between `MIN_DATETIME` and `MAX_DATETIME`."""
    return st.datetimes(min_value=MIN_DATETIME, max_value=MAX_DATETIME)


def s_int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Short lists of small integers (with plenty of duplicates)."""
    return st.lists(st.integers(min_value=-5, max_value=5), max_size=max_size)
