# topmark:header:start
#
#   project      : UtilKit
#   file         : stats.py
#   file_relpath : src/utilkit/arrays/stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Numeric reductions over sequences."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from utilkit.core.results import NumericRange

if TYPE_CHECKING:
    from collections.abc import Sequence


def sum_values(values: Sequence[float]) -> float:
    """Return the sum of ``values`` (``0`` for an empty sequence)."""
    return sum(values, 0)


def average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of ``values``; an empty sequence averages to ``0``."""
    if not values:
        return 0
    return sum_values(values) / len(values)


def min_value(values: Sequence[float]) -> float:
    """Return the smallest value, or ``inf`` for an empty sequence."""
    return min(values, default=math.inf)


def max_value(values: Sequence[float]) -> float:
    """Return the largest value, or ``-inf`` for an empty sequence."""
    return max(values, default=-math.inf)


def value_range(values: Sequence[float]) -> NumericRange:
    """Return the smallest and largest value of ``values`` as a `NumericRange`."""
    return NumericRange(minimum=min_value(values), maximum=max_value(values))
