# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/arrays/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers over ordered sequences; none of them mutates its input."""

from __future__ import annotations

from utilkit.arrays.search import find_all_by, find_by, find_index_by, search
from utilkit.arrays.sets import (
    count_occurrences,
    difference,
    intersection,
    is_equal,
    union,
    unique,
    unique_by,
)
from utilkit.arrays.stats import average, max_value, min_value, sum_values, value_range
from utilkit.arrays.transform import (
    SortOrder,
    chunk,
    flatten,
    group_by,
    paginate,
    rotate,
    sample,
    shuffle_array,
    sort_by,
)

__all__ = [
    "SortOrder",
    "average",
    "chunk",
    "count_occurrences",
    "difference",
    "find_all_by",
    "find_by",
    "find_index_by",
    "flatten",
    "group_by",
    "intersection",
    "is_equal",
    "max_value",
    "min_value",
    "paginate",
    "rotate",
    "sample",
    "search",
    "shuffle_array",
    "sort_by",
    "sum_values",
    "union",
    "unique",
    "unique_by",
]
