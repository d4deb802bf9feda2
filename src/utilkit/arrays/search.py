# topmark:header:start
#
#   project      : UtilKit
#   file         : search.py
#   file_relpath : src/utilkit/arrays/search.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lookup helpers over sequences of records.

Records are read through accessor callables (``item -> value``); see
`utilkit.core.accessors.by_key` for building one from a field name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from utilkit.core.accessors import Accessor

T = TypeVar("T")


def find_by(items: Iterable[T], key: Accessor, value: Any) -> T | None:
    """Return the first item whose ``key(item)`` equals ``value``, or None."""
    for item in items:
        if key(item) == value:
            return item
    return None


def find_all_by(items: Iterable[T], key: Accessor, value: Any) -> list[T]:
    """Return every item whose ``key(item)`` equals ``value``, in input order."""
    return [item for item in items if key(item) == value]


def find_index_by(items: Sequence[T], key: Accessor, value: Any) -> int:
    """Return the index of the first item whose ``key(item)`` equals ``value``, or -1."""
    for index, item in enumerate(items):
        if key(item) == value:
            return index
    return -1


def search(items: Iterable[T], term: str, keys: Sequence[Accessor]) -> list[T]:
    """Return the items where any of ``keys`` yields a string containing ``term``.

    Matching is case-insensitive. Non-string field values never match.

    Args:
        items (Iterable[T]): Records to search.
        term (str): Substring to look for.
        keys (Sequence[Accessor]): Accessors for the fields to search.

    Returns:
        list[T]: Matching records in input order.

    Example:
        ```python
        users = [{"name": "John Doe"}, {"name": "Jane Smith"}]
        search(users, "john", [by_key("name")])  # [{"name": "John Doe"}]
        ```
    """
    needle: str = term.lower()
    result: list[T] = []
    for item in items:
        for key in keys:
            field = key(item)
            if isinstance(field, str) and needle in field.lower():
                result.append(item)
                break
    return result
