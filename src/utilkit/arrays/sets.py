# topmark:header:start
#
#   project      : UtilKit
#   file         : sets.py
#   file_relpath : src/utilkit/arrays/sets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""De-duplication, set algebra and counting over sequences.

Results keep the first-seen order of their input. Hashable values are tracked in
a set; unhashable values (lists, dicts) fall back to an equality scan, so every
helper accepts both. Booleans are kept apart from the numbers they equal
(``True`` and ``1`` are distinct members), while ``1`` and ``1.0`` stay one value.
`count_occurrences` counts by plain Python equality.

`difference` keeps duplicates of the first sequence, while `intersection` and
`union` de-duplicate their result.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Sequence

    from utilkit.core.accessors import Accessor

T = TypeVar("T")
H = TypeVar("H", bound="Hashable")


def _member_key(value: Any) -> Any:
    if isinstance(value, bool):
        return (bool, value)
    return value


class _Seen:
    """Membership tracker accepting hashable and unhashable values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._hashable: set[Any] = set()
        self._unhashable: list[Any] = []
        for value in values:
            self.add(value)

    def __contains__(self, value: Any) -> bool:
        try:
            return _member_key(value) in self._hashable
        except TypeError:
            return value in self._unhashable

    def add(self, value: Any) -> None:
        try:
            self._hashable.add(_member_key(value))
        except TypeError:
            self._unhashable.append(value)


def unique(items: Iterable[T]) -> list[T]:
    """Return ``items`` without duplicates, keeping the first occurrence of each value.

    Returns:
        list[T]: ``unique([1, 2, 2, 3, 1]) == [1, 2, 3]``.
    """
    return unique_by(items, lambda item: item)


def unique_by(items: Iterable[T], key: Accessor) -> list[T]:
    """Return the first item for each distinct ``key(item)`` value, in input order."""
    seen = _Seen()
    result: list[T] = []
    for item in items:
        value = key(item)
        if value in seen:
            continue
        seen.add(value)
        result.append(item)
    return result


def intersection(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the distinct items of ``first`` that also occur in ``second``."""
    others = _Seen(second)
    return unique(item for item in first if item in others)


def difference(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the items of ``first`` absent from ``second``; duplicates are kept.

    Returns:
        list[T]: ``difference([1, 1, 2, 3], [3]) == [1, 1, 2]``.
    """
    others = _Seen(second)
    return [item for item in first if item not in others]


def union(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the distinct items of ``first`` followed by the new items of ``second``."""
    return unique([*first, *second])


def count_occurrences(items: Iterable[H]) -> dict[H, int]:
    """Return how often each value occurs, keyed in first-seen order.

    Returns:
        dict[H, int]: ``count_occurrences(["a", "b", "a"]) == {"a": 2, "b": 1}``.
    """
    return dict(Counter(items))


def is_equal(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Return True if both sequences have the same length and equal items position by position."""
    if len(first) != len(second):
        return False
    return all(a == b for a, b in zip(first, second))
