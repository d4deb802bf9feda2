# topmark:header:start
#
#   project      : UtilKit
#   file         : transform.py
#   file_relpath : src/utilkit/arrays/transform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequence reshaping helpers: grouping, sorting, chunking, flattening, rotation,
pagination and random sampling.

Every helper returns a new list and leaves its input untouched.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, TypeVar

from utilkit.config.logging import get_logger
from utilkit.core.enum_mixins import KeyedStrEnum
from utilkit.core.results import Page
from utilkit.randomness.generators import random_elements
from utilkit.randomness.generators import shuffle as _shuffle

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from utilkit.config.logging import UtilkitLogger
    from utilkit.core.accessors import Accessor
    from utilkit.randomness.source import RandomSource

logger: UtilkitLogger = get_logger(__name__)

T = TypeVar("T")


class SortOrder(KeyedStrEnum):
    """Direction used by `sort_by`."""

    ASC = ("asc", "Ascending", ("ascending", "up"))
    DESC = ("desc", "Descending", ("descending", "down"))


def group_by(items: Iterable[T], key: Accessor) -> dict[str, list[T]]:
    """Bucket ``items`` by ``str(key(item))``.

    Groups appear in the order their first member appears, and members keep
    their input order.

    Returns:
        dict[str, list[T]]: e.g. ``{"admin": [...], "user": [...]}``.
    """
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(str(key(item)), []).append(item)
    return groups


def sort_by(
    items: Iterable[T],
    key: Accessor,
    order: SortOrder | str = SortOrder.ASC,
) -> list[T]:
    """Return ``items`` stably sorted by ``key(item)``.

    Items with equal keys keep their input order in both directions.

    Args:
        items (Iterable[T]): Items to sort.
        key (Accessor): Accessor producing mutually comparable values.
        order (SortOrder | str): ``"asc"`` (default) or ``"desc"``.

    Returns:
        list[T]: The sorted copy.

    Raises:
        ValueError: If ``order`` is not a known direction.
    """
    direction: SortOrder = SortOrder.coerce(order)
    return sorted(items, key=key, reverse=direction is SortOrder.DESC)


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into lists of ``size`` items; the last one may be shorter.

    Raises:
        ValueError: If ``size`` is smaller than 1.
    """
    if size < 1:
        raise ValueError(f"chunk size must be at least 1, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def flatten(items: Iterable[Any], depth: int = 1) -> list[Any]:
    """Flatten nested lists and tuples up to ``depth`` levels.

    Args:
        items (Iterable[Any]): A possibly nested sequence.
        depth (int): Levels to flatten; ``0`` returns a plain copy. Defaults to 1.

    Returns:
        list[Any]: ``flatten([1, [2, [3, [4]]]], 2) == [1, 2, 3, [4]]``.
    """
    if depth <= 0:
        return list(items)
    flat: list[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten(item, depth - 1))  # pyright: ignore[reportUnknownArgumentType]
        else:
            flat.append(item)
    return flat


def rotate(items: Sequence[T], positions: int) -> list[T]:
    """Rotate ``items`` to the right by ``positions`` (left when negative).

    Returns:
        list[T]: ``rotate([1, 2, 3, 4, 5], 2) == [4, 5, 1, 2, 3]``.
    """
    length: int = len(items)
    if length == 0:
        return []
    offset: int = positions % length
    return list(items[length - offset :]) + list(items[: length - offset])


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Return the 1-based ``page`` of ``items``.

    Pages outside ``1..total_pages`` have empty ``data``; they are not an error.

    Args:
        items (Sequence[T]): The full sequence.
        page (int): 1-based page index.
        page_size (int): Items per page.

    Returns:
        Page[T]: ``paginate([1, 2, 3, 4, 5], 1, 2)`` holds ``[1, 2]`` with
        ``total_pages == 3``.

    Raises:
        ValueError: If ``page_size`` is smaller than 1.
    """
    if page_size < 1:
        raise ValueError(f"page size must be at least 1, got {page_size}")
    total_items: int = len(items)
    total_pages: int = math.ceil(total_items / page_size)
    if page < 1:
        logger.trace("paginate: page %d is before the first page", page)
        data: list[T] = []
    else:
        start: int = (page - 1) * page_size
        data = list(items[start : start + page_size])
    return Page(
        data=data,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
    )


def shuffle_array(items: Sequence[T], *, source: RandomSource | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher-Yates)."""
    return _shuffle(items, source=source)


def sample(items: Sequence[T], count: int, *, source: RandomSource | None = None) -> list[T]:
    """Return ``min(count, len(items))`` items picked without replacement."""
    return random_elements(items, count, source=source)
