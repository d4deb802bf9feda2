# topmark:header:start
#
#   project      : UtilKit
#   file         : accessors.py
#   file_relpath : src/utilkit/core/accessors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessor helpers for the property-keyed array functions.

Array helpers such as `find_by` or `group_by` take an accessor callable
(``item -> value``). `by_key` builds one from a field name so records stored as
mappings (``dict``) and records stored as objects (dataclasses, named tuples)
can be queried the same way.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

Accessor = Callable[[Any], Any]


def by_key(name: str, default: Any = None) -> Accessor:
    """Return an accessor reading ``name`` from a mapping item or an attribute.

    Args:
        name (str): Mapping key or attribute name.
        default (Any): Value returned when the record has no such field.

    Returns:
        Accessor: A callable ``record -> value``.

    Example:
        ```python
        users = [{"id": 1, "name": "John"}, {"id": 2, "name": "Jane"}]
        find_by(users, by_key("id"), 2)  # {"id": 2, "name": "Jane"}
        ```
    """

    def _get(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name, default)  # pyright: ignore[reportUnknownMemberType]
        return getattr(record, name, default)

    _get.__name__ = f"by_key_{name}"
    return _get
