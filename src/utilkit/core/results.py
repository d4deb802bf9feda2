# topmark:header:start
#
#   project      : UtilKit
#   file         : results.py
#   file_relpath : src/utilkit/core/results.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured, immutable result types returned by UtilKit helpers.

Every result is created by a single call and never mutated afterwards; each
offers a ``to_dict()`` view that uses the same field names as its attributes so
results can be serialized (e.g. by the CLI JSON output) without extra mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a multi-rule validation (e.g. a password policy check).

    Attributes:
        errors (tuple[str, ...]): Human-readable messages, in the fixed order in
            which the rules are evaluated. Empty when every rule passed.
    """

    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True iff no rule reported an error."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the result."""
        return {"is_valid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated sequence.

    Attributes:
        data (list[T]): Items on this page (empty when ``page`` is out of range).
        page (int): The requested 1-based page index.
        page_size (int): The requested page size.
        total_pages (int): ``ceil(total_items / page_size)``.
        total_items (int): Length of the source sequence.
    """

    data: list[T] = field(default_factory=lambda: [])
    page: int = 1
    page_size: int = 1
    total_pages: int = 0
    total_items: int = 0

    @property
    def has_next(self) -> bool:
        """Return True if a later page holds items."""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Return True if this is not the first page."""
        return self.page > 1

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the page."""
        return {
            "data": list(self.data),
            "page": self.page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
        }


@dataclass(frozen=True)
class NumericRange:
    """Smallest and largest value of a numeric sequence."""

    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        """Return ``maximum - minimum``."""
        return self.maximum - self.minimum

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the range."""
        return {"min": self.minimum, "max": self.maximum}
