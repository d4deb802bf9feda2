# topmark:header:start
#
#   project      : UtilKit
#   file         : enum_mixins.py
#   file_relpath : src/utilkit/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for UtilKit (typing-friendly, UI-agnostic).

Helpers accept either an enum member or its raw string value (``"left"``,
``"desc"``, ``"image"``, ...). `KeyedStrEnum` makes both spellings interchangeable:
members *are* strings, and `KeyedStrEnum.parse` normalizes user tokens.

Example:
    ```python
    class Order(KeyedStrEnum):
        ASC = ("asc", "Ascending", ("ascending", "up"))
        DESC = ("desc", "Descending", ("descending", "down"))

    assert Order.parse("Descending") is Order.DESC
    assert Order.ASC == "asc"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        """
        if raw is None:
            return None
        if isinstance(raw, cls):
            return raw
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None

    @classmethod
    def coerce(cls: type[_KS], raw: str) -> _KS:
        """Parse ``raw`` like `parse`, raising ``ValueError`` on an unknown token.

        Args:
            raw (str): Member, key, name or alias.

        Returns:
            _KS: The matching member.

        Raises:
            ValueError: If ``raw`` does not name a member.
        """
        member: _KS | None = cls.parse(raw)
        if member is None:
            choices: str = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown {cls.__name__} {raw!r} (expected one of: {choices})")
        return member
