# topmark:header:start
#
#   project      : UtilKit
#   file         : generators.py
#   file_relpath : src/utilkit/randomness/generators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module-level random helpers.

Each helper draws from the process-wide default `RandomSource` unless an explicit
``source`` is passed, which keeps call sites short while allowing seeded,
reproducible draws in tests::

    random_uuid()
    random_password(16, special=False, source=RandomSource(seed=1))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from utilkit.randomness.source import RandomSource, default_source

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

T = TypeVar("T")


def _resolve(source: RandomSource | None) -> RandomSource:
    return source if source is not None else default_source()


def random_number(minimum: int, maximum: int, *, source: RandomSource | None = None) -> int:
    """Return an integer in ``[minimum, maximum]`` (inclusive on both ends)."""
    return _resolve(source).number(minimum, maximum)


def random_int(maximum: int, *, source: RandomSource | None = None) -> int:
    """Return an integer in ``[0, maximum)``."""
    return _resolve(source).integer(maximum)


def random_float(
    minimum: float,
    maximum: float,
    decimals: int = 2,
    *,
    source: RandomSource | None = None,
) -> float:
    """Return a float in ``[minimum, maximum]`` rounded to ``decimals`` places."""
    return _resolve(source).float_between(minimum, maximum, decimals)


def random_boolean(probability: float = 0.5, *, source: RandomSource | None = None) -> bool:
    """Return True with the given probability."""
    return _resolve(source).boolean(probability)


def random_numeric(length: int, *, source: RandomSource | None = None) -> str:
    """Return a string of ``length`` random digits."""
    return _resolve(source).numeric(length)


def random_alpha(
    length: int,
    uppercase: bool = False,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return ``length`` random ASCII letters."""
    return _resolve(source).alpha(length, uppercase)


def random_alphanumeric(
    length: int,
    *,
    uppercase: bool = False,
    mixed_case: bool = False,
    source: RandomSource | None = None,
) -> str:
    """Return ``length`` random ASCII letters and digits.

    Args:
        length (int): Number of characters.
        uppercase (bool): Uppercase letters only.
        mixed_case (bool): Lowercase and uppercase letters.
        source (RandomSource | None): Source to draw from; the default source if None.

    Returns:
        str: e.g. ``"HJ3K9D2L5Q"`` with ``uppercase=True``.
    """
    return _resolve(source).alphanumeric(length, uppercase=uppercase, mixed_case=mixed_case)


def random_string(length: int, charset: str, *, source: RandomSource | None = None) -> str:
    """Return ``length`` characters drawn from ``charset`` (e.g. ``"ACGT"``)."""
    return _resolve(source).string(length, charset)


def random_password(
    length: int,
    *,
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    special: bool = True,
    source: RandomSource | None = None,
) -> str:
    """Return a random password over the enabled character classes.

    Raises:
        ConfigurationError: If every character class is disabled.
    """
    return _resolve(source).password(
        length,
        uppercase=uppercase,
        lowercase=lowercase,
        numbers=numbers,
        special=special,
    )


def random_hex_color(*, source: RandomSource | None = None) -> str:
    """Return a random ``#RRGGBB`` color."""
    return _resolve(source).hex_color()


def random_uuid(*, source: RandomSource | None = None) -> str:
    """Return a random version-4 UUID string."""
    return _resolve(source).uuid()


def random_element(items: Sequence[T], *, source: RandomSource | None = None) -> T | None:
    """Return a random element of ``items``, or None when ``items`` is empty."""
    return _resolve(source).element(items)


def random_elements(
    items: Sequence[T],
    count: int,
    *,
    source: RandomSource | None = None,
) -> list[T]:
    """Return up to ``count`` elements of ``items`` picked without replacement."""
    return _resolve(source).elements(items, count)


def shuffle(items: Sequence[T], *, source: RandomSource | None = None) -> list[T]:
    """Return a shuffled copy of ``items``; the input is left untouched."""
    return _resolve(source).shuffle(items)


def random_date(
    start: datetime,
    end: datetime,
    *,
    source: RandomSource | None = None,
) -> datetime:
    """Return a datetime drawn uniformly between ``start`` and ``end``."""
    return _resolve(source).date(start, end)


def random_ip_address(*, source: RandomSource | None = None) -> str:
    """Return a random IPv4 address such as ``"192.168.1.42"``."""
    return _resolve(source).ip_address()


def random_mac_address(*, source: RandomSource | None = None) -> str:
    """Return a random MAC address such as ``"3A:F2:7C:01:9B:E4"``."""
    return _resolve(source).mac_address()
