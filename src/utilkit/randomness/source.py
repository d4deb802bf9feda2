# topmark:header:start
#
#   project      : UtilKit
#   file         : source.py
#   file_relpath : src/utilkit/randomness/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Random value generation over an explicit pseudo-random source.

`RandomSource` wraps a `random.Random` instance so that every draw can be
reproduced from a seed::

    source = RandomSource(seed=42)
    source.uuid()            # same value on every run
    source.password(12)

Module-level shortcuts (``random_uuid()``, ``random_password()``, ...) draw from a
process-wide default source created once at import time; `seed_default_source`
reseeds it.

Thread safety:
    A single draw from `random.Random` is atomic, so sources may be shared
    between threads. Multi-draw results (strings, shuffles) from concurrent
    callers interleave, which keeps each result uniformly distributed but makes
    a seeded sequence irreproducible. Give each thread its own source when
    reproducibility matters.

Not suitable for secrets: the underlying generator is a Mersenne Twister.
"""

from __future__ import annotations

import math
import random
import string
from datetime import datetime
from typing import TYPE_CHECKING, Final, TypeVar

from utilkit.config.logging import get_logger
from utilkit.core.errors import ConfigurationError
from utilkit.formatting.numbers import to_fixed

if TYPE_CHECKING:
    from collections.abc import Sequence

    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)

T = TypeVar("T")

LOWERCASE: Final[str] = string.ascii_lowercase
UPPERCASE: Final[str] = string.ascii_uppercase
DIGITS: Final[str] = string.digits
PASSWORD_SPECIALS: Final[str] = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_UUID_TEMPLATE: Final[str] = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
_HEX_DIGITS: Final[str] = "0123456789abcdef"


class RandomSource:
    """Explicit pseudo-random source used by every UtilKit random helper.

    Args:
        seed (int | str | bytes | None): Seed for a private `random.Random`;
            ``None`` seeds from the operating system.
        rng (random.Random | None): An existing generator to draw from instead.
            Takes precedence over ``seed``.
    """

    def __init__(
        self,
        seed: int | str | bytes | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._rng: random.Random = rng if rng is not None else random.Random(seed)

    def seed(self, seed: int | str | bytes | None = None) -> None:
        """Reseed the underlying generator."""
        self._rng.seed(seed)

    def uniform(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""
        return self._rng.random()

    # --- Numbers ---

    def number(self, minimum: int, maximum: int) -> int:
        """Return an integer in ``[minimum, maximum]`` (both inclusive)."""
        return math.floor(self.uniform() * (maximum - minimum + 1)) + minimum

    def integer(self, maximum: int) -> int:
        """Return an integer in ``[0, maximum)``."""
        return math.floor(self.uniform() * maximum)

    def float_between(self, minimum: float, maximum: float, decimals: int = 2) -> float:
        """Return a float in ``[minimum, maximum]`` rounded to ``decimals`` places.

        Rounding follows `utilkit.formatting.numbers.to_fixed` (half away from zero).
        """
        value: float = self.uniform() * (maximum - minimum) + minimum
        return float(to_fixed(value, decimals))

    def boolean(self, probability: float = 0.5) -> bool:
        """Return True with the given probability (``0..1``, default 0.5)."""
        return self.uniform() < probability

    # --- Strings ---

    def string(self, length: int, charset: str) -> str:
        """Return ``length`` characters drawn independently and uniformly from ``charset``.

        Raises:
            ConfigurationError: If ``charset`` is empty and ``length`` is positive.
        """
        if length > 0 and not charset:
            raise ConfigurationError("Cannot draw characters from an empty character set")
        return "".join(charset[self.integer(len(charset))] for _ in range(length))

    def numeric(self, length: int) -> str:
        """Return ``length`` random decimal digits (leading zeros allowed)."""
        return self.string(length, DIGITS)

    def alpha(self, length: int, uppercase: bool = False) -> str:
        """Return ``length`` random ASCII letters, lowercase unless ``uppercase``."""
        return self.string(length, UPPERCASE if uppercase else LOWERCASE)

    def alphanumeric(
        self,
        length: int,
        *,
        uppercase: bool = False,
        mixed_case: bool = False,
    ) -> str:
        """Return ``length`` random ASCII letters and digits.

        Args:
            length (int): Number of characters.
            uppercase (bool): Use uppercase letters only. Wins over ``mixed_case``.
            mixed_case (bool): Use both lowercase and uppercase letters.

        Returns:
            str: e.g. ``"a3k9d2h5l7"``.
        """
        if uppercase:
            charset: str = UPPERCASE + DIGITS
        elif mixed_case:
            charset = LOWERCASE + UPPERCASE + DIGITS
        else:
            charset = LOWERCASE + DIGITS
        return self.string(length, charset)

    def password(
        self,
        length: int,
        *,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        special: bool = True,
    ) -> str:
        """Return a random password drawn from the enabled character classes.

        Characters are drawn independently; the result is not guaranteed to
        contain one character of every enabled class.

        Raises:
            ConfigurationError: If every character class is disabled.
        """
        charset: str = ""
        if lowercase:
            charset += LOWERCASE
        if uppercase:
            charset += UPPERCASE
        if numbers:
            charset += DIGITS
        if special:
            charset += PASSWORD_SPECIALS

        if not charset:
            logger.debug("random password requested with every character class disabled")
            raise ConfigurationError("At least one character type must be enabled")
        return self.string(length, charset)

    def hex_color(self) -> str:
        """Return a random ``#RRGGBB`` color (uppercase hex digits)."""
        return f"#{self.integer(0x1000000):06X}"

    def uuid(self) -> str:
        """Return a random version-4 UUID string.

        The version nibble is ``4`` and the variant nibble one of ``8 9 a b``.
        """
        out: list[str] = []
        for ch in _UUID_TEMPLATE:
            if ch == "x":
                out.append(_HEX_DIGITS[self.integer(16)])
            elif ch == "y":
                out.append(_HEX_DIGITS[(self.integer(16) & 0x3) | 0x8])
            else:
                out.append(ch)
        return "".join(out)

    # --- Sequences ---

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly shuffled copy of ``items`` (Fisher-Yates)."""
        result: list[T] = list(items)
        for i in range(len(result) - 1, 0, -1):
            j: int = self.integer(i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def element(self, items: Sequence[T]) -> T | None:
        """Return a uniformly chosen element of ``items``, or None if it is empty."""
        if not items:
            return None
        return items[self.integer(len(items))]

    def elements(self, items: Sequence[T], count: int) -> list[T]:
        """Return ``min(count, len(items))`` distinct positions of ``items`` in random order."""
        return self.shuffle(items)[: max(min(count, len(items)), 0)]

    # --- Dates & network ---

    def date(self, start: datetime, end: datetime) -> datetime:
        """Return an instant drawn uniformly between ``start`` and ``end``."""
        return start + (end - start) * self.uniform()

    def ip_address(self) -> str:
        """Return a random dotted-decimal IPv4 address."""
        return ".".join(str(self.integer(256)) for _ in range(4))

    def mac_address(self) -> str:
        """Return a random MAC address as six uppercase hex octets joined by ``:``."""
        return ":".join(f"{self.integer(256):02X}" for _ in range(6))


_default_source: RandomSource = RandomSource()


def default_source() -> RandomSource:
    """Return the process-wide default source used by the module-level helpers."""
    return _default_source


def seed_default_source(seed: int | str | bytes | None = None) -> None:
    """Reseed the process-wide default source (``None`` reseeds from the OS)."""
    logger.debug("Reseeding default random source (seeded=%s)", seed is not None)
    _default_source.seed(seed)
