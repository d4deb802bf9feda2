# topmark:header:start
#
#   project      : UtilKit
#   file         : text.py
#   file_relpath : src/utilkit/formatting/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text formatting: truncation, case conversion, accents, slugs, padding and masking.

All functions return new strings; none of them mutates its input.

Word boundaries for case conversion are whitespace, ``-``, ``_`` and
lowercase-to-uppercase transitions.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Final

from utilkit.core.enum_mixins import KeyedStrEnum

_COMBINING_MARKS_RE: Final[re.Pattern[str]] = re.compile(r"[\u0300-\u036f]")
_UPPERCASE_RE: Final[re.Pattern[str]] = re.compile(r"([A-Z])")
_LEADING_SEPARATOR_RE: Final[dict[str, re.Pattern[str]]] = {
    "_": re.compile(r"^_"),
    "-": re.compile(r"^-"),
}
# First letter of the text, any uppercase letter, or a letter that starts a word.
_CAMEL_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(
    r"^\w|[A-Z]|(?<=[\s_-])\w|\b\w",
    re.ASCII,
)
_CAMEL_SEPARATORS_RE: Final[re.Pattern[str]] = re.compile(r"\s+|-|_")
_SLUG_STRIP_RE: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9_\s-]")
_SLUG_COLLAPSE_RE: Final[re.Pattern[str]] = re.compile(r"[\s_-]+")


class PadDirection(KeyedStrEnum):
    """Side(s) on which `pad` adds fill characters."""

    LEFT = ("left", "Pad on the left", ("start",))
    RIGHT = ("right", "Pad on the right", ("end",))
    BOTH = ("both", "Pad on both sides (extra character on the right)", ("center", "centre"))


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Shorten ``text`` to at most ``max_length`` characters, ending with ``suffix``.

    Text that already fits is returned unchanged. When ``max_length`` is smaller
    than the suffix itself, the result is the first ``max_length`` characters of
    the suffix (an empty string for ``max_length <= 0``).

    Args:
        text (str): The text to shorten.
        max_length (int): Maximum length of the result.
        suffix (str): Marker appended to truncated text. Defaults to ``"..."``.

    Returns:
        str: ``truncate("Hello World", 8) == "Hello..."``.
    """
    if len(text) <= max_length:
        return text
    if max_length < len(suffix):
        return suffix[: max(max_length, 0)]
    return text[: max_length - len(suffix)] + suffix


def to_title_case(text: str) -> str:
    """Lowercase ``text`` then uppercase the first letter of each space-separated word.

    Returns:
        str: ``to_title_case("HELLO WORLD") == "Hello World"``.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def to_camel_case(text: str) -> str:
    """Convert ``text`` to camelCase.

    Returns:
        str: ``"helloWorld"`` for ``"hello world"``, ``"Hello-World"`` and ``"hello_world"``.
    """

    def _case(match: re.Match[str]) -> str:
        letter: str = match.group(0)
        return letter.lower() if match.start() == 0 else letter.upper()

    return _CAMEL_SEPARATORS_RE.sub("", _CAMEL_BOUNDARY_RE.sub(_case, text))


def _to_separated_case(text: str, separator: str) -> str:
    result: str = _UPPERCASE_RE.sub(lambda m: separator + m.group(1), text).lower()
    # Whitespace absorbs a separator inserted right after it ("Hello World").
    result = re.sub(rf"\s+{re.escape(separator)}?", separator, result)
    return _LEADING_SEPARATOR_RE[separator].sub("", result)


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case.

    Returns:
        str: ``"hello_world"`` for ``"helloWorld"`` and ``"Hello World"``.
    """
    return _to_separated_case(text, "_")


def to_kebab_case(text: str) -> str:
    """Convert ``text`` to kebab-case.

    Returns:
        str: ``"hello-world"`` for ``"helloWorld"`` and ``"Hello World"``.
    """
    return _to_separated_case(text, "-")


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched (``"hELLO"`` -> ``"HELLO"``)."""
    return text[:1].upper() + text[1:]


def remove_accents(text: str) -> str:
    """Strip combining diacritical marks (U+0300..U+036F) after NFD decomposition.

    Returns:
        str: ``remove_accents("café") == "cafe"``, ``remove_accents("naïve") == "naive"``.
    """
    return _COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFD", text))


def slugify(text: str) -> str:
    """Turn ``text`` into a URL-friendly slug.

    Accents are removed, the text is lowercased and trimmed, characters other than
    ASCII word characters, whitespace and hyphens are dropped, and runs of
    whitespace, underscores and hyphens become a single hyphen.

    Returns:
        str: ``slugify("Café & Bar") == "cafe-bar"``, ``slugify("Hello World!") == "hello-world"``.
    """
    slug: str = remove_accents(text).lower().strip()
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _SLUG_COLLAPSE_RE.sub("-", slug)
    return slug.strip("-")


def pad(
    text: str,
    length: int,
    char: str = " ",
    direction: PadDirection | str = PadDirection.RIGHT,
) -> str:
    """Pad ``text`` to ``length`` characters with ``char``.

    Args:
        text (str): The text to pad; returned unchanged if already long enough.
        length (int): Target length.
        char (str): Fill character. Defaults to a space.
        direction (PadDirection | str): ``"left"``, ``"right"`` (default) or
            ``"both"``. With ``"both"`` an odd deficit puts the extra character on
            the right.

    Returns:
        str: ``pad("5", 3, "0", "left") == "005"``.

    Raises:
        ValueError: If ``direction`` is not a known direction.
    """
    if len(text) >= length:
        return text
    side: PadDirection = PadDirection.coerce(direction)
    deficit: int = length - len(text)

    if side is PadDirection.LEFT:
        return char * deficit + text
    if side is PadDirection.RIGHT:
        return text + char * deficit
    left: int = deficit // 2
    return char * left + text + char * (deficit - left)


def mask(
    text: str,
    visible_start: int = 4,
    visible_end: int = 4,
    mask_char: str = "*",
) -> str:
    """Hide the middle of ``text`` behind ``mask_char``.

    Args:
        text (str): Sensitive text (card number, phone, token, ...).
        visible_start (int): Leading characters left visible. Defaults to 4.
        visible_end (int): Trailing characters left visible. Defaults to 4.
        mask_char (str): Replacement character. Defaults to ``"*"``.

    Returns:
        str: ``mask("1234567890123456") == "1234********3456"``. Text not longer
        than ``visible_start + visible_end`` is returned unchanged.
    """
    if len(text) <= visible_start + visible_end:
        return text
    hidden: int = len(text) - visible_start - visible_end
    return text[:visible_start] + mask_char * hidden + text[len(text) - visible_end :]
