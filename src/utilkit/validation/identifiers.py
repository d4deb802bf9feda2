# topmark:header:start
#
#   project      : UtilKit
#   file         : identifiers.py
#   file_relpath : src/utilkit/validation/identifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validators for identifier-like strings.

Covers e-mail addresses, URLs, phone numbers, payment card numbers, IPv4
addresses, hex colors and usernames. Every function is a predicate: invalid
input yields ``False`` and never raises.

Notes:
    - The e-mail check is deliberately permissive (one ``@``, a dot somewhere in
      the domain part, no whitespace). It does not implement the RFC 5322 grammar.
    - The phone check only counts digits (10 to 15); it knows nothing about
      country-specific numbering plans.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final
from urllib.parse import urlsplit

from utilkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Collection
    from urllib.parse import SplitResult

    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)

_EMAIL_RE: Final[re.Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
_USERNAME_RE: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z0-9_-]{3,20}")
_NON_DIGIT_RE: Final[re.Pattern[str]] = re.compile(r"\D", re.ASCII)
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s")
_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

_URL_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"[a-z][a-z0-9+.-]*")
_FORBIDDEN_HOST_RE: Final[re.Pattern[str]] = re.compile(r"[\s<>^|%\\]")

#: Special schemes whose URLs must name a host.
HOST_REQUIRED_SCHEMES: Final[frozenset[str]] = frozenset(
    {"http", "https", "ftp", "ftps", "ws", "wss"}
)

PHONE_MIN_DIGITS: Final[int] = 10
PHONE_MAX_DIGITS: Final[int] = 15


def is_valid_email(email: str) -> bool:
    """Return True if ``email`` looks like ``local@domain.tld``.

    Args:
        email (str): The address to check.

    Returns:
        bool: True for ``user@example.com``, False for ``invalid-email``,
        ``@example.com`` or ``user@``.
    """
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_url(url: str, *, schemes: Collection[str] | None = None) -> bool:
    """Return True if ``url`` parses as an absolute URL.

    Any RFC 3986 scheme is accepted unless ``schemes`` restricts them, so
    ``mailto:`` and ``urn:`` URLs pass. The special schemes in
    `HOST_REQUIRED_SCHEMES` must name a host, and a host must not contain
    whitespace, a backslash or one of ``< > ^ | %``.
    Non-ASCII hosts must be IDNA-encodable.

    The standard-library URL splitter is used as a probe only; its ``ValueError``
    (e.g. an unbalanced IPv6 bracket or a non-numeric port) is turned into False.

    Args:
        url (str): The URL to check.
        schemes (Collection[str] | None): Accepted lowercase schemes, or None
            for any scheme.

    Returns:
        bool: True for ``https://example.com`` or ``mailto:user@example.com``,
        False for ``not-a-url``, ``https://`` or ``http://exa mple.com``.
    """
    try:
        parts: SplitResult = urlsplit(url.strip())
        # Accessing the port validates it.
        _ = parts.port
    except ValueError as exc:
        logger.trace("URL probe failed for %r: %s", url, exc)
        return False

    scheme: str = parts.scheme.lower()
    if _URL_SCHEME_RE.fullmatch(scheme) is None:
        return False
    if schemes is not None and scheme not in schemes:
        return False

    hostname: str = parts.hostname or ""
    if not _is_valid_host(hostname):
        return False
    if scheme == "file":
        return bool(parts.path or parts.netloc)
    if scheme in HOST_REQUIRED_SCHEMES:
        return bool(hostname)
    return True


def _is_valid_host(hostname: str) -> bool:
    if _FORBIDDEN_HOST_RE.search(hostname) is not None:
        return False
    if hostname.isascii():
        return True
    try:
        hostname.encode("idna")
    except UnicodeError as exc:
        logger.trace("Host %r is not IDNA-encodable: %s", hostname, exc)
        return False
    return True


def is_valid_phone(phone: str) -> bool:
    """Return True if ``phone`` contains between 10 and 15 digits.

    Every non-digit character (``+``, spaces, dashes, parentheses, ...) is
    ignored.

    Args:
        phone (str): The phone number to check.

    Returns:
        bool: True for ``+1234567890`` or ``(123) 456-7890``.
    """
    digits: str = _NON_DIGIT_RE.sub("", phone)
    return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS


def luhn_checksum(digits: str) -> int:
    """Return the Luhn checksum (``sum mod 10``) of a string of ASCII digits.

    Walking from the least significant digit, every second digit is doubled and
    reduced by 9 when the result exceeds 9.

    Args:
        digits (str): ASCII digits only.

    Returns:
        int: The checksum in ``0..9``; ``0`` means the number is valid.
    """
    total = 0
    double = False
    for ch in reversed(digits):
        digit = int(ch)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return total % 10


def is_valid_credit_card(card_number: str) -> bool:
    """Return True if ``card_number`` passes the Luhn checksum.

    Whitespace is stripped first; any other non-digit character invalidates the
    input.

    Args:
        card_number (str): The card number to check.

    Returns:
        bool: True for ``4532015112830366``, False for ``1234567890123456``.
    """
    cleaned: str = _WHITESPACE_RE.sub("", card_number)
    if _DIGITS_RE.fullmatch(cleaned) is None:
        return False
    return luhn_checksum(cleaned) == 0


def is_valid_ipv4(ip: str) -> bool:
    """Return True for a dotted-quad IPv4 address.

    Each of the four segments must be the canonical decimal spelling of an
    integer in ``0..255``: ``"01"``, ``"+1"`` or ``" 1"`` are rejected.

    Args:
        ip (str): The address to check.

    Returns:
        bool: True for ``192.168.1.1``, False for ``256.1.1.1``.
    """
    parts: list[str] = ip.split(".")
    if len(parts) != 4:
        return False
    for part in parts:
        if _DIGITS_RE.fullmatch(part) is None:
            return False
        value = int(part)
        if value > 255 or str(value) != part:
            return False
    return True


def is_valid_hex_color(color: str) -> bool:
    """Return True for ``#RGB`` or ``#RRGGBB`` (case-insensitive).

    Args:
        color (str): The color code to check.

    Returns:
        bool: True for ``#FF5733`` and ``#fff``, False for ``FF5733``.
    """
    return _HEX_COLOR_RE.fullmatch(color) is not None


def is_valid_username(username: str) -> bool:
    """Return True for 3 to 20 ASCII letters, digits, ``_`` or ``-``.

    Args:
        username (str): The username to check.

    Returns:
        bool: True for ``user_name-123``, False for ``ab``.
    """
    return _USERNAME_RE.fullmatch(username) is not None
