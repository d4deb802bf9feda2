# topmark:header:start
#
#   project      : UtilKit
#   file         : patterns.py
#   file_relpath : src/utilkit/formatting/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template-driven formatting of phone and payment card numbers."""

from __future__ import annotations

import re
from typing import Final

DEFAULT_PHONE_TEMPLATE: Final[str] = "(XXX) XXX-XXXX"
PHONE_PLACEHOLDER: Final[str] = "X"
CARD_GROUP_SIZE: Final[int] = 4

_NON_DIGIT_RE: Final[re.Pattern[str]] = re.compile(r"\D", re.ASCII)
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s")


def format_phone(phone: str, template: str = DEFAULT_PHONE_TEMPLATE) -> str:
    """Fill the ``X`` placeholders of ``template`` with the digits of ``phone``.

    Non-digit characters of ``phone`` are ignored. Surplus digits are dropped;
    placeholders without a digit stay as ``X``.

    Args:
        phone (str): Raw phone number.
        template (str): Pattern with one ``X`` per digit. Defaults to ``"(XXX) XXX-XXXX"``.

    Returns:
        str: ``format_phone("1234567890") == "(123) 456-7890"``.
    """
    digits = iter(_NON_DIGIT_RE.sub("", phone))
    out: list[str] = []
    for ch in template:
        if ch == PHONE_PLACEHOLDER:
            out.append(next(digits, PHONE_PLACEHOLDER))
        else:
            out.append(ch)
    return "".join(out)


def format_credit_card(card_number: str, separator: str = " ") -> str:
    """Group a card number in blocks of four characters.

    Whitespace in the input is removed before grouping; a shorter final block is
    kept as-is and no separator trails the result.

    Args:
        card_number (str): Raw card number.
        separator (str): Block separator. Defaults to a space.

    Returns:
        str: ``format_credit_card("1234567890123456", "-") == "1234-5678-9012-3456"``.
    """
    cleaned: str = _WHITESPACE_RE.sub("", card_number)
    return separator.join(
        cleaned[i : i + CARD_GROUP_SIZE] for i in range(0, len(cleaned), CARD_GROUP_SIZE)
    )
