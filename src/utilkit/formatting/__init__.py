# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting helpers producing display strings from numbers and text."""

from __future__ import annotations

from utilkit.formatting.html import escape_html, unescape_html
from utilkit.formatting.numbers import (
    format_currency,
    format_decimal,
    format_number,
    format_percentage,
    to_fixed,
)
from utilkit.formatting.patterns import format_credit_card, format_phone
from utilkit.formatting.text import (
    PadDirection,
    capitalize,
    mask,
    pad,
    remove_accents,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    truncate,
)

__all__ = [
    "PadDirection",
    "capitalize",
    "escape_html",
    "format_credit_card",
    "format_currency",
    "format_decimal",
    "format_number",
    "format_percentage",
    "format_phone",
    "mask",
    "pad",
    "remove_accents",
    "slugify",
    "to_camel_case",
    "to_fixed",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    "truncate",
    "unescape_html",
]
