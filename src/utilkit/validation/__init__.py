# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/validation/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation helpers.

Predicates answer ``True``/``False``; `validate_password` answers a
`ValidationResult` listing every failed rule. Expected invalid input never raises.
"""

from __future__ import annotations

from utilkit.validation.identifiers import (
    HOST_REQUIRED_SCHEMES,
    is_valid_credit_card,
    is_valid_email,
    is_valid_hex_color,
    is_valid_ipv4,
    is_valid_phone,
    is_valid_url,
    is_valid_username,
    luhn_checksum,
)
from utilkit.validation.password import (
    DEFAULT_PASSWORD_POLICY,
    SPECIAL_CHARACTERS,
    PasswordPolicy,
    validate_password,
)
from utilkit.validation.values import (
    is_alpha,
    is_alphanumeric,
    is_empty,
    is_in_range,
    is_numeric,
    is_valid_date,
    is_valid_json,
    matches_pattern,
)

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "HOST_REQUIRED_SCHEMES",
    "SPECIAL_CHARACTERS",
    "PasswordPolicy",
    "is_alpha",
    "is_alphanumeric",
    "is_empty",
    "is_in_range",
    "is_numeric",
    "is_valid_credit_card",
    "is_valid_date",
    "is_valid_email",
    "is_valid_hex_color",
    "is_valid_ipv4",
    "is_valid_json",
    "is_valid_phone",
    "is_valid_url",
    "is_valid_username",
    "luhn_checksum",
    "matches_pattern",
    "validate_password",
]
