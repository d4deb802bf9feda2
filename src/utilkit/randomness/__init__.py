# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/randomness/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pseudo-random generators built on an explicit, seedable `RandomSource`."""

from __future__ import annotations

from utilkit.randomness.generators import (
    random_alpha,
    random_alphanumeric,
    random_boolean,
    random_date,
    random_element,
    random_elements,
    random_float,
    random_hex_color,
    random_int,
    random_ip_address,
    random_mac_address,
    random_number,
    random_numeric,
    random_password,
    random_string,
    random_uuid,
    shuffle,
)
from utilkit.randomness.source import (
    PASSWORD_SPECIALS,
    RandomSource,
    default_source,
    seed_default_source,
)

__all__ = [
    "PASSWORD_SPECIALS",
    "RandomSource",
    "default_source",
    "random_alpha",
    "random_alphanumeric",
    "random_boolean",
    "random_date",
    "random_element",
    "random_elements",
    "random_float",
    "random_hex_color",
    "random_int",
    "random_ip_address",
    "random_mac_address",
    "random_number",
    "random_numeric",
    "random_password",
    "random_string",
    "random_uuid",
    "seed_default_source",
    "shuffle",
]
