# topmark:header:start
#
#   project      : UtilKit
#   file         : keys.py
#   file_relpath : src/utilkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for UtilKit configuration.

These constants are the external configuration API as it appears in
``utilkit.toml`` and in ``[tool.utilkit]`` inside ``pyproject.toml``. Renaming
or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by UtilKit configuration."""

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_LOCALE: Final[str] = "locale"
    KEY_CURRENCY: Final[str] = "currency"
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_DATE_FORMAT: Final[str] = "date_format"
    KEY_FILE_SIZE_DECIMALS: Final[str] = "file_size_decimals"

    # [password]
    SECTION_PASSWORD: Final[str] = "password"

    KEY_MIN_LENGTH: Final[str] = "min_length"
    KEY_REQUIRE_UPPERCASE: Final[str] = "require_uppercase"
    KEY_REQUIRE_LOWERCASE: Final[str] = "require_lowercase"
    KEY_REQUIRE_NUMBERS: Final[str] = "require_numbers"
    KEY_REQUIRE_SPECIAL_CHARS: Final[str] = "require_special_chars"

    # [random]
    SECTION_RANDOM: Final[str] = "random"

    KEY_SEED: Final[str] = "seed"

    # pyproject.toml nesting: [tool.utilkit]
    PYPROJECT_TOOL: Final[str] = "tool"
    PYPROJECT_SECTION: Final[str] = "utilkit"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMAT: frozenset(
            {
                KEY_LOCALE,
                KEY_CURRENCY,
                KEY_SEPARATOR,
                KEY_DATE_FORMAT,
                KEY_FILE_SIZE_DECIMALS,
            }
        ),
        SECTION_PASSWORD: frozenset(
            {
                KEY_MIN_LENGTH,
                KEY_REQUIRE_UPPERCASE,
                KEY_REQUIRE_LOWERCASE,
                KEY_REQUIRE_NUMBERS,
                KEY_REQUIRE_SPECIAL_CHARS,
            }
        ),
        SECTION_RANDOM: frozenset({KEY_SEED}),
    }
