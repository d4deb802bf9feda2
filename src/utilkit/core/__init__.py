# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by every UtilKit helper group.

This package holds the small, dependency-free pieces the helper groups agree on:

- `utilkit.core.errors`: the exception hierarchy (usage errors only).
- `utilkit.core.results`: frozen result types (`ValidationResult`, `Page`, `NumericRange`).
- `utilkit.core.enum_mixins`: `KeyedStrEnum`, string-valued option enums.
- `utilkit.core.accessors`: `by_key`, accessor factory for the array helpers.
- `utilkit.core.formats`: CLI output formats.
"""

from __future__ import annotations

from utilkit.core.accessors import Accessor, by_key
from utilkit.core.errors import ConfigurationError, UtilkitError
from utilkit.core.results import NumericRange, Page, ValidationResult

__all__ = [
    "Accessor",
    "ConfigurationError",
    "NumericRange",
    "Page",
    "UtilkitError",
    "ValidationResult",
    "by_key",
]
