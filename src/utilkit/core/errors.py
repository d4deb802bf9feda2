# topmark:header:start
#
#   project      : UtilKit
#   file         : errors.py
#   file_relpath : src/utilkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by UtilKit helpers.

Expected invalid input (a malformed e-mail address, a failing Luhn checksum, ...)
never raises: validators answer with ``False`` or a structured result. Exceptions
are reserved for *usage* errors, i.e. a caller asking for something that cannot be
produced, such as a random password drawn from an empty character set.
"""

from __future__ import annotations


class UtilkitError(Exception):
    """Base class for all UtilKit errors."""


class ConfigurationError(UtilkitError, ValueError):
    """Raised when a helper is configured in a way that cannot produce a result.

    Examples:
        - ``random_password()`` with every character class disabled.
        - A configuration file value of the wrong type.
    """
