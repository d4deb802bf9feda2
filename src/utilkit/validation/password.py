# topmark:header:start
#
#   project      : UtilKit
#   file         : password.py
#   file_relpath : src/utilkit/validation/password.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Password policy validation.

A `PasswordPolicy` is a set of independently togglable rules. `validate_password`
evaluates them in a fixed order so that error lists are deterministic:

1. minimum length
2. uppercase letter
3. lowercase letter
4. digit
5. special character (one of ``!@#$%^&*(),.?":{}|<>``)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Final

from utilkit.core.results import ValidationResult

SPECIAL_CHARACTERS: Final[str] = '!@#$%^&*(),.?":{}|<>'

_UPPERCASE_RE: Final[re.Pattern[str]] = re.compile(r"[A-Z]")
_LOWERCASE_RE: Final[re.Pattern[str]] = re.compile(r"[a-z]")
_DIGIT_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]")
_SPECIAL_RE: Final[re.Pattern[str]] = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

MSG_UPPERCASE: Final[str] = "Password must contain at least one uppercase letter"
MSG_LOWERCASE: Final[str] = "Password must contain at least one lowercase letter"
MSG_NUMBER: Final[str] = "Password must contain at least one number"
MSG_SPECIAL: Final[str] = "Password must contain at least one special character"


def min_length_message(min_length: int) -> str:
    """Return the error message reported when a password is too short."""
    return f"Password must be at least {min_length} characters long"


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a password must satisfy.

    Attributes:
        min_length (int): Minimum number of characters (always checked).
        require_uppercase (bool): Require an ASCII uppercase letter.
        require_lowercase (bool): Require an ASCII lowercase letter.
        require_numbers (bool): Require an ASCII digit.
        require_special_chars (bool): Require one of `SPECIAL_CHARACTERS`.
    """

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True

    def with_overrides(self, **overrides: Any) -> PasswordPolicy:
        """Return a copy of this policy with some rules replaced."""
        return replace(self, **overrides)


DEFAULT_PASSWORD_POLICY: Final[PasswordPolicy] = PasswordPolicy()


def validate_password(
    password: str,
    policy: PasswordPolicy | None = None,
    **overrides: Any,
) -> ValidationResult:
    """Check ``password`` against ``policy``.

    Args:
        password (str): The password to check.
        policy (PasswordPolicy | None): Rules to apply; `DEFAULT_PASSWORD_POLICY`
            (all rules on, 8 characters minimum) when omitted.
        **overrides (Any): Individual policy fields to override for this call,
            e.g. ``require_special_chars=False``.

    Returns:
        ValidationResult: ``is_valid`` is True iff ``errors`` is empty.

    Example:
        ```python
        validate_password("MyP@ssw0rd").is_valid  # True
        validate_password("weak").errors
        # ('Password must be at least 8 characters long',
        #  'Password must contain at least one uppercase letter', ...)
        ```
    """
    rules: PasswordPolicy = policy or DEFAULT_PASSWORD_POLICY
    if overrides:
        rules = rules.with_overrides(**overrides)

    errors: list[str] = []
    if len(password) < rules.min_length:
        errors.append(min_length_message(rules.min_length))
    if rules.require_uppercase and not _UPPERCASE_RE.search(password):
        errors.append(MSG_UPPERCASE)
    if rules.require_lowercase and not _LOWERCASE_RE.search(password):
        errors.append(MSG_LOWERCASE)
    if rules.require_numbers and not _DIGIT_RE.search(password):
        errors.append(MSG_NUMBER)
    if rules.require_special_chars and not _SPECIAL_RE.search(password):
        errors.append(MSG_SPECIAL)

    return ValidationResult(errors=tuple(errors))
