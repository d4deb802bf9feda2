# topmark:header:start
#
#   project      : UtilKit
#   file         : exit_codes.py
#   file_relpath : src/utilkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the UtilKit CLI.

UtilKit aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``utilkit validate`` reports an
invalid value with `ExitCode.FAILURE` (1), which makes it usable as a shell
predicate.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the UtilKit CLI.

    Attributes:
        SUCCESS: Successful execution; for ``validate``, the value is valid.
        FAILURE: Generic failure; for ``validate``, the value was rejected.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (invalid/malformed config). Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
