# topmark:header:start
#
#   project      : UtilKit
#   file         : formats.py
#   file_relpath : src/utilkit/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used by the UtilKit CLI.

Kept free of `Click` and console dependencies so that structured results can
declare how they serialize without importing the front-end.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable).

    Notes:
        - Machine formats must not include ANSI color.
    """

    TEXT = "text"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` if the format provided is a machine format, else `False`.
    """
    return fmt == OutputFormat.JSON
