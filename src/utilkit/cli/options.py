# topmark:header:start
#
#   project      : UtilKit
#   file         : options.py
#   file_relpath : src/utilkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the UtilKit CLI.

This module centralizes reusable options (verbosity, color, output format) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from utilkit.cli.cli_types import EnumChoiceParam
from utilkit.cli.errors import UtilkitUsageError
from utilkit.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, ``1`` or more when verbose.

    Raises:
        UtilkitUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise UtilkitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress regular output (exit status only where meaningful).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format text|json`` to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)
