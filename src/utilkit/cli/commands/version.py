# topmark:header:start
#
#   project      : UtilKit
#   file         : version.py
#   file_relpath : src/utilkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `version` command.

Prints the current UtilKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from utilkit.cli.cmd_common import get_console, get_effective_verbosity
from utilkit.cli.options import output_format_option
from utilkit.constants import UTILKIT_VERSION
from utilkit.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from utilkit.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of UtilKit.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat) -> None:
    """Show the current version of UtilKit.

    Args:
        ctx (click.Context): The Click context.
        output_format (OutputFormat): Plain text or JSON.
    """
    console: ClickConsole = get_console(ctx)

    if is_machine_format(output_format):
        console.print(json.dumps({"version": UTILKIT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("UtilKit version:", bold=True, underline=True))
        console.print(f"    {console.styled(UTILKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(UTILKIT_VERSION, bold=True))
