# topmark:header:start
#
#   project      : UtilKit
#   file         : config_dump.py
#   file_relpath : src/utilkit/cli/commands/config_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `config dump` command.

Emits the effective configuration (runtime defaults overridden by the active
configuration file) as TOML. With ``-v`` the source file is reported first as a
TOML comment, so the output stays valid TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.cli.cmd_common import get_config, get_console, get_effective_verbosity
from utilkit.config.model import render_config_toml

if TYPE_CHECKING:
    from utilkit.cli.console import ClickConsole
    from utilkit.config.model import Config


@click.command(
    name="dump",
    help="Dump the effective UtilKit configuration as TOML.",
)
@click.pass_context
def config_dump_command(ctx: click.Context) -> None:
    """Print the effective configuration."""
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)

    if get_effective_verbosity(ctx) > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(f"# Source: {sources}")
    console.print(render_config_toml(config), nl=False)
