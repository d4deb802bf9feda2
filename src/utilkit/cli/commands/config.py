# topmark:header:start
#
#   project      : UtilKit
#   file         : config.py
#   file_relpath : src/utilkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit `config` command group.

  * ``utilkit config dump``: show the effective configuration as TOML.
"""

from __future__ import annotations

import click

from utilkit.cli.commands.config_dump import config_dump_command
from utilkit.cli.options import CONTEXT_SETTINGS


@click.group(
    name="config",
    help="Inspect UtilKit configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


config_command.add_command(config_dump_command, name="dump")
