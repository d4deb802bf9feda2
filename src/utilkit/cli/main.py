# topmark:header:start
#
#   project      : UtilKit
#   file         : main.py
#   file_relpath : src/utilkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit command-line interface.

Group-level options are initialized once and placed into ``ctx.obj``; the
configuration file itself is only loaded by the subcommands that need it.
"""

from __future__ import annotations

from pathlib import Path

import click

from utilkit.cli.commands.config import config_command
from utilkit.cli.commands.format import format_command
from utilkit.cli.commands.random_values import random_command
from utilkit.cli.commands.validate import validate_command
from utilkit.cli.commands.version import version_command
from utilkit.cli.console import ClickConsole
from utilkit.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from utilkit.config.logging import get_logger, resolve_env_log_level, setup_logging
from utilkit.constants import CLI_PROG_NAME

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, console, config path) on the context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Explicit configuration file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    enable_color: bool = not no_color
    setup_logging(level=level_env, enable_color=enable_color)

    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_file"] = config_file


@click.group(
    name=CLI_PROG_NAME,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="UtilKit: validate, format and generate everyday values.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of utilkit.toml / pyproject.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the UtilKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_file=config_file,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(validate_command)

cli.add_command(format_command)

cli.add_command(random_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
