# topmark:header:start
#
#   project      : UtilKit
#   file         : cmd_common.py
#   file_relpath : src/utilkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by UtilKit subcommands: context state and configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from utilkit.cli.errors import UtilkitConfigError
from utilkit.config.logging import get_logger
from utilkit.config.model import Config, MutableConfig
from utilkit.core.errors import ConfigurationError

if TYPE_CHECKING:
    import click

    from utilkit.cli.console import ClickConsole
    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the root group."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Load (once per invocation) and return the effective configuration.

    Raises:
        UtilkitConfigError: If the configuration file cannot be loaded.
    """
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached

    config_file: Path | None = ctx.obj.get("config_file")
    try:
        config: Config = MutableConfig.load_merged(
            config_file=Path(config_file) if config_file is not None else None,
        ).freeze()
    except ConfigurationError as exc:
        raise UtilkitConfigError(str(exc)) from exc

    logger.debug("Effective configuration: %s", config)
    ctx.obj["config"] = config
    return config
