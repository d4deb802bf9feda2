# topmark:header:start
#
#   project      : UtilKit
#   file         : errors.py
#   file_relpath : src/utilkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the UtilKit CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They print through the project console when one is
present in the Click context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from utilkit.cli.exit_codes import ExitCode


class UtilkitCliError(click.ClickException):
    """Base class for all UtilKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class UtilkitUsageError(UtilkitCliError):
    """Error for command-line invocation errors (invalid flags/args/values)."""

    exit_code = ExitCode.USAGE_ERROR


class UtilkitConfigError(UtilkitCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
