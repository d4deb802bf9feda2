# topmark:header:start
#
#   project      : UtilKit
#   file         : logging.py
#   file_relpath : src/utilkit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit diagnostics: a TRACE level, a chalk-colored formatter and env-driven setup.

Every module logs through ``get_logger(__name__)``. Library helpers stay at
TRACE/DEBUG (an invalid e-mail address is an expected outcome); configuration
loading reports at INFO/WARNING. The CLI has no log-level flag: set
``UTILKIT_LOG_LEVEL`` (e.g. ``UTILKIT_LOG_LEVEL=trace utilkit validate url ...``)
to see the probes.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "UTILKIT_LOG_LEVEL"


class UtilkitLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(UtilkitLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d (%(funcName)s) %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with chalk.

    Args:
        fmt (str): `logging` format string.
        enable_color (bool): If False, records are rendered without ANSI codes
            (``utilkit --no-color``).
    """

    def __init__(self, fmt: str, *, enable_color: bool = True) -> None:
        super().__init__(fmt)
        self.enable_color = enable_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record, colored by its level when color is enabled.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The formatted log message.
        """
        message: str = super().format(record)
        if not self.enable_color:
            return message

        level: int = record.levelno
        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``UTILKIT_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``TRACE``, ``debug``, ``Warn``, ...) and numeric strings
    such as ``"10"``.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    name: str = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return _NAME_TO_LEVEL.get(name)


def setup_logging(level: int | None = None, *, enable_color: bool = True) -> None:
    """Route UtilKit diagnostics to stderr at ``level``.

    Records go to stderr; stdout carries only command output. Below INFO the
    format adds the source line and function.

    Args:
        level (int | None): Root level; None consults `resolve_env_log_level`
            and falls back to CRITICAL.
        enable_color (bool): Color records by level.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)

    # One handler per process, however often the CLI runs.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            enable_color=enable_color,
        )
    )
    root_logger.addHandler(stream_handler)

    root_logger.propagate = False


def get_logger(name: str) -> UtilkitLogger:
    """Return the `UtilkitLogger` registered under ``name`` (usually ``__name__``)."""
    return cast("UtilkitLogger", logging.getLogger(name))
