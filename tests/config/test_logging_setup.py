# topmark:header:start
#
#   project      : UtilKit
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the UtilKit logging helpers: env level resolution and formatting."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from utilkit.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    resolve_env_log_level,
    setup_logging,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Reinstate the session-wide TRACE setup after a test reconfigures logging."""
    yield
    setup_logging(level=TRACE_LEVEL)


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """It should read level names and numbers from UTILKIT_LOG_LEVEL."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """It should return None when the variable is absent."""
    assert resolve_env_log_level() is None


def test_formatter_without_color_is_plain() -> None:
    """Disabling color should leave the formatted record free of ANSI codes."""
    record = logging.LogRecord("utilkit.demo", logging.WARNING, __file__, 1, "careful", (), None)

    formatter = ChalkFormatter("[%(levelname)s] %(name)s: %(message)s", enable_color=False)

    assert formatter.format(record) == "[WARNING] utilkit.demo: careful"


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_writes_to_stderr() -> None:
    """The root logger should get exactly one stderr handler at the requested level."""
    setup_logging(level=logging.INFO, enable_color=False)
    setup_logging(level=logging.INFO, enable_color=False)

    root: logging.Logger = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_defaults_to_critical() -> None:
    """Without a level or environment variable, only CRITICAL records pass."""
    setup_logging()

    assert logging.getLogger().level == logging.CRITICAL
