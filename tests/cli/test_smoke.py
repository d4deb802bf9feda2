# topmark:header:start
#
#   project      : UtilKit
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for UtilKit.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and every subcommand's help succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import parametrize

if TYPE_CHECKING:
    from click.testing import Result


def test_cli_entry() -> None:
    """It should show usage information and exit code SUCCESS when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    for command in ("version", "validate", "format", "random", "config"):
        assert command in result.output


def test_cli_without_command_prints_help() -> None:
    """It should print the group help when no subcommand is given."""
    result: Result = run_cli([])

    assert_SUCCESS(result)

    assert "Usage" in result.output


@parametrize(
    "argv",
    [
        ["version", "--help"],
        ["validate", "-h"],
        ["format", "--help"],
        ["random", "--help"],
        ["config", "dump", "--help"],
    ],
)
def test_subcommand_help(argv: list[str]) -> None:
    """Every subcommand should render its help."""
    result: Result = run_cli(argv)

    assert_SUCCESS(result)

    assert "Usage" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    """Combining -v and -q should be rejected as a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)

    assert "mutually exclusive" in result.output
