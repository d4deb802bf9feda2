# topmark:header:start
#
#   project      : UtilKit
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from utilkit.constants import UTILKIT_VERSION

if TYPE_CHECKING:
    from click.testing import Result


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result: Result = run_cli(
        [
            "--no-color",  # Disable color mode for exact matching
            "version",
        ]
    )

    assert_SUCCESS(result)

    assert result.output.strip() == UTILKIT_VERSION


def test_version_verbose_adds_title() -> None:
    """With -v, the version should be preceded by a title line."""
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)

    lines: list[str] = result.output.strip().splitlines()
    assert lines[0] == "UtilKit version:"
    assert lines[1].strip() == UTILKIT_VERSION


def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with the version value."""
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)

    assert json.loads(result.output) == {"version": UTILKIT_VERSION}
