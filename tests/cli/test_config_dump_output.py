# topmark:header:start
#
#   project      : UtilKit
#   file         : test_config_dump_output.py
#   file_relpath : tests/cli/test_config_dump_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `config dump` output validity and configuration errors.

Ensures that running `utilkit config dump`:

- Exits successfully (exit code 0).
- Produces valid TOML that can be parsed by `tomlkit`.
- Reports the configuration source as a TOML comment with `-v`.
- Maps configuration errors to exit code 78.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli_in
from tests.conftest import write_toml

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _parse(output: str) -> dict[str, Any]:
    return tomlkit.parse(output).unwrap()


def test_dump_defaults_is_valid_toml(tmp_path: Path) -> None:
    """Without a config file, the runtime defaults should be dumped."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "config", "dump"])

    assert_SUCCESS(result)

    parsed: dict[str, Any] = _parse(result.output)
    assert parsed["format"]["currency"] == "USD"
    assert parsed["password"]["require_special_chars"] is True


def test_dump_reflects_config_file(tmp_path: Path) -> None:
    """Values from utilkit.toml should override the defaults."""
    write_toml(tmp_path / "utilkit.toml", '[format]\ncurrency = "EUR"\n\n[random]\nseed = 5\n')

    result: Result = run_cli_in(tmp_path, ["config", "dump"])

    assert_SUCCESS(result)

    parsed: dict[str, Any] = _parse(result.output)
    assert parsed["format"]["currency"] == "EUR"
    assert parsed["random"]["seed"] == 5


def test_dump_verbose_reports_source(tmp_path: Path) -> None:
    """With -v the source file is printed as a TOML comment."""
    config_file: Path = write_toml(tmp_path / "custom.toml", '[format]\nlocale = "fr_FR"\n')

    result: Result = run_cli_in(
        tmp_path, ["--no-color", "-v", "--config", str(config_file), "config", "dump"]
    )

    assert_SUCCESS(result)

    first_line: str = result.output.splitlines()[0]
    assert first_line == f"# Source: {config_file}"
    assert _parse(result.output)["format"]["locale"] == "fr_FR"


def test_dump_verbose_without_file(tmp_path: Path) -> None:
    """The defaults are named as the source when no file is active."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "-v", "config", "dump"])

    assert_SUCCESS(result)

    assert result.output.startswith("# Source: <defaults>\n")


def test_invalid_toml_is_a_config_error(tmp_path: Path) -> None:
    """Malformed TOML should exit with CONFIG_ERROR."""
    write_toml(tmp_path / "utilkit.toml", "[format\n")

    result: Result = run_cli_in(tmp_path, ["--no-color", "config", "dump"])

    assert_CONFIG_ERROR(result)

    assert "Invalid TOML" in result.output


def test_wrong_type_is_a_config_error(tmp_path: Path) -> None:
    """A value of the wrong type should exit with CONFIG_ERROR."""
    write_toml(tmp_path / "utilkit.toml", '[password]\nmin_length = "eight"\n')

    result: Result = run_cli_in(tmp_path, ["validate", "password", "Passw0rd!"])

    assert_CONFIG_ERROR(result)

    assert "[password].min_length must be an integer" in result.output


def test_missing_explicit_config_is_a_config_error(tmp_path: Path) -> None:
    """A --config path that does not exist should exit with CONFIG_ERROR."""
    result: Result = run_cli_in(
        tmp_path, ["--config", str(tmp_path / "nope.toml"), "config", "dump"]
    )

    assert_CONFIG_ERROR(result)
