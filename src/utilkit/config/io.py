# topmark:header:start
#
#   project      : UtilKit
#   file         : io.py
#   file_relpath : src/utilkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for UtilKit configuration.

This module provides:
- the runtime defaults (defined in code, no I/O),
- reading ``utilkit.toml`` / ``pyproject.toml`` with `tomlkit`,
- discovery of the configuration file for the current directory,
- checked value getters that raise `ConfigurationError` on a wrong type,
- rendering a TOML table back to text.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from utilkit.config.keys import Toml
from utilkit.config.logging import get_logger
from utilkit.core.errors import ConfigurationError

if TYPE_CHECKING:
    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)

TomlTable = dict[str, Any]

DEFAULT_TOML_CONFIG_NAME: Final[str] = "utilkit.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"


def load_defaults_dict() -> TomlTable:
    """Return UtilKit's runtime defaults as a new TOML-compatible dict.

    ``[random].seed`` is unset by default and therefore absent.
    """
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_LOCALE: "en_US",
            Toml.KEY_CURRENCY: "USD",
            Toml.KEY_SEPARATOR: ",",
            Toml.KEY_DATE_FORMAT: "YYYY-MM-DD",
            Toml.KEY_FILE_SIZE_DECIMALS: 2,
        },
        Toml.SECTION_PASSWORD: {
            Toml.KEY_MIN_LENGTH: 8,
            Toml.KEY_REQUIRE_UPPERCASE: True,
            Toml.KEY_REQUIRE_LOWERCASE: True,
            Toml.KEY_REQUIRE_NUMBERS: True,
            Toml.KEY_REQUIRE_SPECIAL_CHARS: True,
        },
        Toml.SECTION_RANDOM: {},
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.utilkit]`` table of a parsed ``pyproject.toml``, if any."""
    tool: Any = data.get(Toml.PYPROJECT_TOOL, {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(Toml.PYPROJECT_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the configuration file for ``start`` (default: the current directory).

    Looks for ``utilkit.toml`` first, then for a ``pyproject.toml`` that has a
    ``[tool.utilkit]`` table. Only ``start`` itself is searched.

    Returns:
        Path | None: The first match, or None.
    """
    base: Path = start if start is not None else Path.cwd()

    candidate: Path = base / DEFAULT_TOML_CONFIG_NAME
    if candidate.is_file():
        logger.debug("Discovered config file: %s", candidate)
        return candidate

    pyproject: Path = base / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        try:
            has_section: bool = extract_tool_section(load_toml_dict(pyproject)) is not None
        except ConfigurationError:
            logger.warning("Ignoring unreadable %s during discovery", pyproject)
            return None
        if has_section:
            logger.debug("Discovered [tool.utilkit] in %s", pyproject)
            return pyproject

    logger.debug("No UtilKit config file found in %s", base)
    return None


# --- Checked getters ---


def _where(section: str, key: str) -> str:
    return f"[{section}].{key}"


def get_str(table: TomlTable, section: str, key: str) -> str | None:
    """Return ``table[key]`` as a string, or None when absent.

    Raises:
        ConfigurationError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(
            f"{_where(section, key)} must be a string, got {type(value).__name__}"
        )
    return value


def get_int(table: TomlTable, section: str, key: str) -> int | None:
    """Return ``table[key]`` as an integer, or None when absent.

    Raises:
        ConfigurationError: If the value is present but not an integer (booleans
            are rejected).
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{_where(section, key)} must be an integer, got {type(value).__name__}"
        )
    return value


def get_bool(table: TomlTable, section: str, key: str) -> bool | None:
    """Return ``table[key]`` as a boolean, or None when absent.

    Raises:
        ConfigurationError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"{_where(section, key)} must be a boolean, got {type(value).__name__}"
        )
    return value


def get_section(data: TomlTable, section: str) -> TomlTable:
    """Return the ``[section]`` table, warning about keys UtilKit does not know.

    Raises:
        ConfigurationError: If ``section`` exists but is not a table.
    """
    value: Any = data.get(section, {})
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"[{section}] must be a table, got {type(value).__name__}")
    table: TomlTable = dict(cast("Mapping[str, Any]", value))
    allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(section, frozenset())
    for key in sorted(set(table) - allowed):
        logger.warning("Ignoring unknown config key %s", _where(section, key))
        del table[key]
    return table


def warn_unknown_sections(data: TomlTable) -> None:
    """Log a warning for every top-level section UtilKit does not know."""
    for section in sorted(set(data) - set(Toml.ALLOWED_SECTION_KEYS)):
        logger.warning("Ignoring unknown config section [%s]", section)


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Drop ``None`` entries; TOML has no null value."""
    if isinstance(value, Mapping):
        mapping: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in mapping.items() if v is not None}
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render; ``None`` values are omitted.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
