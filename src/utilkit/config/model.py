# topmark:header:start
#
#   project      : UtilKit
#   file         : model.py
#   file_relpath : src/utilkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot of the effective settings.
    - `MutableConfig`: a mutable builder used while loading and merging; it can
      be frozen into `Config` and thawed back for edits.

Every `MutableConfig` field is tri-state: ``None`` means "inherit", so a
configuration file only overrides the keys it actually sets. `freeze` fills the
remaining gaps from the runtime defaults.

Example:
    ```python
    config = MutableConfig.load_merged().freeze()
    validate_password("secret", config.password_policy)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from utilkit.config.io import (
    discover_config_file,
    extract_tool_section,
    get_bool,
    get_int,
    get_section,
    get_str,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_sections,
)
from utilkit.config.keys import Toml
from utilkit.config.logging import get_logger
from utilkit.core.errors import ConfigurationError
from utilkit.randomness.source import RandomSource
from utilkit.validation.password import PasswordPolicy

if TYPE_CHECKING:
    from utilkit.config.io import TomlTable
    from utilkit.config.logging import UtilkitLogger

logger: UtilkitLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable UtilKit configuration.

    Attributes:
        locale (str): Locale for currency formatting (``[format].locale``).
        currency (str): ISO 4217 currency code (``[format].currency``).
        separator (str): Thousands separator for number formatting.
        date_format (str): Token pattern for date formatting.
        file_size_decimals (int): Decimal places for file-size formatting.
        password_policy (PasswordPolicy): Rules from the ``[password]`` section.
        seed (int | None): Seed for random generation; None draws from the OS.
        config_files (tuple[Path, ...]): Files the configuration was read from.
    """

    locale: str
    currency: str
    separator: str
    date_format: str
    file_size_decimals: int
    password_policy: PasswordPolicy
    seed: int | None = None
    config_files: tuple[Path, ...] = ()

    def random_source(self) -> RandomSource:
        """Return a new `RandomSource` seeded from ``[random].seed``."""
        return RandomSource(seed=self.seed)

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML table (unset values omitted)."""
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_LOCALE: self.locale,
                Toml.KEY_CURRENCY: self.currency,
                Toml.KEY_SEPARATOR: self.separator,
                Toml.KEY_DATE_FORMAT: self.date_format,
                Toml.KEY_FILE_SIZE_DECIMALS: self.file_size_decimals,
            },
            Toml.SECTION_PASSWORD: {
                Toml.KEY_MIN_LENGTH: self.password_policy.min_length,
                Toml.KEY_REQUIRE_UPPERCASE: self.password_policy.require_uppercase,
                Toml.KEY_REQUIRE_LOWERCASE: self.password_policy.require_lowercase,
                Toml.KEY_REQUIRE_NUMBERS: self.password_policy.require_numbers,
                Toml.KEY_REQUIRE_SPECIAL_CHARS: self.password_policy.require_special_chars,
            },
            Toml.SECTION_RANDOM: {
                Toml.KEY_SEED: self.seed,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            locale=self.locale,
            currency=self.currency,
            separator=self.separator,
            date_format=self.date_format,
            file_size_decimals=self.file_size_decimals,
            min_length=self.password_policy.min_length,
            require_uppercase=self.password_policy.require_uppercase,
            require_lowercase=self.password_policy.require_lowercase,
            require_numbers=self.password_policy.require_numbers,
            require_special_chars=self.password_policy.require_special_chars,
            seed=self.seed,
            config_files=list(self.config_files),
        )


def render_config_toml(config: Config) -> str:
    """Render ``config`` as a TOML document (e.g. for ``utilkit config dump``)."""
    return to_toml(config.to_toml_dict())


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging.

    All settings default to ``None`` (inherit). See `Config` for their meaning.
    """

    # [format]
    locale: str | None = None
    currency: str | None = None
    separator: str | None = None
    date_format: str | None = None
    file_size_decimals: int | None = None

    # [password]
    min_length: int | None = None
    require_uppercase: bool | None = None
    require_lowercase: bool | None = None
    require_numbers: bool | None = None
    require_special_chars: bool | None = None

    # [random]
    seed: int | None = None

    # Provenance
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Unset values are taken from the runtime defaults.

        Raises:
            ConfigurationError: If a numeric setting is out of range.
        """
        resolved: MutableConfig = MutableConfig.from_defaults().merge_with(self)

        assert resolved.locale is not None
        assert resolved.currency is not None
        assert resolved.separator is not None
        assert resolved.date_format is not None
        assert resolved.file_size_decimals is not None
        assert resolved.min_length is not None

        if resolved.file_size_decimals < 0:
            raise ConfigurationError(
                f"[format].file_size_decimals must not be negative, "
                f"got {resolved.file_size_decimals}"
            )
        if resolved.min_length < 0:
            raise ConfigurationError(
                f"[password].min_length must not be negative, got {resolved.min_length}"
            )

        return Config(
            locale=resolved.locale,
            currency=resolved.currency,
            separator=resolved.separator,
            date_format=resolved.date_format,
            file_size_decimals=resolved.file_size_decimals,
            password_policy=PasswordPolicy(
                min_length=resolved.min_length,
                require_uppercase=bool(resolved.require_uppercase),
                require_lowercase=bool(resolved.require_lowercase),
                require_numbers=bool(resolved.require_numbers),
                require_special_chars=bool(resolved.require_special_chars),
            ),
            seed=resolved.seed,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed TOML table.

        Unknown sections and keys are logged and ignored.

        Args:
            data (TomlTable): The parsed ``utilkit.toml`` (or ``[tool.utilkit]``) content.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The draft; keys absent from ``data`` stay None.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        warn_unknown_sections(data)

        fmt: TomlTable = get_section(data, Toml.SECTION_FORMAT)
        pwd: TomlTable = get_section(data, Toml.SECTION_PASSWORD)
        rnd: TomlTable = get_section(data, Toml.SECTION_RANDOM)

        s_fmt: str = Toml.SECTION_FORMAT
        s_pwd: str = Toml.SECTION_PASSWORD
        return cls(
            locale=get_str(fmt, s_fmt, Toml.KEY_LOCALE),
            currency=get_str(fmt, s_fmt, Toml.KEY_CURRENCY),
            separator=get_str(fmt, s_fmt, Toml.KEY_SEPARATOR),
            date_format=get_str(fmt, s_fmt, Toml.KEY_DATE_FORMAT),
            file_size_decimals=get_int(fmt, s_fmt, Toml.KEY_FILE_SIZE_DECIMALS),
            min_length=get_int(pwd, s_pwd, Toml.KEY_MIN_LENGTH),
            require_uppercase=get_bool(pwd, s_pwd, Toml.KEY_REQUIRE_UPPERCASE),
            require_lowercase=get_bool(pwd, s_pwd, Toml.KEY_REQUIRE_LOWERCASE),
            require_numbers=get_bool(pwd, s_pwd, Toml.KEY_REQUIRE_NUMBERS),
            require_special_chars=get_bool(pwd, s_pwd, Toml.KEY_REQUIRE_SPECIAL_CHARS),
            seed=get_int(rnd, Toml.SECTION_RANDOM, Toml.KEY_SEED),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from ``utilkit.toml`` or from ``[tool.utilkit]`` in ``pyproject.toml``.

        Raises:
            ConfigurationError: If the file is unreadable, is not valid TOML, lacks
                a ``[tool.utilkit]`` table (``pyproject.toml``), or holds a value of
                the wrong type.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == "pyproject.toml":
            section: TomlTable | None = extract_tool_section(data)
            if section is None:
                raise ConfigurationError(f"[tool.utilkit] section missing or malformed in {path}")
            data = section

        draft: MutableConfig = cls.from_toml_dict(data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        start: Path | None = None,
    ) -> MutableConfig:
        """Return the defaults overridden by the active configuration file.

        The active file is ``config_file`` when given, otherwise the one found by
        `discover_config_file` in ``start`` (default: the current directory).

        Raises:
            ConfigurationError: If the active file cannot be loaded.
        """
        draft: MutableConfig = cls.from_defaults()
        path: Path | None = config_file if config_file is not None else discover_config_file(start)
        if path is None:
            return draft
        logger.info("Loading configuration from %s", path)
        return draft.merge_with(cls.from_toml_file(Path(path)))

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where the values set in ``other`` override this draft."""
        return MutableConfig(
            locale=other.locale if other.locale is not None else self.locale,
            currency=other.currency if other.currency is not None else self.currency,
            separator=other.separator if other.separator is not None else self.separator,
            date_format=other.date_format
            if other.date_format is not None
            else self.date_format,
            file_size_decimals=other.file_size_decimals
            if other.file_size_decimals is not None
            else self.file_size_decimals,
            min_length=other.min_length if other.min_length is not None else self.min_length,
            require_uppercase=other.require_uppercase
            if other.require_uppercase is not None
            else self.require_uppercase,
            require_lowercase=other.require_lowercase
            if other.require_lowercase is not None
            else self.require_lowercase,
            require_numbers=other.require_numbers
            if other.require_numbers is not None
            else self.require_numbers,
            require_special_chars=other.require_special_chars
            if other.require_special_chars is not None
            else self.require_special_chars,
            seed=other.seed if other.seed is not None else self.seed,
            config_files=self.config_files + other.config_files,
        )
