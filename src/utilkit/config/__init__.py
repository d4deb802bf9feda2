# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for UtilKit.

Settings are read from ``utilkit.toml`` or from ``[tool.utilkit]`` in
``pyproject.toml`` (parsed with tomlkit) on top of runtime defaults defined in
code. `MutableConfig` is the merge-time builder, `Config` the frozen result.
"""

from __future__ import annotations

from utilkit.config.logging import get_logger, setup_logging

from utilkit.config.io import discover_config_file, load_defaults_dict  # isort: skip
from utilkit.config.model import Config, MutableConfig, render_config_toml  # isort: skip

__all__ = [
    "Config",
    "MutableConfig",
    "discover_config_file",
    "get_logger",
    "load_defaults_dict",
    "render_config_toml",
    "setup_logging",
]
