# topmark:header:start
#
#   project      : UtilKit
#   file         : constants.py
#   file_relpath : src/utilkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

UTILKIT_VERSION: str = get_version("utilkit")

CLI_PROG_NAME: str = "utilkit"
