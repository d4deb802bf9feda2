# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilKit CLI subcommands."""
