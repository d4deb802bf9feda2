# topmark:header:start
#
#   project      : UtilKit
#   file         : __main__.py
#   file_relpath : src/utilkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running UtilKit via ``python -m utilkit``.

Equivalent to running the ``utilkit`` console script; it delegates directly to
`utilkit.cli.main.cli`.

Examples:
    Validate a card number using the module interface::

        python -m utilkit validate credit-card 4532015112830366
"""

from __future__ import annotations

from utilkit.cli.main import cli

if __name__ == "__main__":
    cli()
