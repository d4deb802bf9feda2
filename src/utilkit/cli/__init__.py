# topmark:header:start
#
#   project      : UtilKit
#   file         : __init__.py
#   file_relpath : src/utilkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line front-end for UtilKit (``utilkit``)."""
