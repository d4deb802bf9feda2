# topmark:header:start
#
#   project      : UtilKit
#   file         : html.py
#   file_relpath : src/utilkit/formatting/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal HTML escaping for the five reserved characters.

Unlike `html.escape`/`html.unescape` from the standard library, the table is fixed
(``&`` ``<`` ``>`` ``"`` ``'``), the apostrophe is written ``&#039;`` and unescaping
only recognizes these five entities; any other entity passes through untouched.
"""

from __future__ import annotations

import re
from typing import Final

HTML_ESCAPES: Final[dict[str, str]] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
HTML_UNESCAPES: Final[dict[str, str]] = {entity: ch for ch, entity in HTML_ESCAPES.items()}

_ESCAPE_TABLE: Final[dict[int, str]] = str.maketrans(HTML_ESCAPES)
_ENTITY_RE: Final[re.Pattern[str]] = re.compile("|".join(map(re.escape, HTML_UNESCAPES)))


def escape_html(text: str) -> str:
    """Replace ``& < > " '`` with their entities in a single pass.

    Returns:
        str: ``escape_html("<div>Hello</div>") == "&lt;div&gt;Hello&lt;/div&gt;"``.
    """
    return text.translate(_ESCAPE_TABLE)


def unescape_html(text: str) -> str:
    """Replace the five entities produced by `escape_html` with their characters.

    Returns:
        str: ``unescape_html("&lt;b&gt;") == "<b>"``; ``"&copy;"`` is left as-is.
    """
    return _ENTITY_RE.sub(lambda m: HTML_UNESCAPES[m.group(0)], text)
