# topmark:header:start
#
#   project      : UtilKit
#   file         : test_patterns_html.py
#   file_relpath : tests/formatting/test_patterns_html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for phone/card templates and HTML escaping."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tests.conftest import parametrize
from utilkit.formatting import escape_html, format_credit_card, format_phone, unescape_html


@parametrize(
    "phone, template, expected",
    [
        ("1234567890", "(XXX) XXX-XXXX", "(123) 456-7890"),
        ("+1 (234) 567-8901", "+X XXX XXX XXXX", "+1 234 567 8901"),
        ("12345", "(XXX) XXX-XXXX", "(123) 45X-XXXX"),
        ("123456789012", "XXX-XXX-XXXX", "123-456-7890"),
    ],
)
def test_format_phone(phone: str, template: str, expected: str) -> None:
    """It should fill placeholders in order and leave unfilled ones as X."""
    assert format_phone(phone, template) == expected


def test_format_phone_default_template() -> None:
    """It should default to the North American layout."""
    assert format_phone("555.123.4567") == "(555) 123-4567"


@parametrize(
    "card, separator, expected",
    [
        ("1234567890123456", " ", "1234 5678 9012 3456"),
        ("1234567890123456", "-", "1234-5678-9012-3456"),
        ("1234 5678 9012 345", " ", "1234 5678 9012 345"),
        ("", " ", ""),
    ],
)
def test_format_credit_card(card: str, separator: str, expected: str) -> None:
    """It should group by four without a trailing separator."""
    assert format_credit_card(card, separator) == expected


def test_escape_html() -> None:
    """It should escape the five reserved characters."""
    assert escape_html("<div>Hello</div>") == "&lt;div&gt;Hello&lt;/div&gt;"
    assert escape_html("Tom & \"Jerry\" 'n'") == "Tom &amp; &quot;Jerry&quot; &#039;n&#039;"
    assert escape_html("&amp;") == "&amp;amp;"


def test_unescape_html() -> None:
    """It should only decode the five entities produced by escape_html."""
    assert unescape_html("&lt;b&gt;") == "<b>"
    assert unescape_html("&#039;&quot;&amp;") == "'\"&"
    assert unescape_html("&copy; &nbsp;") == "&copy; &nbsp;"
    assert unescape_html("&amp;lt;") == "&lt;"


@given(text=st.text(max_size=60))
def test_html_round_trip(text: str) -> None:
    """Unescaping escaped text should return the original."""
    assert unescape_html(escape_html(text)) == text
