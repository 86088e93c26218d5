# topmark:header:start
#
#   project      : JSONView
#   file         : test_escaping.py
#   file_relpath : tests/rendering/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Tests for `escape_html` and `html_unescape`."""

from __future__ import annotations

import pytest
from hypothesis import given

from jsonview.rendering.escaping import escape_html, html_unescape
from tests.strategies_jsonview import s_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("plain", "plain"),
        ("a & b", "a &amp; b"),
        ("<script>", "&lt;script&gt;"),
        ('say "hi"', "say &quot;hi&quot;"),
        ("it's", "it&#039;s"),
        ("&lt;", "&amp;lt;"),
        ("", ""),
    ],
)
def test_escape_html_examples(raw: str, expected: str) -> None:
    """Special characters become entities; ampersands are escaped first."""
    assert escape_html(raw) == expected


@pytest.mark.parametrize("value", [None, 42, 1.5, ["<"], {"a": "<"}, b"<"])
def test_escape_html_non_string_is_empty(value: object) -> None:
    """Anything but a string escapes to the empty string."""
    assert escape_html(value) == ""


@pytest.mark.parametrize("value", [None, "", 7, ["x"]])
def test_html_unescape_empty_or_non_string(value: object) -> None:
    """Empty and non-string input unescape to the empty string."""
    assert html_unescape(value) == ""


def test_html_unescape_drops_tags_and_resolves_entities() -> None:
    """Only the text content of the fragment is kept."""
    fragment = '<span class="key">&quot;a &amp; b&quot;</span>: <b>&lt;1&gt;</b>'
    assert html_unescape(fragment) == '"a & b": <1>'


def test_html_unescape_numeric_references() -> None:
    """Decimal and hexadecimal character references are resolved."""
    assert html_unescape("&#039;&#x41;") == "'A"


@given(text=s_text())
def test_escape_leaves_no_special_characters(text: str) -> None:
    """Escaped text contains no raw markup characters."""
    escaped: str = escape_html(text)
    for ch in "<>\"'":
        assert ch not in escaped
    # Every ampersand starts one of the entities we emit
    stripped = (
        escaped.replace("&amp;", "")
        .replace("&lt;", "")
        .replace("&gt;", "")
        .replace("&quot;", "")
        .replace("&#039;", "")
    )
    assert "&" not in stripped


@given(text=s_text(exclude="<>"))
def test_escape_then_unescape_is_identity(text: str) -> None:
    """Unescaping escaped text gives the text back."""
    assert html_unescape(escape_html(text)) == text
