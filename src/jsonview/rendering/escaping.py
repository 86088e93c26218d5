# topmark:header:start
#
#   project      : JSONView
#   file         : escaping.py
#   file_relpath : src/jsonview/rendering/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""HTML escaping helpers.

`escape_html` is the only path by which untrusted text enters the markup strings built
by the structure formatter. `html_unescape` is its inverse: it parses a fragment with
the standard library HTML parser and keeps only the text content, the way a browser's
``textContent`` would.
"""

from __future__ import annotations

from html.parser import HTMLParser
from typing import Final

# Order matters: "&" first so entities introduced below are not escaped twice.
_HTML_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: object) -> str:
    """Escape the HTML special characters of ``text``.

    Args:
        text (object): Text to escape. Anything but a ``str`` yields ``""``.

    Returns:
        str: The escaped text, safe inside element content and quoted attributes.
    """
    if not isinstance(text, str):
        return ""
    for raw, entity in _HTML_REPLACEMENTS:
        text = text.replace(raw, entity)
    return text


class _TextContentParser(HTMLParser):
    """Collect the character data of a fragment, with references resolved."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []

    def handle_data(self, data: str) -> None:
        self._chunks.append(data)

    @property
    def text(self) -> str:
        return "".join(self._chunks)


def html_unescape(markup: object) -> str:
    """Return the plain text content of an HTML fragment.

    Character references are resolved and tags are dropped.

    Args:
        markup (object): The fragment. Anything but a non-empty ``str`` yields ``""``.

    Returns:
        str: The text content.
    """
    if not isinstance(markup, str) or not markup:
        return ""
    parser = _TextContentParser()
    parser.feed(markup)
    parser.close()
    return parser.text
