# topmark:header:start
#
#   project      : JSONView
#   file         : shell.py
#   file_relpath : src/jsonview/rendering/shell.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Presentation shells wrapped around formatted JSON.

All shells are ``<pre class="json-ld">`` blocks. The colorized shell appends a
``<style>`` block scoped to ``.json-ld`` that colors the token classes emitted by the
structure formatter.
"""

from __future__ import annotations

from typing import Final

from jsonview.rendering.escaping import escape_html

JSON_LD_STYLES: Final[str] = """<style>
.json-ld {
  background-color: #f5f5f5;
  padding: 1em;
  border-radius: 4px;
  font-family: monospace;
  line-height: 1.5;
}
.json-ld .keyword { color: #e91e63; }
.json-ld .key { color: #2196f3; }
.json-ld .string { color: #4caf50; }
.json-ld .string.url { color: #9c27b0; }
.json-ld .number { color: #ff5722; }
.json-ld .boolean { color: #ff9800; }
.json-ld .null { color: #795548; }
.json-ld .unknown { color: #607d8b; }
</style>"""


def wrap_plain(content: str) -> str:
    """Wrap formatted markup in a ``pre``/``code`` shell without styles."""
    return f'<pre class="json-ld"><code>{content}</code></pre>'


def wrap_with_styles(content: str) -> str:
    """Wrap formatted markup in a ``pre``/``code`` shell followed by the color rules."""
    return f"{wrap_plain(content)}\n{JSON_LD_STYLES}"


def error_block(message: str) -> str:
    """Return the shell shown instead of output when rendering fails.

    Args:
        message (str): The failure message; it is escaped here.

    Returns:
        str: ``<pre class="json-ld error">Error: ...</pre>``.
    """
    return f'<pre class="json-ld error">Error: {escape_html(message)}</pre>'
