# topmark:header:start
#
#   project      : JSONView
#   file         : __init__.py
#   file_relpath : src/jsonview/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView package.

JSONView renders arbitrary JSON (including JSON-LD documents) as syntax-highlighted,
escaped HTML, and builds compact "item" views for search-result style records.
It exposes a small typed API ([`JsonRenderer`][jsonview.rendering.api.JsonRenderer])
and a Click-based CLI.
"""

from __future__ import annotations

from jsonview.config.model import MutableRendererOptions, RendererOptions
from jsonview.rendering.api import JsonRenderer
from jsonview.rendering.escaping import escape_html, html_unescape
from jsonview.rendering.markup import ElementTreeHost, MarkupHost, to_html

__all__ = [
    "ElementTreeHost",
    "JsonRenderer",
    "MarkupHost",
    "MutableRendererOptions",
    "RendererOptions",
    "escape_html",
    "html_unescape",
    "to_html",
]
