# topmark:header:start
#
#   project      : JSONView
#   file         : errors.py
#   file_relpath : src/jsonview/rendering/errors.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Exceptions raised inside the rendering core.

None of these escape [`JsonRenderer.render`][jsonview.rendering.api.JsonRenderer.render],
which turns them into an error block.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for failures contained by the renderer facade."""


class FormatDepthError(RenderError):
    """The value being formatted is nested deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Value nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth
