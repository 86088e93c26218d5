# topmark:header:start
#
#   project      : JSONView
#   file         : formatter.py
#   file_relpath : src/jsonview/rendering/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Structure formatter: JSON values to syntax-highlighted HTML text.

The output is plain markup text meant to sit inside a ``<pre><code>`` shell. Every
token is wrapped in a ``<span>`` whose class names the token kind (see `StyleClass`);
those class names are a stable, styleable surface.

Layout mirrors ``json.dumps(value, indent=2)``: one entry per line, two spaces per
nesting level, closing brackets aligned with the line that opened them. Keys keep their
insertion order.

Every piece of text taken from the value (keys, strings, fallback representations)
goes through [`escape_html`][jsonview.rendering.escaping.escape_html]. Strings are
JSON-escaped first, so stripping the tags and unescaping the entities gives back a
JSON document equal to the input. Lone surrogates are written as ``\\uXXXX`` escapes,
so the output is always encodable.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

from jsonview.config.logging import get_logger
from jsonview.constants import DEFAULT_MAX_DEPTH, JSONLD_KEYWORD_PREFIX
from jsonview.rendering.errors import FormatDepthError
from jsonview.rendering.escaping import escape_html

logger = get_logger(__name__)

INDENT_UNIT: Final[str] = "  "
URL_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://")

# Unpaired surrogates survive json.loads but cannot be encoded as UTF-8
SURROGATE_RE: Final[re.Pattern[str]] = re.compile("[\ud800-\udfff]")


class StyleClass(Enum):
    """CSS classes emitted by the structure formatter."""

    KEYWORD = "keyword"
    KEY = "key"
    STRING = "string"
    URL = "string url"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"


def _span(style: StyleClass, body: str) -> str:
    return f'<span class="{style.value}">{body}</span>'


def _quoted(text: str) -> str:
    # json.dumps escapes backslashes, quotes and control characters; drop its quotes
    body: str = json.dumps(text, ensure_ascii=False)[1:-1]
    body = SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", body)
    return f'"{escape_html(body)}"'


def _key_text(key: object) -> str:
    return key if isinstance(key, str) else str(key)


class StructureFormatter:
    """Recursive value-to-markup formatter.

    Args:
        max_depth (int): Deepest nesting level accepted before
            [`FormatDepthError`][jsonview.rendering.errors.FormatDepthError] is raised.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def _check_depth(self, indent: int) -> None:
        if indent >= self.max_depth:
            raise FormatDepthError(self.max_depth)

    def format_key(self, key: object) -> str:
        """Render an object key; JSON-LD keywords (``@type``, ...) get their own class."""
        text: str = _key_text(key)
        style = StyleClass.KEYWORD if text.startswith(JSONLD_KEYWORD_PREFIX) else StyleClass.KEY
        return _span(style, _quoted(text))

    def format_object(self, obj: Mapping[Any, Any] | None, indent: int = 0) -> str:
        """Render a mapping as an indented, highlighted JSON object.

        Args:
            obj (Mapping[Any, Any] | None): The mapping. None or empty renders ``{}``.
            indent (int): Nesting level of the line holding the opening brace.

        Returns:
            str: The markup text.

        Raises:
            FormatDepthError: If the nesting exceeds ``max_depth``.
        """
        if not obj:
            return "{}"
        self._check_depth(indent)

        spaces: str = INDENT_UNIT * indent
        entries: list[str] = [
            f"{spaces}{INDENT_UNIT}{self.format_key(key)}: {self.format_value(value, indent + 1)}"
            for key, value in obj.items()
        ]
        return "{\n" + ",\n".join(entries) + f"\n{spaces}}}"

    def format_sequence(self, seq: list[Any] | tuple[Any, ...], indent: int = 0) -> str:
        """Render a list or tuple as an indented JSON array.

        Raises:
            FormatDepthError: If the nesting exceeds ``max_depth``.
        """
        if not seq:
            return "[]"
        self._check_depth(indent)

        spaces: str = INDENT_UNIT * indent
        items: list[str] = [
            f"{spaces}{INDENT_UNIT}{self.format_value(item, indent + 1)}" for item in seq
        ]
        return "[\n" + ",\n".join(items) + f"\n{spaces}]"

    def format_value(self, value: object, indent: int = 0) -> str:
        """Render any value.

        Dispatch order: ``None``, ``str``, ``bool`` (before numbers, since ``bool`` is an
        ``int``), finite ``int``/``float``, list/tuple, mapping. Anything else, including
        ``nan`` and infinities, is rendered as its escaped ``str()`` in the ``unknown``
        class.

        Args:
            value (object): The value.
            indent (int): Nesting level of the line the value starts on.

        Returns:
            str: The markup text.
        """
        if value is None:
            return _span(StyleClass.NULL, "null")
        if isinstance(value, str):
            style = StyleClass.URL if value.startswith(URL_PREFIXES) else StyleClass.STRING
            return _span(style, _quoted(value))
        if isinstance(value, bool):
            return _span(StyleClass.BOOLEAN, "true" if value else "false")
        if isinstance(value, int):
            return _span(StyleClass.NUMBER, str(value))
        if isinstance(value, float) and math.isfinite(value):
            return _span(StyleClass.NUMBER, json.dumps(value))
        if isinstance(value, (list, tuple)):
            return self.format_sequence(value, indent)  # pyright: ignore[reportUnknownArgumentType]
        if isinstance(value, Mapping):
            return self.format_object(value, indent)  # pyright: ignore[reportUnknownArgumentType]
        return self.format_unknown(value)

    def format_unknown(self, value: object) -> str:
        """Render a value outside the JSON data model.

        The representation is ``str(value)`` (``nan``, ``inf``, ``2024-01-01 00:00:00``,
        ``Decimal('1.5')`` prints as ``1.5``, ...), escaped, in the ``unknown`` class.
        """
        logger.trace("Formatting %s value as unknown", type(value).__name__)
        return _span(StyleClass.UNKNOWN, escape_html(str(value)))


_DEFAULT_FORMATTER: Final[StructureFormatter] = StructureFormatter()


def format_object(obj: Mapping[Any, Any] | None, indent: int = 0) -> str:
    """Render a mapping with the default formatter.

    See [`StructureFormatter.format_object`][jsonview.rendering.formatter.StructureFormatter.format_object].
    """
    return _DEFAULT_FORMATTER.format_object(obj, indent)


def format_value(value: object, indent: int = 0) -> str:
    """Render any value with the default formatter.

    See [`StructureFormatter.format_value`][jsonview.rendering.formatter.StructureFormatter.format_value].
    """
    return _DEFAULT_FORMATTER.format_value(value, indent)
