# topmark:header:start
#
#   project      : JSONView
#   file         : test_formatter.py
#   file_relpath : tests/rendering/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Tests for the structure formatter (JSON values to highlighted markup text)."""

from __future__ import annotations

import datetime
import html
import json
import re
from collections import OrderedDict
from decimal import Decimal

import pytest

from jsonview.rendering.errors import FormatDepthError
from jsonview.rendering.formatter import (
    StructureFormatter,
    StyleClass,
    format_object,
    format_value,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, '<span class="null">null</span>'),
        (True, '<span class="boolean">true</span>'),
        (False, '<span class="boolean">false</span>'),
        (0, '<span class="number">0</span>'),
        (-12, '<span class="number">-12</span>'),
        (1.5, '<span class="number">1.5</span>'),
        ("hi", '<span class="string">"hi"</span>'),
        ("https://example.org", '<span class="string url">"https://example.org"</span>'),
        ("http://example.org", '<span class="string url">"http://example.org"</span>'),
        ("ftp://example.org", '<span class="string">"ftp://example.org"</span>'),
        ([], "[]"),
        ({}, "{}"),
    ],
)
def test_scalars_and_empty_containers(value: object, expected: str) -> None:
    """Scalars become a single styled token; empty containers stay bare."""
    assert format_value(value) == expected


def test_object_layout_and_key_classes() -> None:
    """Keys starting with ``@`` get the keyword class; layout is two-space indented."""
    out: str = format_value({"@type": "Thing", "x": 1})
    assert out == (
        "{\n"
        '  <span class="keyword">"@type"</span>: <span class="string">"Thing"</span>,\n'
        '  <span class="key">"x"</span>: <span class="number">1</span>\n'
        "}"
    )


def test_nested_layout_closes_at_parent_indent() -> None:
    """Closing brackets line up with the line that opened them."""
    out: str = format_value({"a": [1, {"b": None}]})
    assert out == (
        "{\n"
        '  <span class="key">"a"</span>: [\n'
        '    <span class="number">1</span>,\n'
        "    {\n"
        '      <span class="key">"b"</span>: <span class="null">null</span>\n'
        "    }\n"
        "  ]\n"
        "}"
    )


def test_key_order_is_preserved() -> None:
    """Keys are emitted in insertion order, never sorted."""
    out: str = format_value(OrderedDict([("z", 1), ("a", 2), ("m", 3)]))
    assert out.index('"z"') < out.index('"a"') < out.index('"m"')


def test_format_object_none_and_indent() -> None:
    """``format_object`` accepts None and an explicit indent level."""
    assert format_object(None) == "{}"
    out: str = format_object({"k": "v"}, 2)
    assert out.splitlines()[1].startswith("      <span")
    assert out.endswith("\n    }")


def test_strings_and_keys_are_escaped() -> None:
    """Markup inside keys and strings is escaped, never emitted raw."""
    out: str = format_value({"<b>": "<script>alert('x')</script>"})
    assert "<b>" not in out
    assert "<script>" not in out
    assert "&lt;b&gt;" in out
    assert "&lt;script&gt;alert(&#039;x&#039;)&lt;/script&gt;" in out


def test_strings_are_json_escaped() -> None:
    """Quotes, backslashes and control characters keep their JSON escapes."""
    out: str = format_value('a"b\\c\nd')
    assert out == '<span class="string">"a\\&quot;b\\\\c\\nd"</span>'


def test_lone_surrogates_become_json_escapes() -> None:
    """Unpaired surrogates are written as ``\\uXXXX`` and the output encodes as UTF-8."""
    value: dict[str, str] = json.loads('{"\\udc00": "a\\ud800b"}')
    out: str = format_value(value)
    out.encode("utf-8")
    assert '<span class="key">"\\udc00"</span>' in out
    assert '<span class="string">"a\\ud800b"</span>' in out
    assert json.loads(html.unescape(re.sub(r"<[^>]+>", "", out))) == value


def test_surrogate_pairs_are_kept_as_characters() -> None:
    """A valid pair decodes to one character, which is written as is."""
    out: str = format_value(json.loads('"\\ud83d\\ude00"'))
    assert out == '<span class="string">"\U0001f600"</span>'


def test_tuple_is_a_sequence() -> None:
    """Tuples render like lists."""
    assert format_value((1,)) == format_value([1])


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (float("nan"), "nan"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (Decimal("1.5"), "1.5"),
        (datetime.date(2024, 1, 2), "2024-01-02"),
        (frozenset(), "frozenset()"),
    ],
)
def test_values_outside_json_render_as_unknown(value: object, text: str) -> None:
    """Non-JSON values fall back to their escaped ``str()`` in the unknown class."""
    assert format_value(value) == f'<span class="unknown">{text}</span>'


def test_unknown_representation_is_escaped() -> None:
    """The fallback representation is escaped like any other text."""

    class Tag:
        def __str__(self) -> str:
            return "<tag>"

    assert format_value(Tag()) == '<span class="unknown">&lt;tag&gt;</span>'


def test_non_string_keys_are_stringified() -> None:
    """Mappings with non-string keys still render (keys go through ``str``)."""
    out: str = format_value({1: "one"})
    assert '<span class="key">"1"</span>' in out


def test_depth_limit() -> None:
    """Nesting beyond ``max_depth`` raises `FormatDepthError`."""
    formatter = StructureFormatter(max_depth=3)
    assert "null" in formatter.format_value([[[None]]])
    with pytest.raises(FormatDepthError, match="maximum depth of 3"):
        formatter.format_value([[[[None]]]])


def test_style_classes_are_stable() -> None:
    """The emitted class names are part of the styling surface."""
    assert [s.value for s in StyleClass] == [
        "keyword",
        "key",
        "string",
        "string url",
        "number",
        "boolean",
        "null",
        "unknown",
    ]


def test_large_and_negative_numbers() -> None:
    """Numbers keep the notation ``json.dumps`` would use."""
    assert format_value(10**30) == f'<span class="number">{10**30}</span>'
    assert format_value(1e300) == f'<span class="number">{json.dumps(1e300)}</span>'
    assert format_value(-0.0) == '<span class="number">-0.0</span>'
