# topmark:header:start
#
#   project      : JSONView
#   file         : test_item.py
#   file_relpath : tests/cli/test_item.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""CLI tests: `item` command and ``--type-renderer`` plugins."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from jsonview.cli.errors import JsonviewUsageError
from jsonview.cli.exit_codes import ExitCode
from jsonview.cli.plugins import parse_type_renderer_spec
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli

RECIPE: dict[str, object] = {
    "url": "https://example.org/pancakes",
    "name": "Pancakes",
    "schema_object": {"@type": "Recipe", "image": "https://example.org/p.jpg"},
}

PLUGIN_SOURCE = '''
def render_recipe(item, renderer):
    return "<article>" + renderer.escape_html(renderer.get_item_name(item)) + "</article>"

NOT_CALLABLE = 3
'''


@pytest.fixture
def plugin_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """An importable module defining a type renderer; returns its name."""
    name = f"jsonview_test_plugin_{uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(PLUGIN_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


def test_item_single_record() -> None:
    """One record renders as one default item view."""
    result = run_cli(["item"], input_text=json.dumps(RECIPE))
    assert_SUCCESS(result)
    out: str = result.output.strip()
    assert out.startswith('<div class="item-container">')
    assert '<a class="item-title-link" href="https://example.org/pancakes">Pancakes</a>' in out
    assert '<img class="item-image" src="https://example.org/p.jpg" alt="Item image">' in out


def test_item_list_of_records() -> None:
    """A list renders one fragment per line."""
    records = [RECIPE, {"name": "Other"}, "junk"]
    result = run_cli(["-q", "item", "-"], input_text=json.dumps(records))
    assert_SUCCESS(result)
    lines = result.output.strip().splitlines()
    assert len(lines) == 3
    assert all(line.startswith('<div class="item-container">') for line in lines)


def test_item_non_object_entries_warn() -> None:
    """Entries that are not objects are counted in a warning on STDERR."""
    result = run_cli(["item"], input_text=json.dumps([RECIPE, "junk", 3]))
    assert_SUCCESS(result)
    assert "Warning: 2 entries are not JSON objects" in result.output


def test_item_empty_list() -> None:
    """An empty list prints nothing."""
    result = run_cli(["item"], input_text="[]")
    assert_SUCCESS(result)
    assert result.output == ""


def test_item_type_renderer(plugin_module: str) -> None:
    """A registered type renderer replaces the default view for its tag."""
    result = run_cli(
        ["item", "--type-renderer", f"Recipe={plugin_module}:render_recipe"],
        input_text=json.dumps([RECIPE, {"name": "<x>", "schema_object": {"@type": "Other"}}]),
    )
    assert_SUCCESS(result)
    first, second = result.output.strip().splitlines()
    assert first == "<article>Pancakes</article>"
    assert second.startswith('<div class="item-container">')
    assert "&lt;x&gt;" in second


def test_item_output_file(tmp_path: Path) -> None:
    """``--output`` writes the fragments to a file."""
    out = tmp_path / "items.html"
    result = run_cli(["item", "-o", str(out)], input_text=json.dumps(RECIPE))
    assert_SUCCESS(result)
    assert out.read_text(encoding="utf-8").startswith('<div class="item-container">')


def test_item_lone_surrogate_in_text() -> None:
    """Text holding a lone surrogate is written as a \\uXXXX escape, not a crash."""
    result = run_cli(["item", "-"], input_text='{"name": "a\\ud800", "url": "\\udfff"}')
    assert_SUCCESS(result)
    assert 'href="\\udfff">a\\ud800</a>' in result.output


def test_item_lone_surrogate_to_file(tmp_path: Path) -> None:
    """``--output`` writes lone surrogates as \\uXXXX escapes."""
    out = tmp_path / "items.html"
    result = run_cli(["item", "-o", str(out)], input_text='{"description": "\\ud800"}')
    assert_SUCCESS(result)
    assert '<div class="item-description">\\ud800</div>' in out.read_text(encoding="utf-8")


def test_item_has_no_colorize_option() -> None:
    """Item views carry no embedded styles, so ``--colorize`` is not accepted."""
    result = run_cli(["item", "--colorize"], input_text="{}")
    assert result.exit_code == 2, result.output
    assert "No such option" in result.output


def test_item_invalid_json() -> None:
    """Item input must be JSON."""
    result = run_cli(["item"], input_text="{not json")
    assert_exit(result, ExitCode.ENCODING_ERROR)
    assert "is not valid JSON" in result.output


@pytest.mark.parametrize(
    "spec",
    [
        "jsonview_no_such_module_xyz:render",
        "json:no_such_function",
    ],
)
def test_item_unloadable_plugin(spec: str) -> None:
    """Targets that cannot be imported exit with PLUGIN_ERROR."""
    result = run_cli(["item", "--type-renderer", f"Recipe={spec}"], input_text="{}")
    assert_exit(result, ExitCode.PLUGIN_ERROR)


def test_item_non_callable_plugin(plugin_module: str) -> None:
    """Targets that are not callable exit with PLUGIN_ERROR."""
    result = run_cli(
        ["item", "--type-renderer", f"Recipe={plugin_module}:NOT_CALLABLE"], input_text="{}"
    )
    assert_exit(result, ExitCode.PLUGIN_ERROR)
    assert "is not callable" in result.output


@pytest.mark.parametrize("spec", ["Recipe", "Recipe=module", "=m:f", "Recipe=:f", "Recipe=m:"])
def test_item_malformed_plugin_spec(spec: str) -> None:
    """Malformed specifications exit with USAGE_ERROR."""
    result = run_cli(["item", "--type-renderer", spec], input_text="{}")
    assert_exit(result, ExitCode.USAGE_ERROR)


def test_parse_type_renderer_spec() -> None:
    """Specifications split into tag, module and attribute path."""
    assert parse_type_renderer_spec(" Recipe = pkg.mod:obj.method ") == (
        "Recipe",
        "pkg.mod",
        "obj.method",
    )
    with pytest.raises(JsonviewUsageError):
        parse_type_renderer_spec("no-equals-sign")
