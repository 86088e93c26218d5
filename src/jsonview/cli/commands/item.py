# topmark:header:start
#
#   project      : JSONView
#   file         : item.py
#   file_relpath : src/jsonview/cli/commands/item.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView `item` command.

Renders item records (``{"url", "name", "site", "schema_object", ...}``) as item
views. The input is either one record or a JSON array of records; each view is
printed as one HTML fragment per line. Entries that are not JSON objects render as
empty items, with a warning on STDERR unless ``-q`` is set.

Type renderers are plain callables ``renderer(item, json_renderer)`` loaded with
``--type-renderer TAG=module:function``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from jsonview.cli.cmd_common import (
    build_renderer_options,
    get_console,
    get_effective_verbosity,
)
from jsonview.cli.errors import JsonviewEncodingError
from jsonview.cli.io import read_input, write_output
from jsonview.cli.options import config_file_option
from jsonview.cli.plugins import register_type_renderers
from jsonview.config.logging import get_logger
from jsonview.rendering.api import JsonRenderer, parse_json

if TYPE_CHECKING:
    from jsonview.cli.console import ClickConsole
    from jsonview.config.logging import JsonviewLogger

logger: JsonviewLogger = get_logger(__name__)


def iter_records(document: Any) -> list[Any]:
    """Return the records held by a parsed document (a record or a list of them)."""
    if isinstance(document, list):
        return list(document)  # pyright: ignore[reportUnknownArgumentType]
    return [document]


@click.command(
    name="item",
    help="Render one item record, or a JSON array of records, as item views.",
)
@click.argument("path", required=False, default=None)
@config_file_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the HTML to this file instead of STDOUT.",
)
@click.option(
    "--type-renderer",
    "type_renderers",
    multiple=True,
    metavar="TAG=module:function",
    help="Render items whose @type is TAG with an importable callable. Repeatable.",
)
def item_command(
    *,
    path: str | None,
    config_path: Path | None,
    output: Path | None,
    type_renderers: tuple[str, ...],
) -> None:
    """Render item records as HTML item views.

    Args:
        path (str | None): Input file, ``-`` or None for STDIN.
        config_path (Path | None): Optional config file.
        output (Path | None): Output file (default: STDOUT).
        type_renderers (tuple[str, ...]): ``TAG=module:function`` specifications.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    options = build_renderer_options(config_path=config_path, colorize=None)
    renderer = JsonRenderer(options)
    register_type_renderers(renderer, type_renderers)

    text: str = read_input(path)
    try:
        document: Any = parse_json(text)
    except ValueError as exc:
        raise JsonviewEncodingError(f"{path or '<stdin>'} is not valid JSON: {exc}") from exc

    records = iter_records(document)
    skipped = sum(1 for r in records if not isinstance(r, Mapping))
    logger.debug("Rendering %d item record(s), %d not JSON objects", len(records), skipped)
    if skipped and get_effective_verbosity(ctx) <= logging.WARNING:
        console.warn(f"Warning: {skipped} entries are not JSON objects and render as empty items")

    html: str = "\n".join(renderer.render_item(record) for record in records)
    if output is not None:
        write_output(html, output)
    elif html:
        console.print(html)
