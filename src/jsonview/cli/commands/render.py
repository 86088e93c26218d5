# topmark:header:start
#
#   project      : JSONView
#   file         : render.py
#   file_relpath : src/jsonview/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView `render` command.

Renders one JSON document as a highlighted HTML block. Malformed JSON is not a CLI
failure: like the library, the command emits an escaped error block and exits 0,
unless ``--strict`` is given. A warning goes to STDERR unless ``-q`` is set.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from jsonview.cli.cmd_common import (
    build_renderer_options,
    get_console,
    get_effective_verbosity,
)
from jsonview.cli.errors import JsonviewRenderError
from jsonview.cli.io import read_input, write_output
from jsonview.cli.options import common_renderer_options
from jsonview.config.logging import get_logger
from jsonview.rendering.api import JsonRenderer

if TYPE_CHECKING:
    from jsonview.cli.console import ClickConsole
    from jsonview.config.logging import JsonviewLogger

logger: JsonviewLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a JSON document (PATH, or STDIN when PATH is '-' or omitted) as HTML.",
)
@click.argument("path", required=False, default=None)
@common_renderer_options
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the HTML to this file instead of STDOUT.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 when the input cannot be rendered.",
)
def render_command(
    *,
    path: str | None,
    config_path: Path | None,
    colorize: bool | None,
    output: Path | None,
    strict: bool,
) -> None:
    """Render a JSON document as HTML.

    Args:
        path (str | None): Input file, ``-`` or None for STDIN.
        config_path (Path | None): Optional config file.
        colorize (bool | None): CLI override for the ``colorize`` option.
        output (Path | None): Output file (default: STDOUT).
        strict (bool): Fail instead of emitting an error block.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    options = build_renderer_options(config_path=config_path, colorize=colorize)
    text: str = read_input(path)

    html, error = JsonRenderer(options).render_with_error(text)
    if error is not None:
        logger.info("Input could not be rendered: %s", error)
        source: str = path or "<stdin>"
        if strict:
            raise JsonviewRenderError(f"Cannot render {source}: {error}")
        if get_effective_verbosity(ctx) <= logging.WARNING:
            console.warn(f"Warning: cannot render {source}, writing an error block: {error}")

    if output is not None:
        write_output(html, output)
    else:
        console.print(html)
