# topmark:header:start
#
#   project      : JSONView
#   file         : config.py
#   file_relpath : src/jsonview/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView `config` command group.

  * ``jsonview config dump``: show the effective renderer options as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonview.cli.cmd_common import build_renderer_options, get_console
from jsonview.cli.options import common_renderer_options

if TYPE_CHECKING:
    from pathlib import Path

    from jsonview.cli.console import ClickConsole


@click.group(
    name="config",
    help="Inspect JSONView renderer options.",
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Print the effective renderer options (defaults < --config < flags) as TOML.",
)
@common_renderer_options
def config_dump_command(*, config_path: Path | None, colorize: bool | None) -> None:
    """Print the merged renderer options as a ``[jsonview]`` TOML document."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    options = build_renderer_options(config_path=config_path, colorize=colorize)
    console.print(options.to_toml(), nl=False)
