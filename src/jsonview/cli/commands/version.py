# topmark:header:start
#
#   project      : JSONView
#   file         : version.py
#   file_relpath : src/jsonview/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView `version` command.

Prints the current JSONView version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from jsonview.cli.cmd_common import get_console, get_effective_verbosity
from jsonview.constants import JSONVIEW_VERSION

if TYPE_CHECKING:
    from jsonview.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of JSONView.",
)
def version_command() -> None:
    """Show the current version of JSONView."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("JSONView version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(JSONVIEW_VERSION, bold=True)}")
    else:
        console.print(console.styled(JSONVIEW_VERSION, bold=True))
