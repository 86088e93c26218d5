# topmark:header:start
#
#   project      : JSONView
#   file         : cmd_common.py
#   file_relpath : src/jsonview/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Helpers shared by JSONView subcommands.

Subcommands pull the console and verbosity that the group stored on ``ctx.obj`` and
build their renderer options with the same precedence:
defaults < config file < CLI flags.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from jsonview.cli.console import ClickConsole
from jsonview.cli.errors import JsonviewConfigError
from jsonview.config.errors import ConfigError
from jsonview.config.logging import get_logger
from jsonview.config.model import MutableRendererOptions

if TYPE_CHECKING:
    from pathlib import Path

    from jsonview.config.model import RendererOptions

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored by the group, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity level stored by the group."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def build_renderer_options(
    *,
    config_path: Path | None,
    colorize: bool | None,
) -> RendererOptions:
    """Merge defaults, an optional config file and CLI overrides.

    Args:
        config_path (Path | None): ``--config`` value.
        colorize (bool | None): ``--colorize/--no-colorize`` value (None = unset).

    Returns:
        RendererOptions: The frozen, effective options.

    Raises:
        JsonviewConfigError: If the config file is missing or invalid.
    """
    merged: MutableRendererOptions = MutableRendererOptions.from_defaults()
    if config_path is not None:
        if not config_path.exists():
            raise JsonviewConfigError(f"Config file not found: {config_path}")
        try:
            merged = merged.merge_with(MutableRendererOptions.from_toml_file(config_path))
        except ConfigError as exc:
            raise JsonviewConfigError(str(exc)) from exc
        logger.debug("Loaded renderer options from %s", config_path)

    merged = merged.merge_with(MutableRendererOptions(colorize=colorize))
    return merged.freeze()
