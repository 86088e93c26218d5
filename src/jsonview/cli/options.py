# topmark:header:start
#
#   project      : JSONView
#   file         : options.py
#   file_relpath : src/jsonview/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, console color, renderer config)
and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from jsonview.cli.errors import JsonviewUsageError
from jsonview.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: A logging-style level: TRACE (``-vvv``), DEBUG (``-vv``), INFO (``-v``),
            ERROR (``-q``) or WARNING (default).

    Raises:
        JsonviewUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise JsonviewUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether console color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and finally enables color only when stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from the CLI.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command.

    These control the console (ANSI) output only; HTML styling is the renderer's
    ``colorize`` option.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Console color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable console color output (equivalent to --color=never).",
    )(f)
    return f


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option to a command."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read renderer options from this jsonview.toml or pyproject.toml.",
    )(f)


def common_renderer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--colorize/--no-colorize`` options to a command."""
    f = config_file_option(f)
    f = click.option(
        "--colorize/--no-colorize",
        "colorize",
        default=None,
        help="Embed color rules in the rendered HTML (default: on).",
    )(f)
    return f
