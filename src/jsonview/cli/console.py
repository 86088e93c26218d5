# topmark:header:start
#
#   project      : JSONView
#   file         : console.py
#   file_relpath : src/jsonview/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Rendered HTML and other program output go through `ClickConsole`; diagnostics go
through `logging` (see [`jsonview.config.logging`][jsonview.config.logging]).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


def encodable(text: str) -> str:
    """Replace code points that UTF-8 cannot encode (lone surrogates) with ``\\uXXXX``."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(encodable(text), nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            encodable(text),
            nl=nl,
            file=self.err or sys.stderr,
            color=self.enable_color,
            fg="yellow",
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            encodable(text),
            nl=nl,
            file=self.err or sys.stderr,
            color=self.enable_color,
            fg="bright_red",
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
