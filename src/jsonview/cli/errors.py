# topmark:header:start
#
#   project      : JSONView
#   file         : errors.py
#   file_relpath : src/jsonview/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Exceptions for the JSONView CLI.

Raise these in commands to abort with a standardized message and exit code.
Exceptions prefer the project console when one is present in the Click context (see
`show()`); otherwise they fall back to Click's default error display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsonview.cli.exit_codes import ExitCode


class JsonviewError(click.ClickException):
    """Base class for all JSONView CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class JsonviewUsageError(JsonviewError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonviewConfigError(JsonviewError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class JsonviewFileNotFoundError(JsonviewError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class JsonviewIOError(JsonviewError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class JsonviewEncodingError(JsonviewError):
    """Error for input that is not valid UTF-8 (or not JSON where records are required)."""

    exit_code = ExitCode.ENCODING_ERROR


class JsonviewPluginError(JsonviewError):
    """Error for ``--type-renderer`` targets that cannot be imported or called."""

    exit_code = ExitCode.PLUGIN_ERROR


class JsonviewRenderError(JsonviewError):
    """Error raised by ``--strict`` when the input could not be rendered."""

    exit_code = ExitCode.FAILURE
