# topmark:header:start
#
#   project      : JSONView
#   file         : io.py
#   file_relpath : src/jsonview/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Input and output helpers for Click commands.

Commands read one document from a path or from STDIN (``-`` or no path) and write
the rendered HTML to STDOUT or to ``--output``. OS-level failures are mapped onto the
CLI error hierarchy so they exit with a meaningful code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from jsonview.cli.errors import JsonviewEncodingError, JsonviewFileNotFoundError, JsonviewIOError
from jsonview.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_input(path: str | None) -> str:
    """Read the input document as UTF-8 text.

    Args:
        path (str | None): A file path, ``"-"`` or None for STDIN.

    Returns:
        str: The document text.

    Raises:
        JsonviewFileNotFoundError: If the path does not exist.
        JsonviewIOError: If the path cannot be read.
        JsonviewEncodingError: If the content is not valid UTF-8.
    """
    if path is None or path == STDIN_SENTINEL:
        logger.debug("Reading input from STDIN")
        data: bytes = sys.stdin.buffer.read() if hasattr(sys.stdin, "buffer") else sys.stdin.read().encode()
        source = "<stdin>"
    else:
        p = Path(path)
        logger.debug("Reading input from %s", p)
        if not p.exists():
            raise JsonviewFileNotFoundError(f"No such file: {path}")
        try:
            data = p.read_bytes()
        except OSError as exc:
            raise JsonviewIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc
        source = path

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise JsonviewEncodingError(f"{source} is not valid UTF-8: {exc}") from exc


def write_output(text: str, output: Path) -> None:
    """Write rendered HTML to ``output`` (UTF-8, trailing newline).

    Code points UTF-8 cannot encode (lone surrogates) are written as ``\\uXXXX``.

    Raises:
        JsonviewIOError: If the file cannot be written.
    """
    try:
        output.write_text(
            text if text.endswith("\n") else f"{text}\n",
            encoding="utf-8",
            errors="backslashreplace",
        )
    except OSError as exc:
        raise JsonviewIOError(f"Cannot write {output}: {exc.strerror or exc}") from exc
    logger.info("Wrote %s", output)
