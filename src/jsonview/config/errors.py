# topmark:header:start
#
#   project      : JSONView
#   file         : errors.py
#   file_relpath : src/jsonview/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Exceptions raised while loading JSONView configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """A configuration source is unreadable, malformed or holds invalid values.

    Attributes:
        path (Path | None): The offending config file, when the error relates to one.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
