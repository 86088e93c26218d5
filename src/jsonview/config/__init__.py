# topmark:header:start
#
#   project      : JSONView
#   file         : __init__.py
#   file_relpath : src/jsonview/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Configuration handling for JSONView.

Re-exports the option model, the config error type and the logging module so
callers and tests can use ``from jsonview.config import RendererOptions, logging``.
"""

from __future__ import annotations

from jsonview.config import logging
from jsonview.config.errors import ConfigError
from jsonview.config.model import MutableRendererOptions, RendererOptions, coerce_options

__all__ = [
    "ConfigError",
    "MutableRendererOptions",
    "RendererOptions",
    "coerce_options",
    "logging",
]
