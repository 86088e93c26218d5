# topmark:header:start
#
#   project      : JSONView
#   file         : constants.py
#   file_relpath : src/jsonview/constants.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""JSONView Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    JSONVIEW_VERSION: str = get_version("jsonview")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    JSONVIEW_VERSION = "0.0.0"

# Environment variable consulted by `jsonview.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: str = "JSONVIEW_LOG_LEVEL"

# Config file names and the TOML tables they hold
JSONVIEW_TOML_NAME: str = "jsonview.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
JSONVIEW_TOML_SECTION: str = "jsonview"
PYPROJECT_TOML_SECTION: str = "tool.jsonview"

# Item view defaults
DEFAULT_INFO_ICON_SRC: str = "images/info.png"
DEFAULT_HREF: str = "#"

# Upper bound on nested image references (sequences of sequences ...)
MAX_IMAGE_DEPTH: int = 32

# Default upper bound on value nesting for the structure formatter
DEFAULT_MAX_DEPTH: int = 200

# Prefix that marks JSON-LD keywords (``@type``, ``@context``, ``@id``, ...)
JSONLD_KEYWORD_PREFIX: str = "@"
JSONLD_TYPE_KEY: str = "@type"
