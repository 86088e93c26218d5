# topmark:header:start
#
#   project      : JSONView
#   file         : keys.py
#   file_relpath : src/jsonview/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Canonical option names for JSONView renderer configuration.

The same names are used as keys of the options mapping accepted by
[`JsonRenderer`][jsonview.rendering.api.JsonRenderer] and as TOML keys in the
``[jsonview]`` table of ``jsonview.toml`` (or ``[tool.jsonview]`` in
``pyproject.toml``). Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Option keys understood by the renderer configuration."""

    KEY_COLORIZE: Final[str] = "colorize"
    KEY_INFO_ICON_SRC: Final[str] = "info_icon_src"
    KEY_MAX_DEPTH: Final[str] = "max_depth"

    # Read back only when exporting: holds the unrecognized keys
    KEY_EXTRAS: Final[str] = "extras"

    @classmethod
    def known_keys(cls) -> frozenset[str]:
        """Return the option keys with a dedicated field on `RendererOptions`."""
        return frozenset({cls.KEY_COLORIZE, cls.KEY_INFO_ICON_SRC, cls.KEY_MAX_DEPTH})
