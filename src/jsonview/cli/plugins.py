# topmark:header:start
#
#   project      : JSONView
#   file         : plugins.py
#   file_relpath : src/jsonview/cli/plugins.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Loading of ``--type-renderer TAG=module:function`` specifications."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

from jsonview.cli.errors import JsonviewPluginError, JsonviewUsageError
from jsonview.config.logging import get_logger

if TYPE_CHECKING:
    from jsonview.rendering.api import JsonRenderer
    from jsonview.rendering.registry import TypeRenderer

logger = get_logger(__name__)


def parse_type_renderer_spec(spec: str) -> tuple[str, str, str]:
    """Split ``TAG=module:function`` into its three parts.

    Raises:
        JsonviewUsageError: If the specification is malformed.
    """
    tag, sep, target = spec.partition("=")
    module_name, colon, attr = target.partition(":")
    if not sep or not colon or not tag.strip() or not module_name.strip() or not attr.strip():
        raise JsonviewUsageError(
            f"Invalid --type-renderer value {spec!r}; expected TAG=module:function"
        )
    return tag.strip(), module_name.strip(), attr.strip()


def load_type_renderer(spec: str) -> tuple[str, TypeRenderer]:
    """Import the callable named by ``spec``.

    Args:
        spec (str): A ``TAG=module:function`` specification. ``function`` may be a
            dotted attribute path inside the module.

    Returns:
        tuple[str, TypeRenderer]: The type tag and the renderer callable.

    Raises:
        JsonviewUsageError: If the specification is malformed.
        JsonviewPluginError: If the module or attribute cannot be loaded, or the
            attribute is not callable.
    """
    tag, module_name, attr_path = parse_type_renderer_spec(spec)
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise JsonviewPluginError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise JsonviewPluginError(
                f"Module {module_name!r} has no attribute {attr_path!r}"
            ) from exc

    if not callable(target):
        raise JsonviewPluginError(f"{module_name}:{attr_path} is not callable")

    logger.debug("Loaded type renderer %s:%s for %r", module_name, attr_path, tag)
    return tag, target


def register_type_renderers(renderer: JsonRenderer, specs: tuple[str, ...] | list[str]) -> None:
    """Load every spec in order and register it on ``renderer`` (last one wins)."""
    for spec in specs:
        tag, func = load_type_renderer(spec)
        renderer.register_type_renderer(tag, func)
