# topmark:header:start
#
#   project      : JSONView
#   file         : registry.py
#   file_relpath : src/jsonview/rendering/registry.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Per-renderer registry of type-specific item renderers.

Each [`JsonRenderer`][jsonview.rendering.api.JsonRenderer] owns one
`TypeRendererRegistry`; there is no process-global registry, so two renderers can
bind different functions to the same type tag.

Type tags are the string found at ``item["schema_object"]["@type"]``. Lookup is an
exact, case-sensitive string match: no wildcards, no type hierarchy.

Typical usage:
    ```python
    renderer = JsonRenderer()

    def render_recipe(item, renderer):
        view = renderer.create_default_item_html(item)
        renderer.add_visible_url(item, view)
        return view

    renderer.register_type_renderer("Recipe", render_recipe)
    ```

Notes:
    Reads and writes take an ``RLock``; a registration replaces the entry for its tag
    in one step, so concurrent dispatch never sees a partial update.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping

from jsonview.config.logging import get_logger

if TYPE_CHECKING:
    from jsonview.rendering.api import JsonRenderer
    from jsonview.rendering.items import ItemRecord

logger = get_logger(__name__)

TypeRenderer = Callable[["ItemRecord", "JsonRenderer"], Any]


class TypeRendererRegistry:
    """Mapping of type tag to type renderer, safe for concurrent use."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._renderers: dict[str, TypeRenderer] = {}

    def register(self, type_tag: str, renderer: TypeRenderer) -> None:
        """Bind ``renderer`` to ``type_tag``, replacing any previous binding.

        Args:
            type_tag (str): The exact ``@type`` value to match.
            renderer (TypeRenderer): Called as ``renderer(item, json_renderer)``; its
                result is returned to the caller unmodified.
        """
        with self._lock:
            replaced: bool = type_tag in self._renderers
            self._renderers[type_tag] = renderer
        logger.debug(
            "%s type renderer for %r: %r",
            "Replaced" if replaced else "Registered",
            type_tag,
            renderer,
        )

    def unregister(self, type_tag: str) -> bool:
        """Remove the binding for ``type_tag``.

        Returns:
            bool: True if a binding was removed, else False.
        """
        with self._lock:
            existed: bool = self._renderers.pop(type_tag, None) is not None
        if existed:
            logger.debug("Unregistered type renderer for %r", type_tag)
        return existed

    def get(self, type_tag: object) -> TypeRenderer | None:
        """Return the renderer bound to ``type_tag``.

        Args:
            type_tag (object): A candidate tag; anything but a ``str`` never matches.

        Returns:
            TypeRenderer | None: The renderer, or None when nothing usable is bound.
        """
        if not isinstance(type_tag, str):
            return None
        with self._lock:
            renderer: Any = self._renderers.get(type_tag)
        if renderer is not None and not callable(renderer):
            logger.warning("Type renderer for %r is not callable; ignoring it", type_tag)
            return None
        return renderer

    def names(self) -> tuple[str, ...]:
        """Return all registered type tags (sorted)."""
        with self._lock:
            return tuple(sorted(self._renderers))

    def as_mapping(self) -> Mapping[str, TypeRenderer]:
        """Return a read-only snapshot of the registry.

        Returns:
            Mapping[str, TypeRenderer]: A `MappingProxyType` over a copy; later
                registrations do not show up in it.
        """
        with self._lock:
            return MappingProxyType(dict(self._renderers))

    def clear(self) -> None:
        """Remove every binding."""
        with self._lock:
            self._renderers.clear()

    def __contains__(self, type_tag: object) -> bool:
        if not isinstance(type_tag, str):
            return False
        with self._lock:
            return type_tag in self._renderers

    def __len__(self) -> int:
        with self._lock:
            return len(self._renderers)
