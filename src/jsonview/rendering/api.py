# topmark:header:start
#
#   project      : JSONView
#   file         : api.py
#   file_relpath : src/jsonview/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Renderer facade.

[`JsonRenderer`][jsonview.rendering.api.JsonRenderer] is the public entry point. It
has two separate output paths:

- `render` returns *markup text*: JSON is parsed, formatted by the
  [`StructureFormatter`][jsonview.rendering.formatter.StructureFormatter] and wrapped in
  a presentation shell. It never raises; failures come back as an escaped error block.
- `create_json_item_html` returns a *markup tree* node built by the
  [`ItemViewBuilder`][jsonview.rendering.items.ItemViewBuilder], unless a type renderer
  registered for the item's ``@type`` takes over.

Example:
    ```python
    from jsonview import JsonRenderer, to_html

    renderer = JsonRenderer({"colorize": False})
    html = renderer.render('{"@type": "Recipe", "name": "Pancakes"}')

    view = renderer.create_json_item_html({"name": "Pancakes", "url": "https://example.org"})
    print(to_html(view))
    ```
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Any, NoReturn

from jsonview.config.logging import get_logger
from jsonview.config.model import coerce_options
from jsonview.constants import JSONLD_TYPE_KEY
from jsonview.rendering import escaping, images, shell
from jsonview.rendering.formatter import StructureFormatter
from jsonview.rendering.items import ItemViewBuilder, get_item_name, schema_object_of
from jsonview.rendering.markup import to_html
from jsonview.rendering.registry import TypeRendererRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jsonview.config.logging import JsonviewLogger
    from jsonview.config.model import RendererOptions
    from jsonview.rendering.items import ItemRecord
    from jsonview.rendering.markup import MarkupHost
    from jsonview.rendering.registry import TypeRenderer

logger: JsonviewLogger = get_logger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_json(text: str | bytes | bytearray) -> Any:
    """Parse a JSON document strictly (``NaN`` and ``Infinity`` are rejected).

    Args:
        text (str | bytes | bytearray): The document.

    Returns:
        Any: The parsed value.

    Raises:
        ValueError: If the document is not valid JSON (``json.JSONDecodeError`` is a
            ``ValueError``), or bytes are not valid UTF-8/16/32.
    """
    return json.loads(text, parse_constant=_reject_constant)


class JsonRenderer:
    """Render JSON values as highlighted markup and item records as item views.

    Args:
        options (RendererOptions | Mapping[str, Any] | None): Renderer options, e.g.
            ``{"colorize": False}``. Unrecognized keys are kept in ``options.extras``.
        host (MarkupHost | None): Markup-tree primitives for item views. Defaults to
            [`ElementTreeHost`][jsonview.rendering.markup.ElementTreeHost].

    Attributes:
        options (RendererOptions): The effective, frozen options.
        type_renderers (TypeRendererRegistry): This instance's type renderer registry.
    """

    def __init__(
        self,
        options: RendererOptions | Mapping[str, Any] | None = None,
        *,
        host: MarkupHost | None = None,
    ) -> None:
        self.options: RendererOptions = coerce_options(options)
        self.type_renderers = TypeRendererRegistry()
        self.formatter = StructureFormatter(max_depth=self.options.max_depth)
        self.items = ItemViewBuilder(host, info_icon_src=self.options.info_icon_src)

    @property
    def host(self) -> MarkupHost:
        """The markup host used to build item views."""
        return self.items.host

    # --- Structure formatter path (markup text) ---

    def render(self, data: object) -> str:
        """Render JSON text or an already parsed value as an HTML block.

        Args:
            data (object): JSON text (``str``/``bytes``) or a parsed value.

        Returns:
            str: The formatted value inside a ``<pre class="json-ld">`` shell (with
                embedded color rules when ``colorize`` is on), or an error block such
                as ``<pre class="json-ld error">Error: ...</pre>``.
        """
        html, _ = self.render_with_error(data)
        return html

    def render_with_error(self, data: object) -> tuple[str, Exception | None]:
        """Render like `render`, also reporting the contained failure.

        Args:
            data (object): JSON text (``str``/``bytes``) or a parsed value.

        Returns:
            tuple[str, Exception | None]: The HTML block, and the exception that turned
                it into an error block (None on success).
        """
        try:
            value: Any = parse_json(data) if isinstance(data, (str, bytes, bytearray)) else data
            formatted: str = self.format_value(value, 0)
        except Exception as exc:  # noqa: BLE001 - render must not raise
            message: str = str(exc) or type(exc).__name__
            logger.debug("Rendering failed (%s): %s", type(exc).__name__, message)
            return shell.error_block(message), exc

        if self.options.colorize:
            return self.wrap_with_styles(formatted), None
        return shell.wrap_plain(formatted), None

    def format_object(self, obj: Mapping[Any, Any] | None, indent: int = 0) -> str:
        """Format a mapping (see [`StructureFormatter.format_object`][jsonview.rendering.formatter.StructureFormatter.format_object])."""
        return self.formatter.format_object(obj, indent)

    def format_value(self, value: object, indent: int = 0) -> str:
        """Format any value (see [`StructureFormatter.format_value`][jsonview.rendering.formatter.StructureFormatter.format_value])."""
        return self.formatter.format_value(value, indent)

    def wrap_with_styles(self, content: str) -> str:
        """Wrap formatted markup in the colorized shell."""
        return shell.wrap_with_styles(content)

    def escape_html(self, text: object) -> str:
        """Escape HTML special characters (see [`escape_html`][jsonview.rendering.escaping.escape_html])."""
        return escaping.escape_html(text)

    def html_unescape(self, markup: object) -> str:
        """Return the text content of a fragment (see [`html_unescape`][jsonview.rendering.escaping.html_unescape])."""
        return escaping.html_unescape(markup)

    # --- Type dispatch ---

    def register_type_renderer(self, type_tag: str, renderer: TypeRenderer) -> None:
        """Render items whose ``schema_object["@type"]`` equals ``type_tag`` with ``renderer``.

        The last registration for a tag wins.

        Args:
            type_tag (str): Exact type tag.
            renderer (TypeRenderer): Called as ``renderer(item, self)``.
        """
        self.type_renderers.register(type_tag, renderer)

    def create_json_item_html(self, item: ItemRecord) -> Any:
        """Render an item record, dispatching on its ``@type``.

        If ``item["schema_object"]["@type"]`` is a string with a registered renderer,
        that renderer's result is returned as is. Otherwise the default item view is
        built.

        Args:
            item (ItemRecord): The item record.

        Returns:
            Any: The type renderer's result, or the default ``div.item-container`` node.
        """
        type_tag: Any = schema_object_of(item).get(JSONLD_TYPE_KEY)
        renderer: TypeRenderer | None = self.type_renderers.get(type_tag)
        if renderer is not None:
            logger.trace("Dispatching item of type %r to %r", type_tag, renderer)
            return renderer(item, self)
        if type_tag is not None:
            logger.trace("No type renderer for %r; using the default item view", type_tag)
        return self.create_default_item_html(item)

    # --- Item view builder path (markup tree) ---

    def create_default_item_html(self, item: ItemRecord) -> Any:
        """Build the default item view (see [`ItemViewBuilder`][jsonview.rendering.items.ItemViewBuilder])."""
        return self.items.create_default_item_html(item)

    def create_title_row(self, item: ItemRecord, parent: Any) -> Any:
        """Append the title row of ``item`` to ``parent``."""
        return self.items.create_title_row(item, parent)

    def add_visible_url(self, item: ItemRecord, parent: Any) -> Any:
        """Append the item's site link to ``parent``."""
        return self.items.add_visible_url(item, parent)

    def possibly_add_explanation(
        self, item: ItemRecord, parent: Any, force: bool = False
    ) -> Any | None:
        """Append the explanation block of ``item`` to ``parent`` when there is one."""
        return self.items.possibly_add_explanation(item, parent, force)

    def make_as_span(self, content: str) -> Any:
        """Return a ``span.item-details-text`` holding ``content`` as plain text."""
        return self.items.make_as_span(content)

    def add_image_if_available(self, item: ItemRecord, container: Any) -> Any | None:
        """Append the item's image block to ``container`` when an image resolves."""
        return self.items.add_image_if_available(item, container)

    def get_item_name(self, item: ItemRecord) -> str:
        """Return the display name of ``item`` (see [`get_item_name`][jsonview.rendering.items.get_item_name])."""
        return get_item_name(item)

    def extract_image(self, container: object) -> str | None:
        """Return the URL of ``container["image"]`` (see [`extract_image`][jsonview.rendering.images.extract_image])."""
        return images.extract_image(container)

    def extract_image_internal(self, image: object) -> str | None:
        """Resolve an image reference to a URL (see [`extract_image_internal`][jsonview.rendering.images.extract_image_internal])."""
        return images.extract_image_internal(image)

    def render_item(self, item: ItemRecord) -> str:
        """Render an item record and serialize the result as HTML text.

        Element trees are serialized with [`to_html`][jsonview.rendering.markup.to_html];
        strings returned by type renderers pass through; anything else goes through
        ``str()``.

        Args:
            item (ItemRecord): The item record.

        Returns:
            str: The HTML fragment.
        """
        return view_to_html(self.create_json_item_html(item))


def view_to_html(view: object) -> str:
    """Serialize an item view as HTML text.

    Args:
        view (object): An ``ElementTree`` element, a string, or any other object.

    Returns:
        str: The HTML fragment.
    """
    if isinstance(view, ET.Element):
        return to_html(view)
    if isinstance(view, str):
        return view
    return str(view)
