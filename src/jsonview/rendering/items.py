# topmark:header:start
#
#   project      : JSONView
#   file         : items.py
#   file_relpath : src/jsonview/rendering/items.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Item view builder.

Builds the visual block of a single item record (a search result, typically) as a
markup *tree* through a [`MarkupHost`][jsonview.rendering.markup.MarkupHost]::

    div.item-container
    ├── div.item-content
    │   ├── div.item-title-row
    │   │   ├── a.item-title-link            (href = url, text = item name)
    │   │   └── span.item-info-icon[title]   (explanation, score, ranking time)
    │   │       └── img[alt=Info]
    │   ├── div.item-description
    │   ├── br                               (only with an explanation)
    │   └── div > span.item-explanation      (only with an explanation)
    └── div > img.item-image                 (only when an image resolves)

Item records are produced by a retrieval layer and are loosely shaped: every field is
optional and may hold an unexpected type. Missing or unusable fields fall back to
``""``, ``0``, ``"#"`` or the element is skipped; nothing here raises on bad data.

Visible text is always inserted with ``MarkupHost.set_text``. This path must stay
separate from the string-building structure formatter.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any, Final

from jsonview.config.logging import get_logger
from jsonview.constants import DEFAULT_HREF, DEFAULT_INFO_ICON_SRC
from jsonview.rendering.escaping import escape_html
from jsonview.rendering.images import extract_image
from jsonview.rendering.markup import ElementTreeHost, MarkupHost

logger = get_logger(__name__)

ItemRecord = Mapping[str, Any]

# CSS classes emitted by the item view builder
CLASS_CONTAINER: Final[str] = "item-container"
CLASS_CONTENT: Final[str] = "item-content"
CLASS_TITLE_ROW: Final[str] = "item-title-row"
CLASS_TITLE_LINK: Final[str] = "item-title-link"
CLASS_INFO_ICON: Final[str] = "item-info-icon"
CLASS_DESCRIPTION: Final[str] = "item-description"
CLASS_EXPLANATION: Final[str] = "item-explanation"
CLASS_SITE_LINK: Final[str] = "item-site-link"
CLASS_IMAGE: Final[str] = "item-image"
CLASS_DETAILS_TEXT: Final[str] = "item-details-text"

KEYWORDS_SEPARATOR: Final[str] = ", "


def _record(item: object) -> ItemRecord:
    """Return ``item`` if it is a mapping, else an empty record."""
    return item if isinstance(item, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]


def _text(value: object) -> str:
    """Return ``value`` if it is a string, else ``""``."""
    return value if isinstance(value, str) else ""


def _number(value: object) -> str:
    """Render a score or timing value; missing or unusable values read as ``0``."""
    if isinstance(value, bool) or not value:
        return "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return json.dumps(value) if math.isfinite(value) else "0"
    if isinstance(value, str):
        return value
    return "0"


def _name_candidate(value: object) -> str:
    """Coerce a name-like field to text: strings as is, lists of strings joined."""
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        words: list[str] = [w for w in value if isinstance(w, str) and w]  # pyright: ignore[reportUnknownVariableType]
        return KEYWORDS_SEPARATOR.join(words)
    return ""


def schema_object_of(item: object) -> Mapping[str, Any]:
    """Return the item's ``schema_object`` mapping, or an empty mapping."""
    if not isinstance(item, Mapping):
        return {}
    schema: Any = item.get("schema_object")  # pyright: ignore[reportUnknownMemberType]
    return schema if isinstance(schema, Mapping) else {}  # pyright: ignore[reportUnknownVariableType]


def get_item_name(item: object) -> str:
    """Return the display name of an item record.

    Fallback chain (first non-empty value wins, fields are never combined):

    1. ``item["name"]``
    2. ``item["schema_object"]["keywords"]`` (a list of strings is joined with ``", "``)
    3. ``item["url"]``
    4. ``""``

    Args:
        item (object): The item record.

    Returns:
        str: The name, possibly empty.
    """
    if not isinstance(item, Mapping):
        return ""
    attempts: tuple[Any, ...] = (
        item.get("name"),  # pyright: ignore[reportUnknownMemberType]
        schema_object_of(item).get("keywords"),
        item.get("url"),  # pyright: ignore[reportUnknownMemberType]
    )
    for candidate in attempts:
        name: str = _name_candidate(candidate)
        if name:
            return name
    return ""


def info_tooltip(item: ItemRecord) -> str:
    """Compose the escaped info tooltip ``"<explanation> (score=<n>) (Ranking time=<n>)"``."""
    explanation: str = _text(item.get("explanation"))
    score: str = _number(item.get("score"))
    time: str = _number(item.get("time"))
    return escape_html(f"{explanation} (score={score}) (Ranking time={time})")


def safe_href(value: object) -> str:
    """Return an escaped link target, or ``"#"`` when ``value`` is not a usable URL."""
    text: str = _text(value)
    return escape_html(text) if text else DEFAULT_HREF


class ItemViewBuilder:
    """Build item views through a markup host.

    Args:
        host (MarkupHost | None): Markup-tree primitives. Defaults to `ElementTreeHost`.
        info_icon_src (str): Image source of the info affordance.
    """

    def __init__(
        self,
        host: MarkupHost | None = None,
        *,
        info_icon_src: str = DEFAULT_INFO_ICON_SRC,
    ) -> None:
        self.host: MarkupHost = host if host is not None else ElementTreeHost()
        self.info_icon_src = info_icon_src

    def _element(self, tag: str, class_name: str | None = None) -> Any:
        node: Any = self.host.create_element(tag)
        if class_name:
            self.host.set_attribute(node, "class", class_name)
        return node

    def create_default_item_html(self, item: ItemRecord) -> Any:
        """Build the default view of an item record.

        Args:
            item (ItemRecord): The record. Non-mapping input renders as an empty record.

        Returns:
            Any: The ``div.item-container`` node.
        """
        if not isinstance(item, Mapping):
            logger.debug("Item record is a %s, rendering it as empty", type(item).__name__)
        item = _record(item)

        container: Any = self._element("div", CLASS_CONTAINER)
        content: Any = self._element("div", CLASS_CONTENT)

        self.create_title_row(item, content)

        description: Any = self._element("div", CLASS_DESCRIPTION)
        self.host.set_text(description, _text(item.get("description")))
        self.host.append_child(content, description)

        self.possibly_add_explanation(item, content)

        self.host.append_child(container, content)
        self.add_image_if_available(item, container)
        return container

    def create_title_row(self, item: ItemRecord, parent: Any) -> Any:
        """Append the title row (link + info icon) to ``parent``.

        Args:
            item (ItemRecord): The record.
            parent (Any): Node receiving the row.

        Returns:
            Any: The ``div.item-title-row`` node.
        """
        item = _record(item)
        title_row: Any = self._element("div", CLASS_TITLE_ROW)

        title_link: Any = self._element("a", CLASS_TITLE_LINK)
        self.host.set_attribute(title_link, "href", safe_href(item.get("url")))
        self.host.set_text(title_link, get_item_name(item))
        self.host.append_child(title_row, title_link)

        info_icon: Any = self._element("span", CLASS_INFO_ICON)
        icon: Any = self.host.create_element("img")
        self.host.set_attribute(icon, "src", self.info_icon_src)
        self.host.set_attribute(icon, "alt", "Info")
        self.host.append_child(info_icon, icon)
        self.host.set_attribute(info_icon, "title", info_tooltip(item))
        self.host.append_child(title_row, info_icon)

        self.host.append_child(parent, title_row)
        return title_row

    def add_visible_url(self, item: ItemRecord, parent: Any) -> Any:
        """Append a link to the item's site (``siteUrl``, labelled with ``site``).

        Returns:
            Any: The ``a.item-site-link`` node.
        """
        item = _record(item)
        link: Any = self._element("a", CLASS_SITE_LINK)
        self.host.set_attribute(link, "href", safe_href(item.get("siteUrl")))
        self.host.set_text(link, _text(item.get("site")))
        self.host.append_child(parent, link)
        return link

    def make_as_span(self, content: str) -> Any:
        """Return a ``span.item-details-text`` holding ``content`` as plain text."""
        span: Any = self._element("span", CLASS_DETAILS_TEXT)
        self.host.set_text(span, _text(content))
        return span

    def possibly_add_explanation(
        self, item: ItemRecord, parent: Any, force: bool = False
    ) -> Any | None:
        """Append the explanation block when the item has one (or ``force`` is set).

        Args:
            item (ItemRecord): The record.
            parent (Any): Node receiving a ``br`` and the explanation ``div``.
            force (bool): Add the block even without an explanation.

        Returns:
            Any | None: The explanation ``div``, or None when nothing was added.
        """
        item = _record(item)
        explanation: str = _text(item.get("explanation"))
        if not explanation and not force:
            return None

        details: Any = self.host.create_element("div")
        self.host.append_child(parent, self.host.create_element("br"))
        span: Any = self.make_as_span(explanation)
        self.host.set_attribute(span, "class", CLASS_EXPLANATION)
        self.host.append_child(details, span)
        self.host.append_child(parent, details)
        return details

    def add_image_if_available(self, item: ItemRecord, container: Any) -> Any | None:
        """Append an image block when the item's ``schema_object`` resolves an image.

        Returns:
            Any | None: The image wrapper ``div``, or None when no image resolved.
        """
        url: str | None = extract_image(schema_object_of(item))
        if url is None:
            return None

        wrapper: Any = self.host.create_element("div")
        img: Any = self._element("img", CLASS_IMAGE)
        self.host.set_attribute(img, "src", escape_html(url))
        self.host.set_attribute(img, "alt", "Item image")
        self.host.append_child(wrapper, img)
        self.host.append_child(container, wrapper)
        return wrapper
