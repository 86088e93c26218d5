# topmark:header:start
#
#   project      : JSONView
#   file         : markup.py
#   file_relpath : src/jsonview/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Markup-tree primitives consumed by the item view builder.

The item view builder never concatenates markup strings: it only calls the four
operations of `MarkupHost`. Text and attribute values are stored as data on the nodes
and escaped by the serializer, so user-controlled fields cannot turn into markup.

`ElementTreeHost` is the default host, backed by ``xml.etree.ElementTree``. Another
host (a DOM binding, an lxml tree, a test recorder) only has to implement the
protocol.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MarkupHost(Protocol):
    """Capability to build a markup tree.

    Nodes are opaque to the item view builder: whatever ``create_element`` returns is
    passed back to the other three operations unchanged.
    """

    def create_element(self, tag: str) -> Any:
        """Create a detached element named ``tag``."""
        ...

    def set_attribute(self, node: Any, name: str, value: str) -> None:
        """Set attribute ``name`` of ``node`` to the literal ``value``."""
        ...

    def set_text(self, node: Any, text: str) -> None:
        """Replace the content of ``node`` with the plain text ``text``."""
        ...

    def append_child(self, parent: Any, child: Any) -> None:
        """Append ``child`` as the last child of ``parent``."""
        ...


class ElementTreeHost:
    """`MarkupHost` backed by ``xml.etree.ElementTree`` elements."""

    def create_element(self, tag: str) -> ET.Element:
        """Create a detached element named ``tag``.

        Args:
            tag (str): Element name.

        Returns:
            ET.Element: The new element.
        """
        return ET.Element(tag)

    def set_attribute(self, node: ET.Element, name: str, value: str) -> None:
        """Set an attribute; the serializer escapes the value."""
        node.set(name, value)

    def set_text(self, node: ET.Element, text: str) -> None:
        """Replace the element's content with plain text.

        Existing children are removed, matching the DOM ``textContent`` setter.
        """
        for child in list(node):
            node.remove(child)
        node.text = text

    def append_child(self, parent: ET.Element, child: ET.Element) -> None:
        """Append ``child`` to ``parent``."""
        parent.append(child)


def to_html(node: ET.Element) -> str:
    """Serialize an element tree built by `ElementTreeHost` as HTML.

    Void elements (``img``, ``br``) are written without an end tag; text and attribute
    values are escaped.

    Args:
        node (ET.Element): The root element.

    Returns:
        str: The HTML fragment.
    """
    return ET.tostring(node, encoding="unicode", method="html")
