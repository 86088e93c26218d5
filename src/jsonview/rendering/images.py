# topmark:header:start
#
#   project      : JSONView
#   file         : images.py
#   file_relpath : src/jsonview/rendering/images.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Normalize schema.org-style image references into a single URL.

An ``image`` field may hold any of these shapes:

- a URL string: ``"https://example.org/a.jpg"``
- an ``ImageObject``: ``{"url": ...}`` or ``{"contentUrl": ...}``
- a sequence of the above, possibly nested: only the first element is considered.

Resolution order (first match wins):

1. a non-empty string is the URL;
2. a mapping's non-empty string ``url``;
3. a mapping's non-empty string ``contentUrl``;
4. a sequence's first element, resolved again with these rules.

Anything else resolves to ``None``. Nesting is walked iteratively and stops after
[`MAX_IMAGE_DEPTH`][jsonview.constants.MAX_IMAGE_DEPTH] levels.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from jsonview.config.logging import get_logger
from jsonview.constants import MAX_IMAGE_DEPTH

logger = get_logger(__name__)

IMAGE_KEY: Final[str] = "image"
IMAGE_URL_KEYS: Final[tuple[str, ...]] = ("url", "contentUrl")


def _url_from_image_object(image: Mapping[Any, Any]) -> str | None:
    for key in IMAGE_URL_KEYS:
        value: Any = image.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_image_internal(image: object) -> str | None:
    """Resolve an image reference of any supported shape to a URL.

    Args:
        image (object): The image reference.

    Returns:
        str | None: The URL, or None when nothing usable is found.
    """
    current: object = image
    for _ in range(MAX_IMAGE_DEPTH):
        if isinstance(current, str):
            return current or None
        if isinstance(current, Mapping):
            return _url_from_image_object(current)  # pyright: ignore[reportUnknownArgumentType]
        if isinstance(current, Sequence) and not isinstance(current, (bytes, bytearray)):
            if not current:
                return None
            current = current[0]  # pyright: ignore[reportUnknownVariableType]
            continue
        return None

    logger.debug("Image reference nested deeper than %d levels; ignoring it", MAX_IMAGE_DEPTH)
    return None


def extract_image(container: object) -> str | None:
    """Return the URL of the ``image`` field of ``container``, if any.

    Args:
        container (object): Usually an item's ``schema_object``.

    Returns:
        str | None: The URL, or None when the container has no usable image.
    """
    if not isinstance(container, Mapping):
        return None
    image: Any = container.get(IMAGE_KEY)  # pyright: ignore[reportUnknownMemberType]
    if not image:
        return None
    return extract_image_internal(image)
