# topmark:header:start
#
#   project      : JSONView
#   file         : __init__.py
#   file_relpath : src/jsonview/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Rendering core for JSONView.

Public modules:
    - jsonview.rendering.api: the `JsonRenderer` facade
    - jsonview.rendering.escaping: HTML escape / unescape
    - jsonview.rendering.formatter: JSON value to highlighted markup text
    - jsonview.rendering.images: image reference normalization
    - jsonview.rendering.items: item view builder (markup tree)
    - jsonview.rendering.markup: markup-tree primitives
    - jsonview.rendering.registry: per-renderer type renderer registry
    - jsonview.rendering.shell: presentation shells
"""

from __future__ import annotations
