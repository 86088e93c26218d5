# topmark:header:start
#
#   project      : JSONView
#   file         : __main__.py
#   file_relpath : src/jsonview/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Module entry point for running JSONView via ``python -m jsonview``.

It delegates directly to :func:`jsonview.cli.main.cli`, so the module form and the
``jsonview`` console script behave identically.

Examples:
    Render a JSON-LD document::

        python -m jsonview render recipe.jsonld > recipe.html
"""

from __future__ import annotations

from jsonview.cli.main import cli

if __name__ == "__main__":
    cli()
