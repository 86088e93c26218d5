# topmark:header:start
#
#   project      : JSONView
#   file         : __init__.py
#   file_relpath : src/jsonview/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Click command-line interface for JSONView.

The entry point is [`jsonview.cli.main.cli`][jsonview.cli.main.cli].
"""
