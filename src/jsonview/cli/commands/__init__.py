# topmark:header:start
#
#   project      : JSONView
#   file         : __init__.py
#   file_relpath : src/jsonview/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Subcommands of the JSONView CLI."""
