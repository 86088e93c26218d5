# topmark:header:start
#
#   project      : JSONView
#   file         : exit_codes.py
#   file_relpath : src/jsonview/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 JSONView contributors
#
# topmark:header:end

"""Standardized exit codes used by the JSONView CLI.

Note that malformed JSON is *not* a CLI failure: the renderer turns it into an error
block and the command still exits with ``SUCCESS`` (see ``jsonview render --strict``).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the JSONView CLI.

    JSONView follows the BSD `sysexits` convention where practical so other tooling
    can interpret failures consistently.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; with ``--strict``, the input could not be rendered.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8, or item input is not JSON. Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PLUGIN_ERROR: A ``--type-renderer`` target cannot be imported. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing, invalid or malformed config. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PLUGIN_ERROR = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
