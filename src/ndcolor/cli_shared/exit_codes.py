# topmark:header:start
#
#   project      : ndcolor
#   file         : exit_codes.py
#   file_relpath : src/ndcolor/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ndcolor authors
#
# topmark:header:end

"""Exit codes for the ndcolor CLI.

ndcolor aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ndcolor CLI.

    Attributes:
        SUCCESS: Input exhausted, all output written.
        FAILURE: Generic failure; also used when standard input is an
            interactive terminal (nothing to read).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        IO_ERROR: Reading standard input or writing standard output failed.
            Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
