# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : exit_codes.py
#   file_relpath : src/buildmsg/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Exit codes for the BuildMsg CLI.

BuildMsg aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BuildMsg CLI.

    Attributes:
        SUCCESS: No error-class message was emitted.
        FAILURE: At least one error-class message was emitted (the error flag is set).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
