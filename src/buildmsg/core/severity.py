# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : severity.py
#   file_relpath : src/buildmsg/core/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Message severities and their display tables.

Sections:
    * Severity: the closed set of message severities a caller may issue.
    * MessageTitle: the title carried in dispatch metadata ("Error" / "Warning").
    * MessageColor: the desired terminal color, with its `click.style` name.

Every table below is an exhaustive `match` over `Severity` closed with
`typing.assert_never`, so a type checker flags any dispatch site that misses a
newly added member.
"""

from __future__ import annotations

from enum import Enum
from typing import assert_never


class Severity(str, Enum):
    """Severity of a diagnostic message.

    The developer and deprecation categories come in warning/error pairs that the
    classifier may convert into one another depending on the run configuration.
    """

    LOG = "log"
    WARNING = "warning"
    FATAL_ERROR = "fatal-error"
    INTERNAL_ERROR = "internal-error"
    DEVELOPER_WARNING = "developer-warning"
    DEVELOPER_ERROR = "developer-error"
    DEPRECATION_WARNING = "deprecation-warning"
    DEPRECATION_ERROR = "deprecation-error"

    @property
    def label(self) -> str:
        """Return the preamble label that opens a rendered message."""
        match self:
            case Severity.FATAL_ERROR:
                return "CMake Error"
            case Severity.INTERNAL_ERROR:
                return "CMake Internal Error (please report a bug)"
            case Severity.LOG:
                return "CMake Debug Log"
            case Severity.DEPRECATION_ERROR:
                return "CMake Deprecation Error"
            case Severity.DEPRECATION_WARNING:
                return "CMake Deprecation Warning"
            case Severity.DEVELOPER_WARNING:
                return "CMake Warning (dev)"
            case Severity.DEVELOPER_ERROR:
                return "CMake Error (dev)"
            case Severity.WARNING:
                return "CMake Warning"
            case _:
                assert_never(self)

    @property
    def suppression_hint(self) -> str:
        """Return the hint telling project developers how to silence this message.

        Only the developer pair carries a hint; every other severity returns "".
        """
        match self:
            case Severity.DEVELOPER_WARNING:
                return "This warning is for project developers.  Use -Wno-dev to suppress it."
            case Severity.DEVELOPER_ERROR:
                return "This error is for project developers. Use -Wno-error=dev to suppress it."
            case (
                Severity.LOG
                | Severity.WARNING
                | Severity.FATAL_ERROR
                | Severity.INTERNAL_ERROR
                | Severity.DEPRECATION_WARNING
                | Severity.DEPRECATION_ERROR
            ):
                return ""
            case _:
                assert_never(self)

    @property
    def title(self) -> MessageTitle:
        """Return the title carried in dispatch metadata.

        Note:
            `LOG` maps to `MessageTitle.WARNING` even though its preamble reads
            "CMake Debug Log". This mirrors the upstream behavior and is kept as is.
        """
        match self:
            case (
                Severity.FATAL_ERROR
                | Severity.INTERNAL_ERROR
                | Severity.DEPRECATION_ERROR
                | Severity.DEVELOPER_ERROR
            ):
                return MessageTitle.ERROR
            case (
                Severity.LOG
                | Severity.WARNING
                | Severity.DEVELOPER_WARNING
                | Severity.DEPRECATION_WARNING
            ):
                return MessageTitle.WARNING
            case _:
                assert_never(self)

    @property
    def color(self) -> MessageColor:
        """Return the desired terminal color for this severity."""
        match self:
            case Severity.INTERNAL_ERROR | Severity.FATAL_ERROR | Severity.DEVELOPER_ERROR:
                return MessageColor.RED
            case Severity.DEVELOPER_WARNING | Severity.WARNING:
                return MessageColor.YELLOW
            case (
                Severity.LOG
                | Severity.DEPRECATION_WARNING
                | Severity.DEPRECATION_ERROR
            ):
                return MessageColor.NORMAL
            case _:
                assert_never(self)


class MessageTitle(str, Enum):
    """Title carried in dispatch metadata; "Error" marks error-class messages."""

    ERROR = "Error"
    WARNING = "Warning"


class MessageColor(Enum):
    """Desired terminal color for a rendered message."""

    NORMAL = "normal"
    RED = "red"
    YELLOW = "yellow"

    @property
    def fg(self) -> str | None:
        """Return the `click.style` foreground color name, or None for `NORMAL`.

        Intended for human-readable output only.
        """
        match self:
            case MessageColor.RED:
                return "red"
            case MessageColor.YELLOW:
                return "yellow"
            case MessageColor.NORMAL:
                return None
            case _:
                assert_never(self)
