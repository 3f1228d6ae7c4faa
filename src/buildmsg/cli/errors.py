# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : errors.py
#   file_relpath : src/buildmsg/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Exceptions for the BuildMsg CLI.

Each class carries the `ExitCode` Click exits with. Library errors
(`ConfigFileError`, `WarningFlagError`) are wrapped with `from_exception` at the
CLI boundary so the library itself stays Click-free.

CLI errors are written through the project console when one was present in the
Click context, in the same stderr channel as rendered diagnostics.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from buildmsg.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from buildmsg.cli_shared.console_api import ConsoleLike


def _context_console() -> ConsoleLike | None:
    ctx = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.obj, dict):
        return None
    return ctx.obj.get("console")


class BuildmsgError(click.ClickException):
    """Base class for all BuildMsg CLI errors.

    The project console is looked up when the error is created, while the Click
    context is still active; Click calls `show()` after the context has been popped.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.console: ConsoleLike | None = _context_console()

    @classmethod
    def from_exception(cls, exc: Exception) -> BuildmsgError:
        """Wrap a library exception, keeping its message."""
        return cls(str(exc))

    def show(self, file: IO[Any] | None = None) -> None:
        """Write ``Error: <message>`` in bright red through the project console.

        Without a console, Click's own display is used.
        """
        if self.console is None:
            super().show(file)
            return
        self.console.diagnostic(f"Error: {self.format_message()}\n", fg="bright_red")


class BuildmsgUsageError(BuildmsgError):
    """Malformed command line, including an invalid ``-W`` flag."""

    exit_code = ExitCode.USAGE_ERROR


class BuildmsgConfigError(BuildmsgError):
    """Unreadable, malformed or invalid configuration file."""

    exit_code = ExitCode.CONFIG_ERROR
