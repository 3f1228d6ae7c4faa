# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : console_api.py
#   file_relpath : src/buildmsg/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Framework-agnostic console interface.

Two channels:
    - ``print``: command output (stdout), e.g. the ``config`` TOML dump.
    - ``diagnostic``: rendered diagnostic blocks and CLI errors (stderr), written
      verbatim and optionally colored.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Console consumed by `ConsoleSink` and the CLI commands."""

    @property
    def color_enabled(self) -> bool:
        """Whether ANSI styling is applied."""
        ...

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write command output to stdout."""
        ...

    def diagnostic(self, text: str, *, fg: str | None = None) -> None:
        """Write ``text`` as is to stderr, in color ``fg`` when color is enabled."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
