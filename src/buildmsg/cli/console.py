# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : console.py
#   file_relpath : src/buildmsg/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Click implementation of `ConsoleLike`.

Rendered diagnostics already carry their own line structure, so `diagnostic` never
appends a newline. Styling wraps the whole block.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from buildmsg.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Apply ANSI styling; otherwise all output is plain text.
        out (TextIO | None): Stream for command output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for diagnostics. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @property
    def color_enabled(self) -> bool:
        """Whether ANSI styling is applied."""
        return self._enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write command output to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self._enable_color)

    def diagnostic(self, text: str, *, fg: str | None = None) -> None:
        """Write a diagnostic block to the error stream, without adding a newline."""
        if fg is not None:
            text = self.styled(text, fg=fg)
        click.echo(text, nl=False, file=self.err, color=self._enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self._enable_color:
            return text
        return click.style(text, **style_kwargs)
