# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : backtrace.py
#   file_relpath : src/buildmsg/core/backtrace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Call-context backtraces attached to issued messages.

The renderer only needs the small `BacktraceLike` surface: append the immediate
context ("title") and the remaining frames ("call stack") to a text buffer. Hosts
may pass their own implementation; `Backtrace` is the one shipped with BuildMsg.

Rendering:
    A frame prints as ``path``, ``path:line`` or ``path:line (name)``.
    The title is `` at <frame>`` when the top frame has a line number, `` in <frame>``
    otherwise. The call stack lists the frames below the top that name a command::

        Call Stack (most recent call first):
          CMakeLists.txt:12 (include)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

CALL_STACK_HEADER = "Call Stack (most recent call first):\n"


class TextBuffer(Protocol):
    """Append-only text buffer (e.g. `io.StringIO`)."""

    def write(self, s: str, /) -> int:
        """Append ``s`` to the buffer."""
        ...


class BacktraceLike(Protocol):
    """Structural interface for call-context backtraces consumed by the renderer."""

    def print_title(self, buffer: TextBuffer) -> None:
        """Append the immediate context; may append nothing."""
        ...

    def print_call_stack(self, buffer: TextBuffer) -> None:
        """Append the rest of the call stack; may append nothing."""
        ...


@dataclass(frozen=True, slots=True)
class Frame:
    """One call-context frame.

    Attributes:
        file_path (str): Source file the call happened in.
        line (int): 1-based line number; 0 when unknown.
        name (str): Name of the command being executed; "" at file scope.
    """

    file_path: str
    line: int = 0
    name: str = ""

    def render(self, relative_to: Path | None = None) -> str:
        """Return the frame as ``path[:line[ (name)]]``."""
        path = _display_path(self.file_path, relative_to)
        if self.line <= 0:
            return path
        if self.name:
            return f"{path}:{self.line} ({self.name})"
        return f"{path}:{self.line}"

    @classmethod
    def parse(cls, spec: str) -> Frame:
        """Parse a ``FILE[:LINE[:NAME]]`` frame spec.

        Raises:
            ValueError: If LINE is present but not an integer.
        """
        path, sep, rest = spec.partition(":")
        if not sep:
            return cls(file_path=path)
        line_text, _, name = rest.partition(":")
        try:
            line = int(line_text) if line_text else 0
        except ValueError:
            raise ValueError(f"Invalid line number {line_text!r} in frame {spec!r}") from None
        return cls(file_path=path, line=line, name=name)


def _display_path(file_path: str, relative_to: Path | None) -> str:
    """Return ``file_path`` relative to ``relative_to`` when it lies below it."""
    if relative_to is None:
        return file_path
    path = Path(file_path)
    if not path.is_absolute():
        return file_path
    try:
        return path.relative_to(relative_to).as_posix()
    except ValueError:
        return file_path


@dataclass(frozen=True, slots=True)
class Backtrace:
    """Immutable backtrace; frames are ordered most recent call first.

    Attributes:
        frames (tuple[Frame, ...]): Call frames, innermost first.
        relative_to (Path | None): Directory that absolute paths are shown relative to.
    """

    frames: tuple[Frame, ...] = ()
    relative_to: Path | None = None

    @classmethod
    def from_frames(cls, *frames: Frame, relative_to: str | os.PathLike[str] | None = None) -> Backtrace:
        """Build a backtrace from frames given innermost first."""
        return cls(
            frames=tuple(frames),
            relative_to=Path(relative_to) if relative_to is not None else None,
        )

    def push(self, frame: Frame) -> Backtrace:
        """Return a new backtrace with ``frame`` as the most recent call."""
        return Backtrace(frames=(frame, *self.frames), relative_to=self.relative_to)

    def pop(self) -> Backtrace:
        """Return the parent backtrace (without the most recent call)."""
        return Backtrace(frames=self.frames[1:], relative_to=self.relative_to)

    @property
    def empty(self) -> bool:
        """Return True if the backtrace has no frames."""
        return not self.frames

    def top(self) -> Frame | None:
        """Return the most recent call, or None for an empty backtrace."""
        return self.frames[0] if self.frames else None

    def print_title(self, buffer: TextBuffer) -> None:
        """Append `` at <frame>`` / `` in <frame>`` for the most recent call."""
        top = self.top()
        if top is None:
            return
        buffer.write(" at " if top.line > 0 else " in ")
        buffer.write(top.render(self.relative_to))

    def print_call_stack(self, buffer: TextBuffer) -> None:
        """Append the frames below the most recent call that name a command."""
        callers = [frame for frame in self.frames[1:] if frame.name]
        if not callers:
            return
        buffer.write(CALL_STACK_HEADER)
        for frame in callers:
            buffer.write(f"  {frame.render(self.relative_to)}\n")

    def __iter__(self) -> Iterator[Frame]:
        """Iterate over frames, most recent call first."""
        return iter(self.frames)

    def __len__(self) -> int:
        """Return the number of frames."""
        return len(self.frames)


EMPTY_BACKTRACE: Backtrace = Backtrace()
