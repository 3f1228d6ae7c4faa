# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : stack.py
#   file_relpath : src/buildmsg/core/stack.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Native stack capture attached to internal errors.

Stack capture is an injectable capability. `NullStackCapture` is the default and
yields nothing, so rendering is identical whether or not a capture facility is
available. `PythonStackCapture` reports the current Python call stack of the host.
"""

from __future__ import annotations

import traceback
from typing import Final, Protocol

from buildmsg.config.logging import get_logger

logger = get_logger(__name__)

STACK_WARNING_PREFIX: Final[str] = "WARNING:"
STACK_NOTE_PREFIX: Final[str] = "Note:"


class StackCapture(Protocol):
    """Capability that returns the host program's current stack as text."""

    def capture_stack(self, skip: int = 0, max_frames: int = 0) -> str:
        """Return the stack as text, or "" when unavailable.

        Args:
            skip (int): Number of innermost frames to leave out.
            max_frames (int): Maximum number of frames to report; 0 means no limit.
        """
        ...


class NullStackCapture:
    """Stack capture for builds without a capture facility; always returns ""."""

    def capture_stack(self, skip: int = 0, max_frames: int = 0) -> str:
        """Return ""."""
        return ""


class PythonStackCapture:
    """Capture the current Python call stack with `traceback`.

    The report opens with a ``WARNING:`` line, which the renderer rewrites into a
    ``Note:`` line.
    """

    header: str

    def __init__(self, header: str = "WARNING: Python call stack (most recent call last):") -> None:
        self.header = header

    def capture_stack(self, skip: int = 0, max_frames: int = 0) -> str:
        """Return the formatted Python call stack of the caller."""
        # Drop this method's own frame in addition to ``skip``.
        frames = traceback.extract_stack()[: -(skip + 1)]
        if max_frames > 0:
            frames = frames[-max_frames:]
        if not frames:
            return ""
        lines = "".join(traceback.format_list(frames)).rstrip("\n")
        logger.trace("Captured %d Python frames", len(frames))
        return f"{self.header}\n{lines}"


def rewrite_stack_prefix(stack: str) -> str:
    """Replace a leading ``WARNING:`` with ``Note:``; leave anything else unchanged."""
    if stack.startswith(STACK_WARNING_PREFIX):
        return STACK_NOTE_PREFIX + stack[len(STACK_WARNING_PREFIX) :]
    return stack
