# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : render.py
#   file_relpath : src/buildmsg/core/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Deterministic rendering of a message into a text block plus display metadata.

Block layout, in order:

    1. preamble label (e.g. ``CMake Warning``);
    2. backtrace title (e.g. `` at CMakeLists.txt:3 (foo)``);
    3. ``":\\n"`` and the wrapped, indented message text;
    4. backtrace call stack;
    5. suppression hint for developer warnings/errors;
    6. a terminating newline;
    7. internal errors only: the native stack capture, ``WARNING:`` rewritten to
       ``Note:``, followed by a newline.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildmsg.config.logging import get_logger
from buildmsg.core.formatter import wrap_text
from buildmsg.core.severity import MessageColor, MessageTitle, Severity
from buildmsg.core.stack import NullStackCapture, rewrite_stack_prefix

if TYPE_CHECKING:
    from buildmsg.config.logging import BuildmsgLogger
    from buildmsg.core.backtrace import BacktraceLike
    from buildmsg.core.formatter import WrapFunc
    from buildmsg.core.stack import StackCapture

logger: BuildmsgLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MessageMetadata:
    """Display metadata handed to the sink alongside the text."""

    title: MessageTitle
    color: MessageColor

    @classmethod
    def for_severity(cls, severity: Severity) -> MessageMetadata:
        """Return the metadata derived from a severity."""
        return cls(title=severity.title, color=severity.color)

    @property
    def is_error(self) -> bool:
        """Return True for error-class messages (those that set the error flag)."""
        return self.title == MessageTitle.ERROR


@dataclass(frozen=True, slots=True)
class RenderedMessage:
    """A fully rendered message."""

    severity: Severity
    text: str
    metadata: MessageMetadata


def render_message(
    severity: Severity,
    text: str,
    backtrace: BacktraceLike,
    *,
    stack_capture: StackCapture | None = None,
    wrap: WrapFunc = wrap_text,
) -> RenderedMessage:
    """Render a message block for an already classified severity.

    Args:
        severity (Severity): The effective severity.
        text (str): Raw message text supplied by the caller.
        backtrace (BacktraceLike): Call context of the message.
        stack_capture (StackCapture | None): Native stack capture used for internal
            errors; None behaves like `NullStackCapture`.
        wrap (WrapFunc): Formatter for the message body.

    Returns:
        RenderedMessage: The text block and its display metadata.
    """
    buf = io.StringIO()

    buf.write(severity.label)
    backtrace.print_title(buf)
    buf.write(":\n")
    buf.write(wrap(text, "  "))
    backtrace.print_call_stack(buf)
    buf.write(severity.suppression_hint)
    buf.write("\n")

    if severity == Severity.INTERNAL_ERROR:
        capture = stack_capture if stack_capture is not None else NullStackCapture()
        stack = capture.capture_stack(0, 0)
        if stack:
            buf.write(rewrite_stack_prefix(stack))
            buf.write("\n")
        else:
            logger.debug("No native stack available for internal error")

    rendered = RenderedMessage(
        severity=severity,
        text=buf.getvalue(),
        metadata=MessageMetadata.for_severity(severity),
    )
    logger.trace("Rendered %s message (%d chars)", severity.value, len(rendered.text))
    return rendered
