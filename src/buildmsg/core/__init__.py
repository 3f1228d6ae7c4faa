# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Message classification, filtering, rendering and dispatch.

Design:
    - `Severity` is a closed enum; its display tables are exhaustive matches.
    - `convert_severity` and `is_severity_visible` are pure functions of a
      `MessengerConfig`.
    - `render_message` builds an immutable `RenderedMessage`.
    - Sinks emit rendered messages and set a shared `ErrorState`.
    - `Messenger` ties these together behind `issue_message`.
"""

from __future__ import annotations

from buildmsg.core.backtrace import EMPTY_BACKTRACE, Backtrace, BacktraceLike, Frame
from buildmsg.core.classify import convert_severity, is_severity_visible
from buildmsg.core.formatter import wrap_text
from buildmsg.core.messenger import Messenger
from buildmsg.core.render import MessageMetadata, RenderedMessage, render_message
from buildmsg.core.severity import MessageColor, MessageTitle, Severity
from buildmsg.core.sink import (
    CallbackSink,
    ConsoleSink,
    DisplaySink,
    ErrorState,
    MemorySink,
    SinkRecord,
    process_error_state,
)
from buildmsg.core.stack import (
    NullStackCapture,
    PythonStackCapture,
    StackCapture,
    rewrite_stack_prefix,
)

__all__ = [
    "EMPTY_BACKTRACE",
    "Backtrace",
    "BacktraceLike",
    "CallbackSink",
    "ConsoleSink",
    "DisplaySink",
    "ErrorState",
    "Frame",
    "MemorySink",
    "MessageColor",
    "MessageMetadata",
    "MessageTitle",
    "Messenger",
    "NullStackCapture",
    "PythonStackCapture",
    "RenderedMessage",
    "Severity",
    "SinkRecord",
    "StackCapture",
    "convert_severity",
    "is_severity_visible",
    "process_error_state",
    "render_message",
    "rewrite_stack_prefix",
    "wrap_text",
]
