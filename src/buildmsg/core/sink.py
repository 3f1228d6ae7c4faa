# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : sink.py
#   file_relpath : src/buildmsg/core/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Display sinks and the shared error flag.

A sink receives a rendered text block with its metadata and emits it. Every sink
sets its `ErrorState` when it accepts an error-class message, before emitting it.

Sinks:
    * ConsoleSink: writes to stderr through a `ConsoleLike`, colored when enabled.
    * CallbackSink: forwards to a host callback instead of writing.
    * MemorySink: records what it receives.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from buildmsg.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from buildmsg.cli_shared.console_api import ConsoleLike
    from buildmsg.config.logging import BuildmsgLogger
    from buildmsg.core.render import MessageMetadata

logger: BuildmsgLogger = get_logger(__name__)


class ErrorState:
    """Set-only "an error occurred" flag shared by handle.

    `set` is atomic and idempotent. There is deliberately no way to clear the flag;
    hosts that need a fresh flag create a new `ErrorState`.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        """Record that an error-class message was emitted."""
        self._event.set()

    @property
    def occurred(self) -> bool:
        """Return True once any error-class message was emitted."""
        return self._event.is_set()

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"ErrorState(occurred={self.occurred})"


_process_error_state = ErrorState()


def process_error_state() -> ErrorState:
    """Return the process-wide error flag used when a sink is given none."""
    return _process_error_state


class DisplaySink(Protocol):
    """Destination for rendered messages."""

    @property
    def error_state(self) -> ErrorState:
        """The error flag this sink sets for error-class messages."""
        ...

    def accept(self, text: str, metadata: MessageMetadata) -> None:
        """Emit ``text``; set the error flag first when ``metadata`` is error-class."""
        ...


class ConsoleSink:
    """Sink writing rendered messages to the console's error stream.

    Args:
        console (ConsoleLike): Console to write through.
        error_state (ErrorState | None): Flag to set for error-class messages;
            defaults to the process-wide flag.
    """

    def __init__(self, console: ConsoleLike, error_state: ErrorState | None = None) -> None:
        self.console = console
        self._error_state = error_state if error_state is not None else process_error_state()

    @property
    def error_state(self) -> ErrorState:
        """The error flag this sink sets for error-class messages."""
        return self._error_state

    def accept(self, text: str, metadata: MessageMetadata) -> None:
        """Write ``text`` in the metadata's color (when the console enables color)."""
        if metadata.is_error:
            self._error_state.set()
        self.console.diagnostic(text, fg=metadata.color.fg)


class CallbackSink:
    """Sink forwarding rendered messages to a host callback.

    Args:
        callback (Callable[[str, MessageMetadata], None]): Receives every message.
        error_state (ErrorState | None): Flag to set for error-class messages;
            defaults to the process-wide flag.
    """

    def __init__(
        self,
        callback: Callable[[str, MessageMetadata], None],
        error_state: ErrorState | None = None,
    ) -> None:
        self.callback = callback
        self._error_state = error_state if error_state is not None else process_error_state()

    @property
    def error_state(self) -> ErrorState:
        """The error flag this sink sets for error-class messages."""
        return self._error_state

    def accept(self, text: str, metadata: MessageMetadata) -> None:
        """Forward ``text`` and ``metadata`` to the callback."""
        if metadata.is_error:
            self._error_state.set()
        self.callback(text, metadata)


@dataclass(frozen=True, slots=True)
class SinkRecord:
    """One message received by a `MemorySink`."""

    text: str
    metadata: MessageMetadata


@dataclass
class MemorySink:
    """Sink recording every message it receives, in order.

    Unlike the other sinks, a `MemorySink` gets its own `ErrorState` by default so
    recording never touches the process-wide flag.
    """

    records: list[SinkRecord] = field(default_factory=lambda: [])
    error_state: ErrorState = field(default_factory=ErrorState)

    def accept(self, text: str, metadata: MessageMetadata) -> None:
        """Record ``text`` and ``metadata``."""
        if metadata.is_error:
            self.error_state.set()
        self.records.append(SinkRecord(text=text, metadata=metadata))
        logger.trace("Recorded message #%d", len(self.records))

    @property
    def texts(self) -> list[str]:
        """Return the recorded texts, in order."""
        return [r.text for r in self.records]

    def __len__(self) -> int:
        """Return the number of recorded messages."""
        return len(self.records)
