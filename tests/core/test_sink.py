# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : test_sink.py
#   file_relpath : tests/core/test_sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Display sinks and the shared error flag."""

from __future__ import annotations

import io
import threading

import click

from buildmsg.cli.console import ClickConsole
from buildmsg.core import (
    CallbackSink,
    ConsoleSink,
    ErrorState,
    MemorySink,
    MessageMetadata,
    Severity,
    SinkRecord,
    process_error_state,
)
from tests.conftest import parametrize

WARNING_META = MessageMetadata.for_severity(Severity.WARNING)
ERROR_META = MessageMetadata.for_severity(Severity.FATAL_ERROR)
LOG_META = MessageMetadata.for_severity(Severity.LOG)


def _console(*, color: bool) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=color, out=out, err=err), out, err


def test_error_state_is_set_only() -> None:
    state = ErrorState()
    assert not state.occurred
    state.set()
    state.set()
    assert state.occurred
    assert "occurred=True" in repr(state)


def test_error_state_set_from_many_threads() -> None:
    state = ErrorState()
    threads = [threading.Thread(target=state.set) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert state.occurred


def test_process_error_state_is_a_singleton() -> None:
    assert process_error_state() is process_error_state()


def test_console_sink_writes_plain_text_to_stderr() -> None:
    console, out, err = _console(color=False)
    state = ErrorState()
    sink = ConsoleSink(console, state)

    sink.accept("CMake Warning:\n  hi\n\n", WARNING_META)

    assert err.getvalue() == "CMake Warning:\n  hi\n\n"
    assert out.getvalue() == ""
    assert not state.occurred


def test_console_sink_sets_flag_for_errors() -> None:
    console, _out, err = _console(color=False)
    state = ErrorState()
    sink = ConsoleSink(console, state)

    sink.accept("CMake Error:\n  boom\n\n", ERROR_META)

    assert state.occurred
    assert sink.error_state is state
    assert err.getvalue() == "CMake Error:\n  boom\n\n"


@parametrize(
    "metadata, styled",
    [
        (WARNING_META, True),
        (ERROR_META, True),
        (LOG_META, False),
    ],
)
def test_console_sink_colors_when_enabled(metadata: MessageMetadata, styled: bool) -> None:
    console, _out, err = _console(color=True)
    sink = ConsoleSink(console, ErrorState())

    sink.accept("text\n", metadata)

    assert ("\x1b[" in err.getvalue()) is styled
    assert click.unstyle(err.getvalue()) == "text\n"


def test_console_sink_defaults_to_process_flag() -> None:
    console, _out, _err = _console(color=False)
    assert ConsoleSink(console).error_state is process_error_state()


def test_callback_sink_forwards_and_sets_flag() -> None:
    received: list[tuple[str, MessageMetadata]] = []
    state = ErrorState()
    sink = CallbackSink(lambda text, meta: received.append((text, meta)), state)

    sink.accept("w\n", WARNING_META)
    assert not state.occurred
    sink.accept("e\n", ERROR_META)

    assert received == [("w\n", WARNING_META), ("e\n", ERROR_META)]
    assert state.occurred


def test_memory_sink_records_in_order() -> None:
    sink = MemorySink()

    sink.accept("one", WARNING_META)
    sink.accept("two", ERROR_META)

    assert sink.records == [SinkRecord("one", WARNING_META), SinkRecord("two", ERROR_META)]
    assert sink.texts == ["one", "two"]
    assert len(sink) == 2
    assert sink.error_state.occurred
    assert sink.error_state is not process_error_state()
