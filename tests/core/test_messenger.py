# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : test_messenger.py
#   file_relpath : tests/core/test_messenger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""The messenger pipeline: conversion, forced display, filtering and dispatch."""

from __future__ import annotations

import pytest
from hypothesis import given

from buildmsg.config import MessengerConfig
from buildmsg.core import (
    Backtrace,
    CallbackSink,
    ErrorState,
    Frame,
    MemorySink,
    MessageMetadata,
    Messenger,
    Severity,
    convert_severity,
)
from tests.conftest import make_config, make_messenger, parametrize
from tests.strategies_buildmsg import s_config, s_severity


def test_default_config_shows_plain_warning() -> None:
    messenger, sink = make_messenger()

    rendered = messenger.issue_message(Severity.WARNING, "X is deprecated")

    assert rendered is not None
    assert sink.texts == ["CMake Warning:\n  X is deprecated\n\n"]
    assert not sink.error_state.occurred


def test_empty_text_is_dispatched_as_minimal_block() -> None:
    messenger, sink = make_messenger()

    rendered = messenger.issue_message(Severity.WARNING, "")

    assert rendered is not None
    assert sink.texts == ["CMake Warning:\n\n"]


def test_forced_demotion_bypasses_suppression() -> None:
    """A developer error demoted to a warning is shown even when dev warnings are suppressed."""
    config = MessengerConfig(dev_warnings_as_errors=False, suppress_dev_warnings=True)
    messenger, sink = make_messenger(config)

    rendered = messenger.issue_message(Severity.DEVELOPER_ERROR, "Policy not set")

    assert rendered is not None
    assert rendered.severity is Severity.DEVELOPER_WARNING
    assert sink.texts == [
        "CMake Warning (dev):\n"
        "  Policy not set\n"
        "This warning is for project developers.  Use -Wno-dev to suppress it.\n"
    ]
    assert not sink.error_state.occurred


def test_forced_escalation_sets_error_flag() -> None:
    messenger, sink = make_messenger(make_config(flags=["-Werror=dev"]))

    rendered = messenger.issue_message(Severity.DEVELOPER_WARNING, "Policy not set")

    assert rendered is not None
    assert rendered.severity is Severity.DEVELOPER_ERROR
    assert sink.texts[0].startswith("CMake Error (dev):\n")
    assert sink.error_state.occurred


@parametrize(
    "severity, overrides",
    [
        (Severity.DEVELOPER_WARNING, {"suppress_dev_warnings": True}),
        (Severity.DEPRECATION_WARNING, {"suppress_deprecated_warnings": True}),
    ],
)
def test_suppressed_messages_are_not_dispatched(
    severity: Severity, overrides: dict[str, bool]
) -> None:
    messenger, sink = make_messenger(make_config(**overrides))

    assert messenger.issue_message(severity, "hidden") is None
    assert len(sink) == 0
    assert not sink.error_state.occurred


@given(severity=s_severity, config=s_config)
def test_converted_messages_are_always_dispatched(
    severity: Severity, config: MessengerConfig
) -> None:
    sink = MemorySink()
    messenger = Messenger(config, sink)

    rendered = messenger.issue_message(severity, "text")

    if convert_severity(severity, config) != severity:
        assert rendered is not None
        assert len(sink) == 1
    if rendered is not None:
        assert rendered.severity == convert_severity(severity, config)
        assert sink.error_state.occurred == rendered.metadata.is_error


def test_display_message_skips_conversion_and_filtering() -> None:
    config = MessengerConfig(suppress_dev_warnings=True)
    messenger, sink = make_messenger(config)

    rendered = messenger.display_message(Severity.DEVELOPER_ERROR, "as given")

    assert rendered.severity is Severity.DEVELOPER_ERROR
    assert sink.texts[0].startswith("CMake Error (dev):\n")
    assert sink.error_state.occurred


def test_backtrace_is_rendered() -> None:
    messenger, sink = make_messenger()
    bt = Backtrace.from_frames(Frame("CMakeLists.txt", 3, "message"))

    messenger.issue_message(Severity.FATAL_ERROR, "boom", bt)

    assert sink.texts == ["CMake Error at CMakeLists.txt:3 (message):\n  boom\n\n"]


def test_config_is_replaceable_between_calls() -> None:
    messenger, sink = make_messenger()

    messenger.issue_message(Severity.DEPRECATION_WARNING, "first")
    messenger.config = make_config(flags=["-Wno-deprecated"])
    messenger.issue_message(Severity.DEPRECATION_WARNING, "second")

    assert len(sink) == 1
    assert "first" in sink.texts[0]


def test_bound_helpers_use_messenger_config() -> None:
    messenger, _sink = make_messenger(MessengerConfig(deprecated_warnings_as_errors=True))

    assert messenger.convert_message_type(Severity.DEPRECATION_WARNING) is (
        Severity.DEPRECATION_ERROR
    )
    assert messenger.is_message_type_visible(Severity.DEPRECATION_ERROR)
    assert not messenger.is_message_type_visible(Severity.DEVELOPER_ERROR)


def test_sink_errors_propagate() -> None:
    def fail(text: str, metadata: MessageMetadata) -> None:
        raise OSError("stream closed")

    messenger = Messenger(None, CallbackSink(fail, ErrorState()))

    with pytest.raises(OSError, match="stream closed"):
        messenger.issue_message(Severity.WARNING, "text")


def test_internal_error_uses_stack_capture() -> None:
    class Capture:
        def capture_stack(self, skip: int = 0, max_frames: int = 0) -> str:
            return "WARNING: native"

    sink = MemorySink()
    messenger = Messenger(None, sink, stack_capture=Capture())

    messenger.issue_message(Severity.INTERNAL_ERROR, "bad")

    assert sink.texts[0].endswith("\n\nNote: native\n")
    assert sink.error_state.occurred
