# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : test_backtrace.py
#   file_relpath : tests/core/test_backtrace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Backtrace frames, titles and call stacks."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from buildmsg.core import EMPTY_BACKTRACE, Backtrace, Frame
from buildmsg.core.backtrace import CALL_STACK_HEADER
from tests.conftest import parametrize


def _title(bt: Backtrace) -> str:
    buf = io.StringIO()
    bt.print_title(buf)
    return buf.getvalue()


def _call_stack(bt: Backtrace) -> str:
    buf = io.StringIO()
    bt.print_call_stack(buf)
    return buf.getvalue()


@parametrize(
    "frame, text",
    [
        (Frame("CMakeLists.txt"), "CMakeLists.txt"),
        (Frame("CMakeLists.txt", 3), "CMakeLists.txt:3"),
        (Frame("CMakeLists.txt", 3, "project"), "CMakeLists.txt:3 (project)"),
        (Frame("CMakeLists.txt", 0, "project"), "CMakeLists.txt"),
    ],
)
def test_frame_render(frame: Frame, text: str) -> None:
    assert frame.render() == text


@parametrize(
    "spec, frame",
    [
        ("a.cmake", Frame("a.cmake")),
        ("a.cmake:7", Frame("a.cmake", 7)),
        ("a.cmake:7:include", Frame("a.cmake", 7, "include")),
        ("a.cmake::include", Frame("a.cmake", 0, "include")),
    ],
)
def test_frame_parse(spec: str, frame: Frame) -> None:
    assert Frame.parse(spec) == frame


def test_frame_parse_rejects_bad_line() -> None:
    with pytest.raises(ValueError, match="Invalid line number"):
        Frame.parse("a.cmake:seven:include")


def test_empty_backtrace_prints_nothing() -> None:
    assert EMPTY_BACKTRACE.empty
    assert EMPTY_BACKTRACE.top() is None
    assert _title(EMPTY_BACKTRACE) == ""
    assert _call_stack(EMPTY_BACKTRACE) == ""


def test_title_uses_at_with_line_and_in_without() -> None:
    assert _title(Backtrace.from_frames(Frame("x.cmake", 2, "foo"))) == " at x.cmake:2 (foo)"
    assert _title(Backtrace.from_frames(Frame("x.cmake"))) == " in x.cmake"


def test_call_stack_skips_top_and_unnamed_frames() -> None:
    bt = Backtrace.from_frames(
        Frame("inner.cmake", 1, "message"),
        Frame("mid.cmake", 5),
        Frame("outer.cmake", 9, "include"),
    )

    assert _call_stack(bt) == CALL_STACK_HEADER + "  outer.cmake:9 (include)\n"


def test_call_stack_without_named_callers_is_empty() -> None:
    bt = Backtrace.from_frames(Frame("inner.cmake", 1, "message"), Frame("top.cmake"))

    assert _call_stack(bt) == ""


def test_push_and_pop_return_new_backtraces() -> None:
    base = Backtrace.from_frames(Frame("outer.cmake", 9, "include"))
    pushed = base.push(Frame("inner.cmake", 1, "message"))

    assert len(base) == 1
    assert len(pushed) == 2
    assert pushed.top() == Frame("inner.cmake", 1, "message")
    assert pushed.pop() == base
    assert list(pushed) == [Frame("inner.cmake", 1, "message"), Frame("outer.cmake", 9, "include")]


def test_relative_to_shortens_paths_below_base(tmp_path: Path) -> None:
    inside = str(tmp_path / "sub" / "CMakeLists.txt")
    outside = str(tmp_path.parent / "elsewhere.cmake")
    bt = Backtrace.from_frames(
        Frame(inside, 2, "message"),
        Frame(outside, 4, "include"),
        relative_to=tmp_path,
    )

    assert _title(bt) == " at sub/CMakeLists.txt:2 (message)"
    assert _call_stack(bt) == CALL_STACK_HEADER + f"  {outside}:4 (include)\n"
