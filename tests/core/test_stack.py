# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : test_stack.py
#   file_relpath : tests/core/test_stack.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Native stack capture and prefix rewriting."""

from __future__ import annotations

from buildmsg.core import NullStackCapture, PythonStackCapture, rewrite_stack_prefix
from tests.conftest import parametrize


def test_null_capture_returns_empty() -> None:
    assert NullStackCapture().capture_stack() == ""
    assert NullStackCapture().capture_stack(2, 5) == ""


def test_python_capture_starts_with_warning_header() -> None:
    report = PythonStackCapture().capture_stack()

    assert report.startswith("WARNING: Python call stack")
    assert "test_python_capture_starts_with_warning_header" in report
    assert not report.endswith("\n")


def test_python_capture_limits_frames() -> None:
    capture = PythonStackCapture(header="WARNING: stack")
    report = capture.capture_stack(max_frames=1)

    # One frame renders as a 'File ...' line plus its source line.
    assert report.count('  File "') == 1
    assert "test_python_capture_limits_frames" in report


@parametrize(
    "stack, expected",
    [
        ("WARNING: frame0\nframe1", "Note: frame0\nframe1"),
        ("frame0\nWARNING: frame1", "frame0\nWARNING: frame1"),
        ("Note: frame0", "Note: frame0"),
        ("", ""),
    ],
)
def test_rewrite_stack_prefix(stack: str, expected: str) -> None:
    assert rewrite_stack_prefix(stack) == expected
