# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : formatter.py
#   file_relpath : src/buildmsg/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Indenting word-wrap formatter for message bodies.

Each input line is handled on its own:

- lines starting with a space, and whitespace-only lines, are kept verbatim;
- empty lines are kept as empty lines;
- any other line is a paragraph, word-wrapped so that indent plus text fits in
  ``width`` columns.

Every emitted line is indented (except empty ones) and ends with a newline.
"""

from __future__ import annotations

import textwrap
from typing import Final, Protocol

DEFAULT_INDENT: Final[str] = "  "
DEFAULT_WIDTH: Final[int] = 77


class WrapFunc(Protocol):
    """Signature of the formatter consumed by the renderer."""

    def __call__(self, text: str, indent: str = DEFAULT_INDENT) -> str:
        """Return ``text`` wrapped and indented."""
        ...


def wrap_text(text: str, indent: str = DEFAULT_INDENT, width: int = DEFAULT_WIDTH) -> str:
    """Wrap and indent ``text``.

    Args:
        text (str): Raw message text; may contain newlines.
        indent (str): Prefix for every non-empty output line.
        width (int): Maximum line width including the indent.

    Returns:
        str: The formatted text, newline-terminated; "" for empty input.
    """
    if not text:
        return ""

    column_width = max(width - len(indent), 1)
    out: list[str] = []
    for line in text.split("\n"):
        if not line:
            out.append("\n")
        elif line.startswith(" ") or not line.strip():
            out.append(f"{indent}{line}\n")
        else:
            wrapped = textwrap.wrap(
                line,
                width=column_width,
                expand_tabs=False,
                replace_whitespace=False,
                break_long_words=False,
                break_on_hyphens=False,
            )
            out.extend(f"{indent}{chunk}\n" for chunk in wrapped)

    # A trailing newline in the input does not add an empty line.
    if text.endswith("\n"):
        out.pop()
    return "".join(out)
