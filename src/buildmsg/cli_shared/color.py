# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : color.py
#   file_relpath : src/buildmsg/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Click-independent color helpers for BuildMsg.

This module provides:

- the ColorMode enum;
- color-mode resolution based on CLI flags, environment, and the output stream.

Rendered messages are written to stderr, so auto-detection looks at stderr.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from buildmsg.config.logging import get_logger

if TYPE_CHECKING:
    from buildmsg.config.logging import BuildmsgLogger


logger: BuildmsgLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (when stderr is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stderr.isatty()`.

    Args:
        color_mode_override (ColorMode | None): Parsed `--color` value; `None` means
            "not provided".
        stream_isatty (bool | None): Optional override for TTY detection. When `None`,
            the function calls `sys.stderr.isatty()` and falls back to `False` on error.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (AttributeError, OSError, ValueError):
            stream_isatty = False
    logger.trace("Auto color mode: isatty=%s", stream_isatty)
    return bool(stream_isatty)
