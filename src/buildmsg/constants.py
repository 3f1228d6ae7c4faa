# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : constants.py
#   file_relpath : src/buildmsg/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BUILDMSG_VERSION: str = get_version("buildmsg")
except PackageNotFoundError:
    BUILDMSG_VERSION = "0.0.0+unknown"
