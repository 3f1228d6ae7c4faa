# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg package.

BuildMsg is the diagnostic-message reporting layer of a build-configuration tool.
It converts developer and deprecation warnings into errors (or back) according to
the run configuration, filters what should not be shown, renders messages with
their call context, and tracks whether an error was reported.
"""

from __future__ import annotations
