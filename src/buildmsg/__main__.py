# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __main__.py
#   file_relpath : src/buildmsg/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Module entry point for running BuildMsg via ``python -m buildmsg``.

Delegates to :func:`buildmsg.cli.main.cli`, the single CLI entry point.
"""

from __future__ import annotations

from buildmsg.cli.main import cli

if __name__ == "__main__":
    cli()
