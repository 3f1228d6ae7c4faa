# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : version.py
#   file_relpath : src/buildmsg/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg `version` command.

Prints the current BuildMsg version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildmsg.constants import BUILDMSG_VERSION

if TYPE_CHECKING:
    from buildmsg.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of BuildMsg.",
)
def version_command() -> None:
    """Show the current version of BuildMsg."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(console.styled(BUILDMSG_VERSION, bold=True))
