# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : config.py
#   file_relpath : src/buildmsg/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg `config` command.

Prints the resolved messenger configuration as TOML: the explicit warning group
levels and the four effective booleans, after applying defaults, config files and
``-W`` flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildmsg.cli.config_resolver import resolve_messenger_config
from buildmsg.config.io import render_config_toml
from buildmsg.config.logging import get_logger

if TYPE_CHECKING:
    from buildmsg.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="config",
    help="Show the resolved messenger configuration as TOML.",
)
def config_command() -> None:
    """Show the resolved messenger configuration.

    Prints the configuration resolved from the group options as a TOML document to stdout.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    config = resolve_messenger_config(ctx)

    logger.trace("Rendering config: %r", config)
    console.print(render_config_toml(config), nl=False)
