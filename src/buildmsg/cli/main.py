# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : main.py
#   file_relpath : src/buildmsg/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg command-line interface.

Key ideas:
- Group-level options (verbosity, color) are resolved once and placed into
  ``ctx.obj``, together with the config sources and ``-W`` flags.
- Commands that need a `MessengerConfig` resolve it on demand (see
  `buildmsg.cli.config_resolver`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildmsg.cli.commands.config import config_command
from buildmsg.cli.commands.issue import issue_command
from buildmsg.cli.commands.version import version_command
from buildmsg.cli.console import ClickConsole
from buildmsg.cli.config_resolver import ConfigSources
from buildmsg.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from buildmsg.cli_shared.color import ColorMode, resolve_color_mode
from buildmsg.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from buildmsg.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Internal logging: BUILDMSG_LOG_LEVEL wins over -v/-q
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BuildMsg CLI: classify, filter and render build diagnostics.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
    warning_flags: tuple[str, ...],
) -> None:
    """Entry point for the BuildMsg CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    ctx.obj["config_sources"] = ConfigSources(
        config_files=config_files,
        no_config=no_config,
        warning_flags=warning_flags,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'buildmsg issue SEVERITY TEXT' to report a message.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(issue_command)

if __name__ == "__main__":
    cli()
