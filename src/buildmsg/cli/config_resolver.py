# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : config_resolver.py
#   file_relpath : src/buildmsg/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Resolve the messenger configuration from the group's Click parameters.

The group only records where configuration comes from (`ConfigSources`). Commands
that need a `MessengerConfig` call `resolve_messenger_config`, so a broken config
file or ``-W`` flag fails those commands and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from buildmsg.cli.errors import BuildmsgConfigError, BuildmsgUsageError
from buildmsg.config.io import ConfigFileError, load_merged_config
from buildmsg.config.logging import get_logger
from buildmsg.config.warning_flags import WarningFlagError

if TYPE_CHECKING:
    import click

    from buildmsg.config.logging import BuildmsgLogger
    from buildmsg.config.model import MessengerConfig

logger: BuildmsgLogger = get_logger(__name__)


@dataclass(frozen=True)
class ConfigSources:
    """Configuration inputs taken from the command line."""

    config_files: tuple[str, ...] = ()
    no_config: bool = False
    warning_flags: tuple[str, ...] = ()


def resolve_messenger_config(ctx: click.Context) -> MessengerConfig:
    """Return the messenger configuration for this invocation.

    The result is cached in ``ctx.obj["messenger_config"]``.

    Args:
        ctx (click.Context): Current Click context; its ``obj`` holds the
            ``config_sources`` recorded by the group.

    Returns:
        MessengerConfig: The layered configuration.

    Raises:
        BuildmsgConfigError: If a config file cannot be loaded.
        BuildmsgUsageError: If a ``-W`` flag is malformed.
    """
    obj = ctx.find_root().ensure_object(dict)
    cached: MessengerConfig | None = obj.get("messenger_config")
    if cached is not None:
        return cached

    sources: ConfigSources = obj.get("config_sources") or ConfigSources()
    try:
        config = load_merged_config(
            directory=Path.cwd(),
            config_files=[Path(p) for p in sources.config_files],
            no_config=sources.no_config,
            warning_flags=list(sources.warning_flags),
        )
    except ConfigFileError as e:
        raise BuildmsgConfigError.from_exception(e) from e
    except WarningFlagError as e:
        raise BuildmsgUsageError.from_exception(e) from e

    obj["messenger_config"] = config
    logger.trace("Messenger config: %r", config)
    return config
