# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : __init__.py
#   file_relpath : src/buildmsg/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Messenger configuration: model, warning flags, TOML I/O and logging.

Build configurations with `MutableMessengerConfig` (mutable), then `freeze()` into a
`MessengerConfig` for the messenger. To tweak a frozen config, call
`MessengerConfig.thaw()`, edit the builder, and `freeze()` again.
"""

from __future__ import annotations

from buildmsg.config.io import (
    ConfigFileError,
    discover_config_file,
    load_config_file,
    load_merged_config,
    render_config_toml,
)
from buildmsg.config.model import MessengerConfig, MutableMessengerConfig
from buildmsg.config.warning_flags import (
    DiagLevel,
    FlagAction,
    WarningFlag,
    WarningFlagError,
    apply_warning_flags,
    parse_warning_flag,
)

__all__ = [
    "ConfigFileError",
    "DiagLevel",
    "FlagAction",
    "MessengerConfig",
    "MutableMessengerConfig",
    "WarningFlag",
    "WarningFlagError",
    "apply_warning_flags",
    "discover_config_file",
    "load_config_file",
    "load_merged_config",
    "parse_warning_flag",
    "render_config_toml",
]
