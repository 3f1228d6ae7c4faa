# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : io.py
#   file_relpath : src/buildmsg/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Load and render messenger configuration as TOML.

Sources:
    - ``buildmsg.toml``: settings live at the document root.
    - ``pyproject.toml``: settings live under ``[tool.buildmsg]``.

Shape:
    ```toml
    [warnings]
    dev = "warn"          # "ignore" | "warn" | "error"
    deprecated = "error"
    ```

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buildmsg.config.logging import get_logger
from buildmsg.config.model import MutableMessengerConfig
from buildmsg.config.warning_flags import DEPRECATED_GROUP, DEV_GROUP, DiagLevel

if TYPE_CHECKING:
    from buildmsg.config.logging import BuildmsgLogger
    from buildmsg.config.model import MessengerConfig

logger: BuildmsgLogger = get_logger(__name__)

TomlTable = dict[str, Any]

CONFIG_FILE_NAME: Final[str] = "buildmsg.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "buildmsg")
SECTION_WARNINGS: Final[str] = "warnings"
KNOWN_GROUPS: Final[tuple[str, ...]] = (DEV_GROUP, DEPRECATED_GROUP)


class ConfigFileError(ValueError):
    """Raised when a config file cannot be read, parsed or validated."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Cannot read config file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigFileError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_settings(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the BuildMsg settings table of a parsed document.

    ``pyproject.toml`` documents are looked up under ``[tool.buildmsg]``; any other
    document is taken as a whole. Returns None when a ``pyproject.toml`` has no
    BuildMsg section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for key in PYPROJECT_SECTION:
        if not isinstance(table, dict) or key not in table:
            return None
        table = cast("TomlTable", table)[key]
    return cast("TomlTable", table) if isinstance(table, dict) else None


def levels_from_settings(settings: TomlTable, path: Path) -> dict[str, DiagLevel]:
    """Validate the ``[warnings]`` table and return its group levels.

    Raises:
        ConfigFileError: If the table or one of its values is invalid.
    """
    warnings_any: Any = settings.get(SECTION_WARNINGS, {})
    if not isinstance(warnings_any, dict):
        raise ConfigFileError(f"{path}: [{SECTION_WARNINGS}] must be a table")
    warnings_table = cast("TomlTable", warnings_any)

    levels: dict[str, DiagLevel] = {}
    for group, value in warnings_table.items():
        if group not in KNOWN_GROUPS:
            logger.warning("%s: ignoring unknown warning group %r", path, group)
            continue
        if not isinstance(value, str):
            raise ConfigFileError(f"{path}: [{SECTION_WARNINGS}].{group} must be a string")
        try:
            levels[group] = DiagLevel.from_key(value)
        except ValueError as e:
            raise ConfigFileError(f"{path}: [{SECTION_WARNINGS}].{group}: {e}") from e
    return levels


def load_config_file(path: Path) -> MutableMessengerConfig | None:
    """Load one config file into a builder layer.

    Args:
        path (Path): ``buildmsg.toml``, ``pyproject.toml`` or any TOML file with the
            BuildMsg layout at its root.

    Returns:
        MutableMessengerConfig | None: The layer, or None for a ``pyproject.toml``
        without a ``[tool.buildmsg]`` section.

    Raises:
        ConfigFileError: If the file cannot be read, parsed or validated.
    """
    data: TomlTable = load_toml_dict(path)
    settings = extract_settings(data, path)
    if settings is None:
        logger.debug("No [tool.buildmsg] section in %s", path)
        return None
    levels = levels_from_settings(settings, path)
    logger.info("Loaded config from %s: %s", path, {k: v.key for k, v in levels.items()})
    return MutableMessengerConfig.from_levels(levels, source=str(path))


def discover_config_file(directory: Path) -> Path | None:
    """Return the config file to use in ``directory``, if any.

    ``buildmsg.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only counts
    when it has a ``[tool.buildmsg]`` section.
    """
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    candidate = directory / PYPROJECT_FILE_NAME
    if candidate.is_file():
        try:
            if extract_settings(load_toml_dict(candidate), candidate) is not None:
                return candidate
        except ConfigFileError as e:
            logger.debug("Skipping %s during discovery: %s", candidate, e)
    return None


def load_merged_config(
    *,
    directory: Path | None = None,
    config_files: list[Path] | None = None,
    no_config: bool = False,
    warning_flags: list[str] | None = None,
) -> MessengerConfig:
    """Resolve the messenger configuration from all layers.

    Precedence (lowest to highest): defaults, discovered config file, explicit
    config files (in order), warning flags (in order).

    Args:
        directory (Path | None): Directory to discover a config file in (defaults to CWD).
        config_files (list[Path] | None): Explicit config files.
        no_config (bool): Skip discovery in ``directory``.
        warning_flags (list[str] | None): ``-W`` flags.

    Returns:
        MessengerConfig: The resolved, immutable configuration.

    Raises:
        ConfigFileError: If a config file is invalid.
        WarningFlagError: If a warning flag is malformed.
    """
    builder = MutableMessengerConfig.from_defaults()

    if not no_config:
        found = discover_config_file(directory or Path.cwd())
        if found is not None:
            layer = load_config_file(found)
            if layer is not None:
                builder.merge_with(layer)

    for path in config_files or []:
        layer = load_config_file(path)
        if layer is not None:
            builder.merge_with(layer)

    if warning_flags:
        builder.apply_warning_flags(warning_flags)

    return builder.freeze()


def render_config_toml(config: MessengerConfig) -> str:
    """Render a resolved configuration as a TOML document.

    The ``[warnings]`` table lists the explicit group levels; ``[effective]`` lists
    the four resolved booleans.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if config.config_files:
        doc.add(tomlkit.comment("Sources: " + ", ".join(config.config_files)))

    warnings_table = tomlkit.table()
    for group, level in config.levels:
        warnings_table.add(group, level.key)
    doc.add(SECTION_WARNINGS, warnings_table)

    effective = tomlkit.table()
    effective.add("dev_warnings_as_errors", config.dev_warnings_as_errors)
    effective.add("suppress_dev_warnings", config.suppress_dev_warnings)
    effective.add("deprecated_warnings_as_errors", config.deprecated_warnings_as_errors)
    effective.add("suppress_deprecated_warnings", config.suppress_deprecated_warnings)
    doc.add("effective", effective)

    return tomlkit.dumps(doc)
