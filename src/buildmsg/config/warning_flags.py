# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : warning_flags.py
#   file_relpath : src/buildmsg/config/warning_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Parse ``-W`` warning flags into per-group diagnostic levels.

Supported forms (the leading ``-W`` is optional so values collected by Click's
``-W`` option can be passed as is):

    -W<name>            raise <name> to at least WARN
    -Wno-<name>         set <name> to IGNORE
    -Werror=<name>      set <name> to ERROR
    -Wno-error=<name>   lower <name> to at most WARN

Only the ``dev`` and ``deprecated`` groups affect the messenger configuration;
other names are recorded and otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from buildmsg.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

    from buildmsg.config.logging import BuildmsgLogger

logger: BuildmsgLogger = get_logger(__name__)

DEV_GROUP = "dev"
DEPRECATED_GROUP = "deprecated"


class DiagLevel(IntEnum):
    """Diagnostic level for a named warning group, ordered IGNORE < WARN < ERROR."""

    IGNORE = 0
    WARN = 1
    ERROR = 2

    @property
    def key(self) -> str:
        """Return the lowercase name used in TOML configuration files."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> DiagLevel:
        """Return the level for a TOML key such as ``"warn"``.

        Raises:
            ValueError: If ``key`` does not name a level.
        """
        try:
            return cls[key.strip().upper()]
        except KeyError:
            choices = ", ".join(repr(level.key) for level in cls)
            raise ValueError(f"Invalid diagnostic level {key!r}; expected one of {choices}") from None


class FlagAction(Enum):
    """What a warning flag does to the level of its group."""

    ENABLE = "enable"  # -W<name>
    DISABLE = "disable"  # -Wno-<name>
    ERROR = "error"  # -Werror=<name>
    NO_ERROR = "no-error"  # -Wno-error=<name>


class WarningFlagError(ValueError):
    """Raised when a warning flag is malformed."""


@dataclass(frozen=True)
class WarningFlag:
    """A parsed warning flag."""

    name: str
    action: FlagAction

    def apply(self, current: DiagLevel | None) -> DiagLevel:
        """Return the new level for this flag's group given its current level.

        An unset group is treated as WARN, its default visible state.
        """
        base = DiagLevel.WARN if current is None else current
        match self.action:
            case FlagAction.ENABLE:
                return max(base, DiagLevel.WARN)
            case FlagAction.DISABLE:
                return DiagLevel.IGNORE
            case FlagAction.ERROR:
                return DiagLevel.ERROR
            case FlagAction.NO_ERROR:
                return min(base, DiagLevel.WARN)


def parse_warning_flag(flag: str) -> WarningFlag:
    """Parse a single warning flag.

    Args:
        flag (str): The flag, with or without its leading ``-W``.

    Returns:
        WarningFlag: The group name and the action to apply.

    Raises:
        WarningFlagError: If no group name is given, or ``error`` is not followed by ``=``.
    """
    entry = flag[2:] if flag.startswith("-W") else flag

    found_no = False
    found_error = False
    if entry.startswith("no-"):
        found_no = True
        entry = entry[3:]
    if entry.startswith("error"):
        found_error = True
        entry = entry[5:]

    if not entry:
        raise WarningFlagError(f"No warning name provided in {flag!r}.")

    if found_error:
        if not entry.startswith("="):
            raise WarningFlagError(
                f"Invalid warning flag {flag!r}: expected '-Werror=<name>' or '-Wno-error=<name>'."
            )
        entry = entry[1:]
        if not entry:
            raise WarningFlagError(f"No warning name provided in {flag!r}.")

    if found_no and found_error:
        action = FlagAction.NO_ERROR
    elif found_error:
        action = FlagAction.ERROR
    elif found_no:
        action = FlagAction.DISABLE
    else:
        action = FlagAction.ENABLE

    return WarningFlag(name=entry, action=action)


def apply_warning_flags(
    levels: MutableMapping[str, DiagLevel],
    flags: Iterable[str],
) -> MutableMapping[str, DiagLevel]:
    """Apply warning flags, in order, to a mapping of group levels.

    Args:
        levels (MutableMapping[str, DiagLevel]): Levels to update in place.
        flags (Iterable[str]): Warning flags as given on the command line.

    Returns:
        MutableMapping[str, DiagLevel]: The updated ``levels`` mapping.

    Raises:
        WarningFlagError: If any flag is malformed.
    """
    for raw in flags:
        flag = parse_warning_flag(raw)
        new_level = flag.apply(levels.get(flag.name))
        if flag.name not in (DEV_GROUP, DEPRECATED_GROUP):
            logger.debug("Warning group %r is not used by the messenger", flag.name)
        logger.trace("Warning flag %r: %s -> %s", raw, flag.name, new_level.key)
        levels[flag.name] = new_level
    return levels
