# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : model.py
#   file_relpath : src/buildmsg/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Messenger configuration model and layering policy.

This module defines:
    - `MessengerConfig`: an immutable snapshot read by the messenger for the
      duration of one message evaluation.
    - `MutableMessengerConfig`: a mutable builder used while layering defaults,
      config files and command-line warning flags; it can be frozen into a
      `MessengerConfig` and thawed back for edits.

Layering:
    Each layer contributes explicit `DiagLevel` values for the ``dev`` and
    ``deprecated`` warning groups. Later layers win. `MutableMessengerConfig.freeze`
    resolves the levels into the four booleans:

    - ``deprecated``: IGNORE suppresses deprecation warnings, ERROR turns them into
      errors, WARN shows them as warnings.
    - ``dev``: IGNORE suppresses developer warnings, WARN shows them as warnings,
      ERROR turns them into errors. While ``deprecated`` has no explicit level, the
      ``dev`` level is applied to the deprecation pair too.

Out of scope:
    TOML I/O lives in `buildmsg.config.io`; ``-W`` parsing lives in
    `buildmsg.config.warning_flags`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from buildmsg.config.logging import get_logger
from buildmsg.config.warning_flags import (
    DEPRECATED_GROUP,
    DEV_GROUP,
    DiagLevel,
    apply_warning_flags,
)

if TYPE_CHECKING:
    from buildmsg.config.logging import BuildmsgLogger

logger: BuildmsgLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class MessengerConfig:
    """Immutable messenger configuration.

    Attributes:
        dev_warnings_as_errors (bool): Escalate developer warnings into developer errors.
        suppress_dev_warnings (bool): Hide developer warnings that were not converted.
        deprecated_warnings_as_errors (bool): Escalate deprecation warnings into errors.
        suppress_deprecated_warnings (bool): Hide deprecation warnings that were not
            converted.
        levels (tuple[tuple[str, DiagLevel], ...]): Explicit group levels this snapshot
            was resolved from (empty when built directly from booleans).
        config_files (tuple[str, ...]): Config sources that contributed to this snapshot.
    """

    dev_warnings_as_errors: bool = False
    suppress_dev_warnings: bool = False
    deprecated_warnings_as_errors: bool = False
    suppress_deprecated_warnings: bool = False
    levels: tuple[tuple[str, DiagLevel], ...] = ()
    config_files: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> MessengerConfig:
        """Return the default configuration: all warnings shown, none escalated."""
        return cls()

    def level_of(self, group: str) -> DiagLevel | None:
        """Return the explicit level of a warning group, or None if it was never set."""
        return dict(self.levels).get(group)

    def thaw(self) -> MutableMessengerConfig:
        """Return a mutable builder carrying this snapshot's values."""
        return MutableMessengerConfig(
            dev_warnings_as_errors=self.dev_warnings_as_errors,
            suppress_dev_warnings=self.suppress_dev_warnings,
            deprecated_warnings_as_errors=self.deprecated_warnings_as_errors,
            suppress_deprecated_warnings=self.suppress_deprecated_warnings,
            levels=dict(self.levels),
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableMessengerConfig:
    """Mutable builder for `MessengerConfig`.

    The four booleans are the base values; explicit group levels are resolved on top
    of them by `freeze`.
    """

    dev_warnings_as_errors: bool = False
    suppress_dev_warnings: bool = False
    deprecated_warnings_as_errors: bool = False
    suppress_deprecated_warnings: bool = False
    levels: dict[str, DiagLevel] = field(default_factory=lambda: {})
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableMessengerConfig:
        """Return a builder with the default configuration."""
        return cls()

    @classmethod
    def from_levels(
        cls,
        levels: Mapping[str, DiagLevel],
        *,
        source: str | None = None,
    ) -> MutableMessengerConfig:
        """Return a builder layer holding explicit group levels.

        Args:
            levels (Mapping[str, DiagLevel]): Group levels, e.g. ``{"dev": DiagLevel.ERROR}``.
            source (str | None): Optional identifier of the layer (e.g. a file path).

        Returns:
            MutableMessengerConfig: The new layer.
        """
        return cls(
            levels=dict(levels),
            config_files=[source] if source is not None else [],
        )

    def set_level(self, group: str, level: DiagLevel) -> MutableMessengerConfig:
        """Set the explicit level of a warning group and return self."""
        self.levels[group] = level
        return self

    def apply_warning_flags(self, flags: Iterable[str]) -> MutableMessengerConfig:
        """Apply ``-W`` flags in order on top of the current levels and return self.

        Raises:
            WarningFlagError: If a flag is malformed.
        """
        apply_warning_flags(self.levels, flags)
        return self

    def merge_with(self, other: MutableMessengerConfig) -> MutableMessengerConfig:
        """Layer another builder's explicit levels on top of this one and return self.

        Only explicit levels and config sources are merged; the other builder's base
        booleans are ignored.
        """
        self.levels.update(other.levels)
        self.config_files.extend(other.config_files)
        return self

    def freeze(self) -> MessengerConfig:
        """Resolve explicit levels into booleans and return an immutable snapshot."""
        dev_err = self.dev_warnings_as_errors
        dev_sup = self.suppress_dev_warnings
        dep_err = self.deprecated_warnings_as_errors
        dep_sup = self.suppress_deprecated_warnings

        deprecated = self.levels.get(DEPRECATED_GROUP)
        if deprecated is not None:
            dep_sup = deprecated == DiagLevel.IGNORE
            dep_err = deprecated == DiagLevel.ERROR

        dev = self.levels.get(DEV_GROUP)
        if dev is not None:
            follow = deprecated is None
            match dev:
                case DiagLevel.IGNORE:
                    dev_sup = True
                    if follow:
                        dep_sup = True
                case DiagLevel.WARN:
                    dev_err = False
                    dev_sup = False
                    if follow:
                        dep_err = False
                        dep_sup = False
                case DiagLevel.ERROR:
                    dev_err = True
                    dev_sup = False
                    if follow:
                        dep_err = True
                        dep_sup = False

        config = MessengerConfig(
            dev_warnings_as_errors=dev_err,
            suppress_dev_warnings=dev_sup,
            deprecated_warnings_as_errors=dep_err,
            suppress_deprecated_warnings=dep_sup,
            levels=tuple(sorted(self.levels.items())),
            config_files=tuple(self.config_files),
        )
        logger.debug("Resolved messenger config: %r", config)
        return config
