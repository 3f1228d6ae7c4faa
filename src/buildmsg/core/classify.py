# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : classify.py
#   file_relpath : src/buildmsg/core/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Severity classification and visibility filtering.

Both functions are pure: they read the configuration and return a value.

Contract:
    Call `convert_severity` first. When it returns a different severity, the
    conversion itself decides that the message is shown and `is_severity_visible`
    must be skipped. Otherwise `is_severity_visible` decides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from buildmsg.core.severity import Severity

if TYPE_CHECKING:
    from buildmsg.config.model import MessengerConfig


def convert_severity(severity: Severity, config: MessengerConfig) -> Severity:
    """Escalate or demote a developer/deprecation severity according to config.

    Warnings become errors when the matching ``*_as_errors`` flag is set, errors
    become warnings when it is not. Every other severity is returned unchanged.
    Applying the function to its own result is a no-op.

    Args:
        severity (Severity): The severity requested by the caller.
        config (MessengerConfig): The run configuration.

    Returns:
        Severity: The effective severity.
    """
    match severity:
        case Severity.DEVELOPER_WARNING | Severity.DEVELOPER_ERROR:
            if config.dev_warnings_as_errors:
                return Severity.DEVELOPER_ERROR
            return Severity.DEVELOPER_WARNING
        case Severity.DEPRECATION_WARNING | Severity.DEPRECATION_ERROR:
            if config.deprecated_warnings_as_errors:
                return Severity.DEPRECATION_ERROR
            return Severity.DEPRECATION_WARNING
        case Severity.LOG | Severity.WARNING | Severity.FATAL_ERROR | Severity.INTERNAL_ERROR:
            return severity
        case _:
            assert_never(severity)


def is_severity_visible(severity: Severity, config: MessengerConfig) -> bool:
    """Return whether a message of this (unconverted) severity should be shown.

    Args:
        severity (Severity): The effective severity.
        config (MessengerConfig): The run configuration.

    Returns:
        bool: True if the message should be rendered and dispatched.
    """
    match severity:
        case Severity.DEPRECATION_ERROR:
            return config.deprecated_warnings_as_errors
        case Severity.DEPRECATION_WARNING:
            return not config.suppress_deprecated_warnings
        case Severity.DEVELOPER_ERROR:
            return config.dev_warnings_as_errors
        case Severity.DEVELOPER_WARNING:
            return not config.suppress_dev_warnings
        case Severity.LOG | Severity.WARNING | Severity.FATAL_ERROR | Severity.INTERNAL_ERROR:
            return True
        case _:
            assert_never(severity)
