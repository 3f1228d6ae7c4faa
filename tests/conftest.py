# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Pytest configuration for the BuildMsg test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `buildmsg.config.MutableMessengerConfig` (mutable), then
      `freeze()` into a `buildmsg.config.MessengerConfig` for the messenger.
    - Do **not** mutate a frozen `MessengerConfig`. If you need to tweak one,
      call `MessengerConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from buildmsg.config import MessengerConfig, MutableMessengerConfig, logging
from buildmsg.core import MemorySink, Messenger

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_buildmsg_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure BuildMsg's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    BUILDMSG_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the internal log level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> MessengerConfig:
    """Return a frozen `MessengerConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.
            The key ``flags`` (a sequence of ``-W`` flags) is applied after the others.

    Returns:
        MessengerConfig: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableMessengerConfig:
    """Return a mutable builder for scenarios that need staged edits.

    Args:
        **overrides (Any): Keyword overrides to apply to the mutable builder.

    Returns:
        MutableMessengerConfig: A builder ready to be frozen or further edited.
    """
    m = MutableMessengerConfig.from_defaults()
    flags: list[str] = list(overrides.pop("flags", []))
    for k, v in overrides.items():
        setattr(m, k, v)
    if flags:
        m.apply_warning_flags(flags)
    return m


def make_messenger(config: MessengerConfig | None = None) -> tuple[Messenger, MemorySink]:
    """Return a messenger wired to a fresh `MemorySink`."""
    sink = MemorySink()
    return Messenger(config, sink), sink
