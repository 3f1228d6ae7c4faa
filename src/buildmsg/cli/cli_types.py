# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : cli_types.py
#   file_relpath : src/buildmsg/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""Custom Click parameter types for the BuildMsg CLI.

Defines `EnumChoiceParam` (string → Enum member, case-insensitive) and
`FrameParam` (``FILE[:LINE[:NAME]]`` → `Frame`).
"""

from __future__ import annotations

from enum import Enum
from typing import (
    TYPE_CHECKING,
    Generic,
    Iterable,
    NoReturn,
    Protocol,
    TypeVar,
    cast,
)

import click

from buildmsg.core.backtrace import Frame

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        # Case-insensitive lookup by the enum's string value; '_' and '-' are equivalent
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key = str(value).lower().replace("_", "-")
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list["ClickCompletionItem"]:
        """Tab completion for Click.

        Bash: `eval "$(_BUILDMSG_COMPLETE=bash_source buildmsg)"`
        """
        from click.shell_completion import (
            CompletionItem as RuntimeCompletionItem,
        )

        prefix = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(val)
            for val in self.choices
            if val.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class FrameParam(ParamTypeBase):
    """A Click parameter type that parses ``FILE[:LINE[:NAME]]`` into a `Frame`."""

    name = "frame"

    def convert(
        self,
        value: str | Frame,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Frame:
        """Convert a frame spec into a `Frame`."""
        if isinstance(value, Frame):
            return value
        try:
            return Frame.parse(value)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param=param, ctx=ctx) from exc
