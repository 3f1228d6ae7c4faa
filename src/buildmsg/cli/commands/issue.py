# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : issue.py
#   file_relpath : src/buildmsg/cli/commands/issue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""BuildMsg `issue` command.

Issues one diagnostic message through the messenger using the configuration resolved
from the group options, and writes the rendered block to stderr.

Exit codes:
  * 0 when no error-class message was emitted (including filtered messages).
  * 1 when an error-class message was emitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildmsg.cli.cli_types import EnumChoiceParam, FrameParam
from buildmsg.cli.config_resolver import resolve_messenger_config
from buildmsg.cli_shared.exit_codes import ExitCode
from buildmsg.config.logging import get_logger
from buildmsg.core.backtrace import Backtrace
from buildmsg.core.messenger import Messenger
from buildmsg.core.severity import Severity
from buildmsg.core.sink import ConsoleSink, ErrorState
from buildmsg.core.stack import NullStackCapture, PythonStackCapture

if TYPE_CHECKING:
    from buildmsg.cli_shared.console_api import ConsoleLike
    from buildmsg.config.model import MessengerConfig
    from buildmsg.core.backtrace import Frame
    from buildmsg.core.stack import StackCapture

logger = get_logger(__name__)


@click.command(
    name="issue",
    help=(
        "Issue a diagnostic message of the given SEVERITY. "
        "TEXT is the message body; use '-' to read it from STDIN."
    ),
    epilog=(
        "Notes:\n"
        "  • Frames given with --at are innermost first.\n"
        "  • Developer and deprecation messages follow -W and the config file;\n"
        "    --force bypasses conversion and filtering."
    ),
)
@click.argument("severity", type=EnumChoiceParam(Severity))
@click.argument("text")
@click.option(
    "--at",
    "frames",
    multiple=True,
    type=FrameParam(),
    metavar="FILE[:LINE[:NAME]]",
    help="Add a call frame (repeatable, most recent call first).",
)
@click.option(
    "--relative-to",
    "relative_to",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Show absolute frame paths relative to this directory.",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Display the message as given, without conversion or filtering.",
)
@click.option(
    "--python-stack",
    "python_stack",
    is_flag=True,
    default=False,
    help="Append the Python call stack to internal errors.",
)
def issue_command(
    *,
    severity: Severity,
    text: str,
    frames: tuple[Frame, ...],
    relative_to: str | None,
    force: bool,
    python_stack: bool,
) -> None:
    """Issue a single diagnostic message.

    Args:
        severity (Severity): Requested severity.
        text (str): Message text, or '-' to read it from STDIN.
        frames (tuple[Frame, ...]): Call frames, most recent call first.
        relative_to (str | None): Base directory for frame paths.
        force (bool): Use `Messenger.display_message` instead of `issue_message`.
        python_stack (bool): Capture the Python stack for internal errors.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    config: MessengerConfig = resolve_messenger_config(ctx)

    if text == "-":
        text = click.get_text_stream("stdin").read()

    error_state = ErrorState()
    stack_capture: StackCapture = PythonStackCapture() if python_stack else NullStackCapture()
    messenger = Messenger(config, ConsoleSink(console, error_state), stack_capture=stack_capture)
    backtrace = Backtrace.from_frames(*frames, relative_to=relative_to)

    if force:
        messenger.display_message(severity, text, backtrace)
    elif messenger.issue_message(severity, text, backtrace) is None:
        logger.info("%s message suppressed by configuration", severity.value)

    if error_state.occurred:
        ctx.exit(ExitCode.FAILURE)

    # No explicit return needed for Click commands.
