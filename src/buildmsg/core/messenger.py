# buildmsg:header:start
#
#   project      : BuildMsg
#   file         : messenger.py
#   file_relpath : src/buildmsg/core/messenger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildmsg:header:end

"""The messenger: single entry point for issuing diagnostic messages.

Per message, `Messenger.issue_message`:

    1. converts the requested severity (`convert_severity`);
    2. if the severity changed, always shows the message ("forced");
       otherwise asks `is_severity_visible` and stops if it says no;
    3. renders the block (`render_message`) and hands it to the sink.

Each call runs to completion synchronously. The messenger keeps no state between
calls besides its collaborators; sink errors propagate to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildmsg.config.logging import get_logger
from buildmsg.config.model import MessengerConfig
from buildmsg.core.backtrace import EMPTY_BACKTRACE
from buildmsg.core.classify import convert_severity, is_severity_visible
from buildmsg.core.formatter import wrap_text
from buildmsg.core.render import render_message
from buildmsg.core.stack import NullStackCapture

if TYPE_CHECKING:
    from buildmsg.config.logging import BuildmsgLogger
    from buildmsg.core.backtrace import BacktraceLike
    from buildmsg.core.formatter import WrapFunc
    from buildmsg.core.render import RenderedMessage
    from buildmsg.core.severity import Severity
    from buildmsg.core.sink import DisplaySink
    from buildmsg.core.stack import StackCapture

logger: BuildmsgLogger = get_logger(__name__)


class Messenger:
    """Classify, filter, render and dispatch diagnostic messages.

    Args:
        config (MessengerConfig | None): Run configuration; defaults to
            `MessengerConfig.from_defaults()`. May be replaced between calls.
        sink (DisplaySink): Destination of rendered messages.
        stack_capture (StackCapture | None): Native stack capture for internal
            errors; defaults to `NullStackCapture`.
        wrap (WrapFunc): Formatter for message bodies.

    Example:
        ```python
        sink = MemorySink()
        messenger = Messenger(MessengerConfig(dev_warnings_as_errors=True), sink)
        messenger.issue_message(Severity.DEVELOPER_WARNING, "Policy not set")
        assert sink.error_state.occurred
        ```
    """

    config: MessengerConfig
    sink: DisplaySink
    stack_capture: StackCapture
    wrap: WrapFunc

    def __init__(
        self,
        config: MessengerConfig | None,
        sink: DisplaySink,
        *,
        stack_capture: StackCapture | None = None,
        wrap: WrapFunc = wrap_text,
    ) -> None:
        self.config = config if config is not None else MessengerConfig.from_defaults()
        self.sink = sink
        self.stack_capture = stack_capture if stack_capture is not None else NullStackCapture()
        self.wrap = wrap

    def convert_message_type(self, severity: Severity) -> Severity:
        """Return the effective severity under the current configuration."""
        return convert_severity(severity, self.config)

    def is_message_type_visible(self, severity: Severity) -> bool:
        """Return whether an unconverted severity is shown under the current configuration."""
        return is_severity_visible(severity, self.config)

    def issue_message(
        self,
        severity: Severity,
        text: str,
        backtrace: BacktraceLike = EMPTY_BACKTRACE,
    ) -> RenderedMessage | None:
        """Issue a message, subject to conversion and visibility filtering.

        Args:
            severity (Severity): Severity requested by the caller.
            text (str): Message text.
            backtrace (BacktraceLike): Call context of the message.

        Returns:
            RenderedMessage | None: The dispatched message, or None if it was filtered out.
        """
        # Read the configuration once for the whole call.
        config = self.config
        effective = convert_severity(severity, config)
        if effective != severity:
            logger.debug("Converted %s message to %s", severity.value, effective.value)
        elif not is_severity_visible(effective, config):
            logger.debug("Suppressed %s message", effective.value)
            return None
        return self.display_message(effective, text, backtrace)

    def display_message(
        self,
        severity: Severity,
        text: str,
        backtrace: BacktraceLike = EMPTY_BACKTRACE,
    ) -> RenderedMessage:
        """Render and dispatch a message unconditionally.

        No conversion or filtering is applied; ``severity`` is used as given.

        Returns:
            RenderedMessage: The dispatched message.
        """
        rendered = render_message(
            severity,
            text,
            backtrace,
            stack_capture=self.stack_capture,
            wrap=self.wrap,
        )
        self.sink.accept(rendered.text, rendered.metadata)
        return rendered
