"""
prefixed_logger.py
------------------
Logging facade with per-instance prefix, color and enable toggle.

Responsibilities
----------------
- Instance entry point (print_log): gated by the handle's enabled flag,
  prefixes the message and forwards to the static entry point.
- Static entry point (log): formats in rich or plain mode and writes to the
  configured sink. It has no per-instance gate.
- Never let a formatting, filtering or sink failure reach the caller.
"""

import sys

from ijs_logger.core.debug.debug_logger import DebugLogger
from ijs_logger.core.runtime.logger_runtime import get_runtime
from ijs_logger.logger.colors import to_color
from ijs_logger.logger.formatting import format_attribution, format_rich
from ijs_logger.logger.log_types import LogRecord, LogType, LoggedException


class PrefixedLogger:
    """Per-owner logger handle. Intended for single-threaded main-loop code."""

    def __init__(self, prefix: str = "", color=None, enabled: bool = True):
        """
        Args:
            prefix: Text placed before every message, followed by '::'
            color: Any value accepted by to_color(); None follows the
                   configured default color
            enabled: Initial state of the enable toggle
        """
        self._prefix = prefix
        self._color = color
        self._enabled = enabled

    # ===========================================================
    # State
    # ===========================================================

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def color(self):
        if self._color is None:
            return to_color(get_runtime().settings.default_color)
        return to_color(self._color)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    def set_color(self, color) -> None:
        """Store the color as given; it is coerced when a message is logged."""
        self._color = color

    # ===========================================================
    # Instance Entry Point
    # ===========================================================

    def print_log(self, message: str, log_type: LogType = LogType.LOG, context=None) -> None:
        """
        Log through this handle.

        Args:
            message: Text to log
            log_type: Severity
            context: Optional owning object shown alongside the line
        """
        if not self._enabled or not get_runtime().settings.use_logs:
            return
        try:
            message = f"{self._prefix}:: {message}"
        except Exception as e:
            DebugLogger.warn(f"Dropped log message: {type(e).__name__}: {e}", category="dispatch")
            return
        PrefixedLogger.log(message, log_type, context, self._color)

    # ===========================================================
    # Static Entry Point
    # ===========================================================

    @staticmethod
    def log(message: str, log_type: LogType = LogType.LOG, context=None, color=None) -> None:
        """
        Format and dispatch a message regardless of any handle's toggle.

        Args:
            message: Text to log
            log_type: Severity (ignored in plain mode, which always uses log)
            context: Optional owning object
            color: Message color; None means the configured default
        """
        runtime = get_runtime()
        if not runtime.settings.use_logs:
            return

        try:
            if color is None:
                color = runtime.settings.default_color
            record = LogRecord(str(message), log_type, to_color(color), context)
            if runtime.settings.rich_mode:
                PrefixedLogger._dispatch_rich(record, runtime)
            else:
                caller = sys._getframe(1)
                while PrefixedLogger._is_print_log_frame(caller):
                    caller = caller.f_back
                PrefixedLogger._dispatch_plain(record, runtime, caller)
        except Exception as e:
            DebugLogger.warn(f"Dropped log message: {type(e).__name__}: {e}", category="dispatch")

    # ===========================================================
    # Dispatch
    # ===========================================================

    @staticmethod
    def _is_print_log_frame(frame) -> bool:
        """True for print_log of this class or of a subclass override."""
        if frame is None or frame.f_code.co_name != "print_log":
            return False
        return isinstance(frame.f_locals.get("self"), PrefixedLogger)

    @staticmethod
    def _dispatch_rich(record: LogRecord, runtime) -> None:
        """Styled message to the sink operation matching the log type."""
        settings = runtime.settings
        text = format_rich(
            record.message,
            record.color,
            settings.highlight_color,
            settings.message_size,
            settings.highlight_size,
        )

        if record.log_type is LogType.EXCEPTION:
            runtime.sink.log_exception(LoggedException(text), record.context)
        else:
            runtime.sink.write(record.log_type, text, record.context)

    @staticmethod
    def _dispatch_plain(record: LogRecord, runtime, caller_frame) -> None:
        """Message plus caller attribution, always at the informational level."""
        caller_filter = runtime.caller_filter
        callers = caller_filter.nearest_callers(caller_filter.walk(caller_frame))
        runtime.sink.log(format_attribution(record.message, callers), record.context)
