"""
logger_runtime.py
-----------------
Process-owned logger state: settings, active sink and caller filter.

Configured once at startup with configure(); PrefixedLogger reads it on
every call through get_runtime().
"""

from ijs_logger.core.debug.debug_logger import DebugLogger
from ijs_logger.core.runtime.logger_settings import LoggerSettings
from ijs_logger.logger.caller_filter import CallerAttributionFilter, ExclusionRules
from ijs_logger.sinks.console_sink import ConsoleSink


# ===========================================================
# Logger Runtime
# ===========================================================

class LoggerRuntime:
    """Container for the settings, sink and filter used by PrefixedLogger."""

    __slots__ = ("settings", "sink", "caller_filter")

    def __init__(self, settings=None, sink=None, caller_filter=None):
        """
        Args:
            settings: LoggerSettings (defaults when None)
            sink: LogSink (ConsoleSink when None)
            caller_filter: CallerAttributionFilter (built from settings when None)
        """
        self.settings = settings if settings is not None else LoggerSettings()

        if sink is None:
            sink = ConsoleSink()
        self.sink = sink

        if caller_filter is None:
            caller_filter = CallerAttributionFilter(
                ExclusionRules.from_config(self.settings.exclusions)
            )
        self.caller_filter = caller_filter


# ===========================================================
# Singleton Access
# ===========================================================

_RUNTIME = None


def configure(settings=None, sink=None, caller_filter=None) -> LoggerRuntime:
    """Install a new runtime. Call once at startup."""
    global _RUNTIME
    _RUNTIME = LoggerRuntime(settings, sink, caller_filter)
    DebugLogger.system(
        f"Logger configured (use_logs={_RUNTIME.settings.use_logs}, "
        f"rich_mode={_RUNTIME.settings.rich_mode}, sink={type(_RUNTIME.sink).__name__})"
    )
    return _RUNTIME


def get_runtime() -> LoggerRuntime:
    """Get or create the runtime singleton."""
    global _RUNTIME
    if _RUNTIME is None:
        _RUNTIME = LoggerRuntime()
    return _RUNTIME


def reset_runtime() -> None:
    """Drop the singleton. The next call recreates defaults."""
    global _RUNTIME
    _RUNTIME = None


def enable_logs() -> None:
    """Turn every log call on."""
    get_runtime().settings.use_logs = True
    DebugLogger.state("Logs enabled")


def disable_logs() -> None:
    """Turn every log call into a no-op."""
    get_runtime().settings.use_logs = False
    DebugLogger.state("Logs disabled")
