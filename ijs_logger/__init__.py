"""
ijs_logger
----------
Prefixed, colored console logging for pygame games, with caller attribution
in plain builds.

    from ijs_logger import PrefixedLogger, LogType

    logger = PrefixedLogger("Player", "yellow")
    logger.print_log("spawned with 3 lives")
    PrefixedLogger.log("build failed", LogType.ERROR, color="red")
"""

from ijs_logger.core.runtime.logger_settings import LoggerSettings
from ijs_logger.core.runtime.logger_runtime import (
    configure,
    get_runtime,
    reset_runtime,
    enable_logs,
    disable_logs,
)
from ijs_logger.core.services.config_manager import load_settings
from ijs_logger.logger.log_types import LogType, LogRecord, LoggedException
from ijs_logger.logger.caller_filter import StackFrame, ExclusionRules, CallerAttributionFilter
from ijs_logger.logger.prefixed_logger import PrefixedLogger
from ijs_logger.sinks import LogSink, ConsoleSink, RecordingSink, LogConsoleOverlay

__version__ = "1.0.0"

__all__ = [
    # Configuration
    'LoggerSettings',
    'configure',
    'get_runtime',
    'reset_runtime',
    'enable_logs',
    'disable_logs',
    'load_settings',
    # Logger
    'LogType',
    'LogRecord',
    'LoggedException',
    'StackFrame',
    'ExclusionRules',
    'CallerAttributionFilter',
    'PrefixedLogger',
    # Sinks
    'LogSink',
    'ConsoleSink',
    'RecordingSink',
    'LogConsoleOverlay',
]
