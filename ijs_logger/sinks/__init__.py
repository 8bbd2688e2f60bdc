"""
Sink exports.

Log destinations: terminal, in-memory history and the pygame overlay.
"""

from ijs_logger.sinks.base_sink import LogSink
from ijs_logger.sinks.console_sink import ConsoleSink
from ijs_logger.sinks.recording_sink import RecordingSink
from ijs_logger.sinks.overlay_sink import LogConsoleOverlay

__all__ = [
    'LogSink',
    'ConsoleSink',
    'RecordingSink',
    'LogConsoleOverlay',
]
