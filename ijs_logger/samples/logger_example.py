"""
logger_example.py
-----------------
Minimal component showing both entry points.

Inspector-style fields (enable_logs, log_color) are pushed into the owned
logger by on_validate(), the way an editor would after a field edit.
"""

from ijs_logger.logger.colors import YELLOW
from ijs_logger.logger.prefixed_logger import PrefixedLogger


class LoggerExample:
    """Owns a yellow-prefixed logger and logs once on awake()."""

    def __init__(self, enable_logs=False, log_color=YELLOW):
        self._logger = PrefixedLogger("LoggerExample", YELLOW)
        self.enable_logs = enable_logs
        self.log_color = log_color

    @property
    def logger(self):
        return self._logger

    def on_validate(self):
        self._logger.set_enabled(self.enable_logs)
        self._logger.set_color(self.log_color)

    def awake(self):
        PrefixedLogger.log("LoggerExample Log")
        self._logger.print_log("LoggerExample PrintLog")
