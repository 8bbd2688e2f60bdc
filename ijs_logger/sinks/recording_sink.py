"""
recording_sink.py
-----------------
Sink that keeps the most recent records in memory.
"""

from collections import deque
from typing import List, Optional

from ijs_logger.logger.log_types import LogRecord, LogType
from ijs_logger.sinks.base_sink import LogSink


class RecordingSink(LogSink):
    """Bounded in-memory history of log records."""

    def __init__(self, max_records: Optional[int] = 500):
        """
        Args:
            max_records: Oldest records are dropped past this count (None = unbounded)
        """
        self.records = deque(maxlen=max_records)
        self.exceptions = deque(maxlen=max_records)

    # ===========================================================
    # Sink Operations
    # ===========================================================

    def log(self, message: str, context=None) -> None:
        self._record(message, LogType.LOG, context)

    def log_warning(self, message: str, context=None) -> None:
        self._record(message, LogType.WARNING, context)

    def log_error(self, message: str, context=None) -> None:
        self._record(message, LogType.ERROR, context)

    def log_assertion(self, message: str, context=None) -> None:
        self._record(message, LogType.ASSERT, context)

    def log_exception(self, exception: BaseException, context=None) -> None:
        self.exceptions.append(exception)
        self._record(str(exception), LogType.EXCEPTION, context)

    def _record(self, message: str, log_type: LogType, context) -> None:
        self.records.append(LogRecord(message, log_type, context=context))

    # ===========================================================
    # Queries
    # ===========================================================

    def messages(self, log_type: Optional[LogType] = None) -> List[str]:
        """Recorded message texts, optionally for one log type only."""
        return [r.message for r in self.records
                if log_type is None or r.log_type is log_type]

    def clear(self) -> None:
        self.records.clear()
        self.exceptions.clear()

    def __len__(self) -> int:
        return len(self.records)
