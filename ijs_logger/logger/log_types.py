"""
log_types.py
------------
Severity levels and the transient record built for each log call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LogType(Enum):
    """Severity of a log call. Values match the sink operation names."""
    LOG = "log"
    WARNING = "log_warning"
    ERROR = "log_error"
    ASSERT = "log_assertion"
    EXCEPTION = "log_exception"


class LoggedException(Exception):
    """Synthetic exception wrapped around an EXCEPTION-level message."""
    pass


@dataclass(frozen=True)
class LogRecord:
    """One log call. Created per call and discarded after dispatch."""
    message: str
    log_type: LogType = LogType.LOG
    color: Optional[Any] = None
    context: Optional[Any] = None
