"""
base_sink.py
------------
Interface for log destinations.

A sink exposes one write operation per severity. The logger only relies on
"accepts a string and an optional context reference".
"""

from abc import ABC, abstractmethod

from ijs_logger.logger.log_types import LogType


class LogSink(ABC):
    """Severity-keyed log destination."""

    @abstractmethod
    def log(self, message: str, context=None) -> None:
        ...

    @abstractmethod
    def log_warning(self, message: str, context=None) -> None:
        ...

    @abstractmethod
    def log_error(self, message: str, context=None) -> None:
        ...

    @abstractmethod
    def log_assertion(self, message: str, context=None) -> None:
        ...

    @abstractmethod
    def log_exception(self, exception: BaseException, context=None) -> None:
        ...

    def write(self, log_type: LogType, message: str, context=None) -> None:
        """Route to the operation named by ``log_type``."""
        if log_type is LogType.EXCEPTION:
            raise TypeError("EXCEPTION records are written with log_exception()")
        getattr(self, log_type.value)(message, context)


def context_name(context) -> str:
    """Display name of a context reference: its ``name`` or its type name."""
    if context is None:
        return ""
    name = getattr(context, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(context).__name__
