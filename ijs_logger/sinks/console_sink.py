"""
console_sink.py
---------------
Terminal sink. Renders rich-text markup as ANSI styles when the stream is
a TTY and strips it otherwise.
"""

import sys
from typing import Optional

from ijs_logger.logger.log_types import LogType
from ijs_logger.sinks import markup
from ijs_logger.sinks.base_sink import LogSink, context_name


# ===========================================================
# ANSI Styles
# ===========================================================

class Ansi:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    ITALIC = "\033[3m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"


TAGS = {
    LogType.LOG: ("LOG", Ansi.WHITE),
    LogType.WARNING: ("WARNING", Ansi.YELLOW),
    LogType.ERROR: ("ERROR", Ansi.RED),
    LogType.ASSERT: ("ASSERT", Ansi.MAGENTA),
    LogType.EXCEPTION: ("EXCEPTION", Ansi.RED),
}


def span_to_ansi(span: markup.TextSpan) -> str:
    """One span as ANSI escape codes; spans reset their own style."""
    codes = ""
    if span.bold:
        codes += Ansi.BOLD
    if span.italic:
        codes += Ansi.ITALIC
    if span.color is not None:
        codes += "\033[38;2;{};{};{}m".format(*span.color)
    if not codes:
        return span.text
    return f"{codes}{span.text}{Ansi.RESET}"


def render_ansi(text: str) -> str:
    return "".join(span_to_ansi(span) for span in markup.parse(text))


# ===========================================================
# Console Sink
# ===========================================================

class ConsoleSink(LogSink):
    """Writes one line per record to a text stream."""

    def __init__(self, stream=None, use_color: Optional[bool] = None):
        """
        Args:
            stream: Output stream (defaults to sys.stdout at write time)
            use_color: Force ANSI on/off; None = only when the stream is a TTY
        """
        self._stream = stream
        self._use_color = use_color

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def use_color(self) -> bool:
        if self._use_color is not None:
            return self._use_color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    # ===========================================================
    # Sink Operations
    # ===========================================================

    def log(self, message: str, context=None) -> None:
        self._emit(LogType.LOG, message, context)

    def log_warning(self, message: str, context=None) -> None:
        self._emit(LogType.WARNING, message, context)

    def log_error(self, message: str, context=None) -> None:
        self._emit(LogType.ERROR, message, context)

    def log_assertion(self, message: str, context=None) -> None:
        self._emit(LogType.ASSERT, message, context)

    def log_exception(self, exception: BaseException, context=None) -> None:
        self._emit(LogType.EXCEPTION, f"{type(exception).__name__}: {exception}", context)

    # ===========================================================
    # Rendering
    # ===========================================================

    def format_line(self, log_type: LogType, message: str, context=None) -> str:
        """Build the output line for a record."""
        label, tag_color = TAGS[log_type]
        owner = context_name(context)
        owner_str = f"[{owner}] " if owner else ""

        if self.use_color():
            return f"{tag_color}[{label}]{Ansi.RESET} {owner_str}{render_ansi(message)}"
        return f"[{label}] {owner_str}{markup.strip(message)}"

    def _emit(self, log_type: LogType, message: str, context) -> None:
        stream = self.stream
        stream.write(self.format_line(log_type, message, context) + "\n")
        stream.flush()
