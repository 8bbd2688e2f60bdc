"""
formatting.py
-------------
Message formatting for the two output modes.

Rich mode wraps the message in console markup and highlights integers.
Plain mode appends the nearest caller frames for traceability.
"""

import re
from typing import Sequence

from ijs_logger.core.runtime.logger_settings import Attribution, RichText
from ijs_logger.logger.colors import color_to_hex


_WHITESPACE = re.compile(r"\s")
_INTEGER = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


# ===========================================================
# Rich Mode
# ===========================================================

def is_integer_token(token: str) -> bool:
    """True for a token that parses as a signed 32-bit integer."""
    if not _INTEGER.fullmatch(token):
        return False
    return INT32_MIN <= int(token) <= INT32_MAX


def highlight_numbers(message: str,
                      highlight_color=RichText.HIGHLIGHT_COLOR,
                      size: int = RichText.HIGHLIGHT_SIZE) -> str:
    """
    Wrap every integer token of the message in highlight markup.

    The message is split on each whitespace character (empty tokens are kept)
    and re-joined with single spaces.
    """
    code = color_to_hex(highlight_color)
    tokens = _WHITESPACE.split(message)
    for i, token in enumerate(tokens):
        if is_integer_token(token):
            tokens[i] = f"<size={size}><color=#{code}>{token} </color></size>"
    return " ".join(tokens)


def format_rich(message: str, color=None,
                highlight_color=RichText.HIGHLIGHT_COLOR,
                message_size: int = RichText.MESSAGE_SIZE,
                highlight_size: int = RichText.HIGHLIGHT_SIZE) -> str:
    """Style a whole message for the rich-text console."""
    text = highlight_numbers(message, highlight_color, highlight_size)
    return (f"<size={message_size}><i><b><color=#{color_to_hex(color)}>"
            f"{text}</color></b></i></size>")


# ===========================================================
# Plain Mode
# ===========================================================

def format_attribution(message: str, callers: Sequence) -> str:
    """
    Append caller segments, e.g. ' ⇒ F: Player.update, S: Game.run'.

    Callers without a resolved type or method are skipped; with nothing to
    show the message is returned unchanged.
    """
    segments = []
    for label, frame in zip(Attribution.LABELS, callers):
        if frame.is_resolved:
            segments.append(f"{label}: {frame.type_name}.{frame.method_name}")

    if not segments:
        return message
    return f"{message} {Attribution.ARROW} {', '.join(segments)}"
