"""
markup.py
---------
Parses the rich-text console markup produced in rich mode into styled spans.

Supported tags: <size=N>, <color=#RRGGBB>, <b>, <i> and their closing forms.
Unbalanced closing tags are ignored; anything else is plain text.
"""

import re
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ijs_logger.logger.colors import to_color


_TAG = re.compile(r"<(/?)(size|color|b|i)(?:=([^>]*))?>")


@dataclass(frozen=True)
class TextSpan:
    """A run of text sharing one style."""
    text: str
    color: Optional[Tuple[int, int, int]] = None
    size: Optional[int] = None
    bold: bool = False
    italic: bool = False


def _apply(style: TextSpan, name: str, value: Optional[str]) -> TextSpan:
    if name == "b":
        return replace(style, bold=True)
    if name == "i":
        return replace(style, italic=True)
    if name == "size":
        try:
            return replace(style, size=int(value))
        except (TypeError, ValueError):
            return style
    try:
        c = to_color(value)
    except (TypeError, ValueError):
        return style
    return replace(style, color=(c.r, c.g, c.b))


def parse(markup: str) -> List[TextSpan]:
    """Split markup into styled spans; empty runs are dropped."""
    spans = []
    stack = [(None, TextSpan(""))]
    pos = 0

    for match in _TAG.finditer(markup):
        if match.start() > pos:
            spans.append(replace(stack[-1][1], text=markup[pos:match.start()]))
        pos = match.end()

        closing, name, value = match.group(1), match.group(2), match.group(3)
        if closing:
            # Pop back to the matching open tag, if any
            for depth in range(len(stack) - 1, 0, -1):
                if stack[depth][0] == name:
                    del stack[depth:]
                    break
        else:
            stack.append((name, _apply(stack[-1][1], name, value)))

    if pos < len(markup):
        spans.append(replace(stack[-1][1], text=markup[pos:]))
    return spans


def strip(markup: str) -> str:
    """Plain text with all recognised tags removed."""
    return "".join(span.text for span in parse(markup))


__all__ = ["TextSpan", "parse", "strip"]

