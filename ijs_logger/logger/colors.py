"""
colors.py
---------
Color coercion and rich-text hex codes.

Accepts anything pygame.Color accepts (names, "#RRGGBB", 0-255 tuples) and
normalized float tuples in the 0.0-1.0 range.
"""

import pygame

from ijs_logger.core.runtime.logger_settings import RichText


WHITE = pygame.Color(255, 255, 255)
BLACK = pygame.Color(0, 0, 0)
RED = pygame.Color(255, 0, 0)
YELLOW = pygame.Color(255, 235, 4)
ACCENT = pygame.Color(RichText.HIGHLIGHT_COLOR)


def _channel(value: float) -> int:
    """Normalized float channel to byte, truncating like a byte cast."""
    return max(0, min(255, int(value * 255.0)))


def to_color(value=None) -> pygame.Color:
    """
    Coerce a color-like value into a new pygame.Color.

    Args:
        value: None (default color), pygame.Color, name or hex string,
               0-255 int tuple, or 0.0-1.0 float tuple

    Returns:
        pygame.Color
    """
    if value is None:
        return pygame.Color(RichText.DEFAULT_COLOR)

    if isinstance(value, pygame.Color):
        return pygame.Color(value.r, value.g, value.b, value.a)

    if isinstance(value, (tuple, list)):
        if any(isinstance(v, float) for v in value):
            return pygame.Color(*(_channel(v) for v in value))
        return pygame.Color(*value)

    return pygame.Color(value)


def color_to_hex(color) -> str:
    """Return the two-digit-per-channel RGB code, e.g. 'FF214C'. Alpha is dropped."""
    c = to_color(color)
    return f"{c.r:02X}{c.g:02X}{c.b:02X}"
