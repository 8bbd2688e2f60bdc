"""
overlay_sink.py
---------------
In-game console overlay. Records log lines like RecordingSink and draws the
most recent ones, with their rich-text styling, onto a pygame surface.
"""

import pygame

from ijs_logger.core.debug.debug_logger import DebugLogger
from ijs_logger.logger.log_types import LogType
from ijs_logger.sinks import markup
from ijs_logger.sinks.recording_sink import RecordingSink


class LogConsoleOverlay(RecordingSink):
    """Translucent log panel toggled with the backquote key."""

    TOGGLE_KEY = pygame.K_BACKQUOTE

    PANEL_COLOR = (20, 20, 20, 180)
    PADDING = 6
    LINE_HEIGHT = 18
    FONT_SIZE = 14

    SEVERITY_COLORS = {
        LogType.LOG: (230, 230, 230),
        LogType.WARNING: (255, 210, 60),
        LogType.ERROR: (255, 80, 80),
        LogType.ASSERT: (220, 120, 255),
        LogType.EXCEPTION: (255, 80, 80),
    }

    def __init__(self, max_lines=12, width=640, font_name="consolas", max_records=200):
        """
        Args:
            max_lines: Lines shown at once (newest at the bottom)
            width: Panel width in pixels
            font_name: System font used for all spans
            max_records: History kept in memory
        """
        super().__init__(max_records)
        self.max_lines = max_lines
        self.width = width
        self.font_name = font_name
        self.visible = True
        self._fonts = {}

        DebugLogger.init(f"LogConsoleOverlay ready ({max_lines} lines)", category="overlay")

    # ===========================================================
    # Input
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Toggle visibility on the toggle key.

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.KEYDOWN and event.key == self.TOGGLE_KEY:
            self.visible = not self.visible
            DebugLogger.state(f"Overlay {'shown' if self.visible else 'hidden'}", category="overlay")
            return True
        return False

    # ===========================================================
    # Rendering
    # ===========================================================

    def visible_records(self):
        """Newest ``max_lines`` records, oldest first."""
        records = list(self.records)
        return records[-self.max_lines:] if self.max_lines > 0 else []

    def draw(self, surface, position=(10, 10)) -> None:
        """
        Draw the panel and its lines.

        Args:
            surface: Target pygame surface
            position: Top-left corner of the panel
        """
        if not self.visible:
            return

        lines = self.visible_records()
        if not lines:
            return

        x0, y0 = position
        height = self.PADDING * 2 + self.LINE_HEIGHT * len(lines)
        panel = pygame.Surface((self.width, height), pygame.SRCALPHA)
        panel.fill(self.PANEL_COLOR)
        surface.blit(panel, (x0, y0))

        y = y0 + self.PADDING
        for record in lines:
            self._draw_line(surface, record, x0 + self.PADDING, y)
            y += self.LINE_HEIGHT

    def _draw_line(self, surface, record, x, y) -> None:
        default_color = self.SEVERITY_COLORS[record.log_type]
        for span in markup.parse(record.message):
            if not span.text:
                continue
            font = self._font(span.size or self.FONT_SIZE, span.bold, span.italic)
            text_surf = font.render(span.text, True, span.color or default_color)
            surface.blit(text_surf, (x, y))
            x += text_surf.get_width()

    def _font(self, size, bold, italic):
        """Cached SysFont per style."""
        key = (size, bold, italic)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(self.font_name, size, bold=bold, italic=italic)
        return self._fonts[key]
