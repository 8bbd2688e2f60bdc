"""
logger_settings.py
------------------
Centralized configuration for the logging layer.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict


# ===========================================================
# Formatting Constants
# ===========================================================
class RichText:
    MESSAGE_SIZE = 11
    HIGHLIGHT_SIZE = 13
    HIGHLIGHT_COLOR = "#FF214C"
    DEFAULT_COLOR = "white"


# ===========================================================
# Attribution
# ===========================================================
class Attribution:
    CALLER_COUNT = 2
    ARROW = "⇒"
    LABELS = ("F", "S")


# ===========================================================
# Diagnostics (internal console output)
# ===========================================================
class DiagnosticsConfig:
    """
    Controls which parts of the logging layer report on themselves.
    Used by DebugLogger; unrelated to PrefixedLogger output.
    """

    # Master Control
    ENABLE_LOGGING = True
    LOG_LEVEL = "WARN"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        "system": True,  # Runtime configuration and lifecycle
        "loading": True,  # Settings file loading
        "dispatch": True,  # Swallowed formatting / sink failures
        "overlay": True,  # In-game console overlay
    }


# ===========================================================
# Logger Settings
# ===========================================================
@dataclass
class LoggerSettings:
    """
    Process-owned switches for PrefixedLogger.

    ``use_logs`` gates every log call (both entry points). ``rich_mode``
    selects rich-text styling over plain output with caller attribution.
    """

    use_logs: bool = True
    rich_mode: bool = True
    default_color: Any = RichText.DEFAULT_COLOR
    highlight_color: Any = RichText.HIGHLIGHT_COLOR
    message_size: int = RichText.MESSAGE_SIZE
    highlight_size: int = RichText.HIGHLIGHT_SIZE
    exclusions: Dict[str, list] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerSettings":
        """Build settings from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
