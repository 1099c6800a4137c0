"""Settings and look-and-feel constants for the game window.

Colors and sizes are plain module constants. The few values that may come
from the environment are collected in ``Settings``.
"""

import logging
import os
from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# PALETTE COLORS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
SQUARE_BACKGROUND = "#333"
SQUARE_BORDER = "#555"
WIN_BACKGROUND = "#2f5d2f"
SQUARE_MIN_SIZE = 64
SQUARE_FONT_SIZE = 28

DEFAULT_WINDOW_TITLE = "Tic-Tac-Toe"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Environment-dependent settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    window_title: str = DEFAULT_WINDOW_TITLE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from NOUGHTS_* environment variables."""
        level = os.getenv("NOUGHTS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {level}")
        return cls(
            log_level=level,
            window_title=os.getenv("NOUGHTS_WINDOW_TITLE", DEFAULT_WINDOW_TITLE),
        )
