from PySide6.QtWidgets import QPushButton, QSizePolicy
from PySide6.QtCore import QSize, Signal, Slot
from PySide6.QtGui import QFont

from .. import config


class SquareButton(QPushButton):
    """
    one clickable cell, shows its mark
    """
    square_clicked = Signal(int)  # emits own index

    def __init__(self, index, parent=None):
        super().__init__("", parent)
        self.index = index
        self._highlighted = False
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(config.SQUARE_MIN_SIZE, config.SQUARE_MIN_SIZE))
        f = QFont(); f.setPointSize(config.SQUARE_FONT_SIZE); f.setBold(True)
        self.setFont(f)
        self.clicked.connect(self._on_clicked)
        self._apply_style(None)

    @Slot()
    def _on_clicked(self):
        self.square_clicked.emit(self.index)

    @property
    def highlighted(self):
        return self._highlighted

    def set_value(self, value, highlighted=False):
        """
        show 'X', 'O' or nothing
        """
        self._highlighted = highlighted
        self.setText(value or "")
        self._apply_style(value)

    def _apply_style(self, value):
        # mark color + win background
        color = config.X_COLOR if value == 'X' else config.O_COLOR
        bg = config.WIN_BACKGROUND if self._highlighted else config.SQUARE_BACKGROUND
        self.setStyleSheet(
            f"QPushButton {{ background-color: {bg}; color: {color};"
            f" border: 2px solid {config.SQUARE_BORDER}; }}"
        )
