from PySide6.QtWidgets import QWidget, QGridLayout, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Signal, Slot

from ..game_logic import BOARD_SIZE, BoardSnapshot
from .square import SquareButton


class BoardWidget(QWidget):
    """
    status line over a 3x3 grid of squares
    """
    cell_clicked = Signal(int)  # emits cell index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self._accept_clicks = True      # toggle click handling
        self.status_label = QLabel("")
        self.status_label.setObjectName("status")
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        grid = QGridLayout()
        grid.setSpacing(0)
        self.squares = []
        for i in range(BOARD_SIZE * BOARD_SIZE):
            sq = SquareButton(i, parent=self)
            sq.square_clicked.connect(self._on_square_clicked)
            grid.addWidget(sq, i // BOARD_SIZE, i % BOARD_SIZE)  # row-major
            self.squares.append(sq)

        layout = QVBoxLayout(self)
        layout.addWidget(self.status_label)
        layout.addLayout(grid, 1)

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    @Slot(int)
    def _on_square_clicked(self, index):
        if not self._accept_clicks:
            return
        self.cell_clicked.emit(index)  # notify owner

    @Slot(object)
    def show_snapshot(self, snapshot: BoardSnapshot):
        """
        redraw every square + status from a snapshot
        """
        line = snapshot.winning_line or ()
        for i, sq in enumerate(self.squares):
            sq.set_value(snapshot.squares[i], highlighted=i in line)
        self.status_label.setText(snapshot.status)
