import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, then columns, then diagonals
LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(squares) -> Optional[Tuple[int, int, int]]:
    """
    first line holding three equal marks, or None
    """
    for a, b, c in LINES:
        # empty cells never match
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return (a, b, c)
    return None


def calculate_winner(squares) -> Optional[str]:
    """
    winning mark ('X' or 'O') for a 9-cell grid, or None
    """
    line = winning_line(squares)
    return squares[line[0]] if line else None


def is_draw(squares) -> bool:
    """
    every cell filled and nobody won
    """
    return all(squares) and calculate_winner(squares) is None


def status_text(squares, x_is_next) -> str:
    winner = calculate_winner(squares)
    if winner:
        return f"Winner: {winner}"
    if is_draw(squares):
        return "Draw"
    return f"Next player: {'X' if x_is_next else 'O'}"


@dataclass(frozen=True)
class BoardSnapshot:
    """
    read-only view of the board handed to widgets
    """
    squares: Tuple[Optional[str], ...]
    x_is_next: bool
    winner: Optional[str]
    winning_line: Optional[Tuple[int, int, int]]
    is_draw: bool
    status: str

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.is_draw


class GameLogic(QObject):
    """
    tic-tac-toe rules and state

    owns the 9-cell grid and the turn flag; every accepted move
    is published through board_changed
    """
    board_changed = Signal(object)  # emits BoardSnapshot

    def __init__(self, parent=None):
        """
        empty grid, X moves first
        """
        super().__init__(parent)
        self._squares = [None] * CELL_COUNT
        self.x_is_next = True

    @property
    def squares(self):
        # copy, callers must go through apply_move
        return list(self._squares)

    @property
    def current_player(self) -> str:
        return 'X' if self.x_is_next else 'O'

    @property
    def winner(self) -> Optional[str]:
        return calculate_winner(self._squares)

    @property
    def is_draw(self) -> bool:
        return is_draw(self._squares)

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def move_count(self) -> int:
        return sum(1 for sq in self._squares if sq)

    def apply_move(self, index: int) -> str:
        """
        place the current mark at index, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"cell index out of range: {index}")
        if self.game_over:
            logger.debug("move at %d rejected: game is over", index)
            return "invalid"
        if self._squares[index]:
            logger.debug("move at %d rejected: cell holds %s",
                         index, self._squares[index])
            return "invalid"

        player = self.current_player
        self._squares[index] = player
        self.x_is_next = not self.x_is_next
        logger.info("player %s took cell %d", player, index)

        if self.winner:
            result = "win"
            logger.info("player %s wins", self.winner)
        elif self.is_draw:
            result = "draw"
            logger.info("game drawn")
        else:
            result = "continue"
        self.board_changed.emit(self.snapshot())
        return result

    def is_cell_empty(self, index: int) -> bool:
        """
        true if index valid and cell blank
        """
        if 0 <= index < CELL_COUNT:
            return self._squares[index] is None
        return False

    def status_text(self) -> str:
        return status_text(self._squares, self.x_is_next)

    def snapshot(self) -> BoardSnapshot:
        squares = tuple(self._squares)
        return BoardSnapshot(
            squares=squares,
            x_is_next=self.x_is_next,
            winner=calculate_winner(squares),
            winning_line=winning_line(squares),
            is_draw=is_draw(squares),
            status=status_text(squares, self.x_is_next),
        )

    def reset_game(self):
        """
        clear board, X to move
        """
        self._squares = [None] * CELL_COUNT
        self.x_is_next = True
        logger.info("new game")
        self.board_changed.emit(self.snapshot())
