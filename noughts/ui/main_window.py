import logging

from ..game_logic import GameLogic, BoardSnapshot
from ..ui.board_widget import BoardWidget
from .. import config

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class GameWindow(QMainWindow):
    """
    main window, owns the game state and wires it to the board
    """
    def __init__(self, settings=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.settings = settings or config.Settings()
        self.game_logic = GameLogic(parent=self)
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self.board_widget.show_snapshot(self.game_logic.snapshot())
        self._update_message("player X turn", is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.settings.window_title)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel#status { color: #eee; font-size: 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        # clicks go to the state owner, state changes come back as snapshots
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.game_logic.board_changed.connect(self.board_widget.show_snapshot)
        self.game_logic.board_changed.connect(self._on_board_changed)

        self._create_bottom_controls()     # message + reset
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # message label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:     style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = f"color: {config.X_COLOR}; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # occupied cell or finished game: nothing happens
        self.game_logic.apply_move(index)

    @Slot(object)
    def _on_board_changed(self, snapshot: BoardSnapshot):
        if snapshot.winner:
            self._handle_game_over(f"player {snapshot.winner} wins!")
        elif snapshot.is_draw:
            self._handle_game_over("it's a draw!")
        else:
            nxt = 'X' if snapshot.x_is_next else 'O'
            self._update_message(f"player {nxt} turn", is_turn=True)

    def _handle_game_over(self, msg):
        # end game UI updates
        logger.debug("game over: %s", msg)
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)

    @Slot()
    def reset_game(self):
        # fresh board, X starts
        self.board_widget.set_accept_clicks(True)
        self.game_logic.reset_game()
