from noughts.game_logic import GameLogic
from noughts.ui.board_widget import BoardWidget
from noughts.ui.main_window import GameWindow
from noughts.ui.square import SquareButton


def click(window, index):
    window.board_widget.squares[index].click()


def texts(board):
    return [sq.text() for sq in board.squares]


def test_square_emits_its_index(qapp):
    sq = SquareButton(7)
    got = []
    sq.square_clicked.connect(got.append)
    sq.click()
    assert got == [7]


def test_board_has_nine_squares_in_order(qapp):
    board = BoardWidget()
    assert [sq.index for sq in board.squares] == list(range(9))


def test_board_ignores_clicks_when_disabled(qapp):
    board = BoardWidget()
    got = []
    board.cell_clicked.connect(got.append)
    board.squares[4].click()
    board.set_accept_clicks(False)
    board.squares[5].click()
    assert got == [4]


def test_board_shows_snapshot(qapp):
    board = BoardWidget()
    game = GameLogic()
    for i in (0, 3, 1, 4, 2):
        game.apply_move(i)
    board.show_snapshot(game.snapshot())
    assert texts(board)[:6] == ["X", "X", "X", "O", "O", ""]
    assert [sq.highlighted for sq in board.squares[:4]] == [True, True, True, False]
    assert board.status_label.text() == "Winner: X"


def test_window_starts_empty(qapp):
    window = GameWindow()
    assert texts(window.board_widget) == [""] * 9
    assert window.board_widget.status_label.text() == "Next player: X"


def test_click_places_mark_and_updates_status(qapp):
    window = GameWindow()
    click(window, 4)
    assert window.board_widget.squares[4].text() == "X"
    assert window.board_widget.status_label.text() == "Next player: O"
    assert window.message_label.text() == "player O turn"


def test_click_on_taken_square_does_nothing(qapp):
    window = GameWindow()
    click(window, 0)
    click(window, 0)
    assert window.game_logic.squares[0] == "X"
    assert window.game_logic.current_player == "O"
    assert window.board_widget.status_label.text() == "Next player: O"


def test_win_locks_board(qapp):
    window = GameWindow()
    for i in (0, 1, 3, 4, 6):
        click(window, i)
    assert window.board_widget.status_label.text() == "Winner: X"
    assert window.message_label.text() == "player X wins!"
    assert not window.board_widget.accepts_clicks()
    click(window, 8)
    assert window.board_widget.squares[8].text() == ""


def test_draw_message(qapp):
    window = GameWindow()
    for i in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        click(window, i)
    assert window.board_widget.status_label.text() == "Draw"
    assert window.message_label.text() == "it's a draw!"


def test_new_game_clears_board(qapp):
    window = GameWindow()
    for i in (0, 3, 1, 4, 2):
        click(window, i)
    window.new_game_action.trigger()
    assert texts(window.board_widget) == [""] * 9
    assert window.board_widget.accepts_clicks()
    assert window.board_widget.status_label.text() == "Next player: X"
    click(window, 8)
    assert window.board_widget.squares[8].text() == "X"


def test_reset_button(qapp):
    window = GameWindow()
    click(window, 0)
    window.reset_button.click()
    assert window.game_logic.squares == [None] * 9
