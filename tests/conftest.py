import os

# widgets need a platform plugin even without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def play(game, moves):
    """Apply moves in order and return the list of results."""
    return [game.apply_move(i) for i in moves]
