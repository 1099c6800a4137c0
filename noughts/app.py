import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette

from . import config
from .ui.main_window import GameWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, config.WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, config.WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, config.BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, config.ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, config.TEXT_COLOR)
    palette.setColor(QPalette.Button, config.BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, config.BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, config.HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, config.HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, config.DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, config.DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noughts", description="Two-player tic-tac-toe.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p


def configure_logging(settings: config.Settings, verbose: bool = False):
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    ns, qt_args = build_parser().parse_known_args(argv)
    settings = config.Settings.from_env()
    configure_logging(settings, ns.verbose)

    app = QApplication([sys.argv[0], *qt_args])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = GameWindow(settings)
    window.show()
    logger.info("window shown, starting event loop")
    return app.exec()
