import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .config import parse_args
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(26, 46, 40)
WINDOW_TEXT_COLOR = QColor(229, 231, 235)
BASE_COLOR = QColor(42, 64, 57)
ALT_BASE_COLOR = QColor(56, 84, 74)
TOOLTIP_BASE_COLOR = Qt.white
TOOLTIP_TEXT_COLOR = Qt.black
TEXT_COLOR = QColor(229, 231, 235)
BUTTON_COLOR = QColor(52, 211, 153)
BUTTON_TEXT_COLOR = Qt.white
BRIGHT_TEXT_COLOR = QColor(251, 191, 36)
HIGHLIGHT_COLOR = QColor(110, 231, 183)
HIGHLIGHTED_TEXT_COLOR = Qt.black

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_WINDOW_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark green theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.ToolTipBase, TOOLTIP_BASE_COLOR)
    palette.setColor(QPalette.ToolTipText, TOOLTIP_TEXT_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.BrightText, BRIGHT_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_WINDOW_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.info("starting, opponent delay %d ms, seed %s", config.opponent_delay_ms, config.seed)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.resize(480, 560)
    window.show()
    return app.exec()
