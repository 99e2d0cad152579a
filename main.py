import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.game_logic import GameState, DEFAULT_BOARD_SIZE
from tictactoe.ui.main_window import TicTacToeWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

DARK_GRAY = QColor(53, 53, 53)
DARKER_GRAY = QColor(35, 35, 35)
ACCENT = QColor(42, 130, 218)
MUTED = QColor(127, 127, 127)

# role -> color for the active/inactive groups
PALETTE_ROLES = {
    QPalette.Window: DARK_GRAY,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARKER_GRAY,
    QPalette.AlternateBase: DARK_GRAY,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

# greyed out when a widget is disabled
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme used by the board colors.
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv):
    """
    our options; anything unknown is left for QApplication
    """
    parser = argparse.ArgumentParser(description="N x N tic-tac-toe with move history")
    parser.add_argument("--size", default=str(DEFAULT_BOARD_SIZE),
                        help="starting board size, integer > 2 (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", help="log every move and ignored input")
    return parser.parse_known_args(argv)

def main(argv=None):
    argv = sys.argv if argv is None else argv
    args, qt_args = parse_args(argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(argv[:1] + qt_args)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    game_state = GameState(args.size)
    logger.info("starting %dx%d game", game_state.board_size, game_state.board_size)
    window = TicTacToeWindow(game_state)
    window.show()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
