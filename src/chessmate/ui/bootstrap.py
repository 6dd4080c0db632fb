"""Start-up of the Qt application."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessmate.game.settings import GameSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Name, widget style and stylesheet for the whole application."""
    from chessmate.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chessmate")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: GameSettings | None = None,
) -> int:
    """Ask for player names, then create and run the main Qt window."""
    from PyQt6.QtWidgets import QApplication

    from chessmate.ui.dialogs.player_names_dialog import PlayerNamesDialog
    from chessmate.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    names = PlayerNamesDialog.ask()
    if names is None:
        _LOGGER.info("Player names dialog cancelled")
        return 0

    window = MainWindow(*names, settings=settings)
    window.show()

    return app.exec()
