"""Board colour schemes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colours used by :class:`~chessmate.ui.board.board_scene.BoardScene`."""

    light_square: QColor
    dark_square: QColor
    selection: QColor  # overlay on the selected piece
    check: QColor  # overlay on a king in check
    label_on_light: QColor  # coordinate text drawn on a light square
    label_on_dark: QColor
    piece: QColor

    @classmethod
    def classic(cls) -> BoardTheme:
        """White and gray squares with a red selection frame colour."""
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(128, 128, 128),
            selection=QColor(220, 0, 0, 110),
            check=QColor(220, 0, 0, 160),
            label_on_light=QColor(96, 96, 96),
            label_on_dark=QColor(235, 235, 235),
            piece=QColor(10, 10, 10),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(232, 237, 249),
            dark_square=QColor(119, 153, 204),
            selection=QColor(250, 210, 40, 120),
            check=QColor(230, 40, 40, 150),
            label_on_light=QColor(119, 153, 204),
            label_on_dark=QColor(232, 237, 249),
            piece=QColor(15, 20, 30),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(238, 238, 210),
            dark_square=QColor(118, 150, 86),
            selection=QColor(250, 210, 40, 120),
            check=QColor(230, 40, 40, 150),
            label_on_light=QColor(118, 150, 86),
            label_on_dark=QColor(238, 238, 210),
            piece=QColor(15, 25, 10),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a ``--theme`` name; unknown names give Classic."""
        factories = {"Classic": cls.classic, "Blue": cls.blue, "Green": cls.green}
        return factories.get(name, cls.classic)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QDialog {
    background: #f4f4f4;
}

QLabel {
    color: #202020;
    font-size: 15px;
    font-weight: 600;
}

QListWidget {
    background: #ffffff;
    color: #303030;
    border: 1px solid #c8c8c8;
    font-size: 13px;
}

QStatusBar {
    color: #404040;
}
"""
