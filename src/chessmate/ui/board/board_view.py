"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Keeps the whole board visible at any widget size.

    Signals (re-emitted from the scene):
        move_requested(Position, Position)
        selection_rejected(str)
    """

    move_requested = pyqtSignal(object, object)
    selection_rejected = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        self._scene.move_requested.connect(self.move_requested.emit)
        self._scene.selection_rejected.connect(self.selection_rejected.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def show_board(self, board: Board, side_to_move: Color, interactive: bool = True) -> None:
        """Redraw *board* and set whether clicks are accepted."""
        self._scene.set_board(board, side_to_move)
        self._scene.set_interactive(interactive)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
