"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.errors import MissingKingError
from chessmate.core.position import BOARD_SIZE, FILES, Position, iter_positions
from chessmate.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Moves are entered with two clicks: one on a piece of the side to move,
    one on the destination.

    Signals:
        move_requested(Position, Position): second click completed a move.
        selection_rejected(str): second click landed on the selected square.
    """

    move_requested = pyqtSignal(object, object)
    selection_rejected = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.classic()
        self._board: Board | None = None
        self._side_to_move = Color.WHITE

        # Interaction state
        self._selected: Position | None = None
        self._interactive = True
        self._show_coordinates = True
        self._highlight_check = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._selection_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board, side_to_move: Color) -> None:
        """Show *board* with *side_to_move* allowed to pick pieces."""
        self._board = board
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()
        self._refresh_check()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board is not None:
            self._sync_pieces()
            self._refresh_check()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_highlight_check(self, enabled: bool) -> None:
        self._highlight_check = enabled
        self._refresh_check()

    @property
    def selected_square(self) -> Position | None:
        return self._selected

    def handle_square_click(self, pos: Position) -> None:
        """Selection logic shared by mouse presses and tests."""
        if not self._interactive or self._board is None:
            return

        if self._selected is None:
            piece = self._board.get_piece(pos)
            if piece is not None and piece.color == self._side_to_move:
                self._select_square(pos)
            return

        if pos == self._selected:
            self.selection_rejected.emit("Please click on a different spot.")
            return

        from_pos = self._selected
        self._clear_selection()
        self.move_requested.emit(from_pos, pos)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for pos in iter_positions():
            is_light = (pos.row + pos.column) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(pos.column * t, pos.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

            coord_color = self._theme.label_on_light if is_light else self._theme.label_on_dark

            # Rank numbers (left edge)
            if pos.column == 0:
                txt = QGraphicsSimpleTextItem(str(BOARD_SIZE - pos.row))
                txt.setFont(font)
                txt.setBrush(QBrush(coord_color))
                txt.setPos(2, pos.row * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if pos.row == BOARD_SIZE - 1:
                txt = QGraphicsSimpleTextItem(FILES[pos.column])
                txt.setFont(font)
                txt.setBrush(QBrush(coord_color))
                txt.setPos(pos.column * t + t - 14, pos.row * t + t - 18)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for piece in self._board.pieces():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece))
            bounds = item.boundingRect()
            pos = piece.position
            item.setPos(
                pos.column * t + (t - bounds.width()) / 2,
                pos.row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[pos] = item

    def _refresh_check(self) -> None:
        """Highlight the king of the side to move when it is in check."""
        self._clear_items(self._check_items)
        if self._board is None or not self._highlight_check:
            return
        try:
            in_check = self._board.is_in_check(self._side_to_move)
        except MissingKingError:
            return
        if in_check:
            king_pos = self._board.king_position(self._side_to_move)
            rect = self._make_highlight(king_pos, self._theme.check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        pos = self._pos_to_square(event.scenePos())
        if pos is not None:
            self.handle_square_click(pos)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, pos: Position) -> None:
        self._clear_selection()
        self._selected = pos
        rect = self._make_highlight(pos, self._theme.selection)
        self._selection_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected = None
        self._clear_items(self._selection_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, point: QPointF) -> Position | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Position(row, col)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(pos.column * t, pos.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
