"""Per-variant shape rules.

A shape rule decides whether a piece could travel between two squares.
Squares in between are never inspected: sliding pieces move through
occupied squares.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, PieceType
from chessmate.core.position import BOARD_SIZE

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.core.piece import Piece

ShapeRule = Callable[["Board", "Piece", int, int, int, int], bool]

PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


def _is_diagonal(dr: int, dc: int) -> bool:
    return abs(dr) == abs(dc) and dr != 0


def _is_straight(dr: int, dc: int) -> bool:
    return (dr == 0) != (dc == 0)


def _bishop(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    return _is_diagonal(nrow - row, ncol - col)


def _rook(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    return _is_straight(nrow - row, ncol - col)


def _queen(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    dr, dc = nrow - row, ncol - col
    return _is_diagonal(dr, dc) or _is_straight(dr, dc)


def _knight(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    return (abs(nrow - row), abs(ncol - col)) in ((2, 1), (1, 2))


def _king(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    return abs(nrow - row) <= 1 and abs(ncol - col) <= 1


def _pawn(board: Board, piece: Piece, row: int, col: int, nrow: int, ncol: int) -> bool:
    direction = PAWN_DIRECTION[piece.color]
    dr, dc = nrow - row, ncol - col
    target = board.piece_at(nrow, ncol)

    # Forward pushes
    if dc == 0:
        if dr == direction:
            return target is None
        if dr == 2 * direction and row == PAWN_START_ROW[piece.color]:
            return target is None
        return False

    # Diagonal capture
    if abs(dc) == 1 and dr == direction:
        return target is not None and target.color != piece.color
    return False


_SHAPE_RULES: dict[PieceType, ShapeRule] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


def validate_move(
    board: Board,
    piece: Piece,
    current_row: int,
    current_col: int,
    new_row: int,
    new_col: int,
) -> bool:
    """Whether *piece* may move from the current square to the new one.

    Pure: reads the destination cell only. Off-board destinations and the
    null move are illegal for every variant.
    """
    if not (0 <= new_row < BOARD_SIZE and 0 <= new_col < BOARD_SIZE):
        return False
    if (new_row, new_col) == (current_row, current_col):
        return False
    rule = _SHAPE_RULES[piece.piece_type]
    return rule(board, piece, current_row, current_col, new_row, new_col)
