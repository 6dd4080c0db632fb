"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Board, Color, Position

    board = Board()
    board.move_piece(Position.from_notation("E2"), Position.from_notation("E4"))
    board.is_in_check(Color.BLACK)
"""

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult, PieceType
from chessmate.core.errors import (
    ChessError,
    InvalidBoardError,
    MissingKingError,
    NotationError,
)
from chessmate.core.move_rules import validate_move
from chessmate.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessmate.core.piece import Piece
from chessmate.core.position import BOARD_SIZE, Position, iter_positions

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidBoardError",
    "MissingKingError",
    "NotationError",
    # Domain objects
    "BOARD_SIZE",
    "Board",
    "Piece",
    "Position",
    "iter_positions",
    "validate_move",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
