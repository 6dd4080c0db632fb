"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessmate.core import move_rules
from chessmate.core.enums import Color, PieceType
from chessmate.core.errors import NotationError
from chessmate.core.position import Position

if TYPE_CHECKING:
    from chessmate.core.board import Board

# piece type -> (FEN letter, white glyph, black glyph)
_PIECE_FACES: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("P", "♙", "♟"),
    PieceType.KNIGHT: ("N", "♘", "♞"),
    PieceType.BISHOP: ("B", "♗", "♝"),
    PieceType.ROOK: ("R", "♖", "♜"),
    PieceType.QUEEN: ("Q", "♕", "♛"),
    PieceType.KING: ("K", "♔", "♚"),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {}
_UNICODE: dict[tuple[Color, PieceType], str] = {}
for _ptype, (_letter, _white, _black) in _PIECE_FACES.items():
    _FEN_CHARS[(Color.WHITE, _ptype)] = _letter
    _FEN_CHARS[(Color.BLACK, _ptype)] = _letter.lower()
    _UNICODE[(Color.WHITE, _ptype)] = _white
    _UNICODE[(Color.BLACK, _ptype)] = _black

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _FEN_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a colored piece standing on *position*."""

    color: Color
    piece_type: PieceType
    position: Position

    # ── Movement ─────────────────────────────────────────────────────────

    def validate_move(
        self,
        board: Board,
        current_row: int,
        current_col: int,
        new_row: int,
        new_col: int,
    ) -> bool:
        """Apply this variant's shape rule (see :mod:`chessmate.core.move_rules`)."""
        return move_rules.validate_move(
            board, self, current_row, current_col, new_row, new_col
        )

    def moved_to(self, position: Position) -> Piece:
        """The same piece standing on *position*."""
        return replace(self, position=position)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Position) -> Piece:
        """Piece for a FEN letter standing on *position*, e.g. 'n' is a black knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise NotationError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, position)

    @property
    def code(self) -> str:
        """Two-letter board code, e.g. ``wK`` or ``bp``."""
        prefix = "w" if self.color == Color.WHITE else "b"
        letter = _PIECE_FACES[self.piece_type][0]
        # pawns print in lowercase: "wp", "bp"
        if self.piece_type == PieceType.PAWN:
            letter = letter.lower()
        return prefix + letter

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
