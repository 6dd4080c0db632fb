"""Board — piece placement on an 8x8 grid, move execution, check detection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from chessmate.core.enums import Color, PieceType
from chessmate.core.errors import InvalidBoardError, MissingKingError
from chessmate.core.piece import Piece
from chessmate.core.position import BOARD_SIZE, FILES, Position, iter_positions

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of pieces plus the list of captured pieces.

    ``Board()`` is the standard starting layout; use :meth:`from_pieces` for
    custom layouts.
    """

    __slots__ = ("_grid", "_captured")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._captured: list[Piece] = []
        self._setup_initial()

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls()

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Board:
        """Board holding exactly *pieces*.

        Raises :class:`InvalidBoardError` unless every piece is on the board,
        no two pieces share a square and each color has exactly one king.
        """
        board = cls._empty()
        for piece in pieces:
            pos = piece.position
            if not pos.is_on_board():
                raise InvalidBoardError(f"Piece {piece.code} is off the board at {pos}")
            if board._grid[pos.row][pos.column] is not None:
                raise InvalidBoardError(f"Two pieces on {pos}")
            board._grid[pos.row][pos.column] = piece

        for color in Color:
            kings = sum(
                1 for p in board.pieces(color) if p.piece_type == PieceType.KING
            )
            if kings != 1:
                raise InvalidBoardError(
                    f"Expected exactly one {color.name} king, found {kings}"
                )
        return board

    @classmethod
    def _empty(cls) -> Board:
        board = cls.__new__(cls)
        board._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        board._captured = []
        return board

    def _setup_initial(self) -> None:
        for col, piece_type in enumerate(_BACK_RANK):
            self._place(Piece(Color.BLACK, piece_type, Position(0, col)))
            self._place(Piece(Color.BLACK, PieceType.PAWN, Position(1, col)))
            self._place(Piece(Color.WHITE, PieceType.PAWN, Position(6, col)))
            self._place(Piece(Color.WHITE, piece_type, Position(7, col)))

    def _place(self, piece: Piece) -> None:
        self._grid[piece.position.row][piece.position.column] = piece

    # ── Element access ───────────────────────────────────────────────────

    def get_piece(self, position: Position) -> Piece | None:
        """Piece standing on *position*, or ``None`` (also off the board)."""
        return self.piece_at(position.row, position.column)

    def piece_at(self, row: int, column: int) -> Piece | None:
        if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
            return None
        return self._grid[row][column]

    def __getitem__(self, position: Position) -> Piece | None:
        return self.get_piece(position)

    @property
    def captured(self) -> tuple[Piece, ...]:
        """Pieces removed from play, in capture order."""
        return tuple(self._captured)

    def pieces(self, color: Color | None = None) -> Iterator[Piece]:
        """Pieces on the board (optionally of one *color*), row by row."""
        for row in self._grid:
            for piece in row:
                if piece is not None and (color is None or piece.color == color):
                    yield piece

    # ── Moves ────────────────────────────────────────────────────────────

    def is_legal_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Whether :meth:`move_piece` would accept the move.

        Shape rule of the piece on *from_pos*, plus a veto on landing on a
        piece of the mover's own color.
        """
        if not (from_pos.is_on_board() and to_pos.is_on_board()):
            return False
        piece = self.get_piece(from_pos)
        if piece is None:
            return False
        if not piece.validate_move(
            self, from_pos.row, from_pos.column, to_pos.row, to_pos.column
        ):
            return False
        target = self.get_piece(to_pos)
        return target is None or target.color != piece.color

    def move_piece(self, from_pos: Position, to_pos: Position) -> bool:
        """Move the piece on *from_pos* to *to_pos*, capturing any occupant.

        Returns ``False`` (board unchanged) when the move is illegal. No king
        safety or turn order is checked here.
        """
        if not self.is_legal_move(from_pos, to_pos):
            _LOGGER.debug("Rejected move %s -> %s", from_pos, to_pos)
            return False

        piece = self.get_piece(from_pos)
        assert piece is not None
        target = self.get_piece(to_pos)
        if target is not None:
            self._captured.append(target)
        self._relocate(piece, to_pos)
        _LOGGER.debug("Moved %s %s -> %s", piece.code, from_pos, to_pos)
        return True

    def _relocate(self, piece: Piece, to_pos: Position) -> None:
        from_pos = piece.position
        self._grid[from_pos.row][from_pos.column] = None
        self._grid[to_pos.row][to_pos.column] = piece.moved_to(to_pos)

    # ── Check / checkmate ────────────────────────────────────────────────

    def king_position(self, color: Color) -> Position:
        """Return the square of *color*'s king."""
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return piece.position
        raise MissingKingError(f"No {color.name} king on board")

    def is_under_attack(self, position: Position, by_color: Color) -> bool:
        """Whether any piece of *by_color* has a shape rule reaching *position*."""
        for piece in self.pieces(by_color):
            src = piece.position
            if piece.validate_move(
                self, src.row, src.column, position.row, position.column
            ):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        return self.is_under_attack(self.king_position(color), color.opposite)

    def is_checkmate(self, color: Color) -> bool:
        """In check, and no legal move of *color* gets out of it.

        Each candidate move is tried on a copy; this board is never modified.
        """
        if not self.is_in_check(color):
            return False

        for piece in list(self.pieces(color)):
            for to_pos in iter_positions():
                if not self.is_legal_move(piece.position, to_pos):
                    continue
                probe = self.copy()
                probe._relocate(piece, to_pos)
                if not probe.is_in_check(color):
                    _LOGGER.debug(
                        "%s escapes check with %s %s -> %s",
                        color.name,
                        piece.code,
                        piece.position,
                        to_pos,
                    )
                    return False
        return True

    # ── Copying / display ────────────────────────────────────────────────

    def copy(self) -> Board:
        board = Board._empty()
        board._grid = [row.copy() for row in self._grid]
        board._captured = self._captured.copy()
        return board

    def render(self) -> str:
        """Text grid: file header, rank labels, ``##`` for empty squares."""
        lines = ["   " + "  ".join(FILES)]
        for row_idx, row in enumerate(self._grid):
            cells = " ".join(p.code if p is not None else "##" for p in row)
            lines.append(f"{BOARD_SIZE - row_idx} {cells}")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self._captured == other._captured

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        rows.append("  " + " ".join(FILES.lower()))
        return "\n".join(rows)
