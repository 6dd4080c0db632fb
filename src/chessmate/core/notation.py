"""Piece-placement text (the board field of a FEN string)."""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.errors import NotationError
from chessmate.core.piece import Piece
from chessmate.core.position import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Build a board from placement text, e.g. ``"7k/6Q1/5K2/8/8/8/8/8"``.

    Only the first whitespace-separated field is read, so a full FEN
    string is accepted too.
    """
    fields = text.split()
    if not fields:
        raise NotationError("Empty placement text")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise NotationError(f"Expected 8 ranks, got {len(ranks)}: {text!r}")

    pieces: list[Piece] = []
    for row, rank_str in enumerate(ranks):
        col = 0
        for ch in rank_str:
            if ch.isdigit():
                col += int(ch)
                continue
            if col >= BOARD_SIZE:
                raise NotationError(f"Rank {BOARD_SIZE - row} too long: {rank_str!r}")
            pieces.append(Piece.from_char(ch, Position(row, col)))
            col += 1
        if col != BOARD_SIZE:
            raise NotationError(
                f"Rank {BOARD_SIZE - row} has {col} squares: {rank_str!r}"
            )
    return Board.from_pieces(pieces)


def board_to_placement(board: Board) -> str:
    """Placement text for *board* (rank 8 first)."""
    parts: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        rank_str = ""
        for col in range(BOARD_SIZE):
            piece = board.piece_at(row, col)
            if piece is None:
                empty += 1
            else:
                if empty:
                    rank_str += str(empty)
                    empty = 0
                rank_str += str(piece)
        if empty:
            rank_str += str(empty)
        parts.append(rank_str)
    return "/".join(parts)
