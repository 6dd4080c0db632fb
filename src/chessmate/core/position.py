"""Position — a square on the board, addressed by row and column.

Board layout (row-major, rank 8 on top):
    A8=(0, 0), B8=(0, 1), ..., H8=(0, 7)
    ...
    A1=(7, 0), B1=(7, 1), ..., H1=(7, 7)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessmate.core.errors import NotationError

BOARD_SIZE = 8
FILES = "ABCDEFGH"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, column) pair."""

    row: int
    column: int

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_coordinates(cls, row: int, column: int) -> Position:
        """Build a position from grid coordinates (no validation)."""
        return cls(row, column)

    @classmethod
    def from_notation(cls, text: str) -> Position:
        """Parse a square name, e.g. ``"E2"`` → ``Position(6, 4)``."""
        name = text.strip().upper()
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise NotationError(f"Invalid square name: {text!r}")
        return cls(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("A"))

    # ── Queries ──────────────────────────────────────────────────────────

    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE

    def to_notation(self) -> str:
        """Square name, e.g. ``Position(6, 4)`` → ``"E2"``."""
        if not self.is_on_board():
            raise NotationError(f"Position off the board: ({self.row}, {self.column})")
        return f"{FILES[self.column]}{BOARD_SIZE - self.row}"

    def __str__(self) -> str:
        if self.is_on_board():
            return self.to_notation()
        return f"({self.row}, {self.column})"


def iter_positions() -> Iterator[Position]:
    """All 64 squares, row by row from A8 to H1."""
    for row in range(BOARD_SIZE):
        for column in range(BOARD_SIZE):
            yield Position(row, column)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Position(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Position(7, c) for c in range(8))
