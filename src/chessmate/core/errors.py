"""Exceptions raised by the chess engine.

Every error also derives from :class:`ValueError`, since each one describes
bad input (a malformed square, an impossible layout, a board without a king).
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for all engine errors."""


class NotationError(ChessError):
    """Malformed square name or placement text."""


class InvalidBoardError(ChessError):
    """A custom board layout that breaks the board invariants."""


class MissingKingError(ChessError):
    """Check or checkmate queried for a color with no king on the board."""
