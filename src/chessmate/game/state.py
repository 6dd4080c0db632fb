"""Game state machine — tracks turn, phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult
from chessmate.core.errors import MissingKingError
from chessmate.core.piece import Piece
from chessmate.core.position import Position
from chessmate.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)

_WIN_FOR: dict[Color, GameResult] = {
    Color.WHITE: GameResult.WHITE_WINS,
    Color.BLACK: GameResult.BLACK_WINS,
}


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    piece: Piece  # the mover, standing on its origin square
    from_pos: Position
    to_pos: Position
    captured: Piece | None = None
    gives_check: bool = False

    @property
    def notation(self) -> str:
        """Compact form, e.g. ``E2-E4`` or ``E4xD5``."""
        sep = "x" if self.captured is not None else "-"
        return f"{self.from_pos}{sep}{self.to_pos}"

    @property
    def description(self) -> str:
        return f"Move from {self.from_pos} to {self.to_pos}"


@dataclass
class GameState:
    """Manages game lifecycle: side to move, phase, result, move history.

    Plain data and logic with no I/O. Turn order is checked
    by the controller, not here.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_pos: Position, to_pos: Position) -> MoveRecord | None:
        """Play a move on the board and record it.

        Returns ``None`` when the board rejects the move.
        """
        if not from_pos.is_on_board() or not to_pos.is_on_board():
            return None
        piece = self.board.get_piece(from_pos)
        captured = self.board.get_piece(to_pos)
        if piece is None or not self.board.move_piece(from_pos, to_pos):
            return None

        mover = piece.color
        opponent = mover.opposite
        gives_check = False
        try:
            gives_check = self.board.is_in_check(opponent)
            if gives_check and self.board.is_checkmate(opponent):
                _LOGGER.info("%s is checkmated", opponent.name)
                self._finish(_WIN_FOR[mover])
        except MissingKingError:
            # Only reachable when moves into self-check are allowed.
            _LOGGER.warning("%s king captured on %s", opponent.name, to_pos)
            self._finish(_WIN_FOR[mover])

        record = MoveRecord(
            piece=piece,
            from_pos=from_pos,
            to_pos=to_pos,
            captured=captured,
            gives_check=gives_check,
        )
        self.move_history.append(record)
        self.side_to_move = opponent
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_number(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER
