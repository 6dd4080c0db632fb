"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState, GameSettings.
Emits events via simple callbacks so the console / UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult
from chessmate.core.position import Position
from chessmate.game.interfaces import GamePhase, IPlayer
from chessmate.game.settings import GameSettings
from chessmate.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CheckCallback = Callable[[Color], None]  # color now in check
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
RejectedCallback = Callable[[Position, Position, str], None]  # from, to, reason


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a two-player game: enforces turn order, applies moves,
    notifies listeners.

    The engine's :meth:`Board.move_piece` knows nothing about turns or king
    safety; both are checked here before a move reaches the board.
    """

    __slots__ = ("_state", "_players", "_settings", "_last_rejection", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._settings = settings if settings is not None else GameSettings()
        self._last_rejection: str | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    @property
    def last_rejection(self) -> str | None:
        """Reason the most recent :meth:`submit_move` was refused."""
        return self._last_rejection

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game."""
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, side_to_move)
        self._last_rejection = None
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Submit a move for the side to move. Returns True if applied."""
        reason = self._rejection_reason(from_pos, to_pos)
        if reason is not None:
            self._reject(from_pos, to_pos, reason)
            return False

        record = self._state.apply_move(from_pos, to_pos)
        if record is None:
            self._reject(from_pos, to_pos, "Illegal move for that piece")
            return False
        self._last_rejection = None

        self._emit_move(record)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        elif record.gives_check:
            self._emit_check(self._state.side_to_move)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _rejection_reason(self, from_pos: Position, to_pos: Position) -> str | None:
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return "The game is over" if state.is_game_over else "No game in progress"
        if not from_pos.is_on_board() or not to_pos.is_on_board():
            return "Square off the board"

        board = state.board
        piece = board.get_piece(from_pos)
        if piece is None:
            return f"No piece on {from_pos}"
        if piece.color != state.side_to_move:
            return f"It is {state.side_to_move.name.lower()}'s turn"
        if from_pos == to_pos:
            return "Please choose a different square"
        if not board.is_legal_move(from_pos, to_pos):
            return "Illegal move for that piece"

        if not self._settings.allow_self_check:
            probe = board.copy()
            probe.move_piece(from_pos, to_pos)
            if probe.is_in_check(piece.color):
                return "That move leaves your king in check"
        return None

    def _reject(self, from_pos: Position, to_pos: Position, reason: str) -> None:
        _LOGGER.debug("Rejected %s -> %s: %s", from_pos, to_pos, reason)
        self._last_rejection = reason
        for cb in self.events.on_rejected:
            cb(from_pos, to_pos, reason)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s", result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
