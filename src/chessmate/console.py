"""Console front end — the read-eval-print game loop."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessmate.core.enums import Color, GameResult, PieceType
from chessmate.core.errors import NotationError
from chessmate.core.position import Position
from chessmate.game.controller import GameController
from chessmate.game.player import HumanPlayer

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"quit", "exit", "resign"})


def parse_move(text: str) -> tuple[Position, Position]:
    """Parse ``"E2 E4"``, ``"e2e4"`` or ``"E2-E4"`` into two positions."""
    tokens = text.replace("-", " ").split()
    if len(tokens) == 1 and len(tokens[0]) == 4:
        tokens = [tokens[0][:2], tokens[0][2:]]
    if len(tokens) != 2:
        raise NotationError(f"Expected two squares, e.g. 'E2 E4', got {text!r}")
    return Position.from_notation(tokens[0]), Position.from_notation(tokens[1])


class ConsoleGame:
    """Plays a game between two humans sharing one terminal.

    Args:
        controller: Game orchestrator; a fresh one is created if omitted.
        input_fn: ``(prompt) -> str``; raising ``EOFError`` ends the game.
        output_fn: ``(text) -> None``.
    """

    def __init__(
        self,
        controller: GameController | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._controller = controller if controller is not None else GameController()
        self._input = input_fn
        self._output = output_fn
        self._controller.events.on_check.append(self._on_check)

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> int:
        """Play until checkmate (0) or until the players quit (1)."""
        white_name = self._ask_name("What's Player 1's name?", "Player 1: ")
        black_name = self._ask_name("What's Player 2's name?", "Player 2: ")
        if white_name is None or black_name is None:
            return 1

        self._controller.new_game(
            HumanPlayer(Color.WHITE, white_name),
            HumanPlayer(Color.BLACK, black_name),
        )
        self._output("Game started.")
        return self.play()

    def play(self) -> int:
        """Main loop over an already started game."""
        state = self._controller.state
        while not state.is_game_over:
            self._output(state.board.render())
            player = self._controller.current_player
            name = player.name if player is not None else str(state.side_to_move)
            self._output(f"{name}'s turn")

            line = self._read("Enter your next move: ")
            if line is None or line.strip().lower() in _QUIT_WORDS:
                self._output("Game abandoned.")
                return 1

            try:
                from_pos, to_pos = parse_move(line)
            except NotationError as exc:
                self._output(str(exc))
                continue

            if not self._controller.submit_move(from_pos, to_pos):
                self._output(f"Invalid move: {self._controller.last_rejection}")

        self._output(state.board.render())
        self._output(f"Game over: {self._result_text()}")
        return 0

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ask_name(self, question: str, prompt: str) -> str | None:
        self._output(question)
        return self._read(prompt)

    def _read(self, prompt: str) -> str | None:
        try:
            return self._input(prompt)
        except EOFError:
            _LOGGER.debug("Input closed")
            return None

    def _on_check(self, color: Color) -> None:
        self._output(f"{color.name.title()} is in check!")

    def _result_text(self) -> str:
        state = self._controller.state
        winner = "White" if state.result == GameResult.WHITE_WINS else "Black"
        last = state.move_history[-1] if state.move_history else None
        if (
            last is not None
            and last.captured is not None
            and last.captured.piece_type == PieceType.KING
        ):
            return f"{winner} wins by capturing the king"
        return f"{winner} wins by checkmate"
