"""Tests for GameController — the orchestrator."""

from chessmate.core.enums import Color, GameResult
from chessmate.core.notation import board_from_placement
from chessmate.core.position import A1, A2, A8, E1, E2, E4, E5, E7, G1, G7, Position
from chessmate.game.controller import GameController
from chessmate.game.interfaces import GamePhase
from chessmate.game.player import HumanPlayer
from chessmate.game.settings import GameSettings
from chessmate.game.state import GameState, MoveRecord


def _make_controller(
    placement: str | None = None,
    settings: GameSettings | None = None,
) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController(settings)
    board = board_from_placement(placement) if placement else None
    ctrl.new_game(HumanPlayer(Color.WHITE, "W"), HumanPlayer(Color.BLACK, "B"), board)
    return ctrl


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_players_assigned(self) -> None:
        ctrl = _make_controller()
        white = ctrl.player(Color.WHITE)
        black = ctrl.player(Color.BLACK)
        assert white is not None and white.name == "W"
        assert black is not None and black.name == "B"

    def test_current_player_is_white(self) -> None:
        ctrl = _make_controller()
        cp = ctrl.current_player
        assert cp is not None and cp.color == Color.WHITE

    def test_phase_event(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_default_settings(self) -> None:
        assert GameController().settings == GameSettings()


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move(E2, E4)
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.last_rejection is None

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E2, E5)
        assert ctrl.last_rejection == "Illegal move for that piece"
        assert ctrl.state.side_to_move == Color.WHITE

    def test_wrong_side_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E7, E5)
        assert ctrl.last_rejection == "It is white's turn"

    def test_empty_square_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E4, E5)
        assert ctrl.last_rejection == "No piece on E4"

    def test_same_square_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E2, E2)
        assert ctrl.last_rejection == "Please choose a different square"

    def test_off_board_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(E2, Position(-1, 4))
        assert ctrl.last_rejection == "Square off the board"

    def test_own_piece_destination_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(A1, A2)
        assert ctrl.board.get_piece(A2) is not None

    def test_rejected_event(self) -> None:
        ctrl = _make_controller()
        seen: list[tuple[Position, Position, str]] = []
        ctrl.events.on_rejected.append(lambda f, t, r: seen.append((f, t, r)))
        ctrl.submit_move(E2, E5)
        assert seen == [(E2, E5, "Illegal move for that piece")]

    def test_move_event_fires(self) -> None:
        ctrl = _make_controller()
        events: list[str] = []

        def on_move(record: MoveRecord, state: GameState) -> None:
            events.append(record.notation)

        ctrl.events.on_move.append(on_move)
        ctrl.submit_move(E2, E4)
        assert events == ["E2-E4"]

    def test_no_game_in_progress(self) -> None:
        ctrl = GameController()
        assert not ctrl.submit_move(E2, E4)
        assert ctrl.last_rejection == "No game in progress"


class TestKingSafety:
    _PINNED = "4k3/8/8/8/8/8/r7/4K3"

    def test_move_into_check_rejected(self) -> None:
        ctrl = _make_controller(self._PINNED)
        assert not ctrl.submit_move(E1, E2)
        assert ctrl.last_rejection == "That move leaves your king in check"
        assert ctrl.board.get_piece(E1) is not None

    def test_self_check_allowed_by_setting(self) -> None:
        ctrl = _make_controller(self._PINNED, GameSettings(allow_self_check=True))
        results: list[GameResult] = []
        ctrl.events.on_game_over.append(results.append)

        assert ctrl.submit_move(E1, E2)
        assert ctrl.submit_move(A2, E2)  # rook takes the king
        assert results == [GameResult.BLACK_WINS]
        assert ctrl.state.is_game_over


class TestCheckAndMate:
    def test_check_event(self) -> None:
        ctrl = _make_controller("4k3/8/8/8/8/8/8/R3K3")
        checked: list[Color] = []
        ctrl.events.on_check.append(checked.append)
        assert ctrl.submit_move(A1, A8)
        assert checked == [Color.BLACK]
        assert not ctrl.state.is_game_over

    def test_game_over_event_on_checkmate(self) -> None:
        ctrl = _make_controller("7k/8/5K2/8/8/8/8/6Q1")
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        checked: list[Color] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_check.append(checked.append)

        assert ctrl.submit_move(G1, G7)
        assert results == [GameResult.WHITE_WINS]
        assert phases == [GamePhase.GAME_OVER]
        assert checked == []

    def test_moves_refused_after_game_over(self) -> None:
        ctrl = _make_controller("7k/8/5K2/8/8/8/8/6Q1")
        ctrl.submit_move(G1, G7)
        assert not ctrl.submit_move(Position(0, 7), Position(0, 6))
        assert ctrl.last_rejection == "The game is over"
