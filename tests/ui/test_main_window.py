"""Tests for MainWindow game flow and notices."""

from __future__ import annotations

import pytest

from chessmate.core.enums import Color, GameResult
from chessmate.core.position import A1, A2, A8, E1, E2, E4, E5, E7, G1, G7, Position
from chessmate.game.settings import GameSettings
from chessmate.ui.dialogs.player_names_dialog import PlayerNamesDialog
from chessmate.ui.main_window import MainWindow


def _click(window: MainWindow, from_pos: Position, to_pos: Position) -> None:
    scene = window.board_view.board_scene
    scene.handle_square_click(from_pos)
    scene.handle_square_click(to_pos)


class TestSetup:
    def test_title_and_labels(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        assert window.windowTitle() == "Chess Game"
        assert window._player1_label.text() == "Player 1: Alice"
        assert window._player2_label.text() == "Player 2: Bob"
        white = window.controller.player(Color.WHITE)
        assert white is not None and white.name == "Alice"

    def test_blank_names_get_defaults(self, notices: list[str]) -> None:
        window = MainWindow()
        assert window._player1_label.text() == "Player 1: Player (white)"

    def test_status_shows_turn(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        assert window.statusBar().currentMessage() == "Alice's turn"

    def test_settings_applied(self, notices: list[str]) -> None:
        window = MainWindow(settings=GameSettings(show_coordinates=False))
        scene = window.board_view.board_scene
        assert all(not item.isVisible() for item in scene._coord_items)

    def test_menu_new_game_uses_dialog(
        self, notices: list[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window = MainWindow("Alice", "Bob")
        _click(window, E2, E4)
        monkeypatch.setattr(PlayerNamesDialog, "ask", lambda _parent=None: ("Carol", "Dave"))

        window._on_new_game()

        assert window._player1_label.text() == "Player 1: Carol"
        assert window.move_panel.lines() == []
        assert window.controller.state.side_to_move == Color.WHITE

    def test_new_game_panel_matches_fresh_history(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        _click(window, E2, E4)
        _click(window, E7, E5)
        assert len(window.move_panel.lines()) == 2

        window.new_game("Carol", "Dave")

        assert window.controller.state.move_history == []
        assert window.move_panel.lines() == []

    def test_menu_new_game_cancelled(
        self, notices: list[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        window = MainWindow("Alice", "Bob")
        monkeypatch.setattr(PlayerNamesDialog, "ask", lambda _parent=None: None)
        window._on_new_game()
        assert window._player1_label.text() == "Player 1: Alice"


class TestMoves:
    def test_click_move_updates_panel_and_turn(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        _click(window, E2, E4)

        assert window.move_panel.lines() == ["Move from E2 to E4"]
        assert window.controller.state.side_to_move == Color.BLACK
        assert window.statusBar().currentMessage() == "Bob's turn"
        assert E4 in window.board_view.board_scene._piece_items
        assert notices == []

    def test_invalid_move_notifies(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        _click(window, E2, E5)

        assert notices == ["Invalid move"]
        assert window.statusBar().currentMessage() == "Illegal move for that piece"
        assert window.move_panel.lines() == []

    def test_same_square_click_notifies(self, notices: list[str]) -> None:
        window = MainWindow("Alice", "Bob")
        _click(window, E2, E2)
        assert notices == ["Please click on a different spot."]

    def test_check_notice(self, notices: list[str], board_from) -> None:
        window = MainWindow("Alice", "Bob")
        window.new_game("Alice", "Bob", board_from("4k3/8/8/8/8/8/8/R3K3"))
        _click(window, A1, A8)
        assert notices == ["Check!"]

    def test_checkmate_notice(self, notices: list[str], board_from) -> None:
        window = MainWindow("Alice", "Bob")
        window.new_game("Alice", "Bob", board_from("7k/8/5K2/8/8/8/8/6Q1"))
        _click(window, G1, G7)

        assert notices == ["Checkmate! White wins!"]
        assert window.controller.state.result == GameResult.WHITE_WINS
        assert not window.board_view.board_scene.is_interactive()

    def test_king_capture_notice(self, notices: list[str], board_from) -> None:
        window = MainWindow("Alice", "Bob", GameSettings(allow_self_check=True))
        window.new_game("Alice", "Bob", board_from("4k3/8/8/8/8/8/r7/4K3"))
        _click(window, E1, E2)
        _click(window, A2, E2)
        assert notices[-1] == "King captured! Black wins!"
