"""Tests for BoardScene click handling and overlays."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.notation import board_from_placement
from chessmate.core.position import A8, E1, E2, E4, E7, E8, H1, Position
from chessmate.ui.board.board_scene import BoardScene
from chessmate.ui.board.board_view import BoardView
from chessmate.ui.styles.theme import BoardTheme


def _scene(board: Board | None = None, side: Color = Color.WHITE) -> BoardScene:
    scene = BoardScene()
    scene.set_board(board if board is not None else Board(), side)
    return scene


def test_pos_to_square_top_left_is_a8() -> None:
    scene = BoardScene()
    half = BoardScene.TILE / 2
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == A8
    assert scene._pos_to_square(scene.sceneRect().bottomRight() - QPointF(half, half)) == H1


def test_pos_to_square_outside_board() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-5, 10)) is None
    assert scene._pos_to_square(QPointF(10, BoardScene.TILE * 8 + 1)) is None


def test_one_glyph_per_piece() -> None:
    scene = _scene()
    assert len(scene._piece_items) == 32
    assert scene._piece_items[E1].text() == "♔"
    assert scene._piece_items[E8].text() == "♚"


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_two_clicks_request_move() -> None:
    scene = _scene()
    requested: list[tuple[Position, Position]] = []
    scene.move_requested.connect(lambda f, t: requested.append((f, t)))

    scene.handle_square_click(E2)
    assert scene.selected_square == E2
    assert scene._selection_items

    scene.handle_square_click(E4)
    assert requested == [(E2, E4)]
    assert scene.selected_square is None
    assert scene._selection_items == []


def test_first_click_ignores_empty_and_opponent_squares() -> None:
    scene = _scene()
    scene.handle_square_click(E4)
    assert scene.selected_square is None
    scene.handle_square_click(E7)
    assert scene.selected_square is None


def test_clicking_selected_square_again_is_rejected() -> None:
    scene = _scene()
    messages: list[str] = []
    requested: list[object] = []
    scene.selection_rejected.connect(messages.append)
    scene.move_requested.connect(lambda f, t: requested.append((f, t)))

    scene.handle_square_click(E2)
    scene.handle_square_click(E2)

    assert messages == ["Please click on a different spot."]
    assert requested == []
    assert scene.selected_square == E2


def test_non_interactive_ignores_clicks() -> None:
    scene = _scene()
    scene.handle_square_click(E2)
    scene.set_interactive(False)
    assert scene.selected_square is None
    assert not scene.is_interactive()

    scene.handle_square_click(E2)
    assert scene.selected_square is None


def test_check_highlight_follows_setting() -> None:
    board = board_from_placement("k3q3/8/8/8/8/8/8/4K3")
    scene = _scene(board, Color.WHITE)
    assert len(scene._check_items) == 1

    scene.set_highlight_check(False)
    assert scene._check_items == []

    scene.set_highlight_check(True)
    assert len(scene._check_items) == 1


def test_no_check_highlight_for_quiet_position() -> None:
    scene = _scene()
    assert scene._check_items == []


def test_set_theme_redraws_squares() -> None:
    scene = _scene()
    theme = BoardTheme.by_name("Blue")
    scene.set_theme(theme)
    brush = scene._square_items[A8].brush()
    assert brush.color() == theme.light_square
    assert len(scene._piece_items) == 32


def test_view_bubbles_scene_signals() -> None:
    view = BoardView()
    view.show_board(Board(), Color.WHITE)
    requested: list[tuple[Position, Position]] = []
    messages: list[str] = []
    view.move_requested.connect(lambda f, t: requested.append((f, t)))
    view.selection_rejected.connect(messages.append)

    scene = view.board_scene
    scene.handle_square_click(E2)
    scene.handle_square_click(E2)
    scene.handle_square_click(E4)

    assert messages == ["Please click on a different spot."]
    assert requested == [(E2, E4)]


def test_view_show_board_can_lock_input() -> None:
    view = BoardView()
    view.show_board(Board(), Color.WHITE, interactive=False)
    view.board_scene.handle_square_click(E2)
    assert view.board_scene.selected_square is None
