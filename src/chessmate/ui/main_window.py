"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult, PieceType
from chessmate.core.position import Position
from chessmate.game.controller import GameController
from chessmate.game.player import HumanPlayer
from chessmate.game.settings import GameSettings
from chessmate.game.state import GameState, MoveRecord
from chessmate.ui.board.board_view import BoardView
from chessmate.ui.dialogs.player_names_dialog import PlayerNamesDialog
from chessmate.ui.panels.move_panel import MovePanel
from chessmate.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: board, player labels and move list."""

    def __init__(
        self,
        player1_name: str = "",
        player2_name: str = "",
        settings: GameSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")
        self.setMinimumSize(640, 560)
        self.resize(800, 800)

        self._settings = settings if settings is not None else GameSettings()
        self._controller = GameController(self._settings)

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()
        self._connect_game_events()

        self.new_game(player1_name, player2_name)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._player2_label = QLabel()
        self._player2_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._player2_label)

        middle = QHBoxLayout()
        self._board_view = BoardView()
        middle.addWidget(self._board_view, stretch=3)

        self._move_panel = MovePanel()
        self._move_panel.setFixedWidth(220)
        middle.addWidget(self._move_panel)
        root.addLayout(middle, stretch=1)

        self._player1_label = QLabel()
        self._player1_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._player1_label)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        self._board_view.move_requested.connect(self._on_move_requested)
        self._board_view.selection_rejected.connect(self._notify)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        new_action = QAction("&New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self._on_new_game)
        game_menu.addAction(new_action)

        game_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        s = self._settings
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_highlight_check(s.highlight_check)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        player1_name: str = "",
        player2_name: str = "",
        board: Board | None = None,
    ) -> None:
        """Start a fresh game; player 1 plays White."""
        white = HumanPlayer(Color.WHITE, player1_name)
        black = HumanPlayer(Color.BLACK, player2_name)
        self._controller.new_game(white, black, board)

        self._player1_label.setText(f"Player 1: {white.name}")
        self._player2_label.setText(f"Player 2: {black.name}")
        self._move_panel.set_history(self._controller.state.move_history)
        self._sync_board()

    def _on_new_game(self) -> None:
        names = PlayerNamesDialog.ask(self)
        if names is not None:
            self.new_game(*names)

    def _on_move_requested(self, from_pos: Position, to_pos: Position) -> None:
        if not self._controller.submit_move(from_pos, to_pos):
            reason = self._controller.last_rejection or ""
            self._status_bar.showMessage(reason, 4000)
            self._notify("Invalid move")

    # ── Controller events ────────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self._move_panel.add_move(record)
        self._sync_board()

    def _on_check(self, color: Color) -> None:
        self._notify("Check!")

    def _on_game_over(self, result: GameResult) -> None:
        winner = "White" if result == GameResult.WHITE_WINS else "Black"
        self._status_bar.showMessage(f"{winner} wins")
        history = self._controller.state.move_history
        last_capture = history[-1].captured if history else None
        if last_capture is not None and last_capture.piece_type == PieceType.KING:
            self._notify(f"King captured! {winner} wins!")
        else:
            self._notify(f"Checkmate! {winner} wins!")

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_board(self) -> None:
        state = self._controller.state
        self._board_view.show_board(
            state.board, state.side_to_move, interactive=not state.is_game_over
        )
        if not state.is_game_over:
            player = self._controller.current_player
            name = player.name if player is not None else str(state.side_to_move)
            self._status_bar.showMessage(f"{name}'s turn")

    def _notify(self, text: str) -> None:
        _LOGGER.debug("Notice: %s", text)
        QMessageBox.information(self, "Chess Game", text)
