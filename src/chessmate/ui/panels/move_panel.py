"""MovePanel — scrollable list of played moves."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from chessmate.game.state import MoveRecord


class MovePanel(QWidget):
    """Displays the game's move history, one line per move."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._records: list[MoveRecord] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Sans Serif", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def clear(self) -> None:
        self._records.clear()
        self._list.clear()

    def add_move(self, record: MoveRecord) -> None:
        """Append a move to the panel."""
        self._records.append(record)
        self._list.addItem(record.description)
        self._list.scrollToBottom()

    def set_history(self, records: list[MoveRecord]) -> None:
        """Rebuild the entire move list."""
        self.clear()
        for record in records:
            self.add_move(record)

    def lines(self) -> list[str]:
        """Text of every row, top to bottom."""
        return [self._list.item(i).text() for i in range(self._list.count())]
