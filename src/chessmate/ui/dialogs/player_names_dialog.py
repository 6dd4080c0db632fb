"""PlayerNamesDialog — asks both players for their names."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)


class PlayerNamesDialog(QDialog):
    """Modal dialog with one name field per player."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(320)
        self.setWindowTitle("Enter Player Names")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._setup_ui()

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(10)

        self._player1_edit = QLineEdit()
        self._player2_edit = QLineEdit()
        form.addRow("Player 1 name:", self._player1_edit)
        form.addRow("Player 2 name:", self._player2_edit)
        main.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        main.addWidget(buttons)

    def set_names(self, player1: str, player2: str) -> None:
        self._player1_edit.setText(player1)
        self._player2_edit.setText(player2)

    def names(self) -> tuple[str, str]:
        return self._player1_edit.text().strip(), self._player2_edit.text().strip()

    @staticmethod
    def ask(parent: QWidget | None = None) -> tuple[str, str] | None:
        dlg = PlayerNamesDialog(parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.names()
        return None
