"""Tests for the player names dialog."""

from __future__ import annotations

from chessmate.ui.dialogs.player_names_dialog import PlayerNamesDialog


def test_title() -> None:
    assert PlayerNamesDialog().windowTitle() == "Enter Player Names"


def test_names_are_stripped() -> None:
    dlg = PlayerNamesDialog()
    dlg.set_names("  Alice ", "Bob  ")
    assert dlg.names() == ("Alice", "Bob")


def test_empty_by_default() -> None:
    assert PlayerNamesDialog().names() == ("", "")
