"""Players taking part in a game."""

from __future__ import annotations

from chessmate.core.enums import Color
from chessmate.game.interfaces import IPlayer


class HumanPlayer(IPlayer):
    """A human participant; moves arrive through the console or the UI."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name.strip() or f"Player ({color.name.lower()})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"HumanPlayer({self._color.name}, {self._name!r})"
