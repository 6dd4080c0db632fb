"""User-configurable game and display settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Rules
    allow_self_check: bool = False  # moves may leave the mover's king attacked

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    highlight_check: bool = True
