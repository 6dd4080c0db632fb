"""Game management layer — controller, players, state machine.

Quick start::

    from chessmate.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
"""

from chessmate.game.controller import GameController, GameEvents
from chessmate.game.interfaces import GamePhase, IPlayer
from chessmate.game.player import HumanPlayer
from chessmate.game.settings import GameSettings
from chessmate.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
