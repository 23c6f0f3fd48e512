"""Game management layer: controller, state machine, Qt event boundary.

Quick start::

    from tacto.game import GameController, GameSession, UserActionEvents

    events = UserActionEvents()
    session = GameSession(GameController(view), events, rows=3, columns=3)
    session.start()
    events.start_game_clicked.emit()
"""

from tacto.game.bridge import GameSession, UserActionEvents
from tacto.game.controller import GameController, GameEvents
from tacto.game.interfaces import IGameController, IGameView

__all__ = [
    # Interfaces
    "IGameController",
    "IGameView",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSession",
    "UserActionEvents",
]
