"""Game management layer — players and the turn-taking session.

Quick start::

    from chessgen.game import GameSession, RandomPlayer

    session = GameSession(
        players={
            Color.WHITE: RandomPlayer(Color.WHITE, seed=1),
            Color.BLACK: RandomPlayer(Color.BLACK, seed=2),
        },
    )
    session.play(10)
"""

from chessgen.game.interfaces import IPlayer
from chessgen.game.player import CallbackPlayer, RandomPlayer
from chessgen.game.session import GameSession, SessionEvents

__all__ = [
    # Interfaces
    "IPlayer",
    # Concrete
    "CallbackPlayer",
    "GameSession",
    "RandomPlayer",
    "SessionEvents",
]
