"""Game management layer — session, players, snapshots, configuration.

Quick start::

    from clichess.core import Color
    from clichess.game import GameSession, HumanPlayer, RandomSuggester, SuggestionPlayer

    session = GameSession(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=SuggestionPlayer(Color.BLACK, RandomSuggester(seed=1)),
    )
"""

from clichess.game.config import GameConfig
from clichess.game.interfaces import IPlayer, SessionState
from clichess.game.player import (
    HumanPlayer,
    MoveSuggester,
    RandomSuggester,
    SuggestionPlayer,
)
from clichess.game.session import GameSession, SessionEvents
from clichess.game.state import BoardSnapshot, MoveRecord, Rejection

__all__ = [
    # Interfaces
    "IPlayer",
    "MoveSuggester",
    "SessionState",
    # Concrete
    "BoardSnapshot",
    "GameConfig",
    "GameSession",
    "HumanPlayer",
    "MoveRecord",
    "RandomSuggester",
    "Rejection",
    "SessionEvents",
    "SuggestionPlayer",
]
