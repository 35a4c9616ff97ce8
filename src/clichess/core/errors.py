"""Move-rejection taxonomy and core exceptions.

Rejections are *values*: validators return a :class:`MoveError` (or
``None`` for success) so that the acting side can be told why and asked
again. Exceptions are reserved for conditions that must stop computation.
"""

from __future__ import annotations

from enum import Enum


class MoveError(Enum):
    """Reason a candidate move was refused, ordered as the checks run."""

    OUT_OF_BOUNDS = "square is off the board"
    EMPTY_SOURCE = "there is no piece on the starting square"
    WRONG_TURN = "that piece does not belong to the side to move"
    FRIENDLY_CAPTURE = "cannot capture your own piece"
    NO_OP_MOVE = "start and end squares are the same"
    GEOMETRY_INVALID = "that piece cannot move that way"
    PATH_BLOCKED = "the path is blocked"
    LEAVES_OWN_KING_IN_CHECK = "the move leaves your king in check"
    # Session level
    GAME_OVER = "the game is already over"
    UNPARSEABLE = "no move could be read from the input"

    @property
    def message(self) -> str:
        return self.value


class ChessError(Exception):
    """Base class for clichess exceptions."""


class KingMissingError(ChessError):
    """A king is absent from the board.

    Only reachable through a corrupted board; dependent computation must
    stop rather than report a verdict.
    """


class MoveSuggestionError(ChessError):
    """A player exhausted its attempts without proposing a legal move."""
