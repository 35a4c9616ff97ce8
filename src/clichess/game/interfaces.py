"""Abstract interfaces for the game layer.

The session depends on these, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from clichess.core.enums import Color

if TYPE_CHECKING:
    from clichess.game.state import BoardSnapshot, Rejection


# ── Session FSM states ───────────────────────────────────────────────────────


class SessionState(IntEnum):
    """Finite-state-machine states of a game session."""

    WHITE_TO_MOVE = auto()
    BLACK_TO_MOVE = auto()
    WHITE_WINS_BY_CHECKMATE = auto()
    BLACK_WINS_BY_CHECKMATE = auto()
    STALEMATE = auto()

    @classmethod
    def to_move(cls, color: Color) -> SessionState:
        return cls.WHITE_TO_MOVE if color == Color.WHITE else cls.BLACK_TO_MOVE

    @classmethod
    def checkmated(cls, loser: Color) -> SessionState:
        """Terminal state for *loser* being mated."""
        if loser == Color.WHITE:
            return cls.BLACK_WINS_BY_CHECKMATE
        return cls.WHITE_WINS_BY_CHECKMATE

    @property
    def is_terminal(self) -> bool:
        return self not in (SessionState.WHITE_TO_MOVE, SessionState.BLACK_TO_MOVE)

    @property
    def winner(self) -> Color | None:
        if self == SessionState.WHITE_WINS_BY_CHECKMATE:
            return Color.WHITE
        if self == SessionState.BLACK_WINS_BY_CHECKMATE:
            return Color.BLACK
        return None


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or move-suggestion agent)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @property
    @abstractmethod
    def max_attempts(self) -> int | None:
        """Proposals allowed per turn; ``None`` means unlimited."""

    @abstractmethod
    def propose_move(
        self, snapshot: BoardSnapshot, rejections: Sequence[Rejection]
    ) -> str | None:
        """Return move text for the current turn, or ``None`` to pass control back.

        *rejections* lists this turn's refused proposals, oldest first, so
        the player can avoid repeating them. The session re-validates
        whatever comes back.
        """
