"""Game configuration shared by the terminal and Qt front ends."""

from __future__ import annotations

from dataclasses import dataclass

from clichess.core.enums import Color
from clichess.core.notation import board_from_fen
from clichess.core.rules import Rules
from clichess.game.player import DEFAULT_SUGGESTION_ATTEMPTS


@dataclass(frozen=True)
class GameConfig:
    """Options for a human-versus-agent session.

    Args:
        human_color: Side the human plays; the agent takes the other.
        max_attempts: Proposals the agent may make per turn.
        seed: Seed for the bundled random suggester.
        fen: Optional starting placement (FEN board + side fields); it must
            describe a playable position.
        unicode: Render pieces as unicode symbols instead of letters.
    """

    human_color: Color = Color.WHITE
    max_attempts: int = DEFAULT_SUGGESTION_ATTEMPTS
    seed: int | None = None
    fen: str | None = None
    unicode: bool = False

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")
        if self.fen is not None:
            Rules.validate_position(board_from_fen(self.fen))

    @property
    def agent_color(self) -> Color:
        return self.human_color.opposite
