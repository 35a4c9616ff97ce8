"""Concrete player implementations and the bundled move suggester."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from clichess.core.enums import Color
from clichess.core.move_generator import LegalMoveGenerator
from clichess.game.interfaces import IPlayer
from clichess.game.state import BoardSnapshot, Rejection

_LOGGER = logging.getLogger(__name__)

MoveSuggester = Callable[[BoardSnapshot, Sequence[Rejection]], str]
ChatResponder = Callable[[str, BoardSnapshot], str]
InputProvider = Callable[[BoardSnapshot, Sequence[Rejection]], str | None]

DEFAULT_SUGGESTION_ATTEMPTS = 3


class HumanPlayer(IPlayer):
    """A human participant.

    Without an *input_provider* moves arrive via ``session.submit_move()``
    and :meth:`propose_move` returns ``None``.
    """

    __slots__ = ("_color", "_name", "_input_provider")

    def __init__(
        self,
        color: Color,
        name: str = "",
        input_provider: InputProvider | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._input_provider = input_provider

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    @property
    def max_attempts(self) -> int | None:
        return None

    def propose_move(
        self, snapshot: BoardSnapshot, rejections: Sequence[Rejection]
    ) -> str | None:
        if self._input_provider is None:
            return None
        return self._input_provider(snapshot, rejections)


class SuggestionPlayer(IPlayer):
    """A participant whose moves come from an external suggester.

    The suggester is any callable ``(snapshot, rejections) -> str``; its
    answer may be free text as long as it contains a ``Move: e7e5`` line.
    Nothing it says is trusted: the session validates every proposal.

    Args:
        color: Side the agent plays.
        suggest: The move-suggestion callable.
        name: Display name.
        max_attempts: Proposals allowed per turn before giving up.
        chat: Optional ``(message, snapshot) -> reply`` for non-move input.
    """

    __slots__ = ("_color", "_name", "_suggest", "_max_attempts", "_chat")

    def __init__(
        self,
        color: Color,
        suggest: MoveSuggester,
        name: str = "AI",
        max_attempts: int = DEFAULT_SUGGESTION_ATTEMPTS,
        chat: ChatResponder | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self._color = color
        self._name = name
        self._suggest = suggest
        self._max_attempts = max_attempts
        self._chat = chat

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def max_attempts(self) -> int | None:
        return self._max_attempts

    @property
    def can_chat(self) -> bool:
        return self._chat is not None

    def propose_move(
        self, snapshot: BoardSnapshot, rejections: Sequence[Rejection]
    ) -> str | None:
        if rejections:
            _LOGGER.debug(
                "%s retrying after %d rejection(s); last: %s",
                self._name,
                len(rejections),
                rejections[-1],
            )
        return self._suggest(snapshot, rejections)

    def chat(self, message: str, snapshot: BoardSnapshot) -> str | None:
        """Forward a chat message; ``None`` when the agent does not chat."""
        if self._chat is None:
            return None
        return self._chat(message, snapshot)


class RandomSuggester:
    """Suggests a uniformly random legal move, avoiding rejected ones.

    Stands in for a real move-suggestion agent and answers in the same
    ``Move: <from><to>`` format such an agent is asked to use.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def __call__(self, snapshot: BoardSnapshot, rejections: Sequence[Rejection]) -> str:
        board = snapshot.to_board()
        refused = {r.move for r in rejections}
        candidates = sorted(
            (
                m
                for m in LegalMoveGenerator.generate(board, snapshot.side_to_move)
                if m not in refused
            ),
            key=str,
        )
        if not candidates:
            return "I have no move to offer."
        move = self._rng.choice(candidates)
        return f"Picking at random.\nMove: {move}"
