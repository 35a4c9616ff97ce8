"""Check detection built on the move validator's geometry rules."""

from __future__ import annotations

from collections.abc import Iterator

from clichess.core.board import Board
from clichess.core.enums import Color
from clichess.core.move import Move
from clichess.core.types import Square
from clichess.core.validator import MoveValidator


def _attacks_on_king(board: Board, color: Color) -> Iterator[Square]:
    king_sq = board.king_square(color)
    for sq, _piece in board.pieces(color.opposite):
        if MoveValidator.validate(board, Move(sq, king_sq), enforce_turn=False) is None:
            yield sq


class CheckDetector:
    """Answers "is this king attacked" without touching the board.

    An opposing piece attacks the king when the validator, with turn
    enforcement off, would let it move onto the king's square. A pawn
    therefore only attacks diagonally and sliders need a clear path.
    Both methods raise :class:`~clichess.core.errors.KingMissingError`
    if the king is absent.
    """

    @staticmethod
    def attackers(board: Board, color: Color) -> list[Square]:
        """Squares of opposing pieces attacking *color*'s king, a8 first."""
        return list(_attacks_on_king(board, color))

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return next(_attacks_on_king(board, color), None) is not None
