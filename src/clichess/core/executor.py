"""MoveExecutor - commits an already-validated move to the board."""

from __future__ import annotations

import logging

from clichess.core.board import Board
from clichess.core.enums import PieceType
from clichess.core.move import Move
from clichess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class MoveExecutor:
    """Applies moves without re-validating them.

    Callers must only pass moves that survived the full legality
    pipeline (:meth:`LegalMoveGenerator.check_move`).
    """

    @staticmethod
    def apply(board: Board, move: Move) -> Piece | None:
        """Move the piece and return the captured piece, if any.

        The side to move is left untouched; flipping the turn belongs to
        the session.
        """
        mover = board[move.from_sq]
        if mover is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = board.move_piece(move.from_sq, move.to_sq)
        if captured is None:
            return None

        if captured.piece_type == PieceType.KING:
            # A filtered legal move can never reach a king; the filter is broken.
            _LOGGER.error(
                "Invariant violation: %s captured the %s on %s",
                mover.description,
                captured.description,
                move.to_sq,
            )
        else:
            _LOGGER.info(
                "%s captures %s on %s", mover.description, captured.description, move.to_sq
            )
        return captured
