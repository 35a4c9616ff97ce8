"""Legal move generation: pseudo-legal candidates filtered for self-check."""

from __future__ import annotations

from clichess.core.board import Board
from clichess.core.check import CheckDetector
from clichess.core.enums import Color
from clichess.core.errors import MoveError
from clichess.core.move import Move
from clichess.core.types import Square, all_squares
from clichess.core.validator import MoveValidator


class LegalMoveGenerator:
    """Enumerates and checks strictly legal moves.

    Every hypothetical move is played on a scratch :meth:`Board.copy`;
    the board handed in is only ever read, so all methods are safe to
    call speculatively (e.g. for move hints).
    """

    # -- Public API ---------------------------------------------------------

    @staticmethod
    def generate(board: Board, color: Color) -> set[Move]:
        """All legal moves for *color*, regardless of whose turn it is."""
        legal: set[Move] = set()
        for from_sq, _piece in board.pieces(color):
            legal |= LegalMoveGenerator._moves_from(board, from_sq)
        return legal

    @staticmethod
    def moves_from(board: Board, sq: Square) -> set[Move]:
        """Legal moves of the piece on *sq* (empty set for an empty square)."""
        if not sq.in_bounds or board.is_empty(sq):
            return set()
        return LegalMoveGenerator._moves_from(board, sq)

    @staticmethod
    def leaves_king_in_check(board: Board, move: Move) -> bool:
        """Would the mover's king be attacked after *move*?

        *move* must already be pseudo-legal (its source holds a piece).
        """
        mover = board[move.from_sq]
        if mover is None:
            raise ValueError(f"No piece on {move.from_sq}")
        scratch = board.copy()
        scratch.move_piece(move.from_sq, move.to_sq)
        return CheckDetector.is_in_check(scratch, mover.color)

    @staticmethod
    def check_move(
        board: Board, move: Move, enforce_turn: bool = True
    ) -> MoveError | None:
        """Full legality pipeline: piece rules first, then the self-check filter."""
        error = MoveValidator.validate(board, move, enforce_turn=enforce_turn)
        if error is not None:
            return error
        if LegalMoveGenerator.leaves_king_in_check(board, move):
            return MoveError.LEAVES_OWN_KING_IN_CHECK
        return None

    # -- Internal -----------------------------------------------------------

    @staticmethod
    def _moves_from(board: Board, from_sq: Square) -> set[Move]:
        moves: set[Move] = set()
        for to_sq in all_squares():
            move = Move(from_sq, to_sq)
            if MoveValidator.validate(board, move, enforce_turn=False) is not None:
                continue
            if not LegalMoveGenerator.leaves_king_in_check(board, move):
                moves.add(move)
        return moves
