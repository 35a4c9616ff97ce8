"""High-level chess rules: check, checkmate and stalemate classification."""

from __future__ import annotations

from clichess.core.board import Board
from clichess.core.check import CheckDetector
from clichess.core.enums import Color, GameResult, PieceType
from clichess.core.move_generator import LegalMoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Draw rules (repetition, fifty moves, insufficient material) are not
    modelled; the only terminal verdicts are checkmate and stalemate.
    """

    @staticmethod
    def classify(board: Board, color: Color | None = None) -> GameResult:
        """Status of *color* (default: the side to move) before it acts."""
        if color is None:
            color = board.side_to_move
        in_check = CheckDetector.is_in_check(board, color)
        has_moves = bool(LegalMoveGenerator.generate(board, color))

        if not has_moves:
            return GameResult.CHECKMATE if in_check else GameResult.STALEMATE
        return GameResult.CHECK if in_check else GameResult.ONGOING

    @staticmethod
    def validate_position(board: Board) -> None:
        """Raise ``ValueError`` unless *board* is a playable position.

        Each side needs exactly one king, and the side that just moved
        must not have left its own king attacked.
        """
        for color in Color:
            kings = sum(
                1 for _sq, piece in board.pieces(color) if piece.piece_type == PieceType.KING
            )
            if kings != 1:
                raise ValueError(f"Expected one {color} king, found {kings}")

        waiting = board.side_to_move.opposite
        if CheckDetector.is_in_check(board, waiting):
            raise ValueError(
                f"The {waiting} king is in check with {board.side_to_move} to move"
            )

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return CheckDetector.is_in_check(board, board.side_to_move)

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        return Rules.classify(board) == GameResult.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        return Rules.classify(board) == GameResult.STALEMATE
