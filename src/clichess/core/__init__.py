"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from clichess.core import Board, Color, LegalMoveGenerator, Rules

    board = Board.initial()
    moves = LegalMoveGenerator.generate(board, Color.WHITE)
    print(len(moves), Rules.classify(board))
"""

from clichess.core.board import Board
from clichess.core.check import CheckDetector
from clichess.core.enums import Color, GameResult, PieceType
from clichess.core.errors import (
    ChessError,
    KingMissingError,
    MoveError,
    MoveSuggestionError,
)
from clichess.core.executor import MoveExecutor
from clichess.core.move import Move
from clichess.core.move_generator import LegalMoveGenerator
from clichess.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    extract_suggested_move,
    parse_move_input,
)
from clichess.core.piece import Piece
from clichess.core.rules import Rules
from clichess.core.types import Square, all_squares, parse_square, square_name
from clichess.core.validator import MoveValidator

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Rules engine
    "CheckDetector",
    "LegalMoveGenerator",
    "MoveExecutor",
    "MoveValidator",
    "Rules",
    # Errors
    "ChessError",
    "KingMissingError",
    "MoveError",
    "MoveSuggestionError",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "extract_suggested_move",
    "parse_move_input",
]
