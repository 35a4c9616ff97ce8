"""Pseudo-legal move validation: geometry, path clearance, captures, turn.

Whether the move leaves the mover's own king attacked is *not* decided
here; see :mod:`clichess.core.move_generator` for that filter.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from clichess.core.board import Board
from clichess.core.enums import PieceType
from clichess.core.errors import MoveError
from clichess.core.move import Move
from clichess.core.piece import Piece
from clichess.core.types import Square

KNIGHT_JUMPS: frozenset[tuple[int, int]] = frozenset({(2, 1), (1, 2)})


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_sq: Square, to_sq: Square) -> Iterator[Square]:
    """Squares strictly between two aligned squares, walking from *from_sq*.

    The squares must share a row, a column or a diagonal.
    """
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)
    current = from_sq.offset(step_row, step_col)
    while current != to_sq:
        yield current
        current = current.offset(step_row, step_col)


class MoveValidator:
    """Stateless predicate deciding whether a move obeys the piece rules."""

    @staticmethod
    def validate(
        board: Board, move: Move, enforce_turn: bool = True
    ) -> MoveError | None:
        """Return ``None`` if *move* is pseudo-legal, else the first failure.

        ``enforce_turn=False`` asks "could this piece go there at all",
        which is what attack detection and move enumeration need.

        A same-square move is reported as ``NO_OP_MOVE`` before the
        friendly-capture check runs, since the source piece would
        otherwise count as a friendly target.
        """
        from_sq, to_sq = move.from_sq, move.to_sq
        if not (from_sq.in_bounds and to_sq.in_bounds):
            return MoveError.OUT_OF_BOUNDS

        piece = board[from_sq]
        if piece is None:
            return MoveError.EMPTY_SOURCE
        if enforce_turn and piece.color != board.side_to_move:
            return MoveError.WRONG_TURN

        if from_sq == to_sq:
            return MoveError.NO_OP_MOVE
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return MoveError.FRIENDLY_CAPTURE

        return _GEOMETRY[piece.piece_type](board, piece, from_sq, to_sq)

    @staticmethod
    def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the two is empty."""
        return all(board.is_empty(sq) for sq in squares_between(from_sq, to_sq))


# -- Per-piece geometry -------------------------------------------------------


def _pawn(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    direction = piece.color.pawn_direction
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col
    target = board[to_sq]

    if d_col == 0 and d_row == direction:
        return None if target is None else MoveError.GEOMETRY_INVALID

    if d_col == 0 and d_row == 2 * direction:
        if from_sq.row != piece.color.pawn_start_row or target is not None:
            return MoveError.GEOMETRY_INVALID
        if not board.is_empty(from_sq.offset(direction, 0)):
            return MoveError.PATH_BLOCKED
        return None

    if abs(d_col) == 1 and d_row == direction:
        # Friendly targets were already refused, so any piece here is an enemy.
        return None if target is not None else MoveError.GEOMETRY_INVALID

    return MoveError.GEOMETRY_INVALID


def _knight(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    jump = (abs(to_sq.row - from_sq.row), abs(to_sq.col - from_sq.col))
    return None if jump in KNIGHT_JUMPS else MoveError.GEOMETRY_INVALID


def _is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq.row - from_sq.row)
    return d_row != 0 and d_row == abs(to_sq.col - from_sq.col)


def _is_orthogonal(from_sq: Square, to_sq: Square) -> bool:
    return (from_sq.row == to_sq.row) != (from_sq.col == to_sq.col)


def _slide(
    board: Board, from_sq: Square, to_sq: Square, aligned: bool
) -> MoveError | None:
    if not aligned:
        return MoveError.GEOMETRY_INVALID
    if not MoveValidator.is_path_clear(board, from_sq, to_sq):
        return MoveError.PATH_BLOCKED
    return None


def _bishop(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    return _slide(board, from_sq, to_sq, _is_diagonal(from_sq, to_sq))


def _rook(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    return _slide(board, from_sq, to_sq, _is_orthogonal(from_sq, to_sq))


def _queen(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    aligned = _is_diagonal(from_sq, to_sq) or _is_orthogonal(from_sq, to_sq)
    return _slide(board, from_sq, to_sq, aligned)


def _king(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> MoveError | None:
    reach = max(abs(to_sq.row - from_sq.row), abs(to_sq.col - from_sq.col))
    return None if reach == 1 else MoveError.GEOMETRY_INVALID


_GEOMETRY: dict[
    PieceType, Callable[[Board, Piece, Square, Square], MoveError | None]
] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}
