"""Board - piece placement on an 8x8 grid plus the side to move."""

from __future__ import annotations

from clichess.core.enums import Color, PieceType
from clichess.core.errors import KingMissingError
from clichess.core.piece import Piece
from clichess.core.types import BOARD_SIZE, Square, all_squares

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Indexed by :class:`Square`; empty squares hold ``None``.
    """

    __slots__ = ("_grid", "side_to_move")

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.side_to_move = side_to_move

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.in_bounds:
            raise IndexError(f"Square off the board: {sq}")
        return self._grid[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.in_bounds:
            raise IndexError(f"Square off the board: {sq}")
        self._grid[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """``(square, piece)`` pairs for every *color* piece, a8 first."""
        found: list[tuple[Square, Piece]] = []
        for sq in all_squares():
            piece = self._grid[sq.row][sq.col]
            if piece is not None and piece.color == color:
                found.append((sq, piece))
        return found

    def king_square(self, color: Color) -> Square:
        """Return the square of *color*'s king."""
        king = Piece(color, PieceType.KING)
        for sq in all_squares():
            if self._grid[sq.row][sq.col] == king:
                return sq
        raise KingMissingError(f"No {color} king on board")

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Immutable copy of the grid, row 0 (rank 8) first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate a piece without any rule checks; return what was on *to_sq*."""
        captured = self[to_sq]
        self[to_sq] = self[from_sq]
        self[from_sq] = None
        return captured

    def copy(self) -> Board:
        """Independent copy: no row list is shared with the original."""
        b = Board(self.side_to_move)
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid and self.side_to_move == other.side_to_move

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{BOARD_SIZE - row_idx} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
