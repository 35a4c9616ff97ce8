"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a pawn step (rows count down from rank 8)."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as the integer value otherwise.
        return format(str(self), format_spec)


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Status of the side whose move it currently is."""

    ONGOING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameResult.CHECKMATE, GameResult.STALEMATE)
