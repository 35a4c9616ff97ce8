"""Square value type and algebraic-notation helpers.

Board layout (rows stored top-down, ranks count down):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

So ``a8`` is ``Square(0, 0)`` and ``h1`` is ``Square(7, 7)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """A ``(row, col)`` coordinate pair.

    Off-board coordinates are representable on purpose: move validation
    reports them instead of failing at construction time.
    """

    row: int
    col: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def name(self) -> str:
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self) if self.in_bounds else f"({self.row}, {self.col})"


def all_squares() -> Iterator[Square]:
    """All 64 squares, a8 first, row by row."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    if not sq.in_bounds:
        raise ValueError(f"Square off the board: ({sq.row}, {sq.col})")
    return _FILES[sq.col] + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse a square name, case-insensitive, e.g. ``'E4'`` → ``Square(4, 4)``."""
    text = name.lower()
    if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(text[1]), _FILES.index(text[0]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
