"""Piece value object.

An empty square is represented by ``None`` wherever a ``Piece | None`` is
expected; pieces never know which square they stand on.
"""

from __future__ import annotations

from dataclasses import dataclass

from clichess.core.enums import Color, PieceType

_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

_UNICODE_WHITE: dict[PieceType, str] = {
    PieceType.PAWN: "♙",
    PieceType.KNIGHT: "♘",
    PieceType.BISHOP: "♗",
    PieceType.ROOK: "♖",
    PieceType.QUEEN: "♕",
    PieceType.KING: "♔",
}
_UNICODE_BLACK: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable ``(color, piece_type)`` pair."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Letter form: uppercase = white, lowercase = black."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its letter, e.g. ``'n'`` → black knight."""
        ptype = _LETTER_TYPES.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        table = _UNICODE_WHITE if self.color == Color.WHITE else _UNICODE_BLACK
        return table[self.piece_type]

    @property
    def description(self) -> str:
        """Human-readable name, e.g. ``'white knight'``."""
        return f"{self.color} {self.piece_type.name.lower()}"
