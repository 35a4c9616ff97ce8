"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from clichess.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """An ordered ``(from_sq, to_sq)`` pair.

    No promotion, castling or en-passant metadata: those rules are not
    part of this engine.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"

    @property
    def uci(self) -> str:
        """Long-algebraic form, e.g. ``'e2e4'``."""
        return str(self)
