"""Plain-text board rendering for the terminal."""

from __future__ import annotations

from clichess.core.piece import Piece
from clichess.core.types import BOARD_SIZE
from clichess.game.state import BoardSnapshot

_FILES = "abcdefgh"
_SEPARATOR = "    +" + "---+" * BOARD_SIZE


def _cell(piece: Piece | None, unicode: bool) -> str:
    if piece is None:
        return " "
    return piece.symbol if unicode else str(piece)


def render_board(snapshot: BoardSnapshot, unicode: bool = False) -> str:
    """Boxed diagram, rank 8 at the top, uppercase = white."""
    lines = [_SEPARATOR]
    for row_idx, row in enumerate(snapshot.rows):
        cells = "|".join(f" {_cell(p, unicode)} " for p in row)
        lines.append(f"  {BOARD_SIZE - row_idx} |{cells}|")
        lines.append(_SEPARATOR)
    lines.append("      " + "   ".join(_FILES))
    return "\n".join(lines)

