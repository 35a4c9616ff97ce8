"""Text codecs: move input, suggestion extraction and FEN piece placement."""

from __future__ import annotations

import re

from clichess.core.board import Board
from clichess.core.enums import Color
from clichess.core.move import Move
from clichess.core.piece import Piece
from clichess.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

_MOVE_RE = re.compile(r"^([a-h][1-8])\s?([a-h][1-8])$", re.IGNORECASE)
_SUGGESTION_RE = re.compile(
    r"^\s*Move:\s*([a-h][1-8]\s?[a-h][1-8])\s*$", re.IGNORECASE | re.MULTILINE
)


# ── Moves ────────────────────────────────────────────────────────────────────


def parse_move_input(text: str) -> Move | None:
    """Parse ``'e2e4'`` / ``'E2 E4'``; ``None`` if *text* is not a move."""
    match = _MOVE_RE.match(text.strip())
    if match is None:
        return None
    return Move(parse_square(match.group(1)), parse_square(match.group(2)))


def extract_suggested_move(text: str) -> Move | None:
    """Pull the move out of a collaborator's free-text answer.

    The answer is expected to carry a line such as ``Move: g8f6``; an
    answer that is nothing but a move is accepted as well.
    """
    match = _SUGGESTION_RE.search(text.strip())
    if match is not None:
        return parse_move_input(match.group(1))
    return parse_move_input(text)


# ── FEN placement ───────────────────────────────────────────────────────────


def board_from_fen(fen: str) -> Board:
    """Build a board from FEN piece placement and an optional side field.

    Castling, en-passant and clock fields are accepted and ignored.
    """
    parts = fen.split()
    if not parts:
        raise ValueError("Empty FEN")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    # FEN lists rank 8 first, which is exactly row 0.
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        board.side_to_move = Color.WHITE
    elif side_part == "b":
        board.side_to_move = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise piece placement and side to move, e.g. ``'8/8/... w'``."""
    ranks: list[str] = []
    for row in board.rows():
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    side = "w" if board.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(ranks)} {side}"
