"""Session value objects: history records, rejections and display snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from clichess.core.board import Board
from clichess.core.enums import Color, GameResult
from clichess.core.errors import MoveError
from clichess.core.move import Move
from clichess.core.piece import Piece
from clichess.core.types import Square
from clichess.game.interfaces import SessionState


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    ply: int
    move: Move
    piece: Piece
    captured: Piece | None = None
    result_after: GameResult = GameResult.ONGOING

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_check(self) -> bool:
        return self.result_after in (GameResult.CHECK, GameResult.CHECKMATE)


@dataclass(frozen=True)
class Rejection:
    """A refused proposal and why it was refused."""

    text: str
    move: Move | None
    error: MoveError

    def __str__(self) -> str:
        shown = str(self.move) if self.move is not None else repr(self.text)
        return f"{shown}: {self.error.message}"


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view of a session for renderers and collaborators."""

    rows: tuple[tuple[Piece | None, ...], ...]
    side_to_move: Color
    result: GameResult
    state: SessionState
    last_move: Move | None = None

    def piece_at(self, sq: Square) -> Piece | None:
        return self.rows[sq.row][sq.col]

    @property
    def is_game_over(self) -> bool:
        return self.state.is_terminal

    def to_board(self) -> Board:
        """Fresh, independent board with the snapshot's placement."""
        board = Board(self.side_to_move)
        for row_idx, row in enumerate(self.rows):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    board[Square(row_idx, col_idx)] = piece
        return board
