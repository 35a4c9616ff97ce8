"""BoardWidget — 8x8 grid of square buttons rendering a BoardSnapshot."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QWidget

from clichess.core.move import Move
from clichess.core.types import BOARD_SIZE, Square, all_squares
from clichess.game.state import BoardSnapshot

LIGHT_SQUARE = "#f0d9b5"
DARK_SQUARE = "#b58863"
SELECTED_SQUARE = "#f6f669"
LAST_MOVE_SQUARE = "#cdd26a"


class BoardWidget(QWidget):
    """Displays a snapshot and turns two clicks into a move request.

    The widget knows nothing about legality: it only refuses to start a
    selection on an empty square or an opposing piece, and leaves every
    other decision to whoever handles :attr:`move_requested`.

    Signals:
        move_requested(Move): Emitted when the user picks a source and a target.
    """

    move_requested = pyqtSignal(Move)

    TILE = 56  # px per square

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._snapshot: BoardSnapshot | None = None
        self._selected_sq: Square | None = None
        self._interactive = True
        self._buttons: dict[Square, QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(4, 4, 4, 4)

        piece_font = QFont("DejaVu Sans", self.TILE // 2)
        coord_font = QFont("DejaVu Sans", 9)

        for sq in all_squares():
            btn = QPushButton()
            btn.setFixedSize(self.TILE, self.TILE)
            btn.setFont(piece_font)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.clicked.connect(lambda _checked=False, s=sq: self.square_clicked(s))
            layout.addWidget(btn, sq.row, sq.col + 1)
            self._buttons[sq] = btn

        for row in range(BOARD_SIZE):
            label = QLabel(str(BOARD_SIZE - row))
            label.setFont(coord_font)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label, row, 0)
        for col, letter in enumerate("abcdefgh"):
            label = QLabel(letter)
            label.setFont(coord_font)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label, BOARD_SIZE, col + 1)

        self._restyle()

    # ── Public API ───────────────────────────────────────────────────────

    def set_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Show *snapshot* (clears any pending selection)."""
        self._snapshot = snapshot
        self._selected_sq = None
        for sq, btn in self._buttons.items():
            piece = snapshot.piece_at(sq)
            btn.setText(piece.symbol if piece is not None else "")
            btn.setToolTip(f"{sq} {piece.description}" if piece is not None else str(sq))
        self._restyle()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._selected_sq = None
            self._restyle()

    def is_interactive(self) -> bool:
        return self._interactive

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    def square_button(self, sq: Square) -> QPushButton:
        return self._buttons[sq]

    # ── Interaction ──────────────────────────────────────────────────────

    def square_clicked(self, sq: Square) -> None:
        if not self._interactive or self._snapshot is None:
            return
        if self._snapshot.is_game_over:
            return

        piece = self._snapshot.piece_at(sq)
        own_piece = piece is not None and piece.color == self._snapshot.side_to_move

        if self._selected_sq is None:
            if own_piece:
                self._selected_sq = sq
                self._restyle()
            return

        if sq == self._selected_sq:
            self._selected_sq = None
            self._restyle()
            return

        if own_piece:
            self._selected_sq = sq
            self._restyle()
            return

        move = Move(self._selected_sq, sq)
        self._selected_sq = None
        self._restyle()
        self.move_requested.emit(move)

    # ── Styling ──────────────────────────────────────────────────────────

    def _restyle(self) -> None:
        last = self._snapshot.last_move if self._snapshot is not None else None
        highlighted = {last.from_sq, last.to_sq} if last is not None else set()
        for sq, btn in self._buttons.items():
            if sq == self._selected_sq:
                color = SELECTED_SQUARE
            elif sq in highlighted:
                color = LAST_MOVE_SQUARE
            else:
                color = LIGHT_SQUARE if (sq.row + sq.col) % 2 == 0 else DARK_SQUARE
            btn.setStyleSheet(
                f"QPushButton {{ background-color: {color}; border: none; color: black; }}"
            )
