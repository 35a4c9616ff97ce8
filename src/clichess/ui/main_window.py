"""MainWindow — Qt front end for a human-versus-agent session."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from clichess.core.enums import GameResult
from clichess.core.errors import MoveSuggestionError
from clichess.core.move import Move
from clichess.game.config import GameConfig
from clichess.game.interfaces import SessionState
from clichess.game.player import MoveSuggester
from clichess.game.session import GameSession
from clichess.game.state import BoardSnapshot
from clichess.ui.board_widget import BoardWidget

_LOGGER = logging.getLogger(__name__)


def status_text(snapshot: BoardSnapshot) -> str:
    """One-line status for the side to move or the final outcome."""
    state = snapshot.state
    if state == SessionState.STALEMATE:
        return "Stalemate: draw."
    if state.winner is not None:
        return f"Checkmate: {state.winner.name.title()} wins."
    side = snapshot.side_to_move.name.title()
    if snapshot.result == GameResult.CHECK:
        return f"{side} to move (check!)"
    return f"{side} to move."


class MainWindow(QMainWindow):
    """Board plus a status line; the agent replies right after each human move."""

    def __init__(
        self,
        config: GameConfig | None = None,
        suggest: MoveSuggester | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config if config is not None else GameConfig()
        self._suggest = suggest
        self._session: GameSession
        self._setup_ui()
        self.new_game()

    def _setup_ui(self) -> None:
        self.setWindowTitle("CLI Chess")
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self._board_widget = BoardWidget(central)
        self._board_widget.move_requested.connect(self._on_move_requested)
        layout.addWidget(self._board_widget)

        row = QHBoxLayout()
        self._status = QLabel(central)
        self._status.setFont(QFont("DejaVu Sans", 11))
        row.addWidget(self._status, 1)
        self._btn_new = QPushButton("New game", central)
        self._btn_new.clicked.connect(self.new_game)
        row.addWidget(self._btn_new)
        layout.addLayout(row)

        self.setCentralWidget(central)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status(self) -> str:
        return self._status.text()

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._session = GameSession.from_config(self._config, self._suggest)
        self._board_widget.set_interactive(True)
        self._sync()
        self._advance_agent()

    def _on_move_requested(self, move: Move) -> None:
        error = self._session.submit_move(move)
        if error is not None:
            self._status.setText(f"Illegal move {move}: {error.message}.")
            return
        self._sync()
        self._advance_agent()

    def _advance_agent(self) -> None:
        """Let non-human players move until a human is to move or the game ends."""
        while not self._session.is_game_over:
            player = self._session.current_player
            if player is None or player.is_human:
                break
            try:
                self._session.play_turn()
            except MoveSuggestionError as exc:
                _LOGGER.warning("Agent gave up: %s", exc)
                self._board_widget.set_interactive(False)
                self._status.setText(f"{player.name} could not find a legal move.")
                return
            self._sync()

    def _sync(self) -> None:
        snapshot = self._session.snapshot()
        self._board_widget.set_snapshot(snapshot)
        self._status.setText(status_text(snapshot))
        if snapshot.is_game_over:
            self._board_widget.set_interactive(False)
