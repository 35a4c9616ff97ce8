"""Interactive terminal front end: one human against a suggestion agent."""

from __future__ import annotations

import logging
from collections.abc import Callable

from clichess.cli.render import render_board
from clichess.core.check import CheckDetector
from clichess.core.enums import GameResult
from clichess.core.errors import MoveSuggestionError
from clichess.core.notation import parse_move_input
from clichess.game.interfaces import IPlayer, SessionState
from clichess.game.player import SuggestionPlayer
from clichess.game.session import GameSession
from clichess.game.state import Rejection

_LOGGER = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT_WORDS = frozenset({"quit", "exit"})


class TerminalGame:
    """Prompt loop around a :class:`GameSession`.

    Human turns read from *input_fn*: move text is submitted, anything
    else is treated as chat for the agent. Agent turns go through
    :meth:`GameSession.play_turn` and its bounded retries.
    """

    def __init__(
        self,
        session: GameSession,
        input_fn: InputFn = input,
        output: OutputFn = print,
        unicode: bool = False,
    ) -> None:
        self._session = session
        self._input = input_fn
        self._out = output
        self._unicode = unicode
        session.events.on_rejected.append(self._on_rejected)

    def run(self) -> SessionState:
        """Play until the game ends, the human quits or the agent gives up."""
        self._out("Welcome to CLI Chess!")
        self._out("Enter moves like 'e2 e4' or 'e2e4'. Anything else is chat. 'quit' exits.")

        session = self._session
        while not session.is_game_over:
            self._show_board()
            player = session.current_player
            if player is None:
                raise RuntimeError(f"No player for {session.side_to_move}")

            label = "Your" if player.is_human else f"{player.name}'s"
            self._out(f"--- {label} turn ({session.side_to_move.name.title()}) ---")
            if session.result == GameResult.CHECK:
                self._out(self._check_banner())

            if player.is_human:
                if not self._human_turn():
                    self._out("Exiting game. Goodbye!")
                    return session.state
            elif not self._agent_turn(player):
                return session.state

        self._show_board()
        self._out("=" * 16 + " GAME OVER " + "=" * 16)
        self._out(self.end_message(session.state))
        return session.state

    @staticmethod
    def end_message(state: SessionState) -> str:
        if state == SessionState.STALEMATE:
            return "STALEMATE! It's a draw!"
        winner = state.winner
        if winner is not None:
            return f"CHECKMATE! {winner.name.title()} wins!"
        return "Game in progress."

    # ── Turns ────────────────────────────────────────────────────────────

    def _human_turn(self) -> bool:
        """Read input until a legal move is made; ``False`` if the human quits."""
        while True:
            try:
                text = self._input("Enter move or chat message: ").strip()
            except EOFError:
                return False
            if text.lower() in QUIT_WORDS:
                return False
            if not text:
                continue

            move = parse_move_input(text)
            if move is None:
                self._chat(text)
                continue

            error = self._session.submit_move(move)
            if error is None:
                return True
            # The rejection callback has already reported the reason.

    def _agent_turn(self, player: IPlayer) -> bool:
        self._out(f"{player.name} is thinking...")
        try:
            record = self._session.play_turn()
        except MoveSuggestionError as exc:
            _LOGGER.warning("Agent gave up: %s", exc)
            self._out(f"!!! {player.name} failed to provide a valid move. Game abandoned. !!!")
            return False
        if record is not None:
            suffix = f", capturing {record.captured.description}" if record.captured else ""
            self._out(f"{player.name} plays {record.move}{suffix}")
        return True

    def _chat(self, message: str) -> None:
        opponent = self._session.player(self._session.side_to_move.opposite)
        if isinstance(opponent, SuggestionPlayer) and opponent.can_chat:
            reply = opponent.chat(message, self._session.snapshot())
            if reply:
                self._out(f"{opponent.name} says: {reply.strip()}")
                return
        self._out(f"Not a move: {message!r}. Use the form 'e2 e4'.")

    # ── Output helpers ───────────────────────────────────────────────────

    def _show_board(self) -> None:
        self._out("")
        self._out(render_board(self._session.snapshot(), unicode=self._unicode))
        self._out("")

    def _check_banner(self) -> str:
        side = self._session.side_to_move
        attackers = CheckDetector.attackers(self._session.board, side)
        sources = ", ".join(str(sq) for sq in attackers)
        return f"!!! {side.name.title()} king is in check from {sources} !!!"

    def _on_rejected(self, rejection: Rejection) -> None:
        player = self._session.current_player
        who = "Invalid move" if player is None or player.is_human else f"{player.name} error"
        self._out(f"{who}: {rejection}")
