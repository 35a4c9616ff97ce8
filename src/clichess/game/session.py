"""GameSession — owns the authoritative board and drives the turn FSM.

Coordinates: Players, Board, LegalMoveGenerator, Rules, MoveExecutor.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from clichess.core.board import Board
from clichess.core.enums import Color, GameResult
from clichess.core.errors import MoveError, MoveSuggestionError
from clichess.core.executor import MoveExecutor
from clichess.core.move import Move
from clichess.core.move_generator import LegalMoveGenerator
from clichess.core.notation import board_from_fen, extract_suggested_move
from clichess.core.rules import Rules
from clichess.game.config import GameConfig
from clichess.game.interfaces import IPlayer, SessionState
from clichess.game.player import (
    HumanPlayer,
    MoveSuggester,
    RandomSuggester,
    SuggestionPlayer,
)
from clichess.game.state import BoardSnapshot, MoveRecord, Rejection

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
RejectedCallback = Callable[[Rejection], None]
GameOverCallback = Callable[[SessionState], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One game between two players on one authoritative board.

    Every turn is read-classify-validate-apply: the side to move is
    classified first, a submitted move must pass the full legality
    pipeline, and only then is it committed and the turn flipped.

    The starting board must be playable (see :meth:`Rules.validate_position`);
    otherwise ``ValueError`` is raised.
    """

    __slots__ = ("_board", "_state", "_result", "_players", "_history", "events")

    def __init__(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        board: Board | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        Rules.validate_position(self._board)
        self._players: dict[Color, IPlayer] = {}
        if white is not None:
            self._players[Color.WHITE] = white
        if black is not None:
            self._players[Color.BLACK] = black
        self._history: list[MoveRecord] = []
        self._state = SessionState.to_move(self._board.side_to_move)
        self._result = GameResult.ONGOING
        self.events = SessionEvents()
        self.refresh()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        suggest: MoveSuggester | None = None,
        human_name: str = "You",
        agent_name: str = "AI",
    ) -> GameSession:
        """Human versus suggestion agent, as described by *config*."""
        human = HumanPlayer(config.human_color, human_name)
        agent = SuggestionPlayer(
            config.agent_color,
            suggest if suggest is not None else RandomSuggester(config.seed),
            name=agent_name,
            max_attempts=config.max_attempts,
        )
        players = {human.color: human, agent.color: agent}
        board = board_from_fen(config.fen) if config.fen else None
        return cls(players[Color.WHITE], players[Color.BLACK], board=board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """A copy of the current board; the session's own is never handed out."""
        return self._board.copy()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def result(self) -> GameResult:
        """Classification of the side to move."""
        return self._result

    @property
    def side_to_move(self) -> Color:
        return self._board.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._state.is_terminal

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> set[Move]:
        """Legal moves for the side to move (empty once the game is over)."""
        if self.is_game_over:
            return set()
        return LegalMoveGenerator.generate(self._board, self._board.side_to_move)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            rows=self._board.rows(),
            side_to_move=self._board.side_to_move,
            result=self._result,
            state=self._state,
            last_move=self._history[-1].move if self._history else None,
        )

    # ── Turn handling ────────────────────────────────────────────────────

    def refresh(self) -> SessionState:
        """Classify the side to move and enter a terminal state if needed."""
        if self.is_game_over:
            return self._state
        color = self._board.side_to_move
        self._result = Rules.classify(self._board, color)
        if self._result == GameResult.CHECKMATE:
            self._state = SessionState.checkmated(color)
        elif self._result == GameResult.STALEMATE:
            self._state = SessionState.STALEMATE
        else:
            self._state = SessionState.to_move(color)
        return self._state

    def submit_move(self, move: Move) -> MoveError | None:
        """Validate and commit *move* for the side to move.

        Returns ``None`` on success, otherwise the reason it was refused
        (the board is then unchanged).
        """
        if self.is_game_over:
            return MoveError.GAME_OVER

        error = LegalMoveGenerator.check_move(self._board, move, enforce_turn=True)
        if error is not None:
            _LOGGER.debug("Rejected %s for %s: %s", move, self.side_to_move, error.message)
            self._emit_rejected(Rejection(str(move), move, error))
            return error

        piece = self._board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")
        captured = MoveExecutor.apply(self._board, move)
        self._board.side_to_move = self._board.side_to_move.opposite
        self.refresh()

        record = MoveRecord(
            ply=len(self._history) + 1,
            move=move,
            piece=piece,
            captured=captured,
            result_after=self._result,
        )
        self._history.append(record)
        _LOGGER.debug("Ply %d: %s %s", record.ply, piece.description, move)

        self._emit_move(record)
        if self.is_game_over:
            _LOGGER.info("Game over: %s", self._state.name)
            self._emit_game_over(self._state)
        return None

    def play_turn(self) -> MoveRecord | None:
        """Ask the current player for a move until one is legal.

        Returns the committed record, or ``None`` when the game is over or
        a human player has no input to give. Raises
        :class:`MoveSuggestionError` once the player's attempts run out.
        """
        if self.is_game_over:
            return None
        player = self.current_player
        if player is None:
            raise RuntimeError(f"No player for {self.side_to_move}")

        rejections: list[Rejection] = []
        attempts = 0
        while player.max_attempts is None or attempts < player.max_attempts:
            attempts += 1
            text = player.propose_move(self.snapshot(), tuple(rejections))
            if text is None:
                return None

            move = extract_suggested_move(text)
            if move is None:
                rejection = Rejection(text.strip(), None, MoveError.UNPARSEABLE)
                self._emit_rejected(rejection)
                rejections.append(rejection)
                continue

            error = self.submit_move(move)
            if error is None:
                return self._history[-1]
            rejections.append(Rejection(text.strip(), move, error))

        raise MoveSuggestionError(
            f"{player.name} found no legal move in {attempts} attempt(s); "
            f"last: {rejections[-1]}"
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_rejected(self, rejection: Rejection) -> None:
        for cb in self.events.on_rejected:
            cb(rejection)

    def _emit_game_over(self, state: SessionState) -> None:
        for cb in self.events.on_game_over:
            cb(state)
