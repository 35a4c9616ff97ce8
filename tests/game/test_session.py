"""Tests for GameSession: the turn state machine and the retry loop."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from clichess.core.board import Board
from clichess.core.enums import Color, GameResult, PieceType
from clichess.core.errors import MoveError, MoveSuggestionError
from clichess.core.move import Move
from clichess.core.notation import board_from_fen, parse_move_input
from clichess.core.piece import Piece
from clichess.core.types import D5, D8, E2, E4, E5, E7, F2, F3, G2, G4, H4
from clichess.game.config import GameConfig
from clichess.game.interfaces import SessionState
from clichess.game.player import HumanPlayer, RandomSuggester, SuggestionPlayer
from clichess.game.session import GameSession
from clichess.game.state import BoardSnapshot, MoveRecord, Rejection

FOOLS_MATE = [Move(F2, F3), Move(E7, E5), Move(G2, G4), Move(D8, H4)]


class ScriptedSuggester:
    """Replays canned answers and remembers the feedback it was given."""

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self.seen: list[tuple[Rejection, ...]] = []

    def __call__(self, snapshot: BoardSnapshot, rejections: Sequence[Rejection]) -> str:
        self.seen.append(tuple(rejections))
        return self._answers.pop(0)


def _agent_session(
    answers: Sequence[str], max_attempts: int = 3
) -> tuple[GameSession, ScriptedSuggester]:
    suggester = ScriptedSuggester(answers)
    white = SuggestionPlayer(Color.WHITE, suggester, max_attempts=max_attempts)
    return GameSession(white, HumanPlayer(Color.BLACK)), suggester


class TestInitialState:
    def test_defaults(self) -> None:
        session = GameSession()
        assert session.state == SessionState.WHITE_TO_MOVE
        assert session.result == GameResult.ONGOING
        assert session.side_to_move == Color.WHITE
        assert session.history == ()
        assert not session.is_game_over
        assert len(session.legal_moves()) == 20

    def test_board_is_a_copy(self) -> None:
        session = GameSession()
        board = session.board
        board[E2] = None
        assert session.board[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_stalemate_start_is_terminal(self, stalemate: Board) -> None:
        session = GameSession(board=stalemate)
        assert session.state == SessionState.STALEMATE
        assert session.result == GameResult.STALEMATE
        assert session.legal_moves() == set()

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/8/8/8/8/8 w",
            "4k3/8/8/8/8/8/8/K3K3 w",
            "4k3/8/8/8/8/8/8/4RK2 w",
        ],
    )
    def test_unplayable_start_is_refused(self, fen: str) -> None:
        with pytest.raises(ValueError):
            GameSession(board=board_from_fen(fen))

    def test_check_start(self) -> None:
        session = GameSession(board=board_from_fen("4k3/8/8/8/8/8/8/r3K3 w"))
        assert session.state == SessionState.WHITE_TO_MOVE
        assert session.result == GameResult.CHECK


class TestSubmitMove:
    def test_legal_move_flips_turn(self) -> None:
        session = GameSession()
        assert session.submit_move(Move(E2, E4)) is None
        assert session.state == SessionState.BLACK_TO_MOVE
        assert session.side_to_move == Color.BLACK
        record = session.history[-1]
        assert record.ply == 1
        assert record.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert not record.was_capture
        assert session.snapshot().last_move == Move(E2, E4)

    def test_wrong_turn_is_rejected(self) -> None:
        session = GameSession()
        before = session.board
        assert session.submit_move(Move(E7, E5)) == MoveError.WRONG_TURN
        assert session.board == before
        assert session.history == ()

    def test_illegal_geometry_is_rejected(self) -> None:
        session = GameSession()
        assert session.submit_move(Move(E2, E5)) == MoveError.GEOMETRY_INVALID
        assert session.state == SessionState.WHITE_TO_MOVE

    def test_self_check_is_rejected(self) -> None:
        session = GameSession(board=board_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w"))
        error = session.submit_move(parse_move_input("e2d3"))
        assert error == MoveError.LEAVES_OWN_KING_IN_CHECK

    def test_capture_is_recorded(self) -> None:
        session = GameSession(board=board_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w"))
        assert session.submit_move(Move(E4, D5)) is None
        record = session.history[-1]
        assert record.was_capture
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)

    def test_fools_mate(self) -> None:
        session = GameSession()
        for move in FOOLS_MATE:
            assert session.submit_move(move) is None, str(move)
        assert session.state == SessionState.BLACK_WINS_BY_CHECKMATE
        assert session.state.winner == Color.BLACK
        assert session.result == GameResult.CHECKMATE
        assert session.is_game_over
        last = session.history[-1]
        assert last.was_check
        assert last.result_after == GameResult.CHECKMATE

    def test_no_moves_after_game_over(self) -> None:
        session = GameSession()
        for move in FOOLS_MATE:
            session.submit_move(move)
        before = session.board
        assert session.submit_move(Move(E2, E4)) == MoveError.GAME_OVER
        assert session.board == before
        assert session.legal_moves() == set()
        assert session.play_turn() is None
        assert session.state == SessionState.BLACK_WINS_BY_CHECKMATE

    def test_check_is_reported_after_move(self) -> None:
        session = GameSession(board=board_from_fen("4k3/8/8/8/8/8/8/R3K3 w"))
        assert session.submit_move(parse_move_input("a1a8")) is None
        assert session.result == GameResult.CHECK
        assert session.history[-1].was_check


class TestEvents:
    def test_callbacks_fire(self) -> None:
        session = GameSession()
        moves: list[MoveRecord] = []
        rejected: list[Rejection] = []
        finished: list[SessionState] = []
        session.events.on_move.append(moves.append)
        session.events.on_rejected.append(rejected.append)
        session.events.on_game_over.append(finished.append)

        session.submit_move(Move(E2, E5))
        for move in FOOLS_MATE:
            session.submit_move(move)

        assert [r.move for r in moves] == FOOLS_MATE
        assert len(rejected) == 1
        assert rejected[0].error == MoveError.GEOMETRY_INVALID
        assert finished == [SessionState.BLACK_WINS_BY_CHECKMATE]


class TestPlayTurn:
    def test_retries_with_feedback(self) -> None:
        session, suggester = _agent_session(["no idea", "Move: e2e5", "Thinking.\nMove: e2e4"])
        record = session.play_turn()
        assert record is not None
        assert record.move == Move(E2, E4)
        assert [len(seen) for seen in suggester.seen] == [0, 1, 2]
        errors = [r.error for r in suggester.seen[-1]]
        assert errors == [MoveError.UNPARSEABLE, MoveError.GEOMETRY_INVALID]

    def test_unparseable_answers_are_reported(self) -> None:
        session, _ = _agent_session(["pass", "Move: e2e4"])
        rejected: list[Rejection] = []
        session.events.on_rejected.append(rejected.append)
        session.play_turn()
        assert [r.error for r in rejected] == [MoveError.UNPARSEABLE]
        assert rejected[0].move is None

    def test_exhaustion_raises(self) -> None:
        session, suggester = _agent_session(["Move: e2e5"] * 3)
        with pytest.raises(MoveSuggestionError):
            session.play_turn()
        assert len(suggester.seen) == 3
        assert session.state == SessionState.WHITE_TO_MOVE
        assert session.history == ()

    def test_attempt_limit_is_respected(self) -> None:
        session, suggester = _agent_session(["Move: e2e5", "Move: e2e4"], max_attempts=1)
        with pytest.raises(MoveSuggestionError):
            session.play_turn()
        assert len(suggester.seen) == 1

    def test_human_without_provider_passes(self) -> None:
        session = GameSession(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
        assert session.play_turn() is None
        assert session.history == ()

    def test_human_with_provider(self) -> None:
        answers = iter(["e2e5", "e2 e4"])
        human = HumanPlayer(Color.WHITE, input_provider=lambda snap, rej: next(answers))
        session = GameSession(human, HumanPlayer(Color.BLACK))
        record = session.play_turn()
        assert record is not None
        assert record.move == Move(E2, E4)

    def test_missing_player(self) -> None:
        with pytest.raises(RuntimeError):
            GameSession().play_turn()


class TestFromConfig:
    def test_human_white(self) -> None:
        session = GameSession.from_config(GameConfig(seed=1))
        white = session.player(Color.WHITE)
        black = session.player(Color.BLACK)
        assert white is not None and white.is_human
        assert black is not None and not black.is_human
        assert black.max_attempts == 3

    def test_agent_moves_first_when_human_is_black(self) -> None:
        session = GameSession.from_config(GameConfig(human_color=Color.BLACK, seed=5))
        current = session.current_player
        assert current is not None and not current.is_human
        record = session.play_turn()
        assert record is not None
        assert record.piece.color == Color.WHITE
        assert session.state == SessionState.BLACK_TO_MOVE

    def test_custom_suggester_and_position(self) -> None:
        config = GameConfig(fen="4k3/8/8/8/8/8/8/4K3 b", max_attempts=2)
        session = GameSession.from_config(config, suggest=ScriptedSuggester(["Move: e8e7"]))
        assert session.side_to_move == Color.BLACK
        record = session.play_turn()
        assert record is not None
        assert str(record.move) == "e8e7"

    def test_random_agents_play_legal_games(self) -> None:
        session = GameSession(
            SuggestionPlayer(Color.WHITE, RandomSuggester(11)),
            SuggestionPlayer(Color.BLACK, RandomSuggester(12)),
        )
        for _ in range(40):
            if session.play_turn() is None:
                break
        assert len(session.history) >= 1
        for record in session.history:
            assert record.captured is None or record.captured.piece_type != PieceType.KING
