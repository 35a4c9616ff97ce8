"""Tests for CheckDetector."""

import pytest

from clichess.core.board import Board
from clichess.core.check import CheckDetector
from clichess.core.enums import Color
from clichess.core.errors import KingMissingError
from clichess.core.notation import board_from_fen
from clichess.core.types import A1, D2, E2, F3


class TestIsInCheck:
    def test_initial_position(self) -> None:
        board = Board.initial()
        assert not CheckDetector.is_in_check(board, Color.WHITE)
        assert not CheckDetector.is_in_check(board, Color.BLACK)

    def test_pawn_straight_ahead_is_not_check(self) -> None:
        board = board_from_fen("8/8/8/8/8/4p3/4K3/7k w")
        assert not CheckDetector.is_in_check(board, Color.WHITE)

    def test_pawn_diagonal_is_check(self) -> None:
        board = board_from_fen("8/8/8/8/8/3p4/4K3/7k w")
        assert CheckDetector.is_in_check(board, Color.WHITE)

    def test_blocked_slider_is_not_check(self) -> None:
        board = board_from_fen("4k3/4r3/8/8/8/8/4P3/4K3 w")
        assert not CheckDetector.is_in_check(board, Color.WHITE)
        board[E2] = None
        assert CheckDetector.is_in_check(board, Color.WHITE)

    def test_knight_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/8/4K3 w")
        assert CheckDetector.is_in_check(board, Color.WHITE)
        assert not CheckDetector.is_in_check(board, Color.BLACK)

    def test_independent_of_side_to_move(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/8/4K3 b")
        assert CheckDetector.is_in_check(board, Color.WHITE)

    def test_does_not_mutate(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/3p4/r3K3 w")
        before = board.copy()
        CheckDetector.is_in_check(board, Color.WHITE)
        CheckDetector.attackers(board, Color.WHITE)
        assert board == before


class TestAttackers:
    def test_lists_every_attacker(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/3p4/r3K3 w")
        assert CheckDetector.attackers(board, Color.WHITE) == [F3, D2, A1]

    def test_none_when_safe(self) -> None:
        assert CheckDetector.attackers(Board.initial(), Color.BLACK) == []


class TestMissingKing:
    def test_is_in_check_raises(self) -> None:
        with pytest.raises(KingMissingError):
            CheckDetector.is_in_check(Board(), Color.WHITE)

    def test_attackers_raises(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/8 w")
        with pytest.raises(KingMissingError):
            CheckDetector.attackers(board, Color.WHITE)
