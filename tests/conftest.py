"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.move_applicator import apply_move
from chessrules.core.types import parse_square

PlayFn = Callable[..., Board]


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def play() -> PlayFn:
    """Apply a sequence of ``"e2e4"``-style moves, returning the final board."""

    def _play(board: Board, *moves: str) -> Board:
        for text in moves:
            result = apply_move(board, parse_square(text[:2]), parse_square(text[2:4]))
            board = result.board
        return board

    return _play
