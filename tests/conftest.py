"""Shared pytest fixtures for hexmc tests."""

import pytest

from hexmc.board import Board, Team
from hexmc.game_state import GameState
from hexmc.monte_carlo import MonteCarloEvaluator


@pytest.fixture
def board_3x3():
    return Board(3, 3)


@pytest.fixture
def make_game():
    """Game on a fresh board; the human plays `player` and moves first."""
    def _make(rows=3, columns=None, player=Team.BLUE):
        return GameState(Board(rows, columns or rows), player=player, turn=player)
    return _make


@pytest.fixture
def claim():
    """Sets ownership directly, bypassing win detection."""
    def _claim(board, team, *cell_ids):
        for cell_id in cell_ids:
            board[cell_id].team = team
        return board
    return _claim


@pytest.fixture
def small_evaluator():
    return MonteCarloEvaluator(iterations=60, seed=1234)
