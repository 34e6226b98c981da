# Callable agent for 2-D board engines: board cells hold 1 (red, top to bottom),
# -1 (blue, left to right) or 0, and moves are (row, column) tuples.

import numpy as np

from hexmc.board import Board, Team, opponent
from hexmc.errors import NoLegalMoveError
from hexmc.game_state import GameState
from hexmc.monte_carlo import MonteCarloEvaluator

FACADE_ITERATIONS = 200

# Global evaluator, created on first use
_evaluator = None


def get_evaluator():
    global _evaluator
    if _evaluator is None:
        _evaluator = MonteCarloEvaluator(iterations=FACADE_ITERATIONS)
    return _evaluator


def infer_team(board):
    """Red moves first, so red is to move whenever the stone counts are level."""
    board = np.asarray(board)
    return Team.RED if np.count_nonzero(board == 1) <= np.count_nonzero(board == -1) else Team.BLUE


def agent(board, action_set, evaluator=None):
    """
    Picks a move for the side to play on `board`.

    Only cells in `action_set` are considered when it is given.
    """
    hex_board = Board.from_array(board)
    team = infer_team(board)
    game = GameState(hex_board, player=opponent(team), turn=team)

    statistics = (evaluator or get_evaluator()).evaluate(game, team)
    allowed = {tuple(action) for action in action_set}

    # Same order as MoveStatistics.best(): win rate, then lowest cell id
    ranked = sorted(statistics.trials, key=lambda move: (-statistics.win_rate(move), move))
    for move in ranked:
        coordinates = hex_board.coordinates(move)
        if not allowed or coordinates in allowed:
            return coordinates

    raise NoLegalMoveError("No empty cell left to play", context={"team": team.name})
