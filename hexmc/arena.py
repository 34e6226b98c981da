"""
Machine vs machine games.

An agent is any callable taking (game_state, team) and returning a cell id,
NO_LEGAL_MOVE or FORFEIT.
"""

import logging

from hexmc.board import Board, Team
from hexmc.game_state import FORFEIT, GameState
from hexmc.monte_carlo import NO_LEGAL_MOVE
from hexmc.random_source import RandomSource

logger = logging.getLogger(__name__)

HEX_BOARD_SIZE = 11
NUM_EVAL_GAMES = 20


def random_agent(random_source=None):
    """An agent that picks a random unclaimed cell."""
    random_source = random_source or RandomSource()

    def play(game_state, team):
        legal_moves = game_state.legal_moves()
        if not legal_moves:
            return NO_LEGAL_MOVE
        return random_source.choice(legal_moves)

    return play


def mc_agent(evaluator):
    """Wraps a MonteCarloEvaluator as an agent."""
    def play(game_state, team):
        return evaluator.select_move(game_state, team)

    return play


def play_match(red_agent, blue_agent, rows=HEX_BOARD_SIZE, columns=None):
    """Plays one game, red first, and returns the winning team."""
    game = GameState(Board(rows, columns or rows), player=Team.RED, turn=Team.RED)
    agents = {Team.RED: red_agent, Team.BLUE: blue_agent}

    while not game.over:
        team = game.turn
        move = agents[team](game, team)
        if move is NO_LEGAL_MOVE:
            move = FORFEIT
        result = game.apply_move(move, team)
        if not result:
            # an agent that keeps offering illegal cells would never finish
            logger.debug("%s offered cell %s: %s, forfeiting", team, move, result.reason.value)
            game.apply_move(FORFEIT, team)

    return game.winner


def evaluate_agent(agent, opponent_agent, num_games=NUM_EVAL_GAMES, rows=HEX_BOARD_SIZE, columns=None):
    """Plays num_games, alternating who is red, and counts the wins."""
    agent_wins = 0
    opponent_wins = 0

    for i in range(num_games):
        # Alternate who starts
        agent_is_red = i % 2 == 0
        if agent_is_red:
            winner = play_match(agent, opponent_agent, rows, columns)
        else:
            winner = play_match(opponent_agent, agent, rows, columns)

        if (winner == Team.RED) == agent_is_red:
            agent_wins += 1
        else:
            opponent_wins += 1
        logger.debug("Game %d/%d: %s won", i + 1, num_games, winner)

    return {"games": num_games, "agent_wins": agent_wins, "opponent_wins": opponent_wins}
