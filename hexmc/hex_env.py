import gymnasium as gym
from gymnasium import spaces
import numpy as np

from hexmc.board import Board, Team
from hexmc.game_state import GameState
from hexmc.monte_carlo import NO_LEGAL_MOVE
from hexmc.renderer import AsciiRenderer

INVALID_MOVE_REWARD = -10


class HexEnv(gym.Env):
    """
    Hex as a gymnasium environment.

    Without an opponent both colours are played through step() and the reward
    is from the point of view of the team that just moved. With an opponent
    (anything with select_move(game_state, team), e.g. MonteCarloEvaluator)
    the agent plays red and the opponent answers every move as blue.
    """
    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(self, rows=7, columns=None, opponent=None, render_mode=None):
        self.rows = rows
        self.columns = columns or rows
        self.opponent = opponent
        self.game = self._new_game()
        self.renderer = AsciiRenderer()
        self.observation_space = spaces.Box(low=-1, high=1, shape=(self.rows, self.columns), dtype=np.int8)
        self.action_space = spaces.Discrete(self.rows * self.columns)

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

    def _new_game(self):
        return GameState(Board(self.rows, self.columns), player=Team.RED, turn=Team.RED)

    def _get_obs(self):
        return self.game.board.to_array()

    def _get_info(self):
        return {"valid_actions": self.game.legal_moves(), "turn": self.game.turn}

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.game = self._new_game()
        observation = self._get_obs()
        info = self._get_info()
        return observation, info

    def step(self, action):
        action = int(action)
        mover = self.game.turn

        # Check if the move is valid
        if self.game.over or not 0 <= action < self.action_space.n or not self.game.apply_move(action, mover):
            # Invalid move, penalize and end episode
            return self._get_obs(), INVALID_MOVE_REWARD, True, False, self._get_info()

        reward = 0
        terminated = False

        if self.game.over:
            terminated = True
            reward = 1 if self.game.winner == mover else -1
        elif self.opponent is not None:
            reply = self.opponent.select_move(self.game, self.game.turn)
            if reply is not NO_LEGAL_MOVE:
                self.game.apply_move(reply, self.game.turn)
            if self.game.over:
                terminated = True
                reward = 1 if self.game.winner == mover else -1

        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self):
        if self.render_mode == "human":
            self.renderer.display(self.game.board)

    def close(self):
        pass
