"""
Monte Carlo move selection.

Every unclaimed cell is tried as the next move and followed by a number of
random playouts: the remaining cells are shuffled and handed out alternately,
opponent first, until the board is full. The move whose playouts were won most
often is chosen. Playouts run on a private copy of the board, so the game
state passed in is never touched.

Each candidate draws from its own child random stream, so for a fixed seed
the statistics do not depend on how candidates are split across workers.
"""

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field

from hexmc.board import opponent
from hexmc.connectivity import has_path
from hexmc.errors import ConfigurationError
from hexmc.random_source import RandomSource

logger = logging.getLogger(__name__)


def read_env_int(name, default):
    """Integer override from the environment, ConfigurationError if malformed."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer", context={name: raw}) from None


# Playouts per candidate move
ITERATIONS = read_env_int("HEXMC_ITERATIONS", 1200)

# Worker processes; 1 keeps everything in the calling process
NUM_WORKERS = read_env_int("HEXMC_WORKERS", 1)

# Fewer candidates than this are not worth a process pool
PARALLEL_THRESHOLD = 8

# Playouts per candidate between deadline checks
ROUND_SIZE = 100

# Returned by select_move when no cell is left to claim
NO_LEGAL_MOVE = None


@dataclass
class MoveStatistics:
    wins: dict = field(default_factory=dict)
    trials: dict = field(default_factory=dict)

    def record(self, move, wins, trials):
        self.wins[move] = self.wins.get(move, 0) + wins
        self.trials[move] = self.trials.get(move, 0) + trials

    def merge(self, other):
        for move, trials in other.trials.items():
            self.record(move, other.wins[move], trials)

    def win_rate(self, move):
        trials = self.trials.get(move, 0)
        return self.wins.get(move, 0) / trials if trials else 0.0

    def best(self):
        """Highest win rate, lowest cell id on ties."""
        best_move, best_rate = NO_LEGAL_MOVE, -1.0
        for move in sorted(self.trials):
            rate = self.win_rate(move)
            if rate > best_rate:
                best_move, best_rate = move, rate
        return best_move

    def __len__(self):
        return len(self.trials)


def run_playouts(board, candidates, team, streams, iterations, deadline=None):
    """
    Plays `iterations` random games after each candidate move on `board`.

    `board` is mutated during the run and restored after every playout, so
    callers must hand in a copy. Runs in worker processes as well.
    """
    statistics = MoveStatistics()
    rival = opponent(team)
    starts, ends = board.edges(team)
    cells = board.cells
    unclaimed = board.unclaimed()
    snapshot = board.snapshot()

    done = 0
    while done < iterations:
        batch = min(ROUND_SIZE, iterations - done)
        for move, stream in zip(candidates, streams):
            others = [tile for tile in unclaimed if tile != move]
            wins = 0
            for _ in range(batch):
                cells[move].team = team
                current = rival
                for tile in stream.permutation(others):
                    cells[tile].team = current
                    current = opponent(current)

                if has_path(board, starts, ends, team):
                    wins += 1
                board.restore(snapshot)
            statistics.record(move, wins, batch)
        done += batch

        if deadline is not None and time.time() >= deadline:
            logger.debug("Deadline reached after %d of %d playouts per move", done, iterations)
            break

    return statistics


class MonteCarloEvaluator:
    def __init__(self, iterations=None, seed=None, workers=None, time_budget=None,
                 parallel_threshold=PARALLEL_THRESHOLD, random_source=None):
        self.iterations = ITERATIONS if iterations is None else iterations
        self.workers = NUM_WORKERS if workers is None else workers
        self.time_budget = time_budget
        self.parallel_threshold = parallel_threshold

        if self.iterations < 1:
            raise ConfigurationError("iterations must be positive", context={"iterations": self.iterations})
        if self.workers < 1:
            raise ConfigurationError("workers must be positive", context={"workers": self.workers})
        if time_budget is not None and time_budget <= 0:
            raise ConfigurationError("time_budget must be positive", context={"time_budget": time_budget})

        self.random_source = random_source if random_source is not None else RandomSource(seed)

    def evaluate(self, game_state, team=None):
        """Runs the playouts and returns the statistics of this call only."""
        if team is None:
            team = game_state.ai

        candidates = game_state.legal_moves()
        if not candidates:
            return MoveStatistics()

        board = game_state.board.copy()
        streams = self.random_source.spawn(len(candidates))
        deadline = time.time() + self.time_budget if self.time_budget is not None else None

        if self.workers > 1 and len(candidates) >= self.parallel_threshold:
            return self._evaluate_parallel(board, candidates, team, streams, deadline)
        return run_playouts(board, candidates, team, streams, self.iterations, deadline)

    def _evaluate_parallel(self, board, candidates, team, streams, deadline):
        statistics = MoveStatistics()
        with ProcessPoolExecutor(max_workers=self.workers) as pool:
            futures = []
            for worker in range(self.workers):
                moves = candidates[worker::self.workers]
                if not moves:
                    continue
                futures.append(pool.submit(
                    run_playouts, board, moves, team,
                    streams[worker::self.workers], self.iterations, deadline,
                ))
            for future in futures:
                statistics.merge(future.result())
        return statistics

    def select_move(self, game_state, team=None):
        """Best candidate cell id, or NO_LEGAL_MOVE when the board is full."""
        statistics = self.evaluate(game_state, team)
        move = statistics.best()
        if move is not NO_LEGAL_MOVE:
            logger.debug(
                "Selected cell %d: %d wins in %d playouts over %d candidates",
                move, statistics.wins[move], statistics.trials[move], len(statistics),
            )
        return move
