"""Console game: a human against the Monte Carlo AI."""

import argparse
import logging

from hexmc.board import Board, Team
from hexmc.codec import format_tile, parse_tile, to_hex
from hexmc.game_state import FORFEIT, GameState, RejectReason
from hexmc.monte_carlo import ITERATIONS, NO_LEGAL_MOVE, MonteCarloEvaluator
from hexmc.renderer import AsciiRenderer

HEX_BOARD_SIZE = 11
MAX_BOARD_SIZE = 16   # one hex digit per coordinate


def select_team(read=input, write=print):
    write("Will you be red? Y to accept.")
    answer = read("").strip().lower()
    team = Team.RED if answer.startswith("y") else Team.BLUE
    write(f"You are {team}")
    write("Connect a path from " + ("left to right" if team == Team.BLUE else "top to bottom"))
    return team


def rejection_hint(reason, board):
    if reason == RejectReason.OUT_OF_BOUNDS:
        return (
            "Invalid tile!\n"
            f"Row must be between [0-{to_hex(board.rows - 1)}]\n"
            f"Column must be between [0-{to_hex(board.columns - 1)}]"
        )
    return "Tile unavailable. It has already been assigned to a team."


def play(game, evaluator, read=input, write=print, renderer=None):
    """Alternates human and AI moves until the game is over; returns the winner."""
    renderer = renderer or AsciiRenderer()
    board = game.board

    while not game.over:
        write(renderer.render(board))

        while True:
            cell_id = parse_tile(read("Tile? "), board.rows, board.columns)
            result = game.apply_move(cell_id, game.player)
            if result:
                break
            write(rejection_hint(result.reason, board))

        if game.over:
            break

        move = evaluator.select_move(game, game.ai)
        if move is NO_LEGAL_MOVE:
            move = FORFEIT
            write(f"{game.ai} has no move left")
        else:
            write(f"{game.ai} plays {format_tile(move, board.columns)}")
        game.apply_move(move, game.ai)

    write(renderer.render(board))
    write(f"{game.winner} team has won!")
    return game.winner


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Hex against a Monte Carlo AI")
    parser.add_argument("--rows", type=int, default=HEX_BOARD_SIZE)
    parser.add_argument("--columns", type=int, default=None, help="defaults to --rows")
    parser.add_argument("--iterations", type=int, default=ITERATIONS, help="playouts per candidate move")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.columns is None:
        args.columns = args.rows
    for name in ("rows", "columns"):
        if not 1 <= getattr(args, name) <= MAX_BOARD_SIZE:
            parser.error(f"--{name} must be between 1 and {MAX_BOARD_SIZE}")
    return args


def main(argv=None, read=input, write=print):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    evaluator = MonteCarloEvaluator(iterations=args.iterations, seed=args.seed, workers=args.workers)
    player = select_team(read, write)
    game = GameState(Board(args.rows, args.columns), player=player, turn=player)
    play(game, evaluator, read, write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
