from hexmc.arena import evaluate_agent, mc_agent, random_agent
from hexmc.monte_carlo import MonteCarloEvaluator
from hexmc.random_source import RandomSource

# --- Configuration ---
NUM_EVAL_GAMES = 20   # Number of games to play for evaluation
HEX_BOARD_SIZE = 5    # Small board keeps a full evaluation run short
ITERATIONS = 200      # Playouts per candidate move
SEED = 0


# --- Evaluation Function ---
def evaluate_mc_agent(num_games=NUM_EVAL_GAMES):
    print(f"Starting evaluation of Monte Carlo agent against random agent for {num_games} games...")

    random_source = RandomSource(SEED)
    evaluator = MonteCarloEvaluator(iterations=ITERATIONS, random_source=random_source)
    opponent_source, = random_source.spawn(1)

    summary = evaluate_agent(
        mc_agent(evaluator),
        random_agent(opponent_source),
        num_games=num_games,
        rows=HEX_BOARD_SIZE,
    )

    print("\n--- Evaluation Summary ---")
    print(f"Total games played: {summary['games']}")
    print(f"Monte Carlo agent wins: {summary['agent_wins']} ({(summary['agent_wins'] / num_games) * 100:.2f}%)")
    print(f"Random agent wins: {summary['opponent_wins']} ({(summary['opponent_wins'] / num_games) * 100:.2f}%)")
    return summary


if __name__ == '__main__':
    evaluate_mc_agent()
