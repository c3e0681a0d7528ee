#!/usr/bin/env python3
"""
Run a series of Othello games between two configured agents.

Results are written as CSV to the configured output directory and a
per-matchup summary is logged at the end.
"""

import argparse
import logging
import os
import sys
import time
from datetime import datetime

import pandas as pd

# Add the parent directory to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from simulation.config import AgentConfig, SimulationConfig, load_config
from simulation.game_runner import GameRunner
from simulation.analysis import summarize_results


def setup_logging(output_dir: str, log_level: int = logging.INFO) -> logging.Logger:
    """
    Set up logging for a simulation run.

    Args:
        output_dir: Directory for log files
        log_level: Logging level

    Returns:
        Logger instance
    """
    log_path = os.path.join(output_dir, f"simulation_log_{int(time.time())}.txt")

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_path),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger("Simulation")


def run_simulation(config: SimulationConfig, logger: logging.Logger) -> str:
    """
    Play config.games games and save the results.

    Returns:
        Path of the results CSV
    """
    results = []
    for game_index in range(config.games):
        runner = GameRunner(config.black, config.white)
        result = runner.run_game()
        results.append(result)
        logger.info(f"Game {game_index + 1}/{config.games}: winner={result['winner']} "
                    f"discs={result['black_discs']}-{result['white_discs']}")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = os.path.join(config.output_dir, f"othello_games_{timestamp}.csv")
    pd.DataFrame(results).to_csv(output_file, index=False)

    summary = summarize_results(results)
    logger.info("Summary:\n" + summary.to_string(index=False))
    return output_file


def main():
    parser = argparse.ArgumentParser(description='Run Othello games between two agents')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON simulation config')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games (overrides config)')
    parser.add_argument('--depth', type=int, default=None,
                        help='Search depth for the alpha-beta agent playing Black')
    parser.add_argument('--evaluation', choices=['static', 'dynamic'], default=None,
                        help='Evaluation mode for the alpha-beta agent playing Black')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for results and logs')
    args = parser.parse_args()

    config = load_config(args.config) if args.config else SimulationConfig()
    if args.games is not None:
        config.games = args.games
    if args.depth is not None or args.evaluation is not None:
        config.black = AgentConfig(
            algorithm="alphabeta",
            max_depth=args.depth if args.depth is not None else config.black.max_depth,
            evaluation=args.evaluation or config.black.evaluation
        )
    if args.output_dir:
        config.output_dir = args.output_dir

    os.makedirs(config.output_dir, exist_ok=True)
    logger = setup_logging(config.output_dir)

    logger.info(f"Starting {config.games} games: {config.black.label()} (Black) vs "
                f"{config.white.label()} (White)")
    output_file = run_simulation(config, logger)
    logger.info(f"Results saved to: {output_file}")


if __name__ == "__main__":
    main()
