#!/usr/bin/env python3
import sys
import os
import tempfile
import unittest

# Add parent directory to path to make imports work in test
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.alpha_beta_agent import AlphaBetaAgent
from models.game_state import GameState
from models.random_agent import RandomAgent
from simulation.analysis import summarize_results, wilson_interval
from simulation.config import AgentConfig, SimulationConfig, create_agent, load_config, save_config
from simulation.game_runner import GameRunner

# Two empty squares left, Black to move
LATE_GAME_BOARD = [
    "BBBBBBBB",
    "BWWWWWWB",
    "BWBBBBWB",
    "BWBWWBWB",
    "BWBWWBWB",
    "BWBBBBWB",
    "BWWWWWW_",
    "BBBBBBB_",
]


class TestGameRunner(unittest.TestCase):

    def test_random_agents_play_full_game(self):
        runner = GameRunner(AgentConfig(algorithm="random", seed=1), AgentConfig(algorithm="random", seed=2))
        result = runner.run_game()
        self.assertIn(result["winner"], ("BLACK", "WHITE", "DRAW"))
        self.assertEqual(len(result["move_history"].split(",")), result["moves"])
        self.assertLessEqual(result["black_discs"] + result["white_discs"], 64)
        self.assertEqual(result["black_config"], "random")

    def test_seeded_random_games_repeat(self):
        first = GameRunner(AgentConfig(algorithm="random", seed=7), AgentConfig(algorithm="random", seed=8)).run_game()
        second = GameRunner(AgentConfig(algorithm="random", seed=7), AgentConfig(algorithm="random", seed=8)).run_game()
        self.assertEqual(first["move_history"], second["move_history"])

    def test_runner_reused_for_several_games(self):
        runner = GameRunner(AgentConfig(algorithm="random", seed=7), AgentConfig(algorithm="random", seed=8))
        first = runner.run_game()
        second = runner.run_game()
        self.assertEqual(second["moves"], len(second["move_history"].split(",")))
        self.assertEqual(second["moves"], first["moves"])
        self.assertEqual(second["move_history"], first["move_history"])

    def test_alpha_beta_finishes_late_game(self):
        state = GameState.from_rows(LATE_GAME_BOARD, turn="BLACK", turn_number=58)
        runner = GameRunner(AgentConfig(max_depth=2, evaluation="dynamic"), AgentConfig(algorithm="random", seed=0))
        result = runner.run_game(state)
        self.assertTrue(state.is_terminal())
        self.assertGreaterEqual(result["moves"], 1)
        self.assertEqual(result["black_config"], "alphabeta-d2-dynamic")
        self.assertEqual(result["winner"], state.get_winner())


class TestConfig(unittest.TestCase):

    def test_create_agent(self):
        agent = create_agent(AgentConfig(max_depth=3, evaluation="dynamic"))
        self.assertIsInstance(agent, AlphaBetaAgent)
        self.assertEqual(agent.max_depth, 3)
        self.assertIsInstance(create_agent(AgentConfig(algorithm="random")), RandomAgent)

    def test_unknown_algorithm_raises(self):
        with self.assertRaises(ValueError):
            AgentConfig(algorithm="negamax")

    def test_save_and_load(self):
        config = SimulationConfig(
            black=AgentConfig(max_depth=5, evaluation="dynamic"),
            white=AgentConfig(algorithm="random", seed=3),
            games=2,
            output_dir="results"
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "simulation_config.json")
            save_config(config, path)
            self.assertEqual(load_config(path), config)

    def test_missing_config_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/simulation_config.json")


class TestAnalysis(unittest.TestCase):

    def test_summarize_results(self):
        results = [
            {"black_config": "alphabeta-d4-static", "white_config": "random", "winner": "BLACK", "black_discs": 40, "white_discs": 24},
            {"black_config": "alphabeta-d4-static", "white_config": "random", "winner": "WHITE", "black_discs": 20, "white_discs": 44},
            {"black_config": "alphabeta-d4-static", "white_config": "random", "winner": "BLACK", "black_discs": 33, "white_discs": 31},
            {"black_config": "alphabeta-d4-static", "white_config": "random", "winner": "DRAW", "black_discs": 32, "white_discs": 32},
        ]
        summary = summarize_results(results)
        self.assertEqual(len(summary), 1)
        row = summary.iloc[0]
        self.assertEqual(row["games"], 4)
        self.assertAlmostEqual(row["black_win_rate"], 0.5)
        self.assertAlmostEqual(row["white_win_rate"], 0.25)
        self.assertAlmostEqual(row["draw_rate"], 0.25)
        self.assertAlmostEqual(row["mean_disc_diff"], -1.5)
        self.assertLess(row["black_win_ci_low"], 0.5)
        self.assertGreater(row["black_win_ci_high"], 0.5)

    def test_summarize_empty_results(self):
        summary = summarize_results([])
        self.assertTrue(summary.empty)
        self.assertIn("black_win_rate", summary.columns)

    def test_wilson_interval_bounds(self):
        low, high = wilson_interval(10, 10)
        self.assertLessEqual(high, 1.0)
        self.assertGreater(low, 0.5)
        self.assertEqual(wilson_interval(0, 0), (0.0, 0.0))


if __name__ == "__main__":
    unittest.main()
