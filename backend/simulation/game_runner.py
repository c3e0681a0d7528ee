from typing import Dict
import logging
import time
import uuid

from game_logic import BLACK, format_move
from models.game_state import GameState
from simulation.config import AgentConfig, create_agent

logger = logging.getLogger(__name__)


class GameRunner:
    """
    Runs a single game between two agents and captures the results.
    """

    def __init__(self, black_config: AgentConfig, white_config: AgentConfig):
        """
        Initialize a game runner with agent configurations.

        Args:
            black_config: Configuration for the Black agent
            white_config: Configuration for the White agent
        """
        self.black_config = black_config
        self.white_config = white_config
        self.game_id = str(uuid.uuid4())  # Generate a unique game ID

    def run_game(self, state: GameState = None) -> Dict:
        """
        Run a complete game and return statistics.

        Returns:
            Dict containing game statistics
        """
        # Initialize game state
        if state is None:
            state = GameState()

        # Create agents
        black_agent = create_agent(self.black_config)
        white_agent = create_agent(self.white_config)

        # Statistics
        start_time = time.time()
        black_times = []
        white_times = []
        move_history = []

        # Main game loop
        while not state.is_terminal():
            current_agent = black_agent if state.turn == BLACK else white_agent

            move_start = time.time()
            move = current_agent.get_move(state)
            move_time = time.time() - move_start

            if state.turn == BLACK:
                black_times.append(move_time)
            else:
                white_times.append(move_time)

            move_history.append(format_move(move))
            state.apply_move(move)

        black_discs, white_discs = state.disc_counts()
        game_result = {
            "game_id": self.game_id,
            "black_config": self.black_config.label(),
            "white_config": self.white_config.label(),
            "winner": state.get_winner(),
            "black_discs": black_discs,
            "white_discs": white_discs,
            "moves": len(move_history),
            "game_duration": time.time() - start_time,
            "avg_black_move_time": sum(black_times) / len(black_times) if black_times else 0,
            "avg_white_move_time": sum(white_times) / len(white_times) if white_times else 0,
            "move_history": ",".join(move_history)
        }

        logger.info(
            f"Game {self.game_id} finished: {game_result['winner']} "
            f"({black_discs}-{white_discs}) in {game_result['moves']} moves"
        )
        return game_result
