from typing import Dict, Optional
import random


class RandomAgent:
    """Baseline opponent that plays a uniformly random legal move."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_move(self, state) -> Dict:
        """
        Get a random valid move for the current state.
        Returns either a placement {"type": "placement", "x", "y", "flips"} or {"type": "pass"}.
        """
        possible_moves = state.get_valid_moves()
        if not possible_moves:
            raise ValueError(f"No valid moves available for {state.turn} in current state")

        return self.rng.choice(possible_moves)

    def move(self, state):
        state.apply_move(self.get_move(state))
        return state
