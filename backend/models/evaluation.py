from enum import Enum
from typing import Optional, Union
from game_logic import BLACK, WHITE, BOARD_SIZE, get_all_possible_moves, count_discs
from models.errors import ConfigurationError


class EvaluationMode(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


class Evaluator:
    """
    Scores Othello positions from Black's perspective (positive favors Black).

    Two modes are available and one evaluator only ever uses one of them:
    - STATIC: positional weight table plus disc differential, independent of the turn number.
    - DYNAMIC: mobility, corner and disc weights that shift as the turn number grows.
      A finished game collapses to the final disc differential.
    """

    # Classic positional weights: corners are gold, squares next to corners give them away
    POSITION_WEIGHTS = [
        [100, -20, 10,  5,  5, 10, -20, 100],
        [-20, -50, -2, -2, -2, -2, -50, -20],
        [ 10,  -2, -1, -1, -1, -1,  -2,  10],
        [  5,  -2, -1, -1, -1, -1,  -2,   5],
        [  5,  -2, -1, -1, -1, -1,  -2,   5],
        [ 10,  -2, -1, -1, -1, -1,  -2,  10],
        [-20, -50, -2, -2, -2, -2, -50, -20],
        [100, -20, 10,  5,  5, 10, -20, 100],
    ]

    CORNERS = [(0, 0), (BOARD_SIZE - 1, 0), (0, BOARD_SIZE - 1), (BOARD_SIZE - 1, BOARD_SIZE - 1)]

    # Turn at which the dynamic weights have fully shifted to the endgame profile
    LAST_TURN = 60

    def __init__(self, mode: Optional[Union[EvaluationMode, str]]):
        self.mode = self._resolve_mode(mode)

        # Static weights
        self.static_disc_weight = 10

        # Dynamic weights, interpolated between early and late game
        self.mobility_weight_early = 50
        self.mobility_weight_late = 5
        self.disc_weight_early = 1
        self.disc_weight_late = 40
        self.corner_weight = 200

        # A finished game outweighs any heuristic score
        self.terminal_weight = 10000

    @staticmethod
    def _resolve_mode(mode) -> EvaluationMode:
        if mode is None:
            raise ConfigurationError("Evaluation mode is not set")
        if isinstance(mode, EvaluationMode):
            return mode
        try:
            return EvaluationMode(str(mode).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown evaluation mode: {mode}") from None

    def evaluate(self, state) -> int:
        if self.mode is EvaluationMode.STATIC:
            return self.evaluate_static(state)
        if self.mode is EvaluationMode.DYNAMIC:
            return self.evaluate_dynamic(state)
        raise ConfigurationError(f"Unknown evaluation mode: {self.mode}")

    def evaluate_static(self, state) -> int:
        """Positional weights plus weighted disc differential."""
        score = self._positional_score(state.board)
        black, white = count_discs(state.board)
        score += self.static_disc_weight * (black - white)
        return score

    def evaluate_dynamic(self, state) -> int:
        """
        Turn-dependent score. Mobility dominates the opening and disc count
        takes over towards the end. Corners matter the whole game.
        """
        black, white = count_discs(state.board)

        if state.is_terminal():
            return self.terminal_weight * (black - white)

        # Game progression, 0.0 at the start and 1.0 at the last turn
        late_game_ratio = min(1.0, max(0.0, state.turn_number / self.LAST_TURN))
        early_game_ratio = 1.0 - late_game_ratio

        mobility_weight = (self.mobility_weight_early * early_game_ratio +
                           self.mobility_weight_late * late_game_ratio)
        disc_weight = (self.disc_weight_early * early_game_ratio +
                       self.disc_weight_late * late_game_ratio)

        black_mobility = len(get_all_possible_moves(state.board, BLACK))
        white_mobility = len(get_all_possible_moves(state.board, WHITE))

        score = mobility_weight * (black_mobility - white_mobility)
        score += disc_weight * (black - white)
        score += self.corner_weight * self._corner_differential(state.board)

        return int(round(score))

    def _positional_score(self, board) -> int:
        score = 0
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                if board[y][x] == BLACK:
                    score += self.POSITION_WEIGHTS[y][x]
                elif board[y][x] == WHITE:
                    score -= self.POSITION_WEIGHTS[y][x]
        return score

    def _corner_differential(self, board) -> int:
        diff = 0
        for x, y in self.CORNERS:
            if board[y][x] == BLACK:
                diff += 1
            elif board[y][x] == WHITE:
                diff -= 1
        return diff
