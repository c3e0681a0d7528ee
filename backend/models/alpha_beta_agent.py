from typing import Callable, Dict, Optional
from dataclasses import dataclass, field
import logging
import time

from game_logic import BLACK, derive_move
from models.errors import ConfigurationError, SuccessorContractError
from models.evaluation import Evaluator, EvaluationMode
from models.move_ordering import order_successors

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one top-level search."""
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0
    max_ply: int = 0
    value: Optional[int] = None
    started_at: float = field(default_factory=time.time)

    def elapsed(self) -> float:
        return time.time() - self.started_at


def default_successors(state):
    return state.get_successors()


class AlphaBetaAgent:
    """
    Minimax agent with alpha-beta pruning for Othello.

    The search returns boards, not scores: a leaf is returned as-is and the
    caller scores it with the evaluator. The facade turns the chosen
    successor back into a move by diffing the two boards.
    """

    # Sentinels stay finite so negation and comparison never leave the integer range
    INF = 1000000

    # From this turn on the rest of the game is searched to the end
    ENDGAME_TURN = 50
    ENDGAME_DEPTH = 60

    def __init__(self, max_depth: int = 4, evaluation_mode=EvaluationMode.STATIC,
                 evaluator=None, successor_fn: Callable = default_successors,
                 maximizing_player: str = BLACK,
                 should_stop: Optional[Callable[[SearchStats], bool]] = None):
        if max_depth is None or max_depth < 1:
            raise ConfigurationError(f"max_depth must be at least 1, got {max_depth}")

        self.max_depth = max_depth
        self.evaluator = evaluator if evaluator is not None else Evaluator(evaluation_mode)
        self.successor_fn = successor_fn
        self.maximizing_player = maximizing_player
        # Consulted on entry to every non-root node; True turns the node into a leaf
        self.should_stop = should_stop

    def effective_depth(self, state) -> int:
        """Depth limit for one move request, extended to a full solve near the end of the game."""
        if state.turn_number >= self.ENDGAME_TURN:
            return self.ENDGAME_DEPTH
        return self.max_depth

    def search(self, state, current_depth: int, max_depth: int, alpha: int, beta: int,
               stats: Optional[SearchStats] = None):
        """
        Recursive alpha-beta search.

        Returns the best successor of state, or the lookahead board that
        triggered a cutoff. Terminal boards and boards at max_depth are
        returned unchanged.
        """
        if stats is None:
            stats = SearchStats()
        stats.nodes += 1
        stats.max_ply = max(stats.max_ply, current_depth)

        # Base cases
        if state.is_terminal() or current_depth == max_depth:
            stats.leaves += 1
            return state
        if current_depth > 0 and self.should_stop is not None and self.should_stop(stats):
            stats.leaves += 1
            return state

        successors = self.successor_fn(state)
        if not successors:
            raise SuccessorContractError(
                f"No successors for non-terminal state at depth {current_depth}: {state!r}")

        is_maximizing = state.turn == self.maximizing_player

        # Order successors for better pruning
        ordered = order_successors(successors, is_maximizing, self.evaluator)

        best_state = None

        if is_maximizing:
            best_value = -self.INF
            for successor in ordered:
                lookahead = self.search(successor, current_depth + 1, max_depth, alpha, beta, stats)
                value = self.evaluator.evaluate(lookahead)
                if value > best_value or best_state is None:
                    best_value = value
                    best_state = successor
                alpha = max(alpha, value)
                if value >= beta:
                    # Min player will never allow this branch
                    stats.cutoffs += 1
                    return lookahead
        else:
            best_value = self.INF
            for successor in ordered:
                lookahead = self.search(successor, current_depth + 1, max_depth, alpha, beta, stats)
                value = self.evaluator.evaluate(lookahead)
                if value < best_value or best_state is None:
                    best_value = value
                    best_state = successor
                beta = min(beta, value)
                if value <= alpha:
                    # Max player will never allow this branch
                    stats.cutoffs += 1
                    return lookahead

        return best_state

    def choose_successor(self, state, stats: Optional[SearchStats] = None):
        """Run a full search from state and return the chosen successor state."""
        if stats is None:
            stats = SearchStats()

        depth = self.effective_depth(state)
        alpha = -self.INF
        beta = self.INF

        successor = self.search(state, 0, depth, alpha, beta, stats)
        stats.value = self.evaluator.evaluate(successor)

        logger.debug(
            f"Search at turn {state.turn_number} for {state.turn}: depth={depth} "
            f"nodes={stats.nodes} leaves={stats.leaves} cutoffs={stats.cutoffs} "
            f"value={stats.value} [{stats.elapsed():.3f}s]"
        )
        return successor

    def get_move(self, state, stats: Optional[SearchStats] = None) -> Dict:
        """Get the move that leads to the chosen successor."""
        if state.is_terminal():
            raise ValueError("Game is already over")
        successor = self.choose_successor(state, stats)
        return derive_move(state.board, successor.board, state.turn)

    def move(self, state, stats: Optional[SearchStats] = None):
        """Choose a move, apply it to state in place and return the same state object."""
        move = self.get_move(state, stats)
        state.apply_move(move)
        return state
