#!/usr/bin/env python3
import sys
import os
import unittest

# Add parent directory to path to make imports work in test
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.move_ordering import order_successors
from models.evaluation import Evaluator, EvaluationMode
from models.game_state import GameState
from synthetic_tree import BLACK, TreeNode, ValueEvaluator


def leaves(*values):
    return [TreeNode(f"n{i}", BLACK, value=v) for i, v in enumerate(values)]


class TestMoveOrdering(unittest.TestCase):

    def test_maximizing_orders_descending(self):
        nodes = leaves(3, 12, 8, 2)
        ordered = order_successors(nodes, True, ValueEvaluator())
        self.assertEqual([n.value for n in ordered], [12, 8, 3, 2])

    def test_minimizing_orders_ascending(self):
        nodes = leaves(3, 12, 8, 2)
        ordered = order_successors(nodes, False, ValueEvaluator())
        self.assertEqual([n.value for n in ordered], [2, 3, 8, 12])

    def test_ties_keep_generator_order(self):
        nodes = leaves(5, 1, 5, 5)
        ordered = order_successors(nodes, True, ValueEvaluator())
        self.assertEqual([n.name for n in ordered], ["n0", "n2", "n3", "n1"])

        ordered = order_successors(nodes, False, ValueEvaluator())
        self.assertEqual([n.name for n in ordered], ["n1", "n0", "n2", "n3"])

    def test_ordering_keeps_every_successor(self):
        nodes = leaves(4, 4, 9, -1, 0)
        ordered = order_successors(nodes, True, ValueEvaluator())
        self.assertEqual(sorted(n.name for n in ordered), sorted(n.name for n in nodes))

    def test_ordering_does_not_modify_input(self):
        nodes = leaves(1, 2, 3)
        order_successors(nodes, True, ValueEvaluator())
        self.assertEqual([n.value for n in nodes], [1, 2, 3])

    def test_game_successors_ordered_by_evaluator(self):
        state = GameState()
        state.apply_move({"type": "placement", "x": 3, "y": 2})
        evaluator = Evaluator(EvaluationMode.DYNAMIC)
        ordered = order_successors(state.get_successors(), False, evaluator)
        scores = [evaluator.evaluate(s) for s in ordered]
        self.assertEqual(scores, sorted(scores))
        self.assertEqual(len(ordered), len(state.get_valid_moves()))


if __name__ == "__main__":
    unittest.main()
