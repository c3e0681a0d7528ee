"""
Othello AI Simulation Package

This package provides tools for running series of games between
different agent configurations and summarizing the outcomes.
"""

from .game_runner import GameRunner
from .analysis import summarize_results

__all__ = ["GameRunner", "summarize_results"]
