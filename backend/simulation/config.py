"""
Configuration settings for the simulation module.
"""

import os
import json
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from models.alpha_beta_agent import AlphaBetaAgent
from models.random_agent import RandomAgent

ALGORITHMS = ("alphabeta", "random")


@dataclass
class AgentConfig:
    """Configuration for one side of a game."""
    algorithm: str = "alphabeta"
    max_depth: int = 4
    evaluation: str = "static"  # "static" or "dynamic"
    seed: Optional[int] = None  # Only used by the random agent

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {self.algorithm}")

    def label(self) -> str:
        """Short description used in result tables."""
        if self.algorithm == "random":
            return "random"
        return f"alphabeta-d{self.max_depth}-{self.evaluation}"


@dataclass
class SimulationConfig:
    """Configuration for a series of games."""
    black: AgentConfig = field(default_factory=AgentConfig)
    white: AgentConfig = field(default_factory=lambda: AgentConfig(algorithm="random"))
    games: int = 10
    output_dir: str = "simulation_results"


def create_agent(config: AgentConfig):
    """
    Create an agent based on configuration.

    Args:
        config: Agent configuration

    Returns:
        An instance of the appropriate agent class
    """
    if config.algorithm == "alphabeta":
        return AlphaBetaAgent(max_depth=config.max_depth, evaluation_mode=config.evaluation)
    elif config.algorithm == "random":
        return RandomAgent(seed=config.seed)
    else:
        raise ValueError(f"Unknown algorithm: {config.algorithm}")


def _agent_config_from_dict(data: Optional[Dict[str, Any]], default: AgentConfig) -> AgentConfig:
    if data is None:
        return default
    return AgentConfig(**data)


def load_config(config_path: str = "simulation_config.json") -> SimulationConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        SimulationConfig object
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config_dict = json.load(f)

    defaults = SimulationConfig()
    return SimulationConfig(
        black=_agent_config_from_dict(config_dict.get('black'), defaults.black),
        white=_agent_config_from_dict(config_dict.get('white'), defaults.white),
        games=config_dict.get('games', defaults.games),
        output_dir=config_dict.get('output_dir', defaults.output_dir)
    )


def save_config(config: SimulationConfig, config_path: str = "simulation_config.json"):
    """
    Save configuration to a JSON file.

    Args:
        config: SimulationConfig object
        config_path: Path to save the configuration file
    """
    # Create directory if it doesn't exist
    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)
