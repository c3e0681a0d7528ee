"""
Analysis tools for simulation results.
"""

import pandas as pd
import numpy as np
from typing import List, Dict, Any, Tuple


def wilson_interval(successes: int, total: int, z: float = 1.96) -> Tuple[float, float]:
    """Wilson score interval for a win rate."""
    if total == 0:
        return 0.0, 0.0
    p = successes / total
    denominator = 1 + z ** 2 / total
    center = (p + z ** 2 / (2 * total)) / denominator
    margin = z * np.sqrt(p * (1 - p) / total + z ** 2 / (4 * total ** 2)) / denominator
    return float(max(0.0, center - margin)), float(min(1.0, center + margin))


def summarize_results(results: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Summarize game results per matchup.

    Args:
        results: Game result dicts as produced by GameRunner.run_game

    Returns:
        DataFrame with one row per (black_config, white_config) pair
    """
    columns = [
        'black_config', 'white_config', 'games', 'black_win_rate', 'white_win_rate',
        'draw_rate', 'mean_disc_diff', 'black_win_ci_low', 'black_win_ci_high'
    ]
    if not results:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(results)
    df['disc_diff'] = df['black_discs'] - df['white_discs']

    rows = []
    for (black_config, white_config), games in df.groupby(['black_config', 'white_config'], sort=True):
        total = len(games)
        black_wins = int((games['winner'] == 'BLACK').sum())
        white_wins = int((games['winner'] == 'WHITE').sum())
        draws = int((games['winner'] == 'DRAW').sum())
        ci_low, ci_high = wilson_interval(black_wins, total)
        rows.append({
            'black_config': black_config,
            'white_config': white_config,
            'games': total,
            'black_win_rate': black_wins / total,
            'white_win_rate': white_wins / total,
            'draw_rate': draws / total,
            'mean_disc_diff': float(games['disc_diff'].mean()),
            'black_win_ci_low': ci_low,
            'black_win_ci_high': ci_high,
        })

    return pd.DataFrame(rows, columns=columns)
