"""
Configuration for the Oust search engine.
"""

from dataclasses import dataclass


# Board Configuration
BOARD_CONFIG = {
    'size': 4,                          # Hex board radius (61 cells)
    'max_size': 8,                      # Largest radius the evaluation weights are validated for
}

# Search Configuration
SEARCH_CONFIG = {
    'fixed_depth': 0,                   # 0 = iterative deepening, >0 = fixed depth
    'max_depth': None,                  # Iterative deepening ceiling (None = until deadline)
}

# Evaluation Configuration
EVAL_CONFIG = {
    'material_weight': 1000.0,          # Stone difference dominates
    'mobility_weight': 10.0,            # Legal move count (tactical)
    'positional_weight': 0.0,           # Center weights, disabled by default
}

# Match Configuration
MATCH_CONFIG = {
    'num_games': 10,
    'time_limit_s': 2.0,                # Per-move budget delivered by the host timer
    'seed': None,
}


@dataclass(frozen=True)
class EvaluationWeights:
    material: float = EVAL_CONFIG['material_weight']
    mobility: float = EVAL_CONFIG['mobility_weight']
    positional: float = EVAL_CONFIG['positional_weight']
