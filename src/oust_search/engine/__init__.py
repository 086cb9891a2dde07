"""
Alpha-beta search engine for Oust.

This module contains the search components:
- Static evaluation (material, mobility, optional center weights)
- Center-first move ordering
- Alpha-beta minimax with chained-turn depth handling
- Fixed-depth and iterative deepening policies
"""

from oust_search.engine.weights import build_positional_weights, get_positional_weights
from oust_search.engine.evaluation import Evaluator
from oust_search.engine.move_ordering import center_distance, order_moves
from oust_search.engine.alphabeta import (
    AlphaBetaSearch,
    ScoredPath,
    SCORE_WIN,
    SCORE_LOSS,
    SCORE_DRAW,
)
from oust_search.engine.policies import FixedDepth, IterativeDeepening

__all__ = [
    'build_positional_weights',
    'get_positional_weights',
    'Evaluator',
    'center_distance',
    'order_moves',
    'AlphaBetaSearch',
    'ScoredPath',
    'SCORE_WIN',
    'SCORE_LOSS',
    'SCORE_DRAW',
    'FixedDepth',
    'IterativeDeepening',
]
