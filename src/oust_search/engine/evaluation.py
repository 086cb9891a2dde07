"""
Static evaluation for non-terminal Oust positions.

score = W_material * material + W_mobility * mobility + W_positional * positional

- material: stone difference from the evaluating color's side
- mobility: legal move count, positive when the evaluating color is to move
- positional: center weights of own stones minus opponent stones

Terminal positions are never passed here; the search scores them with the
win/loss sentinels so they dominate any heuristic value.
"""

from typing import Optional

import numpy as np

from oust_search.config import BOARD_CONFIG, EvaluationWeights
from oust_search.engine.weights import CENTER_WEIGHT, get_positional_weights
from oust_search.game.game import PLAYER2


def board_cell_count(size: int) -> int:
    """Number of cells on a hex-hex board of radius `size`."""
    return 3 * size * (size + 1) + 1


class Evaluator:
    """
    Material + mobility evaluator with an optional positional term.

    Instances are callable as evaluator(state, color).
    """

    def __init__(self, weights: Optional[EvaluationWeights] = None):
        self.weights = weights if weights is not None else EvaluationWeights()

    def __call__(self, state, color) -> float:
        return self.evaluate(state, color)

    def evaluate(self, state, color) -> float:
        """
        Evaluate a position from `color`'s perspective.

        Args:
            state: Non-terminal game state
            color: Evaluating color (1 or -1)

        Returns:
            Score, positive when favorable to `color`
        """
        material = state.diff()
        if color == PLAYER2:
            material = -material

        # Generating the move list is the dominant cost of evaluation
        moves_available = len(state.get_moves())
        mobility = moves_available if state.current_player == color else -moves_available

        score = self.weights.material * material + self.weights.mobility * mobility

        if self.weights.positional:
            score += self.weights.positional * self.positional(state, color)

        return float(score)

    def positional(self, state, color) -> int:
        """Center weight of own stones minus center weight of opponent stones."""
        weights = get_positional_weights(state.size)
        board = state.board
        own = np.sum(weights[board == color])
        other = np.sum(weights[board == -color])
        return int(own - other)

    def max_magnitude(self, size: int = BOARD_CONFIG['max_size']) -> float:
        """
        Upper bound on |evaluate| for any position on boards up to radius `size`.
        """
        cells = board_cell_count(size)
        return (
            abs(self.weights.material) * cells
            + abs(self.weights.mobility) * cells
            + abs(self.weights.positional) * CENTER_WEIGHT * cells
        )
