"""
Alpha-beta minimax search with chained turns.

A placement may grant the mover another placement (a capture in Oust). Such a
chained turn does not cost search depth, and the moves of the chain are
returned together as one path so the caller can play the whole turn.

Algorithm overview:

    def search(state, depth, alpha, beta, color):
        if cancelled:
            return 0, []                      # placeholder, caller discards
        if terminal:
            return +-(WIN + depth) or 0, []
        if depth <= 0:
            return evaluate(state, color), []

        for move in center_first(moves):
            child = copy(state) + move
            chained = child.mover == state.mover
            result = search(child, max(depth, 1) if chained else depth - 1, ...)

            # MAX: keep best, path = [move] (+ result.path if chained)
            # MIN: keep worst, path = []
            update alpha / beta
            if beta <= alpha:
                break                         # cutoff

Scores are always from `color`'s point of view (plain minimax, not negamax).
"""

import logging
import threading
from dataclasses import dataclass, field

from oust_search.engine.evaluation import Evaluator
from oust_search.engine.move_ordering import order_moves


logger = logging.getLogger(__name__)


# Sentinel values for win/loss/draw
SCORE_WIN = 1000000
SCORE_LOSS = -1000000
SCORE_DRAW = 0
SCORE_INF = float('inf')


@dataclass
class ScoredPath:
    """Score of a subtree and the moves of the turn that reach it."""
    score: float
    path: list = field(default_factory=list)


class AlphaBetaSearch:
    """
    Depth-limited alpha-beta search.

    The search itself is stateless apart from the node counter and the
    cancellation flag, so one instance can serve every move of a game.
    """

    def __init__(self, evaluator=None):
        """
        Args:
            evaluator: Callable (state, color) -> float for non-terminal leaves
        """
        self.evaluator = evaluator if evaluator is not None else Evaluator()

        if hasattr(self.evaluator, 'max_magnitude') and self.evaluator.max_magnitude() >= SCORE_WIN:
            raise ValueError(
                "Evaluation weights can reach the win sentinel; "
                "terminal scores would no longer dominate"
            )

        self.nodes_explored = 0
        self._cancel = threading.Event()

    def reset(self):
        """Clear statistics and the cancellation flag for a new search."""
        self.nodes_explored = 0
        self._cancel.clear()

    def cancel(self):
        """Request early termination. Safe to call from another thread."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def search(self, state, depth: int, alpha: float, beta: float, color) -> ScoredPath:
        """
        Search `state` to `depth` turns.

        Args:
            state: Game state (never mutated)
            depth: Remaining depth budget
            alpha: Best score guaranteed to the maximizer
            beta: Best score guaranteed to the minimizer
            color: Color the scores are computed for

        Returns:
            ScoredPath with the subtree score and, at a maximizing node, the
            moves of the chosen turn
        """
        if self._cancel.is_set():
            return ScoredPath(SCORE_DRAW, [])

        if state.is_game_over():
            self.nodes_explored += 1
            return ScoredPath(self._terminal_score(state, depth, color), [])

        if depth <= 0:
            self.nodes_explored += 1
            return ScoredPath(self.evaluator(state, color), [])

        mover = state.current_player
        maximizing = mover == color
        moves = order_moves(state.get_moves(), state.size)

        if not moves:
            logger.warning(
                "State reports no legal moves but is not game over (player %s to move)", mover
            )
            return ScoredPath(SCORE_LOSS if maximizing else SCORE_WIN, [])

        best = None
        for move in moves:
            child = state.copy()
            child.place_stone(move)

            # Same side to move again: the turn continues without spending depth
            chained = child.current_player == mover
            next_depth = max(depth, 1) if chained else depth - 1

            result = self.search(child, next_depth, alpha, beta, color)

            if maximizing:
                if best is None or result.score > best.score:
                    path = [move] + result.path if chained else [move]
                    best = ScoredPath(result.score, path)
                alpha = max(alpha, result.score)
            else:
                if best is None or result.score < best.score:
                    best = ScoredPath(result.score, [])
                beta = min(beta, result.score)

            if beta <= alpha:
                break

        return best

    def _terminal_score(self, state, depth: int, color) -> float:
        winner = state.get_winner()
        if winner is None:
            return SCORE_DRAW
        if winner == color:
            # Prefer faster wins
            return SCORE_WIN + depth
        if winner == -color:
            # Prefer slower losses
            return SCORE_LOSS - depth

        logger.warning("State reports unknown winner %r; scoring as a draw", winner)
        return SCORE_DRAW
