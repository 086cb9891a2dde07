"""
Depth-selection policies for the search facade.

- FixedDepth: one search at a configured depth
- IterativeDeepening: search depth 1, then 2, then 3... until the deadline
  signal arrives or a forced win is found, keeping the last completed depth

Both return (ScoredPath or None, depth_reached).
"""

import logging
from typing import Optional, Tuple

from oust_search.engine.alphabeta import AlphaBetaSearch, ScoredPath, SCORE_INF, SCORE_WIN


logger = logging.getLogger(__name__)


class FixedDepth:
    """Run exactly one search at `depth`, reporting that depth as reached."""

    iterative = False

    def __init__(self, depth: int):
        if depth < 1:
            raise ValueError(f"Fixed depth must be at least 1, got {depth}")
        self.depth = depth

    def run(self, search: AlphaBetaSearch, state, color) -> Tuple[Optional[ScoredPath], int]:
        result = search.search(state, self.depth, -SCORE_INF, SCORE_INF, color)
        if search.cancelled:
            # Defensive abort: the partial result is still playable
            logger.warning("Deadline reached during fixed-depth search at depth %d", self.depth)
        return result, self.depth


class IterativeDeepening:
    """
    Iterative deepening driver.

    Strategy:
    - Search depth 1, then 2, then 3... with a full window
    - A depth interrupted by the deadline is discarded
    - Stop early once a forced win is proven
    - Without `max_depth` the loop only ends on the deadline or a win
    """

    iterative = True

    def __init__(self, max_depth: Optional[int] = None):
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth

    def run(self, search: AlphaBetaSearch, state, color) -> Tuple[Optional[ScoredPath], int]:
        best = None
        depth_reached = 0
        depth = 1

        while not search.cancelled:
            try:
                result = search.search(state, depth, -SCORE_INF, SCORE_INF, color)
            except Exception:
                logger.exception("Search failed at depth %d; keeping depth %d result", depth, depth_reached)
                break

            # Only accept depths completed before the deadline
            if search.cancelled:
                logger.debug("Deadline reached during depth %d", depth)
                break

            best = result
            depth_reached = depth
            logger.debug(
                "Depth %d done: score=%.1f path=%s nodes=%d",
                depth, result.score, result.path, search.nodes_explored
            )

            if result.score >= SCORE_WIN:
                break
            if self.max_depth is not None and depth >= self.max_depth:
                break

            depth += 1

        return best, depth_reached
