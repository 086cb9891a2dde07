"""
Search player: the move selection entry point used by the match host.

Two modes:
- fixed_depth > 0: one alpha-beta search at that depth
- fixed_depth == 0: iterative deepening until notify_deadline() is called

If the search produces no usable path (or fails), the fallback player's
outcome is returned verbatim, so move() always answers with a playable turn.
"""

import logging

from oust_search.config import SEARCH_CONFIG
from oust_search.engine.alphabeta import AlphaBetaSearch
from oust_search.engine.policies import FixedDepth, IterativeDeepening
from oust_search.players.base import Player, SearchOutcome, SearchType
from oust_search.players.random_player import RandomPlayer


logger = logging.getLogger(__name__)


class SearchPlayer(Player):
    """
    Alpha-beta player with fixed-depth or iterative deepening search.
    """

    def __init__(
        self,
        name: str = "PingPong",
        fixed_depth: int = SEARCH_CONFIG['fixed_depth'],
        evaluator=None,
        fallback: Player = None,
        max_depth: int = SEARCH_CONFIG['max_depth'],
    ):
        """
        Initialize search player.

        Args:
            name: Display name
            fixed_depth: Search depth, or 0 for iterative deepening
            evaluator: Leaf evaluation callable (state, color) -> float
            fallback: Player used when the search yields no move
            max_depth: Iterative deepening ceiling (None = until deadline)
        """
        self._base_name = name
        self.fixed_depth = fixed_depth
        self.search = AlphaBetaSearch(evaluator)
        self.fallback = fallback if fallback is not None else RandomPlayer("Emergency")

        if fixed_depth > 0:
            self.policy = FixedDepth(fixed_depth)
        else:
            self.policy = IterativeDeepening(max_depth)

    @property
    def name(self):
        if self.fixed_depth > 0:
            return f"{self._base_name} (Depth {self.fixed_depth})"
        return f"{self._base_name} (IDS)"

    @property
    def search_type(self):
        return SearchType.MINIMAX_IDS if self.policy.iterative else SearchType.MINIMAX

    def notify_deadline(self):
        self.search.cancel()

    def move(self, state):
        """
        Choose the moves for the current player's turn.

        Args:
            state: Current game state (not modified)

        Returns:
            SearchOutcome with the path, nodes explored and depth reached
        """
        self.search.reset()
        color = state.current_player

        try:
            best, depth_reached = self.policy.run(self.search, state, color)
        except Exception:
            logger.exception("%s: search failed, using fallback", self.name)
            return self.fallback.move(state)

        if best is None or not best.path:
            logger.warning("%s: search produced no move, using fallback", self.name)
            return self.fallback.move(state)

        logger.info(
            "%s: path=%s score=%.1f depth=%d nodes=%d",
            self.name, best.path, best.score, depth_reached, self.search.nodes_explored
        )
        return SearchOutcome(list(best.path), self.search.nodes_explored, depth_reached, self.search_type)
