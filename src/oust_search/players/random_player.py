"""
Random player, also used as the emergency fallback of the search player.
"""
import logging

import numpy as np

from oust_search.players.base import Player, SearchOutcome, SearchType


logger = logging.getLogger(__name__)


class RandomPlayer(Player):
    """
    Plays uniformly random legal placements.

    A capture grants another placement, so the player keeps placing on a
    copy of the state until the turn passes or the game ends.
    """

    def __init__(self, name="Random", seed=None):
        self._name = name
        self.rng = np.random.RandomState(seed)

    @property
    def name(self):
        return self._name

    def move(self, state):
        """
        Pick a random turn.

        Args:
            state: Current game state (not modified)

        Returns:
            SearchOutcome with the placements of one full turn
        """
        mover = state.current_player
        scratch = state.copy()
        path = []

        while not scratch.is_game_over() and scratch.current_player == mover:
            moves = scratch.get_moves()
            if len(moves) == 0:
                logger.warning("No legal moves for player %s on a live position", mover)
                break

            move = moves[self.rng.randint(len(moves))]
            scratch.place_stone(move)
            path.append(move)

        return SearchOutcome(path, 0, 0, SearchType.RANDOM)
