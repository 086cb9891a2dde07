from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class SearchType(Enum):
    RANDOM = 'random'
    MINIMAX = 'minimax'
    MINIMAX_IDS = 'minimax_ids'


@dataclass(frozen=True)
class SearchOutcome:
    """Moves chosen for one turn plus search statistics."""
    path: list = field(default_factory=list)
    nodes_explored: int = 0
    depth_reached: int = 0
    search_type: SearchType = SearchType.MINIMAX


class Player(ABC):
    """
    A player the match host asks for one turn at a time.
    """

    @property
    @abstractmethod
    def name(self):
        pass

    @abstractmethod
    def move(self, state):
        """
        Returns a SearchOutcome whose path plays the current player's whole turn.
        """
        pass

    def notify_deadline(self):
        """
        Called asynchronously by the host when the turn's time is up.
        """
        pass
