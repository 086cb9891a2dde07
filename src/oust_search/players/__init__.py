"""
Players for Oust: the alpha-beta search player and the random fallback.
"""
from .base import Player, SearchOutcome, SearchType
from .random_player import RandomPlayer
from .search_player import SearchPlayer

__all__ = ['Player', 'SearchOutcome', 'SearchType', 'RandomPlayer', 'SearchPlayer']
