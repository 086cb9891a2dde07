# Game module

from .game import GameState, PLAYER1, PLAYER2, get_opponent
from .oust import OustState

__all__ = ['GameState', 'PLAYER1', 'PLAYER2', 'get_opponent', 'OustState']
