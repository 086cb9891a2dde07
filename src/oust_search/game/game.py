from abc import ABC, abstractmethod

PLAYER1 = 1
PLAYER2 = -1


class GameState(ABC):
    """
    Abstract game state consumed by the search engine.

    Moves are hashable (x, y) coordinates. The board center sits at
    (size, size), so the board spans 2 * size + 1 cells along each axis.
    """

    @abstractmethod
    def copy(self):
        """
        Returns an independent copy of the state.
        """
        pass

    @abstractmethod
    def place_stone(self, move):
        """
        Applies a move in place, advancing the turn when it passes.
        """
        pass

    @abstractmethod
    def get_moves(self):
        """
        Returns the list of legal moves for the current player.
        """
        pass

    @abstractmethod
    def is_game_over(self):
        """
        Returns True once the game has finished.
        """
        pass

    @abstractmethod
    def get_winner(self):
        """
        Returns the winning color, or None when there is no winner.
        """
        pass

    @property
    @abstractmethod
    def current_player(self):
        """
        Returns the color to move.
        """
        pass

    @property
    @abstractmethod
    def size(self):
        """
        Returns the board radius.
        """
        pass

    @property
    @abstractmethod
    def board(self):
        """
        Returns the board array indexed [x, y] holding 1, -1 or 0.
        """
        pass

    @abstractmethod
    def diff(self):
        """
        Returns player 1 stones minus player 2 stones.
        """
        pass


def get_opponent(player):
    return -player
