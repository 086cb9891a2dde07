import numpy as np
from collections import deque

from oust_search.game.game import GameState, PLAYER1, PLAYER2, get_opponent


# Axial neighbor offsets on a hex grid
HEX_DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1)]


class OustState(GameState):
    """
    Oust on a hex-hex board.

    Board: radius `size`, stored as a (2*size+1) x (2*size+1) array in axial
    coordinates. Cell (x, y) is on the board iff |x + y - 2*size| <= size.
    Moves: (x, y) placements on empty cells.

    - A placement touching no friendly stone is non-capturing and passes the turn.
    - A placement touching friendly stones must capture: the new group has to
      touch at least one enemy group and be strictly larger than every enemy
      group it touches. Those groups are removed and the mover places again.
    - A player who has placed and then loses every stone loses the game.
    """

    def __init__(self, size=4):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")

        self._size = size
        dim = 2 * size + 1
        xs, ys = np.indices((dim, dim))
        self.valid_mask = np.abs(xs + ys - 2 * size) <= size
        self.valid_mask.setflags(write=False)

        self._board = np.zeros((dim, dim), dtype=np.int8)
        self._current_player = PLAYER1
        self._has_placed = {PLAYER1: False, PLAYER2: False}
        self._game_over = False
        self._winner = None
        self._moves_cache = None

    @classmethod
    def from_board(cls, board, current_player=PLAYER1):
        """
        Build a position from a board array (1, -1 and 0 values).

        Args:
            board: Square array of side 2*size+1, indexed [x, y]
            current_player: Color to move

        Returns:
            OustState positioned as given
        """
        board = np.asarray(board, dtype=np.int8)
        dim = board.shape[0]
        if board.shape != (dim, dim) or dim % 2 == 0:
            raise ValueError(f"Board must be square with odd side, got {board.shape}")

        state = cls((dim - 1) // 2)
        if np.any(board[~state.valid_mask] != 0):
            raise ValueError("Stones placed outside the hexagon")

        state._board = board.copy()
        state._current_player = current_player
        for player in (PLAYER1, PLAYER2):
            state._has_placed[player] = bool(np.any(board == player))

        if not state.get_moves():
            state._finish_by_count()
        return state

    def __repr__(self):
        return f"OustState(size={self._size}, to_move={self._current_player})"

    def __str__(self):
        symbols = {1: 'X', -1: 'O', 0: '.'}
        dim = 2 * self._size + 1
        lines = []
        for y in range(dim):
            cells = [symbols[int(self._board[x, y])] for x in range(dim) if self.valid_mask[x, y]]
            lines.append(" " * abs(y - self._size) + " ".join(cells))
        return "\n".join(lines)

    def copy(self):
        clone = OustState.__new__(OustState)
        clone._size = self._size
        clone.valid_mask = self.valid_mask
        clone._board = self._board.copy()
        clone._current_player = self._current_player
        clone._has_placed = dict(self._has_placed)
        clone._game_over = self._game_over
        clone._winner = self._winner
        # Cached move lists are never mutated in place
        clone._moves_cache = self._moves_cache
        return clone

    @property
    def current_player(self):
        return self._current_player

    @property
    def size(self):
        return self._size

    @property
    def board(self):
        return self._board

    def is_game_over(self):
        return self._game_over

    def get_winner(self):
        return self._winner

    def diff(self):
        return int(np.count_nonzero(self._board == PLAYER1) - np.count_nonzero(self._board == PLAYER2))

    def stone_count(self, player):
        return int(np.count_nonzero(self._board == player))

    def get_moves(self):
        """
        Legal placements for the current player, in row-major board order.
        """
        if self._game_over:
            return []

        if self._moves_cache is None:
            empty = np.argwhere(self.valid_mask & (self._board == 0))
            moves = []
            for x, y in empty:
                move = (int(x), int(y))
                legal, _ = self._classify(move, self._current_player)
                if legal:
                    moves.append(move)
            self._moves_cache = moves

        return list(self._moves_cache)

    def place_stone(self, move):
        if self._game_over:
            raise ValueError("Game is over")

        move = (int(move[0]), int(move[1]))
        if not self._on_board(move) or self._board[move] != 0:
            raise ValueError(f"Cell {move} is not an empty board cell")

        player = self._current_player
        legal, captured = self._classify(move, player)
        if not legal:
            raise ValueError(f"Placement at {move} is not legal for player {player}")

        self._board[move] = player
        self._has_placed[player] = True
        for group in captured:
            for cell in group:
                self._board[cell] = 0
        self._moves_cache = None

        opponent = get_opponent(player)
        if captured:
            if self.stone_count(opponent) == 0:
                self._finish(player)
                return
            # Capturing player places again
        else:
            self._current_player = opponent

        if not self.get_moves():
            self._finish_by_count()

    def _finish(self, winner):
        self._game_over = True
        self._winner = winner
        self._moves_cache = None

    def _finish_by_count(self):
        diff = self.diff()
        if diff > 0:
            self._finish(PLAYER1)
        elif diff < 0:
            self._finish(PLAYER2)
        else:
            self._finish(None)

    def _on_board(self, cell):
        x, y = cell
        dim = 2 * self._size + 1
        return 0 <= x < dim and 0 <= y < dim and bool(self.valid_mask[x, y])

    def _neighbors(self, cell):
        x, y = cell
        for dx, dy in HEX_DIRECTIONS:
            neighbor = (x + dx, y + dy)
            if self._on_board(neighbor):
                yield neighbor

    def _group(self, start, player, pending=None):
        """
        Flood fill the group of `player` containing `start`.

        `pending` is an empty cell treated as holding a `player` stone.
        """
        group = {start}
        frontier = deque([start])
        while frontier:
            cell = frontier.popleft()
            for neighbor in self._neighbors(cell):
                if neighbor in group:
                    continue
                if neighbor == pending or self._board[neighbor] == player:
                    group.add(neighbor)
                    frontier.append(neighbor)
        return group

    def _classify(self, move, player):
        """
        Check a placement on an empty cell.

        Returns:
            (legal, captured_groups) where captured_groups lists the enemy
            groups the placement removes (empty for a non-capturing placement)
        """
        if not any(self._board[n] == player for n in self._neighbors(move)):
            return True, []

        group = self._group(move, player, pending=move)
        enemy = get_opponent(player)
        seen = set()
        captured = []
        for cell in group:
            for neighbor in self._neighbors(cell):
                if neighbor in seen or self._board[neighbor] != enemy:
                    continue
                enemy_group = self._group(neighbor, enemy)
                seen |= enemy_group
                if len(enemy_group) >= len(group):
                    return False, []
                captured.append(enemy_group)

        if not captured:
            return False, []
        return True, captured
