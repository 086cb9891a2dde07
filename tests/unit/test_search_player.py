"""
Unit tests for the search player facade and the random fallback player.
"""

import threading
import time

import numpy as np
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from oust_search.engine.alphabeta import SCORE_WIN
from oust_search.game.game import PLAYER1, PLAYER2
from oust_search.game.oust import OustState
from oust_search.players import Player, RandomPlayer, SearchOutcome, SearchPlayer, SearchType

from tree_game import TreeState


class RecordingFallback(Player):
    """Fallback stub returning a fixed outcome and counting calls."""

    def __init__(self, outcome=None):
        self.outcome = outcome if outcome is not None else SearchOutcome([(9, 9)], 0, 0, SearchType.RANDOM)
        self.calls = 0

    @property
    def name(self):
        return "Recording"

    def move(self, state):
        self.calls += 1
        return self.outcome


def failing_evaluator(state, color):
    raise RuntimeError("broken evaluator")


def assert_playable(state, path):
    """Every move of the path is legal and the turn ends with the path."""
    replay = state.copy()
    mover = replay.current_player
    assert path
    for move in path:
        assert replay.current_player == mover
        assert move in replay.get_moves()
        replay.place_stone(move)
    assert replay.is_game_over() or replay.current_player != mover


class TestSearchPlayer:

    def test_names(self):
        assert SearchPlayer("PingPong", fixed_depth=3).name == "PingPong (Depth 3)"
        assert SearchPlayer("PingPong").name == "PingPong (IDS)"

    def test_fixed_depth_outcome(self):
        state = OustState(2)
        outcome = SearchPlayer(fixed_depth=2).move(state)

        assert outcome.search_type == SearchType.MINIMAX
        assert outcome.depth_reached == 2
        assert outcome.nodes_explored > 0
        assert_playable(state, outcome.path)

    def test_iterative_outcome(self):
        state = OustState(2)
        outcome = SearchPlayer(max_depth=2).move(state)

        assert outcome.search_type == SearchType.MINIMAX_IDS
        assert outcome.depth_reached == 2
        assert_playable(state, outcome.path)

    def test_depth_one_finds_winning_turn(self):
        board = np.zeros((5, 5), dtype=np.int8)
        board[2, 2] = PLAYER1
        board[3, 2] = PLAYER2
        state = OustState.from_board(board, current_player=PLAYER1)

        outcome = SearchPlayer(fixed_depth=1).move(state)

        replay = state.copy()
        for move in outcome.path:
            replay.place_stone(move)
        assert replay.get_winner() == PLAYER1

    def test_nodes_reset_between_moves(self):
        player = SearchPlayer(fixed_depth=1)
        first = player.move(OustState(2))
        second = player.move(OustState(2))
        assert first.nodes_explored == second.nodes_explored

    def test_deadline_from_timer_thread(self):
        state = OustState(3)
        player = SearchPlayer()
        timer = threading.Timer(0.5, player.notify_deadline)

        start = time.time()
        timer.start()
        try:
            outcome = player.move(state)
        finally:
            timer.cancel()

        assert time.time() - start < 10.0
        assert_playable(state, outcome.path)

    def test_never_empty_on_live_positions(self):
        for seed in range(4):
            state = OustState(2)
            mover = RandomPlayer(seed=seed)
            for _ in range(seed + 1):
                for move in mover.move(state).path:
                    state.place_stone(move)
            if state.is_game_over():
                continue
            outcome = SearchPlayer(fixed_depth=2).move(state)
            assert_playable(state, outcome.path)


class TestFallback:

    def test_search_failure_uses_fallback_verbatim(self, caplog):
        fallback = RecordingFallback()
        player = SearchPlayer(fixed_depth=2, evaluator=failing_evaluator, fallback=fallback)

        outcome = player.move(OustState(2))

        assert outcome is fallback.outcome
        assert fallback.calls == 1
        assert 'search failed' in caplog.text

    def test_iterative_failure_uses_fallback(self):
        fallback = RecordingFallback()
        player = SearchPlayer(evaluator=failing_evaluator, fallback=fallback)

        outcome = player.move(OustState(2))

        assert outcome is fallback.outcome

    def test_empty_result_uses_fallback(self, caplog):
        fallback = RecordingFallback(SearchOutcome([], 0, 0, SearchType.RANDOM))
        player = SearchPlayer(fixed_depth=2, fallback=fallback)

        outcome = player.move(TreeState({'root': {'mover': PLAYER1}}))

        assert outcome is fallback.outcome
        assert 'no move' in caplog.text

    def test_default_fallback_is_random(self):
        player = SearchPlayer(fixed_depth=2, evaluator=failing_evaluator)
        state = OustState(2)

        outcome = player.move(state)

        assert outcome.search_type == SearchType.RANDOM
        assert_playable(state, outcome.path)


class TestRandomPlayer:

    def test_plays_full_capture_turn(self):
        board = np.zeros((5, 5), dtype=np.int8)
        board[2, 2] = PLAYER1
        board[3, 2] = PLAYER2
        board[0, 4] = PLAYER2
        state = OustState.from_board(board, current_player=PLAYER1)

        for seed in range(10):
            outcome = RandomPlayer(seed=seed).move(state)
            assert outcome.search_type == SearchType.RANDOM
            assert_playable(state, outcome.path)

    def test_seeded_player_is_reproducible(self):
        state = OustState(3)
        assert RandomPlayer(seed=3).move(state).path == RandomPlayer(seed=3).move(state).path

    def test_does_not_modify_state(self):
        state = OustState(2)
        RandomPlayer(seed=0).move(state)
        assert state.diff() == 0
        assert state.current_player == PLAYER1
