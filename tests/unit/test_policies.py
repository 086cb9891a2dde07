"""
Unit tests for fixed-depth and iterative deepening policies.
"""

import logging

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from oust_search.engine.alphabeta import AlphaBetaSearch, SCORE_WIN, SCORE_INF
from oust_search.engine.evaluation import Evaluator
from oust_search.engine.policies import FixedDepth, IterativeDeepening
from oust_search.game.game import PLAYER1, PLAYER2
from oust_search.game.oust import OustState

from tree_game import TreeState, leaf_value


class TrippingEvaluator:
    """
    Evaluator that trips after `limit` calls: either raises the deadline on
    the search or throws, simulating a timer or an internal failure.
    """

    def __init__(self, limit, mode='cancel'):
        self.inner = Evaluator()
        self.limit = limit
        self.mode = mode
        self.calls = 0
        self.search = None

    def __call__(self, state, color):
        self.calls += 1
        if self.calls > self.limit:
            if self.mode == 'cancel':
                self.search.cancel()
            else:
                raise RuntimeError("evaluator failure")
        return self.inner(state, color)


def tripping_search(limit, mode='cancel'):
    evaluator = TrippingEvaluator(limit, mode)
    search = AlphaBetaSearch(evaluator)
    evaluator.search = search
    return search


def depth_one_reference(state, color):
    return AlphaBetaSearch().search(state, 1, -SCORE_INF, SCORE_INF, color)


class TestFixedDepth:

    def test_reports_configured_depth(self):
        search = AlphaBetaSearch()
        result, depth = FixedDepth(2).run(search, OustState(2), PLAYER1)

        assert depth == 2
        assert result.path
        assert search.nodes_explored > 0

    def test_rejects_non_positive_depth(self):
        with pytest.raises(ValueError):
            FixedDepth(0)

    def test_deadline_aborts_but_keeps_result(self, caplog):
        search = tripping_search(limit=5)
        with caplog.at_level(logging.WARNING):
            result, depth = FixedDepth(3).run(search, OustState(2), PLAYER1)

        assert search.cancelled
        assert depth == 3
        assert result.path
        assert 'Deadline reached' in caplog.text


class TestIterativeDeepening:

    def test_stops_on_proven_win(self):
        nodes = {
            'root': {'mover': PLAYER1, 'moves': {(2, 2): 'win', (0, 2): 'quiet'}},
            'win': {'mover': PLAYER2, 'terminal': True, 'winner': PLAYER1},
            'quiet': {'mover': PLAYER2, 'value': 1},
        }
        result, depth = IterativeDeepening().run(AlphaBetaSearch(leaf_value), TreeState(nodes), PLAYER1)

        assert depth == 1
        assert result.score >= SCORE_WIN
        assert result.path == [(2, 2)]

    def test_max_depth_ceiling(self):
        search = AlphaBetaSearch()
        result, depth = IterativeDeepening(max_depth=2).run(search, OustState(2), PLAYER1)

        assert depth == 2
        assert result.path

    def test_deadline_keeps_last_completed_depth(self):
        state = OustState(2)
        # Depth 1 evaluates 19 leaves; depth 2 needs far more than 100
        search = tripping_search(limit=100)

        result, depth = IterativeDeepening().run(search, state, PLAYER1)

        assert search.cancelled
        assert depth == 1
        assert result == depth_one_reference(state, PLAYER1)

    def test_deadline_before_first_depth(self):
        search = AlphaBetaSearch()
        search.cancel()

        result, depth = IterativeDeepening().run(search, OustState(2), PLAYER1)

        assert result is None
        assert depth == 0

    def test_exception_keeps_previous_depth(self, caplog):
        state = OustState(2)
        search = tripping_search(limit=100, mode='raise')

        with caplog.at_level(logging.ERROR):
            result, depth = IterativeDeepening().run(search, state, PLAYER1)

        assert depth == 1
        assert result == depth_one_reference(state, PLAYER1)
        assert 'Search failed at depth 2' in caplog.text

    def test_rejects_invalid_ceiling(self):
        with pytest.raises(ValueError):
            IterativeDeepening(max_depth=0)
