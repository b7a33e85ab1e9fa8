"""
Tests for othello_engine.selection.evaluation

Tests the position-weight table and static evaluation.
"""

import numpy as np
import pytest

from othello_engine.core.types import BLACK, WHITE
from othello_engine.selection.evaluation import (
    MOBILITY_WEIGHT, POSITION_WEIGHTS,
    evaluate, mobility_score, positional_score,
)


class TestPositionWeights:
    """Reference weight table."""

    def test_shape(self):
        assert POSITION_WEIGHTS.shape == (8, 8)

    def test_symmetric(self):
        """Same value under every board symmetry."""
        assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS.T)
        assert np.array_equal(POSITION_WEIGHTS, np.fliplr(POSITION_WEIGHTS))
        assert np.array_equal(POSITION_WEIGHTS, np.flipud(POSITION_WEIGHTS))

    @pytest.mark.parametrize("r,c,expected", [
        (0, 0, 100), (0, 7, 100), (7, 0, 100), (7, 7, 100),
        (0, 1, -20), (1, 0, -20),
        (1, 1, -50), (6, 6, -50),
        (0, 2, 10), (0, 3, 5),
        (1, 2, -2), (2, 2, 1), (3, 3, 0),
    ])
    def test_values(self, r, c, expected):
        assert POSITION_WEIGHTS[r, c] == expected

    def test_read_only(self):
        with pytest.raises(ValueError):
            POSITION_WEIGHTS[0, 0] = 0


class TestEvaluate:
    """Static evaluation."""

    def test_opening_is_balanced(self, opening_board):
        """Symmetric material and mobility → 0 for either side."""
        assert evaluate(opening_board, BLACK) == 0
        assert evaluate(opening_board, WHITE) == 0

    def test_corner_vs_x_square(self, make_board):
        """
        Black corner (1 + 100) against White X-square (1 - 50), plus
        Black's single capture at (2,2) as mobility.
        """
        board = make_board([
            "B.......",
            ".W......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ])
        assert positional_score(board, BLACK) == 101 - (-49)
        assert mobility_score(board, BLACK) == MOBILITY_WEIGHT * (1 - 0)
        assert evaluate(board, BLACK) == 152

    def test_zero_sum(self, playout_positions):
        """Evaluation for one side is the negation of the other's."""
        for board, _side in playout_positions:
            assert evaluate(board, BLACK) == -evaluate(board, WHITE)

    def test_returns_int(self, opening_board):
        assert type(evaluate(opening_board, BLACK)) is int

    def test_does_not_mutate(self, greedy_board):
        before = greedy_board.copy()
        evaluate(greedy_board, BLACK)
        assert np.array_equal(greedy_board, before)
