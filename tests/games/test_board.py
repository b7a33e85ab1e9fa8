"""
Tests for othello_engine.games.board

Tests the board model: layout, bounds, and disc counting.
"""

import numpy as np
import pytest

from othello_engine.core.types import BLACK, EMPTY, WHITE
from othello_engine.games.board import (
    BOARD_SIZE, check_board, check_cell, count_discs, disc_count,
    empty_board, in_bounds, new_board,
)


class TestNewBoard:
    """Opening position tests."""

    def test_shape_and_dtype(self):
        """Board is an 8x8 int8 grid (64 cells)."""
        board = new_board()
        assert board.shape == (8, 8)
        assert board.size == 64
        assert board.dtype == np.int8

    def test_center_discs(self):
        """Two of each colour on the centre diagonals."""
        board = new_board()
        assert board[3, 3] == WHITE
        assert board[3, 4] == BLACK
        assert board[4, 3] == BLACK
        assert board[4, 4] == WHITE

    def test_everything_else_empty(self):
        """Only the four centre cells are occupied."""
        board = new_board()
        assert np.count_nonzero(board) == 4
        board[3:5, 3:5] = EMPTY
        assert np.all(board == EMPTY)

    def test_fresh_copies(self):
        """Each call returns an independent board."""
        a, b = new_board(), new_board()
        a[0, 0] = BLACK
        assert b[0, 0] == EMPTY

    def test_empty_board(self):
        assert not np.any(empty_board())


class TestBounds:
    """Coordinate checks."""

    @pytest.mark.parametrize("r,c", [(0, 0), (7, 7), (0, 7), (3, 4)])
    def test_in_bounds(self, r, c):
        assert in_bounds(r, c)

    @pytest.mark.parametrize("r,c", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_bounds(self, r, c):
        assert not in_bounds(r, c)

    def test_check_cell_raises(self):
        """Off-board coordinates raise ValueError."""
        with pytest.raises(ValueError):
            check_cell(8, 0)

    def test_check_cell_returns_ints(self):
        r, c = check_cell(np.int64(2), np.int64(3))
        assert (r, c) == (2, 3)
        assert type(r) is int


class TestCheckBoard:
    """Board shape/value validation."""

    def test_accepts_opening(self):
        board = new_board()
        assert check_board(board) is board

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            check_board(np.zeros((6, 6), dtype=np.int8))

    def test_rejects_bad_values(self):
        board = new_board()
        board[0, 0] = 7
        with pytest.raises(ValueError):
            check_board(board)


class TestCounting:
    """Derived scores."""

    def test_opening_counts(self):
        assert count_discs(new_board()) == (2, 2)

    def test_disc_count(self):
        board = new_board()
        board[0, :] = BLACK
        assert disc_count(board, BLACK) == BOARD_SIZE + 2
        assert disc_count(board, WHITE) == 2

    def test_counts_are_plain_ints(self):
        black, white = count_discs(new_board())
        assert type(black) is int and type(white) is int
