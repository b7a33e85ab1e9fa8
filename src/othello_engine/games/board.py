"""
Board model - fixed 8x8 grid of int8 cell states.

Board encoding:
    0 = empty
    1 = black disc
    2 = white disc

Boards are plain NumPy arrays so they copy cheaply (board.copy()) for
search and compare with np.array_equal in tests.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from othello_engine.core.types import BLACK, EMPTY, WHITE

BOARD_SIZE = 8

# Starting discs: two of each colour on the centre diagonals
_MID = BOARD_SIZE // 2
INITIAL_DISCS = {
    (_MID - 1, _MID - 1): WHITE,
    (_MID - 1, _MID): BLACK,
    (_MID, _MID - 1): BLACK,
    (_MID, _MID): WHITE,
}


def new_board() -> np.ndarray:
    """Create the standard four-disc opening position."""
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for (r, c), side in INITIAL_DISCS.items():
        board[r, c] = side
    return board


def empty_board() -> np.ndarray:
    """Board with no discs (used to build test positions)."""
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is on the board."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def check_cell(r: int, c: int) -> Tuple[int, int]:
    """Validate coordinates, returning them as plain ints."""
    r, c = int(r), int(c)
    if not in_bounds(r, c):
        raise ValueError(f"Cell ({r},{c}) is off the board (0-{BOARD_SIZE - 1})")
    return r, c


def check_board(board: np.ndarray) -> np.ndarray:
    """Reject arrays that are not an 8x8 grid of valid cell values."""
    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {board.shape}")
    if not np.isin(board, (EMPTY, BLACK, WHITE)).all():
        raise ValueError("Board contains values other than empty/black/white")
    return board


def count_discs(board: np.ndarray) -> Tuple[int, int]:
    """
    Count discs with a full pass over the board.

    Scores are always derived this way rather than tracked incrementally.

    Returns:
        (black_count, white_count)
    """
    return int(np.count_nonzero(board == BLACK)), int(np.count_nonzero(board == WHITE))


def disc_count(board: np.ndarray, side: int) -> int:
    """Number of discs belonging to one side."""
    return int(np.count_nonzero(board == side))
