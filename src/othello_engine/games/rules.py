"""
Move engine - legality, flips, move application, and pass detection.

Every function takes the board explicitly so the same code runs against
the live game and against disposable clones during search.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from othello_engine.core.types import BLACK, EMPTY, WHITE, Cell, Move
from othello_engine.games.board import BOARD_SIZE, count_discs, in_bounds

# Direction vectors (dr, dc), fixed scan order
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _capture_run(board: np.ndarray, row: int, col: int, dr: int, dc: int, side: int) -> List[Cell]:
    """
    Opponent cells captured in one direction from (row, col).

    Walks outward over contiguous opponent discs; the run only counts if
    it is closed by one of `side`'s own discs.
    """
    opp = 3 - side
    run: List[Cell] = []
    r, c = row + dr, col + dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        cell = board[r, c]
        if cell == opp:
            run.append((r, c))
        elif cell == side:
            return run
        else:
            break
        r += dr
        c += dc
    return []


def is_legal(board: np.ndarray, row: int, col: int, side: int) -> bool:
    """Return True if `side` may place a disc at (row, col)."""
    if not in_bounds(row, col) or board[row, col] != EMPTY:
        return False
    for dr, dc in DIRECTIONS:
        if _capture_run(board, row, col, dr, dc, side):
            return True
    return False


def flips_for(board: np.ndarray, row: int, col: int, side: int) -> List[Cell]:
    """All cells a move would flip (empty if the move is illegal)."""
    if not in_bounds(row, col) or board[row, col] != EMPTY:
        return []
    flipped: List[Cell] = []
    for dr, dc in DIRECTIONS:
        flipped.extend(_capture_run(board, row, col, dr, dc, side))
    return flipped


def count_flips(board: np.ndarray, row: int, col: int, side: int) -> int:
    """Total discs captured by a move, summed over all directions."""
    return len(flips_for(board, row, col, side))


def apply_move(board: np.ndarray, row: int, col: int, side: int) -> List[Cell]:
    """
    Place a disc and flip every captured run. Mutates `board`.

    Callers must check is_legal first; an illegal move leaves the board
    untouched and returns an empty list.

    Returns:
        The flipped cells, in direction scan order.
    """
    flipped = flips_for(board, row, col, side)
    if not flipped:
        return []
    board[row, col] = side
    for r, c in flipped:
        board[r, c] = side
    return flipped


def legal_moves(board: np.ndarray, side: int) -> List[Cell]:
    """
    Every legal placement for `side`, in row-major order.

    The order matters: search and greedy selection keep the first move
    found among equals.
    """
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_legal(board, r, c, side)
    ]


def legal_move_candidates(board: np.ndarray, side: int) -> List[Move]:
    """Legal moves paired with the cells each one flips."""
    moves = []
    for r, c in legal_moves(board, side):
        moves.append(Move(r, c, tuple(flips_for(board, r, c, side))))
    return moves


def has_any_legal_move(board: np.ndarray, side: int) -> bool:
    """Return True if `side` has at least one legal move."""
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if is_legal(board, r, c, side):
                return True
    return False


def mobility(board: np.ndarray, side: int) -> int:
    """Number of legal moves available to `side`."""
    return len(legal_moves(board, side))


def is_terminal(board: np.ndarray) -> bool:
    """Neither side can move."""
    return not has_any_legal_move(board, BLACK) and not has_any_legal_move(board, WHITE)


def winner(board: np.ndarray) -> int:
    """
    Side with strictly more discs, or EMPTY for a draw.

    Only meaningful once the game is over.
    """
    black, white = count_discs(board)
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return EMPTY


def margin(board: np.ndarray) -> Tuple[int, int]:
    """(winner, disc difference) for the final position."""
    black, white = count_discs(board)
    return winner(board), abs(black - white)
