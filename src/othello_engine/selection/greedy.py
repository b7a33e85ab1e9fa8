"""
Greedy single-ply selection (easy tier).

Pick the move that flips the most discs right now. Moves are scanned in
row-major order and the first move is only replaced by a strictly larger
flip count, so ties go to the earliest move.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from othello_engine.core.types import Cell
from othello_engine.games import rules


def greedy_move(board: np.ndarray, side: int) -> Optional[Cell]:
    """
    Return the highest-flip move for `side`, or None if it must pass.
    """
    moves = rules.legal_moves(board, side)
    if not moves:
        return None

    best_move = moves[0]
    max_flips = 0
    for r, c in moves:
        flips = rules.count_flips(board, r, c, side)
        if flips > max_flips:
            max_flips = flips
            best_move = (r, c)
    return best_move
