"""
Static board evaluation for minimax leaves.

score = Σ over AI discs (1 + weight) − Σ over opponent discs (1 + weight)
        + MOBILITY_WEIGHT × (AI mobility − opponent mobility)

The position-weight table is hand-tuned reference data. Changing any value
changes which moves the AI picks.
"""

from __future__ import annotations

import numpy as np

from othello_engine.games import rules

POSITION_WEIGHTS = np.array([
    [100, -20, 10,  5,  5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [ 10,  -2,  1,  1,  1,  1,  -2,  10],
    [  5,  -2,  1,  0,  0,  1,  -2,   5],
    [  5,  -2,  1,  0,  0,  1,  -2,   5],
    [ 10,  -2,  1,  1,  1,  1,  -2,  10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10,  5,  5, 10, -20, 100],
], dtype=np.int32)

POSITION_WEIGHTS.setflags(write=False)

# Per-disc value: material (1) plus positional weight
_DISC_VALUE = 1 + POSITION_WEIGHTS

MOBILITY_WEIGHT = 2


def positional_score(board: np.ndarray, ai_side: int) -> int:
    """Material plus position weights, from the AI's point of view."""
    mine = board == ai_side
    theirs = board == 3 - ai_side
    return int(_DISC_VALUE[mine].sum() - _DISC_VALUE[theirs].sum())


def mobility_score(board: np.ndarray, ai_side: int) -> int:
    ai_moves = rules.mobility(board, ai_side)
    opp_moves = rules.mobility(board, 3 - ai_side)
    return MOBILITY_WEIGHT * (ai_moves - opp_moves)


def evaluate(board: np.ndarray, ai_side: int) -> int:
    """Static evaluation of `board` for `ai_side` (higher is better)."""
    return positional_score(board, ai_side) + mobility_score(board, ai_side)
