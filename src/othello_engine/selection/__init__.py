"""
Selection module - computer move selection by difficulty tier.

Provides the main entry point:
- select_move(): pick a move for a side on a given board

Tiers are looked up in a depth table (see utils.config.DIFFICULTY_DEPTHS):
a depth of None means greedy flip counting, an int means minimax with
alpha-beta pruning at that many plies.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from othello_engine.core.types import Cell, Difficulty
from othello_engine.selection.evaluation import POSITION_WEIGHTS, evaluate
from othello_engine.selection.greedy import greedy_move
from othello_engine.selection.minimax import SearchStats, alphabeta, minimax, minimax_move, search
from othello_engine.utils.config import DIFFICULTY_DEPTHS

logger = logging.getLogger(__name__)


def select_move(
    board: np.ndarray,
    side: int,
    difficulty: "Difficulty | str",
    depths: Optional[Dict[Difficulty, Optional[int]]] = None,
) -> Optional[Cell]:
    """
    Select a move for `side`.

    Args:
        board: Current position (not mutated).
        side: Side to move.
        difficulty: Strength tier.
        depths: Optional override of the difficulty → depth table.

    Returns:
        (row, col), or None when `side` has no legal move and must pass.
    """
    difficulty = Difficulty.parse(difficulty)
    table = DIFFICULTY_DEPTHS if depths is None else depths
    depth = table[difficulty]

    if depth is None:
        move = greedy_move(board, side)
    else:
        move = minimax_move(board, side, depth)

    logger.debug("%s AI selected %s", difficulty.value, move)
    return move


__all__ = [
    "select_move",
    "greedy_move",
    "minimax_move",
    "search",
    "alphabeta",
    "minimax",
    "evaluate",
    "SearchStats",
    "POSITION_WEIGHTS",
]
