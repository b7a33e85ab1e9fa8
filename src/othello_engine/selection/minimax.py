"""
Minimax search with alpha-beta pruning (normal and hard tiers).

Maximizing nodes have the AI side to move, minimizing nodes the opponent.
Every child is searched on its own board copy, so a caller's board is
never mutated.

Depth counts plies: single-side move applications. A forced pass also
consumes a ply but leaves the board unchanged.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from othello_engine.core.types import Cell
from othello_engine.games import rules
from othello_engine.selection.evaluation import evaluate

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search."""
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


def _child(board: np.ndarray, move: Cell, side: int) -> np.ndarray:
    child = board.copy()
    rules.apply_move(child, move[0], move[1], side)
    return child


def alphabeta(
    board: np.ndarray,
    depth: int,
    maximizing: bool,
    ai_side: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Alpha-beta minimax value of `board` from `ai_side`'s point of view.

    Args:
        board: Position to score (not mutated).
        depth: Remaining plies.
        maximizing: True if `ai_side` is to move at this node.
        ai_side: The side the evaluation favours.
        alpha: Best value the maximizer can already guarantee.
        beta: Best value the minimizer can already guarantee.
        stats: Optional counters, updated in place.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0:
        if stats is not None:
            stats.leaves += 1
        return evaluate(board, ai_side)

    player = ai_side if maximizing else 3 - ai_side
    moves = rules.legal_moves(board, player)

    if not moves:
        if not rules.has_any_legal_move(board, 3 - player):
            if stats is not None:
                stats.leaves += 1
            return evaluate(board, ai_side)
        # Forced pass
        return alphabeta(board, depth - 1, not maximizing, ai_side, alpha, beta, stats)

    if maximizing:
        max_score = -math.inf
        for move in moves:
            score = alphabeta(_child(board, move, player), depth - 1, False, ai_side, alpha, beta, stats)
            max_score = max(max_score, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return max_score

    min_score = math.inf
    for move in moves:
        score = alphabeta(_child(board, move, player), depth - 1, True, ai_side, alpha, beta, stats)
        min_score = min(min_score, score)
        beta = min(beta, score)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return min_score


def minimax(board: np.ndarray, depth: int, maximizing: bool, ai_side: int) -> float:
    """
    Plain minimax without pruning.

    Visits the full tree; alphabeta must always return the same value.
    """
    if depth == 0:
        return evaluate(board, ai_side)

    player = ai_side if maximizing else 3 - ai_side
    moves = rules.legal_moves(board, player)

    if not moves:
        if not rules.has_any_legal_move(board, 3 - player):
            return evaluate(board, ai_side)
        return minimax(board, depth - 1, not maximizing, ai_side)

    scores = [minimax(_child(board, move, player), depth - 1, not maximizing, ai_side) for move in moves]
    return max(scores) if maximizing else min(scores)


def score_moves(board: np.ndarray, side: int, depth: int, stats: Optional[SearchStats] = None):
    """
    Yield (move, score) for every legal root move, row-major.

    Each root move is applied to a fresh copy and scored with the opponent
    to move and depth - 1 plies left.
    """
    for move in rules.legal_moves(board, side):
        yield move, alphabeta(_child(board, move, side), depth - 1, False, side, stats=stats)


def search(board: np.ndarray, side: int, depth: int) -> Tuple[Optional[Cell], float, SearchStats]:
    """
    Full root search.

    Returns:
        (best_move or None if `side` must pass, best score, stats)
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    stats = SearchStats()
    best_move: Optional[Cell] = None
    best_score = -math.inf

    for move, score in score_moves(board, side, depth, stats):
        if best_move is None or score > best_score:
            best_score = score
            best_move = move

    logger.debug(
        "depth %d search: move=%s score=%s nodes=%d leaves=%d cutoffs=%d",
        depth, best_move, best_score, stats.nodes, stats.leaves, stats.cutoffs,
    )
    return best_move, best_score, stats


def minimax_move(board: np.ndarray, side: int, depth: int) -> Optional[Cell]:
    """Best move for `side` at `depth` plies, or None if it must pass."""
    move, _score, _stats = search(board, side, depth)
    return move
