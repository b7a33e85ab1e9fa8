"""
Games module - board model, move engine, and the Othello game.
"""

from othello_engine.games.game_state import GameState
from othello_engine.games.board import BOARD_SIZE, new_board, empty_board, in_bounds, count_discs
from othello_engine.games.rules import (
    DIRECTIONS,
    apply_move,
    count_flips,
    flips_for,
    has_any_legal_move,
    is_legal,
    legal_moves,
)
from othello_engine.games.othello import Othello

__all__ = [
    "GameState",
    "Othello",
    "BOARD_SIZE",
    "DIRECTIONS",
    "new_board",
    "empty_board",
    "in_bounds",
    "count_discs",
    "apply_move",
    "count_flips",
    "flips_for",
    "has_any_legal_move",
    "is_legal",
    "legal_moves",
]
