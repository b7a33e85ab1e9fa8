"""
GameState - lightweight game state container.

Optimized for fast copying.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Board plus side to move.

    Uses int8 board for fast copy:
        0 = empty
        1 = black disc
        2 = white disc

    Scores are not stored; they are recounted from the board on demand.
    """
    __slots__ = ('board', 'current_player', 'game_over')

    def __init__(self, board: np.ndarray, current_player: int, game_over: bool = False):
        self.board = board
        self.current_player = current_player
        self.game_over = game_over

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player, self.game_over)
