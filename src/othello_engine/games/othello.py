"""
Othello game implementation.

Uses int8 board:
    0 = empty
    1 = black disc (moves first)
    2 = white disc

The game owns one mutable GameState. Turn order, forced passes, and the
end of the game are resolved here; the rules module only answers
questions about a board.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import numpy as np

from othello_engine.core.types import BLACK, EMPTY, SIDE_NAMES, WHITE, Cell, State, check_side
from othello_engine.games import rules
from othello_engine.games.board import BOARD_SIZE, check_board, check_cell, count_discs, new_board
from othello_engine.games.game_state import GameState

logger = logging.getLogger(__name__)

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: "·", BLACK: "●", WHITE: "○"}


class Othello:
    """8x8 Othello / Reversi."""

    __slots__ = ('state',)

    def __init__(self):
        self.state = GameState(new_board(), current_player=BLACK)

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "othello"

    def num_players(self) -> int:
        return 2

    def clone(self) -> "Othello":
        g = Othello.__new__(Othello)
        g.state = self.state
        return g

    def deep_clone(self) -> "Othello":
        g = Othello.__new__(Othello)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        """
        Replace the current state.

        The side to move and the game-over flag are re-derived from the
        board so an arbitrary position still satisfies the turn invariant.
        """
        check_board(game_state.board)
        check_side(game_state.current_player)
        self.state = game_state
        self._normalize_turn()

    @property
    def board(self) -> np.ndarray:
        return self.state.board

    def current_player(self) -> int:
        return self.state.current_player

    def valid_moves(self) -> np.ndarray:
        """Return legal placements for the side to move as array of shape (N, 2)."""
        if self.state.game_over:
            return np.zeros((0, 2), dtype=np.int32)
        moves = rules.legal_moves(self.state.board, self.state.current_player)
        if not moves:
            return np.zeros((0, 2), dtype=np.int32)
        return np.array(moves, dtype=np.int32)

    def legal_cells(self) -> List[Cell]:
        """Legal placements as (row, col) tuples, row-major."""
        if self.state.game_over:
            return []
        return rules.legal_moves(self.state.board, self.state.current_player)

    def is_legal(self, r: int, c: int) -> bool:
        if self.state.game_over:
            return False
        return rules.is_legal(self.state.board, r, c, self.state.current_player)

    def apply_move(self, move, *, validated: bool = False) -> List[Cell]:
        """
        Place a disc for the side to move and flip captured discs.

        Does not advance the turn; call advance_turn() afterwards.

        Args:
            move: (row, col) pair.
            validated: If True, skip the bounds/game-over checks (caller
                guarantees the move came from valid_moves()).

        Returns:
            The flipped cells.
        """
        r, c = int(move[0]), int(move[1])
        if not validated:
            check_cell(r, c)
            if self.state.game_over:
                raise ValueError("Game is over")

        player = self.state.current_player
        flipped = rules.apply_move(self.state.board, r, c, player)
        if not flipped:
            raise ValueError(f"Illegal move ({r},{c}) for {SIDE_NAMES[player]}")
        return flipped

    def advance_turn(self) -> Optional[int]:
        """
        Hand the turn to the opponent.

        If the opponent has no legal move the turn comes straight back; if
        neither side can move the game ends.

        Returns:
            The side that had to pass, or None.
        """
        if self.state.game_over:
            return None

        board = self.state.board
        mover = self.state.current_player
        nxt = 3 - mover

        if rules.has_any_legal_move(board, nxt):
            self.state.current_player = nxt
            return None

        if rules.has_any_legal_move(board, mover):
            logger.info("%s has no legal move and passes", SIDE_NAMES[nxt])
            return nxt

        self.state.game_over = True
        logger.info("Game over: %s", self.result_string())
        return None

    def _normalize_turn(self) -> None:
        board = self.state.board
        side = self.state.current_player
        if rules.has_any_legal_move(board, side):
            self.state.game_over = False
        elif rules.has_any_legal_move(board, 3 - side):
            self.state.current_player = 3 - side
            self.state.game_over = False
        else:
            self.state.game_over = True

    def is_over(self) -> bool:
        return self.state.game_over

    def scores(self) -> Dict[int, int]:
        black, white = count_discs(self.state.board)
        return {BLACK: black, WHITE: white}

    def winner(self) -> Optional[int]:
        """BLACK, WHITE, EMPTY for a draw, or None while the game is running."""
        if not self.state.game_over:
            return None
        return rules.winner(self.state.board)

    def margin(self) -> int:
        black, white = count_discs(self.state.board)
        return abs(black - white)

    def get_result(self, agent_id: int) -> State:
        if not self.state.game_over:
            return State.NEUTRAL
        w = rules.winner(self.state.board)
        if w == EMPTY:
            return State.TIE
        return State.WIN if w == agent_id else State.LOSS

    def result_string(self) -> str:
        scores = self.scores()
        w = rules.winner(self.state.board)
        tally = f"Black {scores[BLACK]} - White {scores[WHITE]}"
        if w == EMPTY:
            return f"draw ({tally})"
        return f"{SIDE_NAMES[w]} wins ({tally})"

    def state_string(self) -> str:
        board = self.state.board
        lines = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r in range(BOARD_SIZE):
            lines.append(f"{r} " + " ".join(CELL_STRINGS[board[r, c]] for c in range(BOARD_SIZE)))
        return "\n".join(lines)
