"""
Shared test fixtures for othello_engine tests.

Design principles:
- Positions written as 8-line diagrams ('B' black, 'W' white, '.' empty)
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, List, Sequence, Tuple

import numpy as np
import pytest

from othello_engine.core.types import BLACK, EMPTY, WHITE
from othello_engine.games.board import BOARD_SIZE, new_board
from othello_engine.games.othello import Othello
from othello_engine.selection.greedy import greedy_move
from othello_engine.session import GameSession

_CHARS = {".": EMPTY, "B": BLACK, "W": WHITE}


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def make_board() -> Callable[[Sequence[str]], np.ndarray]:
    """Build an int8 board from an 8-line diagram."""
    def _make(rows: Sequence[str]) -> np.ndarray:
        assert len(rows) == BOARD_SIZE
        board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for r, line in enumerate(rows):
            assert len(line) == BOARD_SIZE
            for c, ch in enumerate(line):
                board[r, c] = _CHARS[ch]
        return board
    return _make


@pytest.fixture
def opening_board() -> np.ndarray:
    """Standard four-disc start."""
    return new_board()


@pytest.fixture
def greedy_board(make_board) -> np.ndarray:
    """
    Black to move with three captures available:
    (0,3) flips 2, (4,2) flips 1, (7,6) flips 5.
    """
    return make_board([
        "BWW.....",
        "........",
        "........",
        "........",
        "BW......",
        "........",
        "........",
        "BWWWWW..",
    ])


@pytest.fixture
def pass_board(make_board) -> np.ndarray:
    """
    Black can move at (0,2) or (7,2); White has no legal move at all.
    """
    return make_board([
        "BW......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "BW......",
    ])


@pytest.fixture
def full_board_33_31() -> np.ndarray:
    """Full board, 33 black / 31 white."""
    flat = np.full(BOARD_SIZE * BOARD_SIZE, WHITE, dtype=np.int8)
    flat[:33] = BLACK
    return flat.reshape(BOARD_SIZE, BOARD_SIZE)


@pytest.fixture
def full_board_draw() -> np.ndarray:
    """Full board, 32 black / 32 white."""
    flat = np.full(BOARD_SIZE * BOARD_SIZE, WHITE, dtype=np.int8)
    flat[::2] = BLACK
    return flat.reshape(BOARD_SIZE, BOARD_SIZE)


@pytest.fixture(scope="session")
def playout_positions() -> List[Tuple[np.ndarray, int]]:
    """Every (board, side to move) from one greedy-vs-greedy game."""
    game = Othello()
    positions = []
    while not game.is_over():
        side = game.current_player()
        positions.append((game.board.copy(), side))
        move = greedy_move(game.board, side)
        game.apply_move(move)
        game.advance_turn()
    return positions


# =============================================================================
# Game / Session Fixtures
# =============================================================================

@pytest.fixture
def game() -> Othello:
    """Fresh Othello game."""
    return Othello()


@pytest.fixture
def local_session() -> GameSession:
    """Two-player session on one board."""
    session = GameSession()
    session.start_game("local")
    return session


@pytest.fixture
def ai_session() -> GameSession:
    """Human Black vs. normal-difficulty AI White."""
    session = GameSession()
    session.start_game("ai", "normal", WHITE)
    return session
