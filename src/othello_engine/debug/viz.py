"""
Terminal board renderer.

Draws the board with ANSI colours and optional overlays:
    - legal-move hints for the side to move
    - the last placed disc
    - discs flipped by the last move

Presentation only: takes a board and cell sets, never touches game state.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set

import numpy as np

from othello_engine.core.types import BLACK, EMPTY, SIDE_NAMES, WHITE, Cell

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "yellow": "\033[38;5;142m",
    "gray": "\033[38;5;245m",
    "white": "\033[38;5;255m",
    "black": "\033[38;5;233m",
    "cyan": "\033[38;5;37m",
}

BG = {
    "board": "\033[48;5;22m",     # Dark green felt
    "placed": "\033[48;5;28m",    # Lighter green
    "flipped": "\033[48;5;94m",   # Brown
}

DISC = {
    BLACK: FG["black"] + "●",
    WHITE: FG["white"] + "●",
}

HINT = FG["yellow"] + "·"
BLANK = " "


def _cell(value: int, is_hint: bool, bg: str, color: bool) -> str:
    if not color:
        if value == BLACK:
            return " X "
        if value == WHITE:
            return " O "
        return " * " if is_hint else " . "

    if value == EMPTY:
        glyph = HINT if is_hint else BLANK
    else:
        glyph = DISC[value]
    return f"{bg} {glyph} {RESET}"


def render_board(
    board: np.ndarray,
    hints: Optional[Iterable[Cell]] = None,
    last_move: Optional[Cell] = None,
    flipped: Optional[Iterable[Cell]] = None,
    color: bool = True,
) -> str:
    """
    Render `board` as a multi-line string with row/column labels.

    Args:
        board: 8x8 int8 board.
        hints: Cells to mark as legal moves.
        last_move: Cell to highlight as just placed.
        flipped: Cells to highlight as just flipped.
        color: Emit ANSI colour codes. Plain ASCII otherwise.
    """
    hint_set: Set[Cell] = set(hints or ())
    flip_set: Set[Cell] = set(flipped or ())
    rows, cols = board.shape

    header = "   " + "".join(f" {c} " for c in range(cols))
    lines = [f"{DIM}{header}{RESET}" if color else header]

    for r in range(rows):
        parts = []
        for c in range(cols):
            if (r, c) == last_move:
                bg = BG["placed"]
            elif (r, c) in flip_set:
                bg = BG["flipped"]
            else:
                bg = BG["board"]
            parts.append(_cell(int(board[r, c]), (r, c) in hint_set, bg, color))
        label = f"{DIM} {r} {RESET}" if color else f" {r} "
        lines.append(label + "".join(parts))

    return "\n".join(lines)


def render_status(
    scores: Dict[int, int],
    side_to_move: int,
    game_over: bool,
    winner: Optional[int],
    color: bool = True,
) -> str:
    """One-line score and turn summary."""
    tally = f"Black {scores[BLACK]}  White {scores[WHITE]}"
    if game_over:
        if winner == EMPTY:
            status = "Draw"
        else:
            status = f"{SIDE_NAMES[winner]} wins by {abs(scores[BLACK] - scores[WHITE])}"
    else:
        status = f"{SIDE_NAMES[side_to_move]} to move"

    if color:
        return f"{BOLD}{tally}{RESET}  {FG['cyan']}{status}{RESET}"
    return f"{tally}  {status}"
