"""
Public API for playing Othello in a terminal.

Usage:
    from othello_engine import Config, play

    play(Config(mode="ai", difficulty="hard"))

The loop below is a thin front end: it reads moves, forwards them to a
GameSession, and prints what the session reports back.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional

from othello_engine.core.types import BLACK, SIDE_NAMES, WHITE, Cell, Difficulty
from othello_engine.debug.viz import render_board, render_status
from othello_engine.games.othello import Othello
from othello_engine.selection import select_move
from othello_engine.session import GameSession, MoveOutcome, Outcome
from othello_engine.utils.config import DEFAULT_CONFIG, Config
from othello_engine.utils.factory import create_session

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT_COMMANDS = {"q", "quit", "exit"}
HINT_COMMANDS = {"h", "hint", "hints"}
RESTART_COMMANDS = {"r", "restart"}


def parse_move(raw: str) -> Cell:
    """Parse 'row,col' (or 'row col') into a cell."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row,col', got '{raw}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Row and column must be integers, got '{raw}'") from e


def _show(
    session: GameSession,
    output: OutputFn,
    show_hints: bool,
    last: Optional[MoveOutcome] = None,
    color: bool = True,
) -> None:
    hints = session.legal_moves() if show_hints and session.is_human_turn else None
    output(render_board(
        session.board,
        hints=hints,
        last_move=last.move if last else None,
        flipped=last.flipped if last else None,
        color=color,
    ))
    output(render_status(session.scores, session.side_to_move, session.game_over, session.winner, color=color))


def _report(outcome: MoveOutcome, output: OutputFn) -> None:
    who = SIDE_NAMES[outcome.side]
    r, c = outcome.move
    output(f"\n{who} played {r},{c} (flipped {len(outcome.flipped)})")
    if outcome.passed is not None:
        output(f"{SIDE_NAMES[outcome.passed]} has no legal move and passes.")


def _ai_turn(session: GameSession, output: OutputFn, delay: float = 0.0) -> MoveOutcome:
    """AI selects and applies move; passes the turn if it has none."""
    if delay > 0:
        time.sleep(delay)

    outcome = session.request_ai_move()
    if outcome.outcome is Outcome.NO_MOVE:
        output(f"{SIDE_NAMES[outcome.side]} (AI) has no legal move and passes.")
        session.advance_turn()
    elif outcome.applied:
        _report(outcome, output)
    return outcome


def _human_turn(session: GameSession, raw: str, output: OutputFn) -> Optional[MoveOutcome]:
    """Apply a typed move. Returns None if the input could not be parsed."""
    try:
        r, c = parse_move(raw)
    except ValueError as e:
        output(f"Invalid input: {e}")
        return None

    outcome = session.submit_human_move(r, c)
    if outcome.outcome is Outcome.REJECTED:
        output(f"Illegal move: {outcome.reason}")
    else:
        _report(outcome, output)
    return outcome


def play(
    config: Optional[Config] = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
    color: bool = True,
) -> GameSession:
    """
    Main entry point: run an interactive game until it ends or the user quits.

    Parameters
    ----------
    config : Config
        Mode, difficulty, AI side, depth overrides, hint flag, AI delay.
    input_fn : callable
        Reads one line of user input (prompt → text).
    output : callable
        Writes one line of output.
    color : bool
        Render the board with ANSI colours.

    Returns
    -------
    GameSession
        The session in its final state.
    """
    config = config or DEFAULT_CONFIG
    session = create_session(config)
    show_hints = config.show_hints
    last: Optional[MoveOutcome] = None

    output(f"Starting othello ({session.mode.value}" + (
        f", {session.difficulty.value} AI as {SIDE_NAMES[session.ai_side]})" if session.ai_side else ")"
    ))
    _show(session, output, show_hints, color=color)

    try:
        while not session.game_over:
            if session.ai_pending:
                outcome = _ai_turn(session, output, config.ai_delay)
                if outcome.applied:
                    last = outcome
                _show(session, output, show_hints, last, color=color)
                continue

            raw = input_fn(f"{SIDE_NAMES[session.side_to_move]} move (row,col / hint / restart / quit): ").strip().lower()
            if raw in QUIT_COMMANDS:
                output("Quitting.")
                return session
            if raw in HINT_COMMANDS:
                show_hints = not show_hints
                output(f"Hints {'on' if show_hints else 'off'}.")
                _show(session, output, show_hints, last, color=color)
                continue
            if raw in RESTART_COMMANDS:
                session.restart()
                last = None
                _show(session, output, show_hints, color=color)
                continue

            outcome = _human_turn(session, raw, output)
            if outcome is not None and outcome.applied:
                last = outcome
                _show(session, output, show_hints, last, color=color)

        output("\n" + "=" * 40)
        output("GAME OVER")
        output("=" * 40)
        output(session.game.result_string())

    except (KeyboardInterrupt, EOFError):
        output("\nInterrupted.")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return session


def self_play(
    black: "Difficulty | str" = Difficulty.NORMAL,
    white: "Difficulty | str" = Difficulty.NORMAL,
    depths: Optional[Dict[Difficulty, Optional[int]]] = None,
    output: Optional[OutputFn] = None,
    color: bool = True,
) -> Othello:
    """
    Play the computer against itself and return the finished game.

    Args:
        black: Difficulty tier for Black.
        white: Difficulty tier for White.
        depths: Optional difficulty → depth override.
        output: If given, the board is printed after every move.
        color: Render with ANSI colours.
    """
    tiers: Dict[int, Difficulty] = {BLACK: Difficulty.parse(black), WHITE: Difficulty.parse(white)}
    game = Othello()

    while not game.is_over():
        side = game.current_player()
        move = select_move(game.board, side, tiers[side], depths)
        if move is None:
            # Turn invariant means this only happens on a malformed position
            game.advance_turn()
            continue

        flipped = game.apply_move(move, validated=True)
        passed = game.advance_turn()

        if output is not None:
            output(f"\n{SIDE_NAMES[side]} ({tiers[side].value}) played {move[0]},{move[1]}")
            if passed is not None:
                output(f"{SIDE_NAMES[passed]} has no legal move and passes.")
            output(render_board(game.board, last_move=move, flipped=flipped, color=color))

    if output is not None:
        output(game.result_string())
    return game


__all__ = [
    "play",
    "self_play",
    "parse_move",
    "GameSession",
    "Config",
]
