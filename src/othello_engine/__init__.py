"""
Othello Engine - 8x8 Othello/Reversi rules with a three-tier computer opponent.

This package provides the game rules, an adversarial search AI, and a
session object that sequences turns for a presentation layer.

Quick Start:
    from othello_engine import GameSession

    session = GameSession()
    session.start_game("ai", "normal")
    session.submit_human_move(2, 3)
    session.request_ai_move()

Modules:
    core       - Board encoding, sides, outcomes, move types
    games      - Board model, move engine, and the Othello game
    selection  - Greedy and minimax/alpha-beta move selection
    session    - Turn sequencing and command gating for front ends
    debug      - Terminal board rendering
"""

from othello_engine.api import play, self_play
from othello_engine.core import BLACK, WHITE, EMPTY, Difficulty, Mode, State
from othello_engine.games import Othello, GameState
from othello_engine.selection import select_move
from othello_engine.session import GameSession, GameView, MoveOutcome, Outcome
from othello_engine.utils.config import Config, DIFFICULTY_DEPTHS

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameSession",
    "GameView",
    "MoveOutcome",
    "Outcome",
    "select_move",
    "play",
    "self_play",
    "Config",
    "DIFFICULTY_DEPTHS",
    # Game
    "Othello",
    "GameState",
    # Types
    "BLACK",
    "WHITE",
    "EMPTY",
    "Difficulty",
    "Mode",
    "State",
]
