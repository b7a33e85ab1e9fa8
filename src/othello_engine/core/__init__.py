"""
Core module - board encoding, sides, outcomes, and move types.

This module provides the building blocks used throughout the engine.
"""

from othello_engine.core.types import (
    EMPTY,
    BLACK,
    WHITE,
    SIDES,
    SIDE_NAMES,
    Cell,
    Difficulty,
    Mode,
    Move,
    State,
    check_side,
    opponent,
    parse_side,
)

__all__ = [
    # Constants
    "EMPTY",
    "BLACK",
    "WHITE",
    "SIDES",
    "SIDE_NAMES",
    # Types
    "Cell",
    "Difficulty",
    "Mode",
    "Move",
    "State",
    # Functions
    "check_side",
    "opponent",
    "parse_side",
]
