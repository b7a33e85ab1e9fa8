"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Cell values / sides (int8 board encoding)
- Outcome states reported to each side
- Play mode and AI difficulty tiers
- Move candidates with their flip sets
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Tuple


# ─── Board Encoding ───────────────────────────────────────────────────────────

EMPTY = 0
BLACK = 1   # Black moves first
WHITE = 2

SIDES = (BLACK, WHITE)

SIDE_NAMES = {BLACK: "Black", WHITE: "White"}


def opponent(side: int) -> int:
    """Return the other side (1 ↔ 2)."""
    return 3 - side


def check_side(side: int) -> int:
    """Validate a side value, returning it unchanged."""
    if side not in SIDES:
        raise ValueError(f"Invalid side: {side}. Expected {BLACK} (black) or {WHITE} (white)")
    return side


def parse_side(name: str) -> int:
    """Map 'black' / 'white' (any case) to a side value."""
    lookup = {v.lower(): k for k, v in SIDE_NAMES.items()}
    key = name.strip().lower()
    if key not in lookup:
        raise ValueError(f"Unknown side: {name}. Available: {', '.join(lookup)}")
    return lookup[key]


# ─── Outcomes ─────────────────────────────────────────────────────────────────

class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


# ─── Session Settings ─────────────────────────────────────────────────────────

class Mode(Enum):
    LOCAL = "local"   # two humans on one board
    VS_AI = "ai"      # single player against the computer

    @classmethod
    def parse(cls, value: "str | Mode") -> "Mode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown mode: {value}. Available: {available}") from None


class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty: {value}. Available: {available}") from None


# ─── Moves ────────────────────────────────────────────────────────────────────

Cell = Tuple[int, int]


class Move(NamedTuple):
    """A candidate placement and the opponent cells it flips."""

    row: int
    col: int
    flips: Tuple[Cell, ...] = ()

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    @property
    def flip_count(self) -> int:
        return len(self.flips)
