"""
Game session - the orchestrator between a front end and the engine.

A GameSession owns the live game, knows which sides are human and which
side (if any) the computer plays, gates commands on whose turn it is, and
reports every mutation as a MoveOutcome so a presentation layer can
animate flips and refresh scores without reading engine internals.

Commands never raise for game-level problems (illegal move, wrong turn,
game over); they return Outcome.REJECTED and leave the state unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from othello_engine.core.types import SIDE_NAMES, WHITE, Cell, Difficulty, Mode, check_side
from othello_engine.games.othello import Othello
from othello_engine.selection import select_move
from othello_engine.utils.config import DIFFICULTY_DEPTHS

logger = logging.getLogger(__name__)


class Outcome(Enum):
    ACCEPTED = auto()   # human move applied
    AI_MOVED = auto()   # computer move applied
    NO_MOVE = auto()    # computer had no legal move; caller should pass
    REJECTED = auto()   # command refused, state unchanged


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a session command.

    For applied moves this carries everything a front end needs to update:
    the placed cell, the flipped cells, new scores, and who moves next.
    """
    outcome: Outcome
    move: Optional[Cell] = None
    side: Optional[int] = None
    flipped: Tuple[Cell, ...] = ()
    scores: Dict[int, int] = field(default_factory=dict)
    side_to_move: Optional[int] = None
    passed: Optional[int] = None  # side that had to pass after this move
    game_over: bool = False
    winner: Optional[int] = None
    reason: str = ""

    @property
    def applied(self) -> bool:
        return self.outcome in (Outcome.ACCEPTED, Outcome.AI_MOVED)


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot of the whole session state."""
    board: np.ndarray
    side_to_move: int
    scores: Dict[int, int]
    mode: Mode
    ai_side: Optional[int]
    difficulty: Optional[Difficulty]
    game_over: bool
    winner: Optional[int]
    margin: int
    legal_moves: Tuple[Cell, ...]


Listener = Callable[[MoveOutcome], None]


class GameSession:
    """Turn sequencing for local two-player and single-player-vs-AI games."""

    def __init__(self, depths: Optional[Dict[Difficulty, Optional[int]]] = None):
        self.game = Othello()
        self.mode = Mode.LOCAL
        self.difficulty: Optional[Difficulty] = None
        self.ai_side: Optional[int] = None
        self.depths = dict(DIFFICULTY_DEPTHS if depths is None else depths)
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_game(
        self,
        mode: "Mode | str",
        difficulty: "Difficulty | str | None" = None,
        ai_side: int = WHITE,
    ) -> None:
        """Reset to the opening position with Black to move."""
        self.mode = Mode.parse(mode)
        if self.mode is Mode.VS_AI:
            self.difficulty = Difficulty.parse(difficulty or Difficulty.NORMAL)
            self.ai_side = check_side(ai_side)
        else:
            self.difficulty = None
            self.ai_side = None
        self.game = Othello()
        logger.info(
            "New %s game%s", self.mode.value,
            f" ({self.difficulty.value}, AI plays {SIDE_NAMES[self.ai_side]})" if self.ai_side else "",
        )

    def restart(self) -> None:
        """Start over with the same mode and difficulty."""
        self.start_game(self.mode, self.difficulty, self.ai_side or WHITE)

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with every applied MoveOutcome."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def board(self) -> np.ndarray:
        return self.game.board

    @property
    def side_to_move(self) -> int:
        return self.game.current_player()

    @property
    def scores(self) -> Dict[int, int]:
        return self.game.scores()

    @property
    def game_over(self) -> bool:
        return self.game.is_over()

    @property
    def winner(self) -> Optional[int]:
        return self.game.winner()

    @property
    def margin(self) -> int:
        return self.game.margin()

    @property
    def ai_pending(self) -> bool:
        """True while the computer owes a move."""
        return (
            self.mode is Mode.VS_AI
            and not self.game.is_over()
            and self.side_to_move == self.ai_side
        )

    @property
    def is_human_turn(self) -> bool:
        return not self.game.is_over() and not self.ai_pending

    def legal_moves(self) -> List[Cell]:
        return self.game.legal_cells()

    def view(self) -> GameView:
        return GameView(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            scores=self.scores,
            mode=self.mode,
            ai_side=self.ai_side,
            difficulty=self.difficulty,
            game_over=self.game_over,
            winner=self.winner,
            margin=self.margin,
            legal_moves=tuple(self.legal_moves()),
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def submit_human_move(self, row: int, col: int) -> MoveOutcome:
        """Apply a human move if it is legal and a human is to move."""
        if self.game.is_over():
            return self._reject("game is over")
        if self.ai_pending:
            return self._reject("waiting for the computer to move")
        if not self.game.is_legal(row, col):
            return self._reject(f"illegal move ({row},{col}) for {SIDE_NAMES[self.side_to_move]}")
        return self._play((int(row), int(col)), Outcome.ACCEPTED)

    def request_ai_move(self) -> MoveOutcome:
        """Let the computer choose and play its move."""
        if self.mode is not Mode.VS_AI:
            return self._reject("no computer player in a local game")
        if self.game.is_over():
            return self._reject("game is over")
        if self.side_to_move != self.ai_side:
            return self._reject("not the computer's turn")

        move = select_move(self.board, self.ai_side, self.difficulty, self.depths)
        if move is None:
            logger.info("%s AI has no legal move", SIDE_NAMES[self.ai_side])
            return MoveOutcome(
                Outcome.NO_MOVE,
                side=self.ai_side,
                scores=self.scores,
                side_to_move=self.side_to_move,
                reason="no move available",
            )
        return self._play(move, Outcome.AI_MOVED)

    def advance_turn(self) -> Optional[int]:
        """Pass the turn on; returns the side forced to pass, if any."""
        return self.game.advance_turn()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reject(self, reason: str) -> MoveOutcome:
        logger.debug("Rejected: %s", reason)
        return MoveOutcome(
            Outcome.REJECTED,
            scores=self.scores,
            side_to_move=self.side_to_move,
            game_over=self.game_over,
            winner=self.winner,
            reason=reason,
        )

    def _play(self, move: Cell, outcome: Outcome) -> MoveOutcome:
        side = self.side_to_move
        flipped = self.game.apply_move(move, validated=True)
        passed = self.advance_turn()

        result = MoveOutcome(
            outcome,
            move=move,
            side=side,
            flipped=tuple(flipped),
            scores=self.scores,
            side_to_move=self.side_to_move,
            passed=passed,
            game_over=self.game_over,
            winner=self.winner,
        )
        for listener in self._listeners:
            listener(result)
        return result


__all__ = [
    "GameSession",
    "GameView",
    "MoveOutcome",
    "Outcome",
]
