"""
Configuration and difficulty registry.
"""

from typing import Dict, Optional

from othello_engine.core.types import WHITE, Difficulty, Mode, check_side
from othello_engine.games.board import BOARD_SIZE


# ---------------------------------------------------------------------------
# Difficulty Registry
# ---------------------------------------------------------------------------

# None = greedy single-ply selection; ints are minimax depths in plies
DIFFICULTY_DEPTHS: Dict[Difficulty, Optional[int]] = {
    Difficulty.EASY: None,
    Difficulty.NORMAL: 3,
    Difficulty.HARD: 5,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Game session configuration with sensible defaults."""

    def __init__(
        self,
        mode: "Mode | str" = Mode.VS_AI,
        difficulty: "Difficulty | str | None" = Difficulty.NORMAL,
        ai_side: int = WHITE,
        normal_depth: Optional[int] = None,
        hard_depth: Optional[int] = None,
        show_hints: bool = False,
        ai_delay: float = 0.0,
    ):
        self.mode = Mode.parse(mode)
        self.ai_side = check_side(ai_side)
        self.show_hints = show_hints
        self.ai_delay = max(0.0, ai_delay)

        # Local games have no AI tier
        if self.mode is Mode.LOCAL:
            self.difficulty = None
        else:
            self.difficulty = Difficulty.parse(difficulty or Difficulty.NORMAL)

        self.depths = dict(DIFFICULTY_DEPTHS)
        for difficulty_key, depth in ((Difficulty.NORMAL, normal_depth), (Difficulty.HARD, hard_depth)):
            if depth is None:
                continue
            if depth < 1:
                raise ValueError(f"{difficulty_key.value} depth must be at least 1, got {depth}")
            self.depths[difficulty_key] = depth

    @property
    def board_size(self) -> int:
        return BOARD_SIZE


# Default configuration
DEFAULT_CONFIG = Config()
