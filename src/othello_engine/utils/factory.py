"""
Factory functions for creating game sessions.
"""

from typing import Optional

from othello_engine.session import GameSession
from othello_engine.utils.config import DEFAULT_CONFIG, Config


def create_session(config: Optional[Config] = None) -> GameSession:
    """
    Create a session with a fresh game already started.

    Args:
        config: Session settings (defaults to DEFAULT_CONFIG)

    Returns:
        Started GameSession
    """
    config = config or DEFAULT_CONFIG

    session = GameSession(depths=config.depths)
    session.start_game(config.mode, config.difficulty, config.ai_side)

    return session
