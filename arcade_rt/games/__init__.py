"""
Arcade game framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
"""

from arcade_rt.games.game_state import GameState
from arcade_rt.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
