"""Common GameState enum for all arcade demos.

The host loop and the launcher only look at these values; games keep any
finer-grained bookkeeping private and map it onto them via `state`.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused (world frozen, waiting for confirm)
        GAME_OVER: Game ended (world frozen, waiting for confirm to restart)

    Allowed transitions:
        PLAYING -> PAUSED, PAUSED -> PLAYING
        PLAYING -> GAME_OVER, GAME_OVER -> PLAYING
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
