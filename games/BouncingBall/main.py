#!/usr/bin/env python3
"""BouncingBall - Standalone entry point.

Space charges a jump while the ball is on the ground. Escape quits.
"""

import sys
import os

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from arcade_rt.host import run_game
from games.BouncingBall import config
from games.BouncingBall.game_mode import BouncingBallMode
from models import Resolution


def main():
    resolution = Resolution(width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT)
    game = BouncingBallMode(width=resolution.width, height=resolution.height)
    return run_game(game, resolution, title=config.WINDOW_TITLE, fps=config.FPS)


if __name__ == "__main__":
    sys.exit(main())
