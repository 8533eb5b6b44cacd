#!/usr/bin/env python3
"""FruitCatch - Standalone entry point.

Left/Right move the basket, P pauses, Enter resumes or restarts, Escape quits.
Sprites are read from ./assets/images (run make_assets.py once to create them).
"""

import sys
import os

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from arcade_rt.host import run_game
from games.FruitCatch import config
from games.FruitCatch.game_mode import FruitCatchMode
from models import Resolution


def main():
    resolution = Resolution(width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT)
    game = FruitCatchMode(width=resolution.width, height=resolution.height)
    return run_game(game, resolution, title=config.WINDOW_TITLE, fps=config.FPS)


if __name__ == "__main__":
    sys.exit(main())
