"""
FruitCatch - Configuration loader.

Values come from the environment, optionally seeded from a .env file next
to this module.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1024)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 768)
FPS = _get_int('FPS', 60)
WINDOW_TITLE = os.getenv('WINDOW_TITLE', 'Fruit Catch')

# Spawning
SPAWN_INTERVAL_FRAMES = _get_int('SPAWN_INTERVAL_FRAMES', 120)
BASE_FALL_SPEED = _get_float('BASE_FALL_SPEED', 3.0)       # initial gravity of a new fruit
FALL_SPEED_PER_LEVEL = _get_float('FALL_SPEED_PER_LEVEL', 2.0)

# Basket
BASE_BASKET_SPEED = _get_int('BASE_BASKET_SPEED', 7)       # px/frame at level 0
BASKET_IMAGE = os.getenv('BASKET_IMAGE', 'basket')

# Progression
POINTS_PER_LEVEL = _get_int('POINTS_PER_LEVEL', 10)

# Visual
BACKGROUND_COLOR = (30, 30, 46)
HUD_COLOR = (255, 255, 255)
HUD_DIM_COLOR = (150, 150, 170)
BEST_COLOR = (100, 200, 255)
PAUSE_COLOR = (255, 220, 100)
GAME_OVER_COLOR = (255, 100, 100)
OVERLAY_ALPHA = 160
