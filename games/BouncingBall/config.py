"""
BouncingBall - Configuration loader.

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
WINDOW_TITLE = os.getenv('WINDOW_TITLE', 'Hello, World!')

# Ball
BALL_SIZE = _get_int('BALL_SIZE', 100)
BALL_START_X = _get_int('BALL_START_X', 10)
BALL_SPEED = _get_float('BALL_SPEED', 5.0)  # horizontal px/frame

# Physics (per frame, fixed timestep)
GRAVITY = _get_float('GRAVITY', 1.0)
BOUNCE_DAMPING = _get_float('BOUNCE_DAMPING', 0.6)
JUMP_CHARGE_STEP = _get_float('JUMP_CHARGE_STEP', 2.0)
JUMP_CHARGE_LIMIT = _get_float('JUMP_CHARGE_LIMIT', -28.0)

# Squash while charging: scale_y = (SQUASH_BASE + force_down) / SQUASH_BASE
SQUASH_BASE = _get_float('SQUASH_BASE', 56.0)

# Visual
BACKGROUND_COLOR = (145, 209, 255)
BALL_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
