"""
FruitCatch - Fruit spawner.

Spawns one fruit every N frames just above the top edge of the window.
Fall speed of new fruit grows with the player's level.
"""
import random
from typing import Optional

from arcade_rt.assets import ImageLoader
from arcade_rt.logging import get_logger
from games.FruitCatch import config
from games.FruitCatch.fruit import Fruit, FruitKind

log = get_logger('fruitcatch.spawner')


class FruitSpawner:
    """Frame-counted fruit spawner."""

    def __init__(
        self,
        images: ImageLoader,
        interval_frames: int = config.SPAWN_INTERVAL_FRAMES,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the spawner.

        Args:
            images: Loader used to fetch each kind's image
            interval_frames: Frames between spawns
            rng: Random source (seeded for reproducible runs)
        """
        if interval_frames <= 0:
            raise ValueError(f"Spawn interval must be positive, got {interval_frames}")
        self._images = images
        self.interval_frames = interval_frames
        self._rng = rng or random.Random()

    def should_spawn(self, frame: int) -> bool:
        """True on every interval_frames-th frame."""
        return frame > 0 and frame % self.interval_frames == 0

    @staticmethod
    def fall_speed(level: int) -> float:
        """Initial gravity of a fruit spawned at a level."""
        return config.BASE_FALL_SPEED + level * config.FALL_SPEED_PER_LEVEL

    def choose_kind(self) -> FruitKind:
        """Pick a kind uniformly at random, bombs included."""
        return self._rng.choice(list(FruitKind))

    def spawn(self, window_width: int, level: int) -> Fruit:
        """Create a fruit just above the top edge at a random column.

        Raises:
            AssetLoadError: If the kind's image cannot be loaded
        """
        kind = self.choose_kind()
        image = self._images.load(kind.value)
        max_x = max(window_width - image.get_width(), 0)
        fruit = Fruit(
            image=image,
            kind=kind,
            x=float(self._rng.randint(0, max_x)),
            y=float(-image.get_height()),
            gravity=self.fall_speed(level),
        )
        log.debug("Spawned %s at x=%d gravity=%.1f", kind.value, fruit.x, fruit.gravity)
        return fruit
