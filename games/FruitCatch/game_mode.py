"""
FruitCatch Game Mode

Move the basket with the arrow keys to catch fruit falling from the top of
the window. Each caught fruit scores a point and every ten points raise the
level, which speeds up both the basket and newly spawned fruit. Catching a
bomb ends the game; Enter starts over. P pauses, Enter resumes.
"""
import random
from pathlib import Path
from typing import List, Optional, Union

import pygame

from arcade_rt.assets import ImageLoader
from arcade_rt.games import BaseGame, GameState
from arcade_rt.keyboard import Key, KeyState
from arcade_rt.logging import get_logger
from games.FruitCatch import config
from games.FruitCatch.basket import Basket
from games.FruitCatch.fruit import Fruit
from games.FruitCatch.spawner import FruitSpawner

log = get_logger('fruitcatch')


class FruitCatchMode(BaseGame):
    """FruitCatch game mode - catch fruit, avoid bombs.

    States:
        PLAYING -> PAUSED      pause key
        PAUSED -> PLAYING      confirm key
        PLAYING -> GAME_OVER   bomb caught
        GAME_OVER -> PLAYING   confirm key (score and fruit reset)

    While paused or over the world is frozen and only the confirm key is read.
    """

    NAME = "Fruit Catch"
    DESCRIPTION = "Catch falling fruit in a basket, avoid the bombs."
    VERSION = "1.0.0"
    AUTHOR = "Arcade Demos"

    ARGUMENTS = [
        {
            'name': '--spawn-interval',
            'type': int,
            'default': None,
            'help': 'Frames between fruit spawns (default 120)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible spawns'
        },
        {
            'name': '--assets-dir',
            'type': str,
            'default': None,
            'help': 'Directory holding images/<name>.png (default ./assets)'
        },
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        spawn_interval: Optional[int] = None,
        seed: Optional[int] = None,
        assets_dir: Optional[Union[str, Path]] = None,
        images: Optional[ImageLoader] = None,
        **kwargs,
    ):
        """Initialize FruitCatch.

        Args:
            width: Initial window width
            height: Initial window height
            spawn_interval: Frames between spawns
            seed: Random seed for the spawner
            assets_dir: Directory containing images/
            images: Pre-built image loader (overrides assets_dir)
        """
        super().__init__(width=width, height=height, **kwargs)

        self._images = images or ImageLoader(assets_dir)
        self._spawner = FruitSpawner(
            self._images,
            interval_frames=spawn_interval or config.SPAWN_INTERVAL_FRAMES,
            rng=random.Random(seed),
        )

        # Game state
        self._basket: Optional[Basket] = None
        self._fruits: List[Fruit] = []
        self._frame = 0
        self._score = 0
        self._level = 0
        self._paused = False
        self._over = False

        # Session tracking
        self._session_best = 0
        self._games_played = 0

        self._fonts: Optional[dict] = None

    # =========================================================================
    # State accessors
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        if self._over:
            return GameState.GAME_OVER
        if self._paused:
            return GameState.PAUSED
        return GameState.PLAYING

    def get_score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._level

    @property
    def frame(self) -> int:
        """Frames played since start (paused/over frames not counted)."""
        return self._frame

    @property
    def session_best(self) -> int:
        return self._session_best

    @property
    def fruits(self) -> List[Fruit]:
        """Active fruit in spawn order (copy)."""
        return list(self._fruits)

    @property
    def basket(self) -> Optional[Basket]:
        return self._basket

    @property
    def spawner(self) -> FruitSpawner:
        return self._spawner

    def add_fruit(self, fruit: Fruit) -> None:
        """Append a fruit to the active list."""
        self._fruits.append(fruit)

    # =========================================================================
    # Update
    # =========================================================================

    def _ensure_basket(self) -> Basket:
        """Load the basket image and place the basket on first use.

        Raises:
            AssetLoadError: If the basket image cannot be loaded
        """
        if self._basket is None:
            image = self._images.load(config.BASKET_IMAGE)
            self._basket = Basket.centered(image, self._screen_width, self._screen_height)
        return self._basket

    def _restart(self) -> None:
        """Reset score and fruit after a game over."""
        if self._score > self._session_best:
            self._session_best = self._score
        self._games_played += 1
        log.info("Restart (game %d, best %d)", self._games_played + 1, self._session_best)

        self._score = 0
        self._level = 0
        self._fruits = []
        self._over = False
        self._paused = False

    def update(self, keys: KeyState) -> None:
        """Advance the game by one frame."""
        if self._over or self._paused:
            if keys.is_pressed(Key.CONFIRM):
                if self._over:
                    self._restart()
                else:
                    self._paused = False
                    log.info("Resumed")
            return

        if keys.is_pressed(Key.PAUSE):
            self._paused = True
            log.info("Paused at frame %d", self._frame)
            return

        width, height = self._screen_width, self._screen_height
        basket = self._ensure_basket()
        basket.fit_to_window(width, height)

        speed = config.BASE_BASKET_SPEED + self._level
        if keys.is_pressed(Key.LEFT):
            basket.move(-speed, width)
        if keys.is_pressed(Key.RIGHT):
            basket.move(speed, width)

        self._frame += 1
        if self._spawner.should_spawn(self._frame):
            self.add_fruit(self._spawner.spawn(width, self._level))

        self._update_fruits(basket, height)

        self._level = self._score // config.POINTS_PER_LEVEL

    def _update_fruits(self, basket: Basket, window_height: int) -> None:
        """Move every fruit, then resolve catches and expiries.

        The active list is rebuilt rather than edited in place, so each fruit
        is visited exactly once and survivors keep their order.
        """
        bounds = basket.bounds
        remaining: List[Fruit] = []

        for index, fruit in enumerate(self._fruits):
            fruit.fall()

            if fruit.is_caught_by(bounds):
                if fruit.is_bomb:
                    self._over = True
                    remaining.extend(self._fruits[index + 1:])
                    log.info("Bomb caught, game over with score %d", self._score)
                    break
                self._score += 1
                log.debug("Caught %s, score %d", fruit.kind.value, self._score)
                continue

            if fruit.is_expired(window_height):
                continue

            remaining.append(fruit)

        self._fruits = remaining

    # =========================================================================
    # Draw
    # =========================================================================

    def _get_fonts(self) -> dict:
        if self._fonts is None:
            self._fonts = {
                'large': pygame.font.Font(None, 72),
                'medium': pygame.font.Font(None, 40),
                'small': pygame.font.Font(None, 24),
            }
        return self._fonts

    def draw(self, screen: pygame.Surface) -> None:
        """Render the game."""
        screen.fill(config.BACKGROUND_COLOR)

        for fruit in self._fruits:
            screen.blit(fruit.image, (int(fruit.x), int(fruit.y)))

        if self._basket is not None:
            screen.blit(self._basket.image, (int(self._basket.x), int(self._basket.y)))

        self._draw_hud(screen)

        if self._over:
            self._draw_banner(screen, "GAME OVER", config.GAME_OVER_COLOR,
                              f"Final Score: {self._score}", "Press Enter to play again")
        elif self._paused:
            self._draw_banner(screen, "PAUSED", config.PAUSE_COLOR,
                              f"Score: {self._score}", "Press Enter to resume")

    def _draw_hud(self, screen: pygame.Surface) -> None:
        fonts = self._get_fonts()
        width, height = screen.get_size()

        text = fonts['medium'].render(f"Score: {self._score}", True, config.HUD_COLOR)
        screen.blit(text, (20, 20))
        text = fonts['small'].render(f"Level: {self._level}", True, config.HUD_COLOR)
        screen.blit(text, (20, 60))

        if self._session_best > 0:
            text = fonts['small'].render(f"Best: {self._session_best}", True, config.BEST_COLOR)
            screen.blit(text, (width - text.get_width() - 20, 20))

        text = fonts['small'].render(f"screen size: {width}*{height}", True, config.HUD_DIM_COLOR)
        screen.blit(text, (20, height - 30))

    def _draw_banner(self, screen: pygame.Surface, title: str, color,
                     line: str, prompt: str) -> None:
        """Translucent overlay with a centered title, one info line and a prompt."""
        fonts = self._get_fonts()
        width, height = screen.get_size()

        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, config.OVERLAY_ALPHA))
        screen.blit(overlay, (0, 0))

        center_x = width // 2
        y = height // 2 - 80

        text = fonts['large'].render(title, True, color)
        screen.blit(text, (center_x - text.get_width() // 2, y))
        y += 80

        text = fonts['medium'].render(line, True, config.HUD_COLOR)
        screen.blit(text, (center_x - text.get_width() // 2, y))
        y += 60

        text = fonts['small'].render(prompt, True, config.HUD_DIM_COLOR)
        screen.blit(text, (center_x - text.get_width() // 2, y))
