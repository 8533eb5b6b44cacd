"""
Host game loop.

Owns the pygame window, the clock and the event queue, and drives a
BaseGame through its per-frame contract:

    layout(window_w, window_h) -> (w, h)
    update(keys)
    draw(surface)

Everything runs on one thread; update and draw never block.
"""
from typing import Optional, Tuple

import pygame

from arcade_rt.assets import AssetLoadError
from arcade_rt.games.base_game import BaseGame
from arcade_rt.keyboard import KeyState, PygameKeyState
from arcade_rt.logging import get_logger
from models import Resolution

log = get_logger('host')

DEFAULT_FPS = 60


class HostLoop:
    """Runs a game at a fixed frame rate in a resizable window.

    If the game's layout() returns the window size the game draws straight
    onto the display surface. Otherwise it draws onto an off-screen surface
    of the logical size which is then scaled to fill the window.

    Usage:
        loop = HostLoop(game, Resolution(width=1024, height=768), title="Ball")
        loop.run()

    For headless use call open() once and step() per frame.
    """

    def __init__(
        self,
        game: BaseGame,
        resolution: Resolution,
        title: str = "",
        fps: int = DEFAULT_FPS,
        fullscreen: bool = False,
        key_state: Optional[KeyState] = None,
    ):
        """
        Args:
            game: Game to drive
            resolution: Initial window size
            title: Window caption
            fps: Target frames per second
            fullscreen: Open a fullscreen window instead of a resizable one
            key_state: Fixed key state to use instead of the real keyboard
        """
        self.game = game
        self.resolution = resolution
        self.title = title or game.NAME
        self.fps = fps
        self.fullscreen = fullscreen

        self._key_state = key_state
        self._pygame_keys = PygameKeyState()
        self._screen: Optional[pygame.Surface] = None
        self._offscreen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._frame = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame(self) -> int:
        """Number of frames stepped so far."""
        return self._frame

    @property
    def screen(self) -> Optional[pygame.Surface]:
        return self._screen

    def open(self) -> pygame.Surface:
        """Initialize pygame and open the window."""
        pygame.init()
        if self.fullscreen:
            self._screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self._screen = pygame.display.set_mode(self.resolution.as_tuple, pygame.RESIZABLE)
        pygame.display.set_caption(self.title)
        self._clock = pygame.time.Clock()
        self._running = True

        width, height = self._screen.get_size()
        log.info("Opened %dx%d window '%s' at %d FPS", width, height, self.title, self.fps)
        return self._screen

    def stop(self) -> None:
        """Ask the loop to exit after the current frame."""
        self._running = False

    def close(self) -> None:
        log.info("Closing after %d frames", self._frame)
        self._running = False
        self._screen = None
        self._offscreen = None
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.stop()
            elif event.type == pygame.VIDEORESIZE:
                log.debug("Window resized to %dx%d", event.w, event.h)

    def _current_keys(self) -> KeyState:
        if self._key_state is not None:
            return self._key_state
        return self._pygame_keys.snapshot()

    def _target_surface(self, logical: Tuple[int, int]) -> pygame.Surface:
        """Surface the game should draw on for this frame."""
        if logical == self._screen.get_size():
            return self._screen
        if self._offscreen is None or self._offscreen.get_size() != logical:
            log.debug("Rendering at logical size %dx%d", *logical)
            self._offscreen = pygame.Surface(logical)
        return self._offscreen

    def step(self) -> bool:
        """Run one frame: events, layout, update, draw, flip.

        Returns:
            False once the loop has been asked to stop, True otherwise
        """
        if self._screen is None:
            raise RuntimeError("HostLoop.step() called before open()")

        self._handle_events()
        if not self._running:
            return False

        window_size = self._screen.get_size()
        logical = tuple(self.game.layout(*window_size))

        self.game.update(self._current_keys())

        target = self._target_surface(logical)
        self.game.draw(target)
        if target is not self._screen:
            pygame.transform.scale(target, window_size, self._screen)

        pygame.display.flip()
        self._frame += 1
        return True

    def run(self) -> None:
        """Open the window and run frames until the window is closed.

        Exceptions raised by the game propagate after pygame is shut down.
        """
        self.open()
        try:
            while self.step():
                self._clock.tick(self.fps)
        finally:
            self.close()


def run_game(
    game: BaseGame,
    resolution: Resolution,
    title: str = "",
    fps: int = DEFAULT_FPS,
    fullscreen: bool = False,
) -> int:
    """Run a game until its window closes and return a process exit code.

    A missing or corrupt asset is fatal: it is logged and the exit code is 1.
    """
    loop = HostLoop(game, resolution, title=title, fps=fps, fullscreen=fullscreen)
    try:
        loop.run()
    except AssetLoadError as e:
        log.critical("%s", e)
        return 1
    return 0
