"""Base class for all arcade demos.

All games inherit from BaseGame so the host loop, dev_game.py and the game
registry can drive them through one interface.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin architecture.

Host loop contract, called once per frame in this order:
    layout(outside_width, outside_height) -> (width, height)
    update(keys)
    draw(screen)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

import pygame

from arcade_rt.games.game_state import GameState
from arcade_rt.keyboard import KeyState
from arcade_rt.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all arcade demos.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - update(keys): Advance the game by one frame
        - draw(screen): Draw the game

    Optional overrides:
        - layout(outside_width, outside_height): Logical render size
          (default passes the window size through)

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"
            ARGUMENTS = [
                {'name': '--speed', 'type': int, 'default': 5,
                 'help': 'Starting speed'},
            ]

            def __init__(self, speed=5, **kwargs):
                super().__init__(**kwargs)
                self._speed = speed
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get CLI arguments for this game, duplicates by name removed."""
        seen_names = set()
        result = []
        for arg in cls.ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)
        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    def __init__(self, width: int = 1024, height: int = 768, **kwargs):
        """Initialize base game.

        Args:
            width: Initial logical width (replaced by layout() every frame)
            height: Initial logical height
        """
        if kwargs:
            log.debug("%s ignoring unknown options: %s", self.NAME, sorted(kwargs))
        self._screen_width = width
        self._screen_height = height

    @property
    def screen_size(self) -> Tuple[int, int]:
        """Logical render size most recently reported by layout()."""
        return (self._screen_width, self._screen_height)

    @property
    def state(self) -> GameState:
        """Current game state (standard interface)."""
        return self._get_internal_state()

    def layout(self, outside_width: int, outside_height: int) -> Tuple[int, int]:
        """Report the logical render resolution for a given window size.

        The default passes the window size through unchanged, so the game
        always renders at window resolution with no letterboxing.
        """
        self._screen_width = outside_width
        self._screen_height = outside_height
        return outside_width, outside_height

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        pass

    @abstractmethod
    def update(self, keys: KeyState) -> None:
        """Advance the game by one frame.

        Args:
            keys: Keyboard state for this frame
        """
        pass

    @abstractmethod
    def draw(self, screen: pygame.Surface) -> None:
        """Draw the current state. Must not change game state.

        Args:
            screen: Pygame surface to draw on
        """
        pass
