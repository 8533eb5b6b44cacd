"""
Game Registry - Auto-discovery of the arcade demos.

Games are discovered by scanning the games/ directory for subdirectories
containing a game_mode.py with a class inheriting from BaseGame. Metadata
and CLI arguments are read from the game class itself (BaseGame class
attributes).

Usage:
    from games.registry import GameRegistry

    registry = GameRegistry()
    available = registry.list_games()  # ['bouncingball', 'fruitcatch']

    info = registry.get_game_info('fruitcatch')
    args = registry.get_game_arguments('fruitcatch')

    game = registry.create_game('fruitcatch', width=1024, height=768, seed=3)
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from arcade_rt.games.base_game import BaseGame
from arcade_rt.logging import get_logger

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str  # lowercase identifier (directory name)
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.FruitCatch'

    # CLI arguments (from game class)
    arguments: List[Dict[str, Any]] = field(default_factory=list)

    # Optional features
    has_env_file: bool = False


class GameRegistry:
    """
    Registry for discovering and creating games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Importing games.<Dir>.game_mode
    3. Finding the class defined there that inherits from BaseGame
    4. Reading metadata from its class attributes
    """

    def __init__(self, games_dir: Optional[Path] = None, package: str = 'games'):
        """
        Args:
            games_dir: Directory to scan (defaults to this package's directory)
            package: Import package the game directories live under
        """
        self._games_dir = games_dir or GAMES_DIR
        self._package = package
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type[BaseGame]] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        skip_dirs = {'__pycache__'}

        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith('_') or game_dir.name.startswith('.'):
                continue
            if game_dir.name.lower() in skip_dirs:
                continue
            if not (game_dir / 'game_mode.py').exists():
                continue
            self._register_game(game_dir)

    def _register_game(self, game_dir: Path) -> None:
        """Register a game from its directory. Games that fail to import are skipped."""
        slug = game_dir.name.lower()
        module_path = f"{self._package}.{game_dir.name}"

        try:
            game_class = self._find_game_class(module_path)
        except Exception as e:
            log.warning("Failed to load game from %s: %s", game_dir, e)
            return

        if game_class is None:
            log.warning("No BaseGame subclass in %s/game_mode.py", game_dir)
            return

        self._game_classes[slug] = game_class
        self._games[slug] = GameInfo(
            name=game_class.NAME,
            slug=slug,
            description=game_class.DESCRIPTION,
            version=game_class.VERSION,
            author=game_class.AUTHOR,
            module_path=module_path,
            arguments=game_class.get_arguments(),
            has_env_file=(game_dir / '.env').exists(),
        )
        log.debug("Registered game '%s' (%s)", slug, module_path)

    @staticmethod
    def _find_game_class(module_path: str) -> Optional[Type[BaseGame]]:
        """Find the BaseGame subclass defined in <module_path>.game_mode."""
        module = importlib.import_module(f"{module_path}.game_mode")

        for name, obj in inspect.getmembers(module, inspect.isclass):
            # Skip imported classes (only want classes defined in this module)
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, BaseGame) and obj is not BaseGame:
                return obj
        return None

    def list_games(self) -> List[str]:
        """Sorted list of available game slugs."""
        return sorted(self._games.keys())

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """CLI argument definitions for a game (empty if unknown)."""
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def get_game_class(self, slug: str) -> Optional[Type[BaseGame]]:
        return self._game_classes.get(slug.lower())

    def create_game(self, slug: str, width: int, height: int, **kwargs) -> BaseGame:
        """
        Create a game instance.

        Args:
            slug: Game identifier
            width: Display width
            height: Display height
            **kwargs: Additional game-specific arguments

        Raises:
            ValueError: If game not found
        """
        game_class = self._game_classes.get(slug.lower())
        if game_class is None:
            available = ', '.join(self.list_games())
            raise ValueError(f"Unknown game: {slug}. Available: {available}")
        return game_class(width=width, height=height, **kwargs)
