"""Image asset loading for the games.

Images live at ``<assets_dir>/images/<name>.png``. A failed load raises
AssetLoadError; callers treat it as fatal.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Union

import pygame

from arcade_rt.logging import get_logger

log = get_logger('assets')

DEFAULT_ASSETS_DIR = Path('assets')


class AssetLoadError(Exception):
    """An image file is missing or could not be decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


def resolve_assets_dir(assets_dir: Optional[Union[str, Path]] = None) -> Path:
    """Pick the assets directory: explicit arg, then ARCADE_ASSETS_DIR, then ./assets."""
    if assets_dir is not None:
        return Path(assets_dir)
    env_dir = os.environ.get('ARCADE_ASSETS_DIR')
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_ASSETS_DIR


class ImageLoader:
    """Loads PNG images by name and caches one surface per name.

    Handles:
    - Relative name -> path resolution under images/
    - Conversion to the display format when a display is open
    - Caching so repeated spawns of the same kind share a surface
    """

    def __init__(self, assets_dir: Optional[Union[str, Path]] = None):
        self._assets_dir = resolve_assets_dir(assets_dir)
        self._images: Dict[str, pygame.Surface] = {}

    @property
    def assets_dir(self) -> Path:
        return self._assets_dir

    def image_path(self, name: str) -> Path:
        """Path of the PNG for an image name."""
        return self._assets_dir / 'images' / f'{name}.png'

    def has_image(self, name: str) -> bool:
        """Check if an image is already cached."""
        return name in self._images

    def load(self, name: str) -> pygame.Surface:
        """Load an image by name, using the cache when possible.

        Raises:
            AssetLoadError: If the file does not exist or is not a valid image
        """
        cached = self._images.get(name)
        if cached is not None:
            return cached

        path = self.image_path(name)
        if not path.is_file():
            raise AssetLoadError(path, 'file not found')

        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            raise AssetLoadError(path, str(e)) from e

        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        log.debug("Loaded image '%s' (%dx%d) from %s",
                  name, image.get_width(), image.get_height(), path)
        self._images[name] = image
        return image

    def clear(self) -> None:
        """Drop all cached images."""
        self._images.clear()
