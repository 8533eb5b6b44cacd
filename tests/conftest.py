"""Shared pytest fixtures: headless pygame and on-disk test sprites."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from pathlib import Path
from typing import Dict, Tuple

import pygame
import pytest

from arcade_rt.assets import ImageLoader
from games.FruitCatch.fruit import FruitKind

FRUIT_SIZE = (40, 40)
BASKET_SIZE = (120, 60)


@pytest.fixture(autouse=True, scope='session')
def pygame_headless():
    """Initialize pygame once with the dummy video driver."""
    pygame.init()
    yield
    pygame.quit()


def write_images(assets_dir: Path, sizes: Dict[str, Tuple[int, int]]) -> Path:
    """Write solid-color PNGs of the given sizes under assets_dir/images."""
    images_dir = assets_dir / 'images'
    images_dir.mkdir(parents=True, exist_ok=True)
    for name, size in sizes.items():
        surface = pygame.Surface(size, pygame.SRCALPHA)
        surface.fill((200, 100, 50, 255))
        pygame.image.save(surface, str(images_dir / f'{name}.png'))
    return assets_dir


@pytest.fixture
def assets_dir(tmp_path) -> Path:
    """Assets directory holding every fruit kind plus the basket."""
    sizes = {kind.value: FRUIT_SIZE for kind in FruitKind}
    sizes['basket'] = BASKET_SIZE
    return write_images(tmp_path / 'assets', sizes)


@pytest.fixture
def image_loader(assets_dir) -> ImageLoader:
    return ImageLoader(assets_dir)
