#!/usr/bin/env python3
"""
Placeholder sprite generator.

Draws simple fruit, bomb and basket sprites with pygame and writes them to
<assets-dir>/images/<name>.png, the layout FruitCatch loads from.

Usage:
    python make_assets.py                  # writes ./assets/images/*.png
    python make_assets.py --assets-dir /tmp/assets
    python make_assets.py --force          # overwrite existing files
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pygame

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from arcade_rt.assets import resolve_assets_dir
from arcade_rt.logging import get_logger
from games.FruitCatch.fruit import FruitKind

log = get_logger('make_assets')

FRUIT_SIZE = 48
BASKET_SIZE = (120, 60)


def _round_fruit(color, leaf=(60, 170, 60)) -> pygame.Surface:
    image = pygame.Surface((FRUIT_SIZE, FRUIT_SIZE), pygame.SRCALPHA)
    r = FRUIT_SIZE // 2
    pygame.draw.circle(image, color, (r, r + 2), r - 4)
    pygame.draw.ellipse(image, leaf, (r, 0, 12, 8))
    return image


def _banana() -> pygame.Surface:
    image = pygame.Surface((FRUIT_SIZE, FRUIT_SIZE), pygame.SRCALPHA)
    pygame.draw.arc(image, (250, 220, 60), (4, -FRUIT_SIZE // 2, FRUIT_SIZE - 8, FRUIT_SIZE), 3.4, 6.0, 10)
    return image


def _cherry() -> pygame.Surface:
    image = pygame.Surface((FRUIT_SIZE, FRUIT_SIZE), pygame.SRCALPHA)
    pygame.draw.line(image, (60, 140, 40), (14, 30), (24, 4), 3)
    pygame.draw.line(image, (60, 140, 40), (34, 30), (24, 4), 3)
    pygame.draw.circle(image, (200, 20, 40), (14, 34), 11)
    pygame.draw.circle(image, (200, 20, 40), (34, 34), 11)
    return image


def _grape() -> pygame.Surface:
    image = pygame.Surface((FRUIT_SIZE, FRUIT_SIZE), pygame.SRCALPHA)
    for cx, cy in ((16, 14), (32, 14), (24, 24), (12, 26), (36, 26), (24, 38)):
        pygame.draw.circle(image, (130, 60, 170), (cx, cy), 8)
    return image


def _bomb() -> pygame.Surface:
    image = pygame.Surface((FRUIT_SIZE, FRUIT_SIZE), pygame.SRCALPHA)
    r = FRUIT_SIZE // 2
    pygame.draw.circle(image, (35, 35, 35), (r, r + 4), r - 6)
    pygame.draw.line(image, (120, 90, 60), (r + 6, 10), (r + 14, 2), 3)
    pygame.draw.circle(image, (255, 80, 40), (r + 14, 3), 3)
    return image


def _basket() -> pygame.Surface:
    width, height = BASKET_SIZE
    image = pygame.Surface(BASKET_SIZE, pygame.SRCALPHA)
    body = [(0, 8), (width - 1, 8), (width - 12, height - 1), (12, height - 1)]
    pygame.draw.polygon(image, (150, 95, 45), body)
    pygame.draw.rect(image, (120, 70, 30), (0, 4, width, 8))
    for x in range(20, width - 10, 20):
        pygame.draw.line(image, (110, 65, 30), (x, 12), (x - 4, height - 2), 2)
    return image


SPRITES: Dict[str, Callable[[], pygame.Surface]] = {
    FruitKind.APPLE.value: lambda: _round_fruit((220, 40, 40)),
    FruitKind.BANANA.value: _banana,
    FruitKind.CHERRY.value: _cherry,
    FruitKind.GRAPE.value: _grape,
    FruitKind.ORANGE.value: lambda: _round_fruit((250, 150, 30)),
    FruitKind.BOMB.value: _bomb,
    'basket': _basket,
}


def generate(assets_dir: Path, force: bool = False) -> List[Path]:
    """Write every sprite that is missing (or all of them with force).

    Returns:
        Paths written
    """
    images_dir = assets_dir / 'images'
    images_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, draw in SPRITES.items():
        path = images_dir / f'{name}.png'
        if path.exists() and not force:
            log.debug("Keeping existing %s", path)
            continue
        pygame.image.save(draw(), str(path))
        log.info("Wrote %s", path)
        written.append(path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Generate placeholder sprites')
    parser.add_argument('--assets-dir', type=str, default=None,
                        help='Assets directory (default: $ARCADE_ASSETS_DIR or ./assets)')
    parser.add_argument('--force', action='store_true',
                        help='Overwrite existing images')
    args = parser.parse_args(argv)

    pygame.init()
    try:
        written = generate(resolve_assets_dir(args.assets_dir), force=args.force)
    finally:
        pygame.quit()
    print(f"Generated {len(written)} image(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
