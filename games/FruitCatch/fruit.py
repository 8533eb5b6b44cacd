"""
FruitCatch - Falling fruit.

Each fruit falls with an accelerating speed: every frame its gravity grows
by the weight of its kind and its y position grows by the gravity.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict

import pygame

from models import Rectangle


class FruitKind(Enum):
    """Kinds of falling objects. The value is the image name."""
    APPLE = "apple"
    BANANA = "banana"
    CHERRY = "cherry"
    GRAPE = "grape"
    ORANGE = "orange"
    BOMB = "bomb"

    @property
    def is_bomb(self) -> bool:
        """Bombs end the game when caught instead of scoring."""
        return self is FruitKind.BOMB

    @property
    def weight(self) -> float:
        return FRUIT_WEIGHTS[self]


# Per-frame increase of a fruit's fall speed
FRUIT_WEIGHTS: Dict[FruitKind, float] = {
    FruitKind.APPLE: 0.20,
    FruitKind.BANANA: 0.15,
    FruitKind.CHERRY: 0.10,
    FruitKind.GRAPE: 0.12,
    FruitKind.ORANGE: 0.25,
    FruitKind.BOMB: 0.30,
}


@dataclass
class Fruit:
    """A falling fruit (or bomb).

    Physics (per frame):
        gravity += weight
        y += gravity
    """
    image: pygame.Surface
    kind: FruitKind
    x: float
    y: float
    gravity: float

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    @property
    def is_bomb(self) -> bool:
        return self.kind.is_bomb

    def fall(self) -> None:
        """Advance the fruit by one frame."""
        self.gravity += self.kind.weight
        self.y += self.gravity

    def is_caught_by(self, basket: Rectangle) -> bool:
        """Fruit is below the basket top and its span is strictly inside the basket's.

        Args:
            basket: Basket bounds for this frame
        """
        if not self.y > basket.y:
            return False
        return basket.strictly_contains_span(self.x, self.x + self.width)

    def is_expired(self, window_height: int) -> bool:
        """Fruit has fallen past the bottom of the window."""
        return self.y > window_height
