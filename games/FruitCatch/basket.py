"""
FruitCatch - Player-controlled basket.
"""
from dataclasses import dataclass

import pygame

from models import Rectangle


@dataclass
class Basket:
    """Basket resting on the bottom edge of the window."""
    image: pygame.Surface
    x: float
    y: float

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    @property
    def bounds(self) -> Rectangle:
        """Snapshot of the basket's box for collision checks."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    @classmethod
    def centered(cls, image: pygame.Surface, window_width: int, window_height: int) -> 'Basket':
        """Create a basket centered horizontally on the bottom edge."""
        return cls(
            image=image,
            x=(window_width - image.get_width()) / 2,
            y=window_height - image.get_height(),
        )

    def move(self, dx: float, window_width: int) -> bool:
        """Move horizontally by dx if the result stays inside the window.

        Returns:
            True if the basket moved
        """
        new_x = self.x + dx
        if new_x < 0 or new_x + self.width > window_width:
            return False
        self.x = new_x
        return True

    def fit_to_window(self, window_width: int, window_height: int) -> None:
        """Keep the basket on the bottom edge and inside the window after a resize."""
        self.y = window_height - self.height
        self.x = min(max(self.x, 0), max(window_width - self.width, 0))
