"""
Geometry primitives shared by the runtime and the games.

Resolution describes a window or logical render size; Rectangle is a
per-frame snapshot of an entity's box used for collision checks.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Resolution(BaseModel):
    """Size in pixels, both sides positive.

    Examples:
        >>> Resolution.parse("1024x768").width
        1024
    """
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def as_tuple(self) -> Tuple[int, int]:
        """(width, height) for pygame calls."""
        return (self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a WIDTHxHEIGHT string such as ``1280x720``.

        Raises:
            ValueError: If the text is not two positive integers joined by 'x'
        """
        try:
            width, height = (int(part) for part in text.lower().split('x'))
        except ValueError:
            raise ValueError(f"Invalid resolution {text!r}, expected WIDTHxHEIGHT") from None
        if width <= 0 or height <= 0:
            raise ValueError(f"Resolution must be positive, got {text!r}")
        return cls(width=width, height=height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Rectangle(BaseModel):
    """Axis-aligned box; (x, y) is the top-left corner, y grows downward.

    Examples:
        >>> basket = Rectangle(x=100.0, y=600.0, width=120.0, height=60.0)
        >>> basket.strictly_contains_span(110.0, 200.0)
        True
        >>> basket.strictly_contains_span(100.0, 200.0)
        False
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def strictly_contains_span(self, left: float, right: float) -> bool:
        """True if [left, right] lies inside the box with no shared edge."""
        return self.left < left and right < self.right
