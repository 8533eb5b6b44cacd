"""
BouncingBall - Ball sprite with per-frame physics.

Fixed timestep of one frame: velocities are in pixels per frame and the
position integrates them once per update (explicit Euler).
"""
from dataclasses import dataclass

import pygame

from games.BouncingBall import config


def create_ball_image(size: int = config.BALL_SIZE,
                      color=config.BALL_COLOR) -> pygame.Surface:
    """Draw a filled circle on a transparent square surface."""
    image = pygame.Surface((size, size), pygame.SRCALPHA)
    radius = size // 2
    pygame.draw.circle(image, color, (radius, radius), radius)
    return image


@dataclass
class Ball:
    """The player-controlled ball.

    Physics:
        force_down += GRAVITY            while airborne
        force_down = -0.6 * force_down   on ground contact while falling
        force_right = -force_right       on wall contact while moving into it
        x += int(force_right); y += int(force_down)

    Holding jump while grounded charges force_down toward -28 and freezes
    the ball in place; releasing it lets the ball launch upward.
    """
    image: pygame.Surface
    x: int
    y: int
    force_right: float = config.BALL_SPEED
    force_down: float = 0.0
    scale_x: float = 1.0
    charging: bool = False

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_grounded(self, window_height: int) -> bool:
        """Lower edge at or beyond the bottom of the window."""
        return self.bottom >= window_height

    def is_touching_wall(self, window_width: int) -> bool:
        """Left or right edge at or beyond the window sides."""
        return self.x + self.width >= window_width or self.x <= 0

    def _moving_into_wall(self, window_width: int) -> bool:
        if self.x <= 0 and self.force_right < 0:
            return True
        return self.x + self.width >= window_width and self.force_right > 0

    def step(self, window_width: int, window_height: int, jump_held: bool) -> None:
        """Advance the ball by one frame.

        Args:
            window_width: Current logical width
            window_height: Current logical height
            jump_held: True while the jump key is held
        """
        grounded = self.is_grounded(window_height)

        if grounded and jump_held:
            if self.force_down > 0:
                self.force_down = 0.0
            self.force_down = max(self.force_down - config.JUMP_CHARGE_STEP,
                                  config.JUMP_CHARGE_LIMIT)
            self.charging = True
            return
        self.charging = False

        if not grounded:
            self.force_down += config.GRAVITY
        elif self.force_down > 0:
            self.force_down = -config.BOUNCE_DAMPING * self.force_down

        if self._moving_into_wall(window_width):
            self.force_right = -self.force_right

        self.x += int(self.force_right)
        self.y += int(self.force_down)


def squash_scale(ball: Ball) -> float:
    """Vertical draw scale for the ball.

    While charging a jump the ball is drawn squashed in proportion to the
    stored charge; this never feeds back into the physics.
    """
    if not ball.charging:
        return 1.0
    return (config.SQUASH_BASE + ball.force_down) / config.SQUASH_BASE
