"""
BouncingBall Game Mode

A ball bounces across the window under gravity and reflects off the side
walls. Hold Space while the ball is on the ground to charge a jump; the
ball squashes while charging and launches when Space is released.
"""
from typing import Optional

import pygame

from arcade_rt.games import BaseGame, GameState
from arcade_rt.keyboard import Key, KeyState
from arcade_rt.logging import get_logger
from games.BouncingBall import config
from games.BouncingBall.ball import Ball, create_ball_image, squash_scale

log = get_logger('bouncingball')


class BouncingBallMode(BaseGame):
    """Bouncing ball physics toy. Never ends, has no score."""

    NAME = "Bouncing Ball"
    DESCRIPTION = "A ball bounces around the window. Hold Space on the ground to charge a jump."
    VERSION = "1.0.0"
    AUTHOR = "Arcade Demos"

    ARGUMENTS = [
        {
            'name': '--speed',
            'type': float,
            'default': None,
            'help': 'Initial horizontal speed in pixels/frame (default from config)'
        },
        {
            'name': '--ball-size',
            'type': int,
            'default': None,
            'help': 'Ball diameter in pixels'
        },
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        speed: Optional[float] = None,
        ball_size: Optional[int] = None,
        **kwargs,
    ):
        """Initialize the ball resting on the floor near the left wall.

        Args:
            width: Initial window width
            height: Initial window height
            speed: Initial horizontal force (pixels/frame)
            ball_size: Ball diameter in pixels
        """
        super().__init__(width=width, height=height, **kwargs)

        image = create_ball_image(ball_size or config.BALL_SIZE)
        self._ball = Ball(
            image=image,
            x=config.BALL_START_X,
            y=height - image.get_height(),
            force_right=config.BALL_SPEED if speed is None else speed,
        )
        self._font: Optional[pygame.font.Font] = None

        log.info("Ball %dx%d at (%d, %d), force_right=%.1f",
                 image.get_width(), image.get_height(),
                 self._ball.x, self._ball.y, self._ball.force_right)

    @property
    def ball(self) -> Ball:
        return self._ball

    def _get_internal_state(self) -> GameState:
        return GameState.PLAYING

    def get_score(self) -> int:
        return 0

    def update(self, keys: KeyState) -> None:
        """Advance the ball by one frame."""
        log.trace("ball bottom %d force_down %.2f", self._ball.bottom, self._ball.force_down)
        self._ball.step(self._screen_width, self._screen_height,
                        jump_held=keys.is_pressed(Key.SPACE))

    def draw(self, screen: pygame.Surface) -> None:
        """Draw background, size readout and the (possibly squashed) ball."""
        screen.fill(config.BACKGROUND_COLOR)

        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        width, height = screen.get_size()
        text = self._font.render(f"screen size: {width}*{height}", True, config.TEXT_COLOR)
        screen.blit(text, (0, 0))

        ball = self._ball
        scale_y = squash_scale(ball)
        image = ball.image
        if scale_y != 1.0 or ball.scale_x != 1.0:
            size = (max(1, int(ball.width * ball.scale_x)),
                    max(1, int(ball.height * scale_y)))
            image = pygame.transform.smoothscale(ball.image, size)

        # Keep the bottom edge in place while squashed
        offset_y = int(ball.height * (1 - scale_y))
        screen.blit(image, (ball.x, ball.y + offset_y))
