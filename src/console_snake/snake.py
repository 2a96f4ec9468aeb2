from __future__ import annotations

import logging
from collections import deque

from . import config
from .console import Console, Pixel
from .vec2 import Vector2

logger = logging.getLogger(__name__)


class BodySegment:
    def __init__(self, x: int, y: int):
        self.location = Vector2(x, y)

    def draw(self, console: Console) -> None:
        console.set_pixel(
            self.location.x,
            self.location.y,
            Pixel(config.BODY_GLYPH, config.BODY_COLOR),
        )


class Snake:
    """Player head plus a trailing chain of body segments.

    The chain is ordered head-side first. Each move the tail segment jumps to
    the spot the head just left, so the chain follows the head's path.
    """

    def __init__(self, x: int, y: int):
        self.location = Vector2(x, y)
        self.previous_location: Vector2 | None = None
        self.velocity = Vector2(0, 0)
        self.body: deque[BodySegment] = deque()

    def update(self) -> None:
        if not self.velocity.is_zero():
            self.previous_location = self.location.clone()
        self.location.add(self.velocity)

        # Overshooting wraps to the far edge itself, not the last cell.
        if self.location.x > config.BOARD_WIDTH:
            self.location.x = 0
        if self.location.x < 0:
            self.location.x = config.BOARD_WIDTH
        if self.location.y > config.BOARD_HEIGHT:
            self.location.y = 0
        if self.location.y < 0:
            self.location.y = config.BOARD_HEIGHT

        if not self.body:
            return
        segment = self.body.pop()
        if self.previous_location is not None:
            segment.location = self.previous_location.clone()
        self.body.appendleft(segment)

    def grow(self) -> None:
        if self.previous_location is None:
            return
        self.body.appendleft(BodySegment(self.previous_location.x, self.previous_location.y))
        logger.debug("snake grew to %d segments", len(self.body))

    def collides_with_body(self) -> bool:
        return any(self.location == segment.location for segment in self.body)

    def draw(self, console: Console) -> None:
        console.set_pixel(
            self.location.x,
            self.location.y,
            Pixel(config.HEAD_GLYPH, config.HEAD_COLOR),
        )
        for segment in self.body:
            segment.draw(console)
