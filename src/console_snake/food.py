from __future__ import annotations

from . import config
from .console import Console, Pixel
from .vec2 import Vector2


class Food:
    def __init__(self, x: int, y: int):
        self.location = Vector2(x, y)

    def draw(self, console: Console) -> None:
        console.set_pixel(
            self.location.x,
            self.location.y,
            Pixel(config.FOOD_GLYPH, config.FOOD_COLOR),
        )
