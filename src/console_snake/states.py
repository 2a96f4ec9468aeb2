from __future__ import annotations

import logging
import random

from . import config
from .console import Console, Pixel
from .engine import Transition, clean_push, push, quit_all
from .food import Food
from .snake import Snake
from .vec2 import Vector2

logger = logging.getLogger(__name__)


class GameState:
    """One play session: the snake, the food and the score."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.player = Snake(*config.START_POS)
        self.score = 0
        self.food = Food(0, 0)

    def setup(self, console: Console) -> None:
        self.move_food()
        self.player.velocity = Vector2(0, 0)

    def update(self, console: Console) -> Transition | None:
        console.wait_for_frame()

        if self.player.location == self.food.location:
            self.score += 1
            self.player.grow()
            self.move_food()

        # Checked against the head before this tick's input and move.
        if self.player.collides_with_body():
            logger.debug("self collision at %r, score %d", self.player.location, self.score)
            return push(LoseState(self.score))

        for key, (dx, dy) in config.DIRECTIONS:
            if console.is_key_pressed(key):
                self.player.velocity = Vector2(dx, dy)
        if console.is_key_pressed(config.KEY_QUIT):
            return quit_all()
        if console.is_key_pressed(config.KEY_GROW):
            self.player.grow()

        self.player.update()
        return None

    def render(self, console: Console) -> None:
        console.fill(Pixel(config.BACKGROUND_GLYPH, config.BACKGROUND_COLOR))
        console.print(0, 0, f"Score: {self.score}")
        self.player.draw(console)
        self.food.draw(console)
        console.draw()

    def move_food(self) -> None:
        self.food.location = self.random_location()
        logger.debug("food moved to %r", self.food.location)

    def random_location(self) -> Vector2:
        # Row and column 0 are never picked.
        x = self.rng.randrange(1, config.BOARD_WIDTH)
        y = self.rng.randrange(1, config.BOARD_HEIGHT)
        return Vector2(x, y)


class LoseState:
    def __init__(self, score: int):
        self.score = score

    def update(self, console: Console) -> Transition | None:
        if console.is_key_pressed(config.KEY_YES):
            return clean_push(GameState())
        if console.is_key_pressed(config.KEY_NO) or console.is_key_pressed(config.KEY_QUIT):
            return quit_all()
        return None

    def render(self, console: Console) -> None:
        console.wait_for_frame()
        console.print(0, 0, f"You died!  You got {self.score} points!")
        console.print(0, 1, "Play again? (y / n)")
        console.draw()
