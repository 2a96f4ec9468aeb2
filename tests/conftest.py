import random

import pytest

from console_snake import config
from console_snake.console import Console


class FakeConsole(Console):
    """Console with scripted input. Each wait_for_frame consumes one key set."""

    def __init__(self, frames=None):
        super().__init__(config.BOARD_WIDTH, config.BOARD_HEIGHT, config.FPS)
        self.frames = list(frames or [])
        self.presented = 0

    def press(self, *keys):
        self.frames.append(set(keys))

    def poll_keys(self):
        if self.frames:
            return set(self.frames.pop(0))
        return set()

    def present(self, buffer):
        self.presented += 1


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def rng():
    return random.Random(1234)
