from __future__ import annotations

from collections import namedtuple

from . import config

Pixel = namedtuple("Pixel", ["glyph", "color"])
# glyph: single character
# color: key into config.COLORS


class BackendError(RuntimeError):
    """The display/input backend could not be brought up."""


class Console:
    """Character-grid frame buffer shared by the display backends.

    Drawing calls only touch the buffer; `draw` hands it to `present`.
    Backends override `present` and `poll_keys`, and usually `wait_for_frame`
    for their own pacing.
    """

    def __init__(self, width: int, height: int, target_fps: int):
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.frame_count = 0
        self.pressed: set[str] = set()
        self.buffer = [
            [Pixel(" ", config.DEFAULT_COLOR) for _ in range(width)] for _ in range(height)
        ]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pass

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def fill(self, pixel: Pixel) -> None:
        for row in self.buffer:
            row[:] = [pixel] * self.width

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        if self.in_bounds(x, y):
            self.buffer[y][x] = pixel

    def print(self, x: int, y: int, text: str, color: str = config.DEFAULT_COLOR) -> None:
        for i, ch in enumerate(text):
            self.set_pixel(x + i, y, Pixel(ch, color))

    def glyph_at(self, x: int, y: int) -> str:
        return self.buffer[y][x].glyph

    def row_text(self, y: int) -> str:
        return "".join(p.glyph for p in self.buffer[y])

    def is_key_pressed(self, key: str) -> bool:
        return key in self.pressed

    def wait_for_frame(self) -> None:
        self.frame_count += 1
        self.pressed = self.poll_keys()

    def draw(self) -> None:
        self.present(self.buffer)

    def poll_keys(self) -> set[str]:
        return set()

    def present(self, buffer: list[list[Pixel]]) -> None:
        pass
