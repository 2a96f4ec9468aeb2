from __future__ import annotations

import curses
import logging
import time

from . import config
from .console import BackendError, Console, Pixel

logger = logging.getLogger(__name__)

_CURSES_COLORS = {
    "white": curses.COLOR_WHITE,
    "dark_grey": curses.COLOR_WHITE,
    "dark_green": curses.COLOR_GREEN,
    "green": curses.COLOR_GREEN,
    "red": curses.COLOR_RED,
    "black": curses.COLOR_BLACK,
}
_DIM_COLORS = {"dark_grey", "dark_green"}

_CURSES_KEYS = {
    curses.KEY_UP: config.KEY_UP,
    curses.KEY_DOWN: config.KEY_DOWN,
    curses.KEY_LEFT: config.KEY_LEFT,
    curses.KEY_RIGHT: config.KEY_RIGHT,
}


def translate_key(code: int) -> str | None:
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if 32 <= code < 127:
        return chr(code).lower()
    return None


class TerminalConsole(Console):
    """curses backend. Use as a context manager so the terminal is restored."""

    def __init__(self, width: int, height: int, target_fps: int):
        super().__init__(width, height, target_fps)
        self.screen = None
        self._attrs: dict[str, int] = {}
        self._next_frame = 0.0

    def __enter__(self) -> TerminalConsole:
        try:
            self.screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            self.screen.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("terminal cannot hide the cursor")
            self._init_colors()
        except curses.error as e:
            self._restore()
            raise BackendError(f"failed to initialize the terminal: {e}") from e
        self._next_frame = time.monotonic()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()

    def _restore(self) -> None:
        if self.screen is None:
            return
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.screen = None

    def _init_colors(self) -> None:
        has_colors = curses.has_colors()
        if has_colors:
            curses.start_color()
        for pair, name in enumerate(config.COLORS, start=1):
            attr = 0
            if has_colors:
                curses.init_pair(pair, _CURSES_COLORS[name], curses.COLOR_BLACK)
                attr = curses.color_pair(pair)
            if name in _DIM_COLORS:
                attr |= curses.A_DIM
            self._attrs[name] = attr

    def wait_for_frame(self) -> None:
        interval = 1.0 / self.target_fps
        now = time.monotonic()
        if self._next_frame > now:
            time.sleep(self._next_frame - now)
            self._next_frame += interval
        else:
            # Running behind; don't try to catch up.
            self._next_frame = now + interval
        super().wait_for_frame()

    def poll_keys(self) -> set[str]:
        keys: set[str] = set()
        while True:
            code = self.screen.getch()
            if code == -1:
                return keys
            key = translate_key(code)
            if key is not None:
                keys.add(key)

    def present(self, buffer: list[list[Pixel]]) -> None:
        for y, row in enumerate(buffer):
            for x, pixel in enumerate(row):
                try:
                    self.screen.addstr(y, x, pixel.glyph, self._attrs.get(pixel.color, 0))
                except curses.error:
                    # Writing the bottom-right cell moves the cursor off screen.
                    pass
        self.screen.refresh()
