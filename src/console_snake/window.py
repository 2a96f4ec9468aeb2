from __future__ import annotations

import pygame

from . import config
from .console import BackendError, Console, Pixel

_PYGAME_KEYS = {
    pygame.K_UP: config.KEY_UP,
    pygame.K_DOWN: config.KEY_DOWN,
    pygame.K_LEFT: config.KEY_LEFT,
    pygame.K_RIGHT: config.KEY_RIGHT,
    pygame.K_q: config.KEY_QUIT,
    pygame.K_ESCAPE: config.KEY_QUIT,
    pygame.K_g: config.KEY_GROW,
    pygame.K_y: config.KEY_YES,
    pygame.K_n: config.KEY_NO,
}


class WindowConsole(Console):
    """Draws the character grid into a pygame window, one cell per glyph."""

    def __init__(self, width: int, height: int, target_fps: int):
        super().__init__(width, height, target_fps)
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.clock: pygame.time.Clock | None = None
        self._glyph_cache: dict[Pixel, pygame.Surface] = {}

    def __enter__(self) -> WindowConsole:
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.width * config.CELL_SIZE, self.height * config.CELL_SIZE)
            )
            pygame.display.set_caption("console-snake")
            self.font = pygame.font.SysFont("monospace", config.FONT_SIZE, bold=True)
        except pygame.error as e:
            pygame.quit()
            raise BackendError(f"failed to open the game window: {e}") from e
        self.clock = pygame.time.Clock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pygame.quit()

    def wait_for_frame(self) -> None:
        self.clock.tick(self.target_fps)
        super().wait_for_frame()

    def poll_keys(self) -> set[str]:
        keys: set[str] = set()
        # KEYDOWN catches taps shorter than a frame; get_pressed catches holds.
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keys.add(config.KEY_QUIT)
            elif event.type == pygame.KEYDOWN and event.key in _PYGAME_KEYS:
                keys.add(_PYGAME_KEYS[event.key])
        held = pygame.key.get_pressed()
        for code, key in _PYGAME_KEYS.items():
            if held[code]:
                keys.add(key)
        return keys

    def _glyph(self, pixel: Pixel) -> pygame.Surface:
        surf = self._glyph_cache.get(pixel)
        if surf is None:
            color = config.COLORS.get(pixel.color, config.COLORS[config.DEFAULT_COLOR])
            surf = self.font.render(pixel.glyph, True, color)
            self._glyph_cache[pixel] = surf
        return surf

    def present(self, buffer: list[list[Pixel]]) -> None:
        self.screen.fill(config.COLORS["black"])
        for y, row in enumerate(buffer):
            for x, pixel in enumerate(row):
                if pixel.glyph == " ":
                    continue
                surf = self._glyph(pixel)
                cell = pygame.Rect(x * config.CELL_SIZE, y * config.CELL_SIZE, config.CELL_SIZE, config.CELL_SIZE)
                self.screen.blit(surf, surf.get_rect(center=cell.center))
        pygame.display.flip()
