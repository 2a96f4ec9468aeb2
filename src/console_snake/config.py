from __future__ import annotations

# Board
BOARD_WIDTH, BOARD_HEIGHT = 80, 20
FPS = 10

# Window backend
CELL_SIZE = 16
FONT_SIZE = 16

# Glyphs
BACKGROUND_GLYPH = "."
HEAD_GLYPH = "@"
BODY_GLYPH = "#"
FOOD_GLYPH = "*"

COLORS = {
    "white": (255, 255, 255),
    "dark_grey": (90, 90, 90),
    "dark_green": (0, 140, 0),
    "green": (0, 255, 0),
    "red": (255, 0, 0),
    "black": (0, 0, 0),
}
DEFAULT_COLOR = "white"
BACKGROUND_COLOR = "dark_grey"
HEAD_COLOR = "dark_green"
BODY_COLOR = "green"
FOOD_COLOR = "red"

# Keys
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_QUIT = "q"
KEY_GROW = "g"
KEY_YES = "y"
KEY_NO = "n"

# (key, velocity) in the order they are checked each tick.
DIRECTIONS = (
    (KEY_UP, (0, -1)),
    (KEY_DOWN, (0, 1)),
    (KEY_LEFT, (-1, 0)),
    (KEY_RIGHT, (1, 0)),
)

START_POS = (0, 1)
