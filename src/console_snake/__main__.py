from __future__ import annotations

import argparse
import logging
import random
import shutil
import sys

from . import config
from .console import BackendError
from .engine import Engine
from .states import GameState

logger = logging.getLogger("console_snake")


def terminal_fits(width: int, height: int) -> bool:
    columns, lines = shutil.get_terminal_size()
    return columns >= width and lines >= height


def open_console(backend: str, fps: int):
    if backend == "window":
        from .window import WindowConsole

        return WindowConsole(config.BOARD_WIDTH, config.BOARD_HEIGHT, fps)

    from .terminal import TerminalConsole

    return TerminalConsole(config.BOARD_WIDTH, config.BOARD_HEIGHT, fps)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="console-snake", add_help=True)
    parser.add_argument(
        "--backend",
        choices=("terminal", "window"),
        default="terminal",
        help="Display backend (terminal=curses, window=pygame).",
    )
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frames per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first session's food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level.",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr.")
    args = parser.parse_args(argv)

    if args.fps < 1:
        parser.error("--fps must be at least 1")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=args.log_file,
    )

    if args.backend == "terminal" and not terminal_fits(config.BOARD_WIDTH, config.BOARD_HEIGHT):
        logger.error(
            "Your screen is too small, it must be at least %d x %d characters.",
            config.BOARD_WIDTH,
            config.BOARD_HEIGHT,
        )
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    frames = 0
    try:
        with open_console(args.backend, args.fps) as console:
            engine = Engine(console)
            try:
                frames = engine.run(GameState(rng))
            except KeyboardInterrupt:
                frames = engine.frames
    except BackendError as e:
        logger.error("%s", e)
        return 1

    logger.info("Quit after %d frames.", frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
