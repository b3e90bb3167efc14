from __future__ import annotations

import argparse
import curses
import logging
import os
import sys

from . import config
from .game import main as play
from .render import TerminalTooSmall
from .state import END_BOARD_FULL, END_QUIT, END_SELF, END_WALL

logger = logging.getLogger(__name__)

END_MESSAGES = {
    END_WALL: "The snake hit the wall.",
    END_SELF: "The snake ran into itself.",
    END_BOARD_FULL: "The snake filled the board.",
    END_QUIT: "Quit.",
}


def _setup_logging() -> None:
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    log_path = os.environ.get(config.LOG_ENV_VAR)
    if log_path:
        logging.basicConfig(filename=log_path, level=logging.DEBUG, format=fmt)
    else:
        # stderr shares the terminal with the game screen.
        logging.basicConfig(level=logging.WARNING, format=fmt)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play Snake in the terminal. Arrow keys steer, q quits.",
    )
    parser.parse_args(argv)
    _setup_logging()

    try:
        state = play()
    except (curses.error, TerminalTooSmall) as e:
        logger.debug("terminal setup failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    print(f"Game Over! Score: {state.score}")
    print(END_MESSAGES[state.reason])
    return 0
