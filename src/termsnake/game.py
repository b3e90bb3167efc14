from __future__ import annotations

import curses
import logging
import random

from . import config
from .controls import handle_keys, poll_keys
from .logic import new_game, tick
from .render import draw_state, ensure_fits, init_palette
from .state import Board, State

logger = logging.getLogger(__name__)


def run(screen, board: Board | None = None, rng: random.Random | None = None) -> State:
    """Plays one game on an initialized curses screen and returns the final state."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("terminal can't hide the cursor")
    screen.keypad(True)
    # Esc quits; don't wait the default second for an escape sequence.
    curses.set_escdelay(config.ESC_DELAY_MS)

    state = new_game(board, rng)
    ensure_fits(screen, state.board)
    palette = init_palette()
    logger.info("game started on a %dx%d board", state.board.width, state.board.height)

    draw_state(screen, state, palette)
    while not state.game_over:
        keys = poll_keys(screen, config.TICK_SECONDS)
        state = handle_keys(state, keys)
        state = tick(state, rng)
        draw_state(screen, state, palette)

    return state


def main() -> State:
    return curses.wrapper(run)
