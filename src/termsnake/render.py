from __future__ import annotations

import curses
import logging

from . import config
from .logic import is_wall
from .state import Board, State

logger = logging.getLogger(__name__)


class TerminalTooSmall(RuntimeError):
    pass


def required_size(board: Board) -> tuple[int, int]:
    # Board plus the score and hint lines; one spare column since curses
    # can't write the bottom-right cell.
    return board.height + 2, max(board.width, len(config.HINT)) + 1


def ensure_fits(screen, board: Board) -> None:
    rows, cols = screen.getmaxyx()
    need_rows, need_cols = required_size(board)
    if rows < need_rows or cols < need_cols:
        raise TerminalTooSmall(
            f"terminal is {cols}x{rows}, need at least {need_cols}x{need_rows}"
        )


def init_palette() -> dict[str, int]:
    """Color attributes keyed by glyph; empty when the terminal has no colors."""
    if not curses.has_colors():
        return {}
    curses.start_color()
    pairs = {
        config.HEAD: curses.COLOR_GREEN,
        config.BODY: curses.COLOR_GREEN,
        config.FOOD: curses.COLOR_RED,
        config.WALL: curses.COLOR_CYAN,
        "score": curses.COLOR_YELLOW,
    }
    palette = {}
    for n, (key, color) in enumerate(pairs.items(), start=1):
        curses.init_pair(n, color, curses.COLOR_BLACK)
        palette[key] = curses.color_pair(n)
    palette[config.HEAD] |= curses.A_BOLD
    palette[config.FOOD] |= curses.A_BOLD
    return palette


def board_rows(state: State) -> list[str]:
    board = state.board
    grid = [
        [config.WALL if is_wall(board, (row, col)) else config.EMPTY for col in range(board.width)]
        for row in range(board.height)
    ]
    if state.food is not None:
        fr, fc = state.food
        grid[fr][fc] = config.FOOD
    for i, (row, col) in enumerate(state.snake):
        grid[row][col] = config.HEAD if i == 0 else config.BODY
    return ["".join(line) for line in grid]


def status_lines(state: State) -> list[str]:
    return [f"Score: {state.score}", config.HINT]


def draw_state(screen, state: State, palette: dict[str, int] | None = None) -> None:
    palette = palette or {}
    screen.erase()
    try:
        for y, line in enumerate(board_rows(state)):
            for x, glyph in enumerate(line):
                if glyph != config.EMPTY:
                    screen.addstr(y, x, glyph, palette.get(glyph, 0))
        score, hint = status_lines(state)
        screen.addstr(state.board.height, 0, score, palette.get("score", 0))
        screen.addstr(state.board.height + 1, 0, hint)
    except curses.error:
        # Terminal shrank below the board mid-game; the rest of this frame is dropped.
        logger.debug("frame clipped", exc_info=True)
    screen.refresh()
