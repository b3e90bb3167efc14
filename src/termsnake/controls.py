from __future__ import annotations

import curses
import time

from .logic import quit_game, steer
from .state import DOWN, LEFT, RIGHT, UP, State

KEY_MAP = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

ESC = 27
QUIT_KEYS = {ord("q"), ord("Q"), ESC}


def poll_keys(screen, seconds: float, clock=time.monotonic) -> list[int]:
    """Collects key presses until `seconds` have passed or a quit key arrives."""
    deadline = clock() + seconds
    keys: list[int] = []
    while True:
        remaining = deadline - clock()
        if remaining <= 0:
            return keys
        screen.timeout(max(1, int(remaining * 1000)))
        key = screen.getch()
        if key == -1:
            continue
        keys.append(key)
        if key in QUIT_KEYS:
            return keys


def handle_keys(state: State, keys) -> State:
    for key in keys:
        if key in QUIT_KEYS:
            return quit_game(state)
        new_dir = KEY_MAP.get(key)
        if new_dir:
            state = steer(state, new_dir)
    return state
