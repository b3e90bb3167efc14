from __future__ import annotations

from collections import namedtuple

State = namedtuple(
    "State",
    ["board", "snake", "direction", "next_direction", "food", "score", "game_over", "reason"],
)
# board: Board
# snake: list[(row, col)], head is first element.
# direction: (drow, dcol) of the last committed move
# next_direction: (drow, dcol) applied on the next tick
# food: (row, col), None once the board is full
# score: int
# game_over: bool
# reason: None while running, else one of the END_* values

Board = namedtuple("Board", ["width", "height"])
# Dimensions include the wall border.

UP = (-1, 0)
DOWN = (1, 0)
LEFT = (0, -1)
RIGHT = (0, 1)

END_WALL = "wall"
END_SELF = "self"
END_BOARD_FULL = "board_full"
END_QUIT = "quit"


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
