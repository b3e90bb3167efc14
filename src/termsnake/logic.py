from __future__ import annotations

import logging
import random

from . import config
from .state import (
    END_BOARD_FULL,
    END_QUIT,
    END_SELF,
    END_WALL,
    RIGHT,
    Board,
    Functor,
    State,
    add_vectors,
)

logger = logging.getLogger(__name__)


def new_game(board: Board | None = None, rng: random.Random | None = None) -> State:
    if board is None:
        board = Board(config.BOARD_WIDTH, config.BOARD_HEIGHT)
    state = State(
        board=board,
        snake=[(board.height // 2, board.width // 2)],
        direction=RIGHT,
        next_direction=RIGHT,
        food=None,
        score=0,
        game_over=False,
        reason=None,
    )
    return place_food(state, rng)


def is_wall(board: Board, pos: tuple[int, int]) -> bool:
    row, col = pos
    return row <= 0 or row >= board.height - 1 or col <= 0 or col >= board.width - 1


def free_cells(board: Board, snake) -> list[tuple[int, int]]:
    occupied = set(snake)
    return [
        (row, col)
        for row in range(1, board.height - 1)
        for col in range(1, board.width - 1)
        if (row, col) not in occupied
    ]


def place_food(state: State, rng: random.Random | None = None) -> State:
    """Drop food on a uniformly chosen free interior cell.

    When no free cell is left the board is full and the game ends there.
    """
    cells = free_cells(state.board, state.snake)
    if not cells:
        logger.info("board full, final score %d", state.score)
        return state._replace(food=None, game_over=True, reason=END_BOARD_FULL)
    food = (rng or random).choice(cells)
    logger.debug("food spawned at %s", food)
    return state._replace(food=food)


def steer(state: State, direction: tuple[int, int]) -> State:
    # Checked against the last committed move so buffered presses can't reverse.
    if state.game_over:
        return state
    if len(state.snake) > 1 and add_vectors(state.direction, direction) == (0, 0):
        return state
    if direction != state.next_direction:
        logger.debug("heading %s", direction)
    return state._replace(next_direction=direction)


def quit_game(state: State) -> State:
    if state.game_over:
        return state
    logger.info("quit, final score %d", state.score)
    return state._replace(game_over=True, reason=END_QUIT)


def next_head(state: State) -> tuple[int, int]:
    return add_vectors(state.snake[0], state.next_direction)


def check_collisions(state: State) -> State:
    """Ends the game if the next head lands on a wall or on the snake."""
    head = next_head(state)
    if is_wall(state.board, head):
        reason = END_WALL
    elif head in state.snake:
        reason = END_SELF
    else:
        return state
    logger.info("%s collision at %s, final score %d", reason, head, state.score)
    return state._replace(game_over=True, reason=reason)


def move_snake(state: State, rng: random.Random | None = None) -> State:
    """Moves the snake one cell. Landing on the food grows it and respawns the food."""
    head = next_head(state)
    if head != state.food:
        return state._replace(snake=[head] + state.snake[:-1], direction=state.next_direction)
    grown = state._replace(
        snake=[head] + state.snake,
        direction=state.next_direction,
        score=state.score + config.SCORE_PER_FOOD,
    )
    return place_food(grown, rng)


def tick(state: State, rng: random.Random | None = None) -> State:
    if state.game_over:
        return state
    return (
        Functor(state)
        .map(check_collisions)
        .map(lambda s: move_snake(s, rng) if not s.game_over else s)
        .get()
    )
