"""
Tick-driven snake engine.

Every operation takes a GameState and returns a GameState. States are never
mutated in place: a transition that changes nothing returns the very same
object, anything else returns a new snapshot built with dataclasses.replace.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from .constants import (
    RIGHT,
    VALID_MOVES,
    DELTAS,
    OPPOSITES,
    MOVE_EVERY,
)
from .events import TICK, COMMAND_DIRECTIONS
from .game_state import GameState, Position

logger = logging.getLogger(__name__)


def random_cell(width: int, height: int, rng=None) -> Position:
    """
    Return a uniformly random cell (x, y) on the board.

    Occupancy is not checked: food may land on the snake.
    """
    rng = rng or random
    return (rng.randint(0, width - 1), rng.randint(0, height - 1))


def new_game(width: int, height: int, rng=None) -> GameState:
    """
    Start a session: one-segment snake in the centre heading RIGHT,
    food at a random cell, tick counter at zero.
    """
    for name, value in (("width", width), ("height", height)):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ValueError(f"Board {name} must be a positive integer, got {value!r}.")

    state = GameState(
        snake=((width // 2, height // 2),),
        direction=RIGHT,
        food=random_cell(width, height, rng),
        width=width,
        height=height,
    )
    logger.debug(f"New game on {width}x{height} board: {state!r}")
    return state


def apply_direction(state: GameState, direction: str) -> GameState:
    """
    Change the heading, unless the game is over, the value is not a
    direction, or it would reverse the snake onto itself.
    """
    if state.game_over:
        return state
    if not isinstance(direction, str) or direction not in VALID_MOVES:
        return state
    if direction == state.direction or OPPOSITES[state.direction] == direction:
        return state
    return replace(state, direction=direction)


def advance_tick(state: GameState, rng=None) -> GameState:
    """
    Process one timer tick.

    The snake only moves on every MOVE_EVERY-th tick. A move that leaves the
    board or runs into the body ends the game without touching the snake;
    eating the food grows the snake by one and respawns the food.
    """
    if state.game_over:
        return state

    tick_count = state.tick_count + 1
    if tick_count % MOVE_EVERY != 0:
        return replace(state, tick_count=tick_count)

    dx, dy = DELTAS[state.direction]
    hx, hy = state.head
    new_head = (hx + dx, hy + dy)

    if not state.in_bounds(new_head):
        logger.debug(f"Snake hit the wall at {new_head} on tick {tick_count}")
        return replace(state, tick_count=tick_count, game_over=True)

    if new_head in state.snake:
        logger.debug(f"Snake ran into itself at {new_head} on tick {tick_count}")
        return replace(state, tick_count=tick_count, game_over=True)

    if new_head == state.food:
        # grow: keep the tail
        snake = (new_head,) + state.snake
        food = random_cell(state.width, state.height, rng)
        logger.debug(f"Food eaten at {new_head}, length now {len(snake)}, new food at {food}")
    else:
        # normal move: drop the tail
        snake = (new_head,) + state.snake[:-1]
        food = state.food

    return replace(state, snake=snake, food=food, tick_count=tick_count)


def handle_event(state: GameState, event: str, rng=None) -> GameState:
    """
    Route a single runtime event to its transition.

    QUIT and unknown events leave the state unchanged; ending the session
    is up to the caller.
    """
    if not isinstance(event, str):
        return state
    if event == TICK:
        return advance_tick(state, rng)

    direction: Optional[str] = COMMAND_DIRECTIONS.get(event)
    if direction is not None:
        return apply_direction(state, direction)

    return state
