"""
GameState entity - an immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import RUNNING, GAME_OVER

Position = Tuple[int, int]


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game after a given number of timer ticks.

    Attributes:
        snake: tuple of (x, y) from head at index 0 to tail at the end
        direction: current heading, one of UP, DOWN, LEFT, RIGHT
        food: (x, y) position of the single food item
        width, height: board dimensions
        game_over: True once the snake has hit a wall or itself
        tick_count: number of timer ticks processed so far
    """

    snake: Tuple[Position, ...]
    direction: str
    food: Position
    width: int
    height: int
    game_over: bool = False
    tick_count: int = 0

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def status(self) -> str:
        return GAME_OVER if self.game_over else RUNNING

    def in_bounds(self, position: Position) -> bool:
        """Whether position lies inside [0, width) x [0, height)."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, status={self.status}, "
            f"head={self.head}, length={self.length}, food={self.food}>"
        )
