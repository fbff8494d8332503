"""
Projection of a GameState onto a styled character grid.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .constants import (
    BORDER_HORIZONTAL,
    BORDER_VERTICAL,
    HEAD_CHAR,
    BODY_CHAR,
    FOOD_CHAR,
    EMPTY_CHAR,
    GAME_OVER_MESSAGE,
)
from .game_state import GameState

# Cell style tags
BORDER = "border"
BODY = "body"
HEAD = "head"
FOOD = "food"
PLAIN = "plain"

STYLE_TAGS = {
    BORDER_HORIZONTAL: BORDER,
    BORDER_VERTICAL: BORDER,
    BODY_CHAR: BODY,
    HEAD_CHAR: HEAD,
    FOOD_CHAR: FOOD,
}

Cell = Tuple[str, str]


def style_for(char: str) -> str:
    """Return the style tag for a drawn character."""
    return STYLE_TAGS.get(char, PLAIN)


@dataclass(frozen=True)
class Frame:
    """
    A rendered frame.

    rows holds one tuple of (char, tag) cells per line; text is the plain
    row-major string with every line newline terminated.
    """

    rows: Tuple[Tuple[Cell, ...], ...]

    @property
    def text(self) -> str:
        return "".join("".join(char for char, _ in row) + "\n" for row in self.rows)

    def __str__(self):
        return self.text


def _styled(lines: List[List[str]]) -> Frame:
    return Frame(tuple(tuple((char, style_for(char)) for char in line) for line in lines))


def render(state: GameState) -> Frame:
    """
    Draw the board with its border, the snake (head first) and the food.

    Game over replaces the board with a fixed message. The food is drawn
    last so it shows even when it was respawned under the snake.
    """
    if state.game_over:
        return Frame(tuple(
            tuple((char, PLAIN) for char in line)
            for line in GAME_OVER_MESSAGE.splitlines()
        ))

    board: List[List[str]] = []
    for i in range(state.height + 2):
        if i == 0 or i == state.height + 1:
            board.append([BORDER_HORIZONTAL] * (state.width + 2))
        else:
            board.append([BORDER_VERTICAL] + [EMPTY_CHAR] * state.width + [BORDER_VERTICAL])

    for i, (x, y) in enumerate(state.snake):
        board[y + 1][x + 1] = HEAD_CHAR if i == 0 else BODY_CHAR

    fx, fy = state.food
    board[fy + 1][fx + 1] = FOOD_CHAR

    return _styled(board)
