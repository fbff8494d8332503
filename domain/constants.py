"""
Game constants for the terminal snake engine.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downwards
DELTAS: Dict[str, Tuple[int, int]] = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game states
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"

# Board settings (fixed for a session)
BOARD_WIDTH = 20
BOARD_HEIGHT = 10

# The snake moves once every MOVE_EVERY timer ticks
MOVE_EVERY = 2

# Board glyphs
BORDER_HORIZONTAL = "-"
BORDER_VERTICAL = "|"
HEAD_CHAR = "0"
BODY_CHAR = "O"
FOOD_CHAR = "X"
EMPTY_CHAR = " "

GAME_OVER_MESSAGE = "Game Over!\nPress q to quit.\n"
