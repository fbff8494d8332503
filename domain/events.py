"""
Logical events delivered to the engine by the terminal runtime.

The runtime turns key presses into MOVE_* / QUIT commands and its timer
into TICK events; the engine never sees physical key codes.
"""

from .constants import UP, DOWN, LEFT, RIGHT

TICK = "TICK"

MOVE_UP = "MOVE_UP"
MOVE_DOWN = "MOVE_DOWN"
MOVE_LEFT = "MOVE_LEFT"
MOVE_RIGHT = "MOVE_RIGHT"
QUIT = "QUIT"

COMMAND_DIRECTIONS = {
    MOVE_UP: UP,
    MOVE_DOWN: DOWN,
    MOVE_LEFT: LEFT,
    MOVE_RIGHT: RIGHT,
}

