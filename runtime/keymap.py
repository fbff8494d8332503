"""
Physical key to logical command mapping.
"""

import curses
from typing import Optional, Union

from domain.events import MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, QUIT

CTRL_C = "\x03"

KEY_TO_COMMAND = {
    "w": MOVE_UP,
    "s": MOVE_DOWN,
    "a": MOVE_LEFT,
    "d": MOVE_RIGHT,
    "W": MOVE_UP,
    "S": MOVE_DOWN,
    "A": MOVE_LEFT,
    "D": MOVE_RIGHT,
    "q": QUIT,
    "Q": QUIT,
    CTRL_C: QUIT,
}

CURSES_KEY_TO_COMMAND = {
    curses.KEY_UP: MOVE_UP,
    curses.KEY_DOWN: MOVE_DOWN,
    curses.KEY_LEFT: MOVE_LEFT,
    curses.KEY_RIGHT: MOVE_RIGHT,
}


def command_for_key(key: Union[int, str, None]) -> Optional[str]:
    """
    Translate a key into a command.

    Accepts characters or curses getch() codes; -1 (no key pending) and
    unmapped keys return None.
    """
    if key is None:
        return None
    if isinstance(key, int):
        if key in CURSES_KEY_TO_COMMAND:
            return CURSES_KEY_TO_COMMAND[key]
        if key < 0 or key > 0x10FFFF:
            return None
        key = chr(key)
    return KEY_TO_COMMAND.get(key)
