"""
Domain entities for the terminal snake game engine.

This package holds the game state, its transitions and its rendering. It is
independent of the terminal (curses, colours, key codes, timers).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, BOARD_WIDTH, BOARD_HEIGHT
from .events import TICK, MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, QUIT
from .game_state import GameState, Position
from .engine import new_game, apply_direction, advance_tick, handle_event
from .render import Frame, render, style_for

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'BOARD_WIDTH', 'BOARD_HEIGHT',
    'TICK', 'MOVE_UP', 'MOVE_DOWN', 'MOVE_LEFT', 'MOVE_RIGHT', 'QUIT',
    'GameState', 'Position',
    'new_game', 'apply_direction', 'advance_tick', 'handle_event',
    'Frame', 'render', 'style_for',
]
