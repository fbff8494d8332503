"""
Terminal runtime for the snake engine.

Maps keys to commands, produces timer ticks, feeds both to a GameSession in
arrival order and paints the rendered frame with curses.
"""

from .keymap import command_for_key
from .scheduler import TickScheduler
from .session import GameSession
from .terminal import TerminalRuntime

__all__ = [
    'command_for_key',
    'TickScheduler',
    'GameSession',
    'TerminalRuntime',
]
