"""
Curses front end: reads keys, drives ticks, paints frames.
"""

import curses
import logging
import math
from typing import Dict, Optional

from domain.events import TICK
from domain.render import Frame, PLAIN
from .keymap import command_for_key
from .scheduler import TickScheduler
from .session import GameSession
from .styles import build_styles

logger = logging.getLogger(__name__)


class TerminalRuntime:
    """
    Hosts a GameSession in a curses screen.

    Keys and due ticks are handed to the session one event at a time, in
    the order they were observed; the screen is repainted after each pass.
    """

    def __init__(self, session: GameSession, scheduler: TickScheduler, use_color: bool = True):
        self.session = session
        self.scheduler = scheduler
        self.use_color = use_color
        self.styles: Dict[str, int] = {}

    def run(self):
        """Take over the terminal until the player quits."""
        logger.info("Starting terminal session")
        curses.wrapper(self._main)
        logger.info("Terminal session closed")

    def _main(self, stdscr):
        self.setup(stdscr)
        self.loop(stdscr)

    def setup(self, stdscr):
        # raw mode delivers Ctrl+C as a key instead of SIGINT
        curses.raw()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        stdscr.keypad(True)
        self.styles = build_styles(self.use_color)

    def loop(self, stdscr):
        visible = self.paint(stdscr)
        while True:
            wait_ms = int(math.ceil(self.scheduler.time_until_next() * 1000))
            stdscr.timeout(max(wait_ms, 0))
            command: Optional[str] = command_for_key(stdscr.getch())
            if command is not None and not self.session.dispatch(command):
                return

            # the game is paused while the board does not fit
            due = self.scheduler.due_ticks()
            if visible:
                for _ in range(due):
                    self.session.dispatch(TICK)

            visible = self.paint(stdscr)

    def paint(self, stdscr) -> bool:
        """
        Draw the current frame. Returns False, after drawing a notice instead,
        when the window is too small to hold the frame.
        """
        frame: Frame = self.session.frame()
        max_y, max_x = stdscr.getmaxyx()
        widest = max((len(row) for row in frame.rows), default=0)
        need_x, need_y = widest + 1, len(frame.rows) + 1

        stdscr.erase()
        if max_y < need_y or max_x < need_x:
            notice = f"Terminal too small: need {need_x}x{need_y}, have {max_x}x{max_y}"
            if max_y > 0 and max_x > 1:
                stdscr.addstr(0, 0, notice[:max_x - 1], self.styles.get(PLAIN, 0))
            stdscr.refresh()
            return False

        for y, row in enumerate(frame.rows):
            for x, (char, tag) in enumerate(row):
                stdscr.addstr(y, x, char, self.styles.get(tag, self.styles.get(PLAIN, 0)))
        stdscr.refresh()
        return True
