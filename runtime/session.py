"""
GameSession - owns the single GameState between events.
"""

import logging
from typing import Optional

from domain.engine import new_game, handle_event
from domain.events import QUIT
from domain.game_state import GameState
from domain.render import Frame, render

logger = logging.getLogger(__name__)


class GameSession:
    """
    Serialises event delivery to the engine.

    Events are applied one at a time, in the order dispatch() is called.
    Once QUIT has been received the session is finished and ignores every
    further event.
    """

    def __init__(self, width: int, height: int, rng=None, state: Optional[GameState] = None):
        self.rng = rng
        self.state = state if state is not None else new_game(width, height, rng)
        self.finished = False

    def dispatch(self, event: str) -> bool:
        """
        Apply one event. Returns False once the session has been asked to quit.
        """
        if self.finished:
            return False

        if event == QUIT:
            self.finished = True
            logger.info(
                f"Quit after {self.state.tick_count} ticks "
                f"(status={self.state.status}, length={self.state.length})"
            )
            return False

        previous = self.state
        self.state = handle_event(previous, event, self.rng)

        if self.state.game_over and not previous.game_over:
            logger.info(
                f"Game over on tick {self.state.tick_count} "
                f"with length {self.state.length}"
            )
        return True

    def frame(self) -> Frame:
        return render(self.state)
