"""
Fixed-period tick source for the game loop.
"""

import time
from typing import Callable


class TickScheduler:
    """
    Produces timer ticks at a fixed wall-clock period.

    The scheduler does not sleep or call back; the loop asks it how many
    ticks are due and how long it may wait for input before the next one.
    Deadlines advance by whole periods, so a slow frame delays ticks but
    never drops them.
    """

    def __init__(self, period: float, clock: Callable[[], float] = time.monotonic):
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period!r}.")
        self.period = period
        self.clock = clock
        self.next_deadline = clock() + period

    def due_ticks(self) -> int:
        """Return the number of ticks that have fallen due since the last call."""
        now = self.clock()
        if now < self.next_deadline:
            return 0
        count = int((now - self.next_deadline) // self.period) + 1
        self.next_deadline += count * self.period
        return count

    def time_until_next(self) -> float:
        """Seconds until the next tick is due (never negative)."""
        return max(0.0, self.next_deadline - self.clock())
