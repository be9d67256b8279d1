"""
Tick and second clocks.

TickClock paces the simulation step in real time (or not at all when
`realtime` is off). SecondClock turns elapsed simulated time into whole
second strobes for the countdown, independent of how many ticks fit in a
second.
"""

import time
from typing import Callable


class TickClock:
    def __init__(
        self,
        interval: float,
        realtime: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be > 0, got {interval}")
        self.interval = interval
        self.realtime = realtime
        self.sleep = sleep
        self.ticks = 0

    @classmethod
    def from_rate(cls, ticks_per_second: float, realtime: bool = False,
                  sleep: Callable[[float], None] = time.sleep) -> "TickClock":
        if ticks_per_second <= 0:
            raise ValueError(f"Tick rate must be > 0, got {ticks_per_second}")
        return cls(1.0 / ticks_per_second, realtime=realtime, sleep=sleep)

    def wait(self) -> float:
        """Block until the next tick (if real time) and return its duration."""
        if self.realtime:
            self.sleep(self.interval)
        self.ticks += 1
        return self.interval


class SecondClock:
    """Accumulates elapsed time and reports how many seconds have passed."""

    def __init__(self):
        self.elapsed = 0.0
        self.strobes = 0

    def advance(self, dt: float) -> int:
        self.elapsed += dt
        # Small epsilon keeps 1/8 + ... + 1/8 from landing just under 1.0.
        total = int(self.elapsed + 1e-9)
        fired = total - self.strobes
        self.strobes = total
        return fired
