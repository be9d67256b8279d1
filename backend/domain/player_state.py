"""
PlayerState entity - everything the engine tracks for one snake.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .snake import SnakeBody


@dataclass(frozen=True)
class PlayerState:
    """
    Attributes:
        body: the snake's segments
        score: food eaten so far
        lives: 0..max_lives; 0 means the player is dead
        immunity_ticks: ticks left in the current immunity window
        pending_hit: a bullet touched the body on the last committed tick
        death_reason: 'wall', 'self', 'opponent' or 'bullet' once dead
        death_tick: the tick the player died on
    """

    body: SnakeBody
    score: int = 0
    lives: int = 3
    immunity_ticks: int = 0
    pending_hit: bool = False
    death_reason: Optional[str] = None
    death_tick: Optional[int] = None

    @property
    def alive(self) -> bool:
        return self.lives > 0

    @property
    def immune(self) -> bool:
        return self.immunity_ticks > 0

    @property
    def length(self) -> int:
        return self.body.length

    @property
    def head(self):
        return self.body.head

    def evolve(self, **changes) -> "PlayerState":
        return replace(self, **changes)
