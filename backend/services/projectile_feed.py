"""
Projectile Feed

Supplies the two bullet snapshots the engine samples every tick. The base
ProjectileFeed never fires, which is handy for turret-free matches and
tests. TurretFeed runs two turrets: one patrols the top wall and fires
down, the other patrols the left wall and fires right.
"""

import logging
import random
from typing import Optional, Tuple

from domain.rules import GameRules
from domain.snake import Cell
from domain.tick import BulletSnapshot

logger = logging.getLogger(__name__)

DEFAULT_FIRE_CHANCE = 0.15
DEFAULT_PATROL_EVERY = 2  # ticks per patrol step


class ProjectileFeed:
    """A feed with no turrets: both bullets are always inactive."""

    def snapshot(self) -> Tuple[BulletSnapshot, BulletSnapshot]:
        return (BulletSnapshot.inactive(), BulletSnapshot.inactive())

    def advance(self) -> None:
        """Move everything one tick forward."""


class Turret:
    """
    A turret sliding along one wall and firing across the board.

    `along` is the axis the turret patrols (0 for x, 1 for y); bullets
    travel along the other axis, away from the wall, one cell per tick.
    """

    def __init__(self, rules: GameRules, along: int, rng: random.Random,
                 fire_chance: float, patrol_every: int):
        self.rules = rules
        self.along = along
        self.rng = rng
        self.fire_chance = fire_chance
        self.patrol_every = patrol_every
        self.limit = (rules.width if along == 0 else rules.height) - 2
        self.position = 1
        self.heading = 1
        self.bullet: Optional[Cell] = None
        self._ticks = 0

    def _cell(self, across: int) -> Cell:
        return (self.position, across) if self.along == 0 else (across, self.position)

    def snapshot(self) -> BulletSnapshot:
        if self.bullet is None:
            return BulletSnapshot.inactive()
        return BulletSnapshot(cell=self.bullet, active=True)

    def advance(self) -> None:
        # Bullet flight
        if self.bullet is not None:
            x, y = self.bullet
            self.bullet = (x, y + 1) if self.along == 0 else (x + 1, y)
            if self.rules.is_wall(self.bullet):
                self.bullet = None

        # Patrol, bouncing off the corners
        self._ticks += 1
        if self._ticks % self.patrol_every == 0:
            nxt = self.position + self.heading
            if nxt < 1 or nxt > self.limit:
                self.heading = -self.heading
                nxt = self.position + self.heading
            self.position = nxt

        if self.bullet is None and self.rng.random() < self.fire_chance:
            self.bullet = self._cell(1)
            logger.debug(f"Turret on axis {self.along} fired from {self.bullet}")


class TurretFeed(ProjectileFeed):
    def __init__(
        self,
        rules: GameRules,
        rng: Optional[random.Random] = None,
        fire_chance: float = DEFAULT_FIRE_CHANCE,
        patrol_every: int = DEFAULT_PATROL_EVERY,
    ):
        rng = rng or random.Random()
        self.turrets = (
            Turret(rules, along=0, rng=rng, fire_chance=fire_chance, patrol_every=patrol_every),
            Turret(rules, along=1, rng=rng, fire_chance=fire_chance, patrol_every=patrol_every),
        )

    def snapshot(self) -> Tuple[BulletSnapshot, BulletSnapshot]:
        return (self.turrets[0].snapshot(), self.turrets[1].snapshot())

    def advance(self) -> None:
        for turret in self.turrets:
            turret.advance()
