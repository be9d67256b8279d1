"""
Collision detection.

Everything here is a pure function of the pre-move snapshot and the
candidate heads, so both players are judged against the same board.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from domain.constants import OPPONENT, SELF, WALL
from domain.rules import GameRules
from domain.snake import Cell, SnakeBody
from domain.tick import BulletSnapshot


@dataclass(frozen=True)
class Collision:
    """Collision findings for one player on one tick."""

    crash: Optional[str] = None  # 'wall', 'self' or 'opponent'
    hit: bool = False

    @property
    def crashed(self) -> bool:
        return self.crash is not None


def crash_cause(rules: GameRules, candidate: Cell, own: SnakeBody, other: SnakeBody) -> Optional[str]:
    """
    Return why moving the head to `candidate` is fatal, or None.

    The old head is excluded from the own-body check since it becomes the
    neck; the opponent's head counts.
    """
    if rules.is_wall(candidate):
        return WALL
    if own.occupies(candidate, include_head=False):
        return SELF
    if other.occupies(candidate):
        return OPPONENT
    return None


def bullet_hit(body: SnakeBody, bullets: Iterable[BulletSnapshot]) -> bool:
    """True if any active bullet sits on a live segment. Hits do not stack."""
    return any(b.active and body.occupies(b.cell) for b in bullets)


def detect(
    rules: GameRules,
    candidate: Cell,
    own: SnakeBody,
    other: SnakeBody,
    bullets: Iterable[BulletSnapshot],
) -> Collision:
    return Collision(
        crash=crash_cause(rules, candidate, own, other),
        hit=bullet_hit(own, bullets),
    )
