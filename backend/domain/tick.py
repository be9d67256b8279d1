"""
Per-tick values crossing the engine boundary.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import VALID_MOVES
from .snake import Cell


@dataclass(frozen=True)
class BulletSnapshot:
    """A turret's bullet as sampled for one tick."""

    cell: Cell
    active: bool = True

    @classmethod
    def inactive(cls) -> "BulletSnapshot":
        return cls(cell=(0, 0), active=False)


@dataclass(frozen=True)
class TickInputs:
    """Everything the engine reads from its collaborators for one tick."""

    direction_1: str
    direction_2: str
    food: Cell
    bullets: Tuple[BulletSnapshot, BulletSnapshot] = (
        BulletSnapshot.inactive(),
        BulletSnapshot.inactive(),
    )

    def __post_init__(self):
        for direction in (self.direction_1, self.direction_2):
            if direction not in VALID_MOVES:
                raise ValueError(f"Invalid direction '{direction}'")

    @property
    def directions(self) -> Tuple[str, str]:
        return (self.direction_1, self.direction_2)


@dataclass(frozen=True)
class TickEvents:
    """
    What happened during one committed tick, per player.

    food_eaten is edge-triggered: it is only set on the tick a head landed on
    the food. game_over is set only on the tick the outcome flipped.
    """

    food_eaten: Tuple[bool, bool] = (False, False)
    crashes: Tuple[Optional[str], Optional[str]] = (None, None)
    hits: Tuple[bool, bool] = (False, False)
    damaged: Tuple[bool, bool] = (False, False)
    game_over: bool = False

    @property
    def any_food_eaten(self) -> bool:
        return any(self.food_eaten)
