"""
Food Oracle

Owns the single food cell. When the engine reports the food eaten, a new
cell is drawn at random from the grid interior, retrying while the
candidate lands on a snake. After `max_retries` redraws the last candidate
is accepted, so a crowded board never stalls the match.
"""

import logging
import random
from typing import Callable, Optional

from domain.rules import GameRules
from domain.snake import Cell

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 16

OccupancyCheck = Callable[[Cell], bool]


def _never_occupied(cell: Cell) -> bool:
    return False


class FoodOracle:
    def __init__(
        self,
        rules: GameRules,
        rng: Optional[random.Random] = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        enforce_occupancy: bool = True,
    ):
        self.rules = rules
        self.rng = rng or random.Random()
        self.max_retries = max_retries
        self.enforce_occupancy = enforce_occupancy
        self.current: Optional[Cell] = None
        self.eaten_count = 0

    def _random_interior_cell(self) -> Cell:
        x = self.rng.randint(1, self.rules.width - 2)
        y = self.rng.randint(1, self.rules.height - 2)
        return (x, y)

    def draw(self, occupied: Optional[OccupancyCheck] = None) -> Cell:
        """Draw a new food cell and make it current."""
        if occupied is None or not self.enforce_occupancy:
            occupied = _never_occupied

        candidate = self._random_interior_cell()
        retries = 0
        while occupied(candidate) and retries < self.max_retries:
            candidate = self._random_interior_cell()
            retries += 1

        if occupied(candidate):
            logger.warning(f"No free cell found after {retries} retries; food placed on a snake at {candidate}")
        self.current = candidate
        return candidate

    def reset(self, occupied: Optional[OccupancyCheck] = None) -> Cell:
        self.eaten_count = 0
        return self.draw(occupied)

    def on_eaten(self, occupied: Optional[OccupancyCheck] = None) -> Cell:
        """Food-eaten event from the engine; replaces the food."""
        self.eaten_count += 1
        previous = self.current
        cell = self.draw(occupied)
        logger.debug(f"Food at {previous} eaten; new food at {cell}")
        return cell
