"""
GameRules - the fixed constants a match is played under.
"""

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class GameRules:
    width: int = constants.GRID_WIDTH
    height: int = constants.GRID_HEIGHT
    max_len: int = constants.MAX_LEN
    init_len: int = constants.INIT_LEN
    start_lives: int = constants.START_LIVES
    max_lives: int = constants.MAX_LIVES
    immunity_ticks: int = constants.IMMUNITY_TICKS
    game_seconds: int = constants.GAME_SECONDS
    start_offset: int = constants.START_OFFSET

    def __post_init__(self):
        if self.init_len < 1 or self.init_len > self.max_len:
            raise ValueError(
                f"init_len must be between 1 and max_len ({self.max_len}), got {self.init_len}"
            )
        if not 0 < self.start_lives <= self.max_lives:
            raise ValueError(
                f"start_lives must be between 1 and max_lives ({self.max_lives}), got {self.start_lives}"
            )
        if self.immunity_ticks < 0 or self.game_seconds < 1:
            raise ValueError("immunity_ticks must be >= 0 and game_seconds >= 1")
        # Both starting snakes must fit inside the walls without touching.
        if self.start_offset - (self.init_len - 1) < 1:
            raise ValueError(
                f"A snake of length {self.init_len} does not fit behind a head "
                f"{self.start_offset} cells from the wall"
            )
        if self.width - 1 - self.start_offset <= self.start_offset or self.height < 3:
            raise ValueError(f"Grid {self.width}x{self.height} is too small for two snakes")

    def is_wall(self, cell) -> bool:
        """Border cells and anything off the grid are walls."""
        x, y = cell
        return x <= 0 or y <= 0 or x >= self.width - 1 or y >= self.height - 1

    def is_interior(self, cell) -> bool:
        return not self.is_wall(cell)
