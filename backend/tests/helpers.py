"""
Shared builders for engine tests.
"""

import os
import sys
from typing import List, Optional, Tuple

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState, Outcome  # noqa: E402
from domain.player_state import PlayerState  # noqa: E402
from domain.rules import GameRules  # noqa: E402
from domain.snake import SnakeBody  # noqa: E402
from domain.tick import BulletSnapshot, TickInputs  # noqa: E402

RULES = GameRules()
FAR_FOOD = (1, 1)


def player(positions: List[Tuple[int, int]], capacity: int = RULES.max_len, **kwargs) -> PlayerState:
    kwargs.setdefault("lives", RULES.start_lives)
    return PlayerState(body=SnakeBody.from_positions(positions, capacity), **kwargs)


def make_state(
    p1: PlayerState,
    p2: PlayerState,
    timer: int = 30,
    width: int = RULES.width,
    height: int = RULES.height,
    outcome: Optional[Outcome] = None,
) -> GameState:
    return GameState(
        tick=0,
        width=width,
        height=height,
        players=(p1, p2),
        timer=timer,
        outcome=outcome or Outcome.in_progress(),
    )


def inputs(d1: str, d2: str, food=FAR_FOOD, bullets=None) -> TickInputs:
    if bullets is None:
        return TickInputs(direction_1=d1, direction_2=d2, food=food)
    padded = list(bullets) + [BulletSnapshot.inactive()] * (2 - len(bullets))
    return TickInputs(direction_1=d1, direction_2=d2, food=food, bullets=tuple(padded))
