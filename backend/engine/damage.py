"""
Damage and immunity state machine.

Per player and per tick, in order:
  1. a wall/body crash sets lives to 0, whatever the immunity;
  2. otherwise a pending hit while vulnerable costs one life and opens an
     immunity window;
  3. otherwise an open immunity window counts down by one tick.

The pending-hit latch is loaded from this tick's detection, so a hit that
lands while immune is dropped instead of being queued for later.
"""

import logging
from typing import Tuple

from domain.constants import BULLET
from domain.player_state import PlayerState
from domain.rules import GameRules

from .collision import Collision

logger = logging.getLogger(__name__)


def apply_damage(rules: GameRules, player: PlayerState, collision: Collision) -> Tuple[PlayerState, bool]:
    """
    Return the player after this tick's damage step and whether a life was lost
    to a bullet.
    """
    pending_hit = collision.hit

    if collision.crashed:
        logger.debug(f"Crash ({collision.crash}) at {player.head}: lives {player.lives} -> 0")
        return player.evolve(lives=0, pending_hit=pending_hit, death_reason=collision.crash), False

    if pending_hit and player.immunity_ticks == 0:
        lives = max(player.lives - 1, 0)
        logger.debug(f"Bullet hit: lives {player.lives} -> {lives}, immune for {rules.immunity_ticks} ticks")
        return player.evolve(
            lives=lives,
            immunity_ticks=rules.immunity_ticks,
            pending_hit=False,
            death_reason=BULLET if lives == 0 else player.death_reason,
        ), True

    if player.immunity_ticks > 0:
        return player.evolve(immunity_ticks=player.immunity_ticks - 1, pending_hit=pending_hit), False

    return player.evolve(pending_hit=pending_hit), False
