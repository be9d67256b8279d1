"""
Movement, growth and scoring for a single player.
"""

from typing import Tuple

from domain.player_state import PlayerState
from domain.rules import GameRules
from domain.snake import Cell


def move(rules: GameRules, player: PlayerState, candidate: Cell, food: Cell) -> Tuple[PlayerState, bool]:
    """
    Advance the snake onto `candidate`; returns the new state and whether food
    was eaten. Eating grows the body (capped at max_len), scores a point and
    restores a life (capped at max_lives).
    """
    ate = candidate == food
    body = player.body.advance(candidate, grow=ate)
    if not ate:
        return player.evolve(body=body), False
    return player.evolve(
        body=body,
        score=player.score + 1,
        lives=min(player.lives + 1, rules.max_lives),
    ), True
