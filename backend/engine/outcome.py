"""
Winner determination for the countdown and for lethal ticks.
"""

from typing import Tuple

from domain.constants import DRAW, PLAYER1, PLAYER2
from domain.game_state import Outcome
from domain.player_state import PlayerState


def by_score(players: Tuple[PlayerState, PlayerState]) -> Outcome:
    """Higher score wins; equal scores are a draw."""
    s1, s2 = players[0].score, players[1].score
    if s1 > s2:
        return Outcome.finished(PLAYER1)
    if s2 > s1:
        return Outcome.finished(PLAYER2)
    return Outcome.finished(DRAW)


def after_damage(players: Tuple[PlayerState, PlayerState]) -> Outcome:
    """
    Check lives after the damage step. One dead player loses to the other;
    both dying on the same tick falls back to the scores.
    """
    dead1, dead2 = not players[0].alive, not players[1].alive
    if dead1 and dead2:
        return by_score(players)
    if dead1:
        return Outcome.finished(PLAYER2)
    if dead2:
        return Outcome.finished(PLAYER1)
    return Outcome.in_progress()
