"""
Domain entities for the Turret Duel game engine.

This module contains the core game entities that are independent of
infrastructure concerns (clocks, input devices, replay storage, etc.).
"""

from .constants import (
    UP, RIGHT, DOWN, LEFT, VALID_MOVES, OPPOSITES, DIRECTION_DELTAS,
    PLAYER1, PLAYER2, DRAW,
)
from .snake import Cell, SnakeBody
from .rules import GameRules
from .player_state import PlayerState
from .game_state import GameState, Outcome
from .tick import BulletSnapshot, TickInputs, TickEvents

__all__ = [
    'UP', 'RIGHT', 'DOWN', 'LEFT', 'VALID_MOVES', 'OPPOSITES', 'DIRECTION_DELTAS',
    'PLAYER1', 'PLAYER2', 'DRAW',
    'Cell',
    'SnakeBody',
    'GameRules',
    'PlayerState',
    'GameState',
    'Outcome',
    'BulletSnapshot',
    'TickInputs',
    'TickEvents',
]
