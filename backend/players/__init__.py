"""
Player implementations for Turret Duel.

This module contains the player abstractions and implementations
that supply each snake's requested direction every tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .scripted_player import ScriptedPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
