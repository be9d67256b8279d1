"""
Registry for player types.
Maps player keys (e.g., 'random', 'greedy') to player classes so the CLI can
build players by name. To add a new player, create a module with the class,
import it here, and add an entry to PLAYER_TYPES.
"""

from typing import Dict, List, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

PLAYER_TYPES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
    "scripted": ScriptedPlayer,
}

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_TYPES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'greedy', 'scripted'. If None or empty,
            returns the random player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "random"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_TYPES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player type '{player_key}'. Available players: {available}"
        )

    return PLAYER_TYPES[player_key]


def list_players() -> List[dict]:
    """
    Return metadata about all available player types.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random safe move each tick"},
        {"key": "greedy", "description": "Safe move closest to the food"},
        {"key": "scripted", "description": "Fixed move list, then holds its heading"},
    ]
