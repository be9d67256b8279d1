"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES
from domain.game_state import GameState
from domain.snake import Cell
from .base import Player


def safe_moves(game_state: GameState, player_index: int) -> List[str]:
    """
    Moves that avoid walls, the own body (old head excluded) and the
    opponent's body on the next tick.
    """
    me = game_state.players[player_index].body
    other = game_state.players[1 - player_index].body
    head_x, head_y = me.head

    moves: List[str] = []
    for move, (dx, dy) in DIRECTION_DELTAS.items():
        new_x, new_y = head_x + dx, head_y + dy
        # Check wall collisions
        if (new_x <= 0 or new_x >= game_state.width - 1 or
                new_y <= 0 or new_y >= game_state.height - 1):
            continue
        # Check body collisions
        if me.occupies((new_x, new_y), include_head=False) or other.occupies((new_x, new_y)):
            continue
        moves.append(move)
    return moves


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and bodies.
    """

    def __init__(self, player_index: int, rng: Optional[random.Random] = None):
        super().__init__(player_index)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState, food: Cell) -> str:
        valid_moves = safe_moves(game_state, self.player_index)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
