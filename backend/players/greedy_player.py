"""
Greedy player implementation - heads for the food along safe moves.
"""

import random
from typing import Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES
from domain.game_state import GameState
from domain.snake import Cell
from .base import Player
from .random_player import safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest (Manhattan distance) to
    the food. Ties are broken at random.
    """

    def __init__(self, player_index: int, rng: Optional[random.Random] = None):
        super().__init__(player_index)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState, food: Cell) -> str:
        moves = safe_moves(game_state, self.player_index)
        if not moves:
            return self.rng.choice(sorted(VALID_MOVES))

        head_x, head_y = game_state.players[self.player_index].head
        fx, fy = food

        def distance(move: str) -> int:
            dx, dy = DIRECTION_DELTAS[move]
            return abs(head_x + dx - fx) + abs(head_y + dy - fy)

        best = min(distance(m) for m in moves)
        return self.rng.choice([m for m in moves if distance(m) == best])
