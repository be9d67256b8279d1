"""
Scripted player - replays a fixed list of moves.
"""

from typing import Iterable, Optional

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from domain.snake import Cell
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the scripted moves one per tick. A None entry, or running out of
    script, holds the previously requested heading.
    """

    def __init__(self, player_index: int, moves: Iterable[Optional[str]] = ()):
        super().__init__(player_index)
        self.moves = list(moves)
        for move in self.moves:
            if move is not None and move not in VALID_MOVES:
                raise ValueError(f"Invalid scripted move '{move}'")
        self._cursor = 0

    def get_move(self, game_state: GameState, food: Cell) -> Optional[str]:
        if self._cursor >= len(self.moves):
            return None
        move = self.moves[self._cursor]
        self._cursor += 1
        return move
