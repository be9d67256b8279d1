"""
Base player interface - the direction input for one snake.
"""

from typing import Optional

from domain.game_state import GameState
from domain.snake import Cell


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a requested heading for its
    snake given the last committed game state.
    """

    def __init__(self, player_index: int):
        if player_index not in (0, 1):
            raise ValueError(f"player_index must be 0 or 1, got {player_index}")
        self.player_index = player_index

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def get_move(self, game_state: GameState, food: Cell) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Last committed state of the game
            food: Cell currently holding the food

        Returns:
            One of: "UP", "RIGHT", "DOWN", "LEFT", or None to keep the
            previously requested heading
        """
        raise NotImplementedError
