"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from .constants import DRAW, PLAYER1, PLAYER2
from .player_state import PlayerState
from .snake import Cell


@dataclass(frozen=True)
class Outcome:
    """Either in progress (`over` is False) or over with a winner."""

    over: bool = False
    winner: Optional[str] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls()

    @classmethod
    def finished(cls, winner: str) -> "Outcome":
        if winner not in (PLAYER1, PLAYER2, DRAW):
            raise ValueError(f"Unknown winner '{winner}'")
        return cls(over=True, winner=winner)

    def __str__(self):
        return f"over ({self.winner})" if self.over else "in progress"


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of committed ticks (0 right after reset)
        width, height: board dimensions, border cells included
        players: the two player states, player 1 first
        timer: seconds left on the countdown
        outcome: in progress or over with a winner
    """

    tick: int
    width: int
    height: int
    players: Tuple[PlayerState, PlayerState]
    timer: int
    outcome: Outcome = Outcome()

    @property
    def game_over(self) -> bool:
        return self.outcome.over

    @property
    def player1(self) -> PlayerState:
        return self.players[0]

    @property
    def player2(self) -> PlayerState:
        return self.players[1]

    @property
    def scores(self) -> Tuple[int, int]:
        return (self.players[0].score, self.players[1].score)

    @property
    def lives(self) -> Tuple[int, int]:
        return (self.players[0].lives, self.players[1].lives)

    def occupied(self, cell: Cell) -> bool:
        """True if any live segment of either snake sits on `cell`."""
        return any(p.body.occupies(cell) for p in self.players)

    def evolve(self, **changes) -> "GameState":
        return replace(self, **changes)

    def print_board(self, food: Optional[Cell] = None, bullets: Iterable[Cell] = ()) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        A = food
        * = bullet
        T = snake body
        1,2 = snake head (showing player number)
        Row 0 is printed first, matching the engine's y-down coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]
        for y in range(self.height):
            for x in range(self.width):
                if x in (0, self.width - 1) or y in (0, self.height - 1):
                    board[y][x] = '#'

        if food is not None:
            fx, fy = food
            board[fy][fx] = 'A'

        for i, player in enumerate(self.players, start=1):
            for pos_idx, (x, y) in enumerate(player.body.positions):
                if not (0 <= x < self.width and 0 <= y < self.height):
                    continue
                board[y][x] = str(i) if pos_idx == 0 else 'T'

        # Bullets are drawn last so a hit is visible on top of the body.
        for bx, by in bullets:
            if 0 <= bx < self.width and 0 <= by < self.height:
                board[by][bx] = '*'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, timer={self.timer}, scores={self.scores}, "
            f"lives={self.lives}, outcome={self.outcome}>"
        )
