"""
Game constants for Turret Duel.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
RIGHT = "RIGHT"
DOWN = "DOWN"
LEFT = "LEFT"
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

# Row 0 is the top wall, so UP decreases y
DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}
OPPOSITES: Dict[str, str] = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Outcome
PLAYER1 = "player1"
PLAYER2 = "player2"
DRAW = "draw"

# Death reasons
WALL = "wall"
SELF = "self"
OPPONENT = "opponent"
BULLET = "bullet"

# Game settings
GRID_WIDTH = 40
GRID_HEIGHT = 30
MAX_LEN = 32
INIT_LEN = 3
START_LIVES = 3
MAX_LIVES = 5
IMMUNITY_TICKS = 10
GAME_SECONDS = 30
TICK_RATE = 8  # ticks per second

# Distance of each starting head from its side wall
START_OFFSET = 9
