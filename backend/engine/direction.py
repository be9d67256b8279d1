"""
Direction resolution: turning a requested heading into the step actually taken.
"""

from typing import Optional

from domain.constants import DIRECTION_DELTAS, OPPOSITES
from domain.snake import Cell, SnakeBody


def physical_direction(body: SnakeBody) -> Optional[str]:
    """Heading of the last head movement, or None for a one-cell snake."""
    neck = body.neck()
    if neck is None:
        return None
    hx, hy = body.head
    nx, ny = neck
    delta = (hx - nx, hy - ny)
    for direction, step in DIRECTION_DELTAS.items():
        if step == delta:
            return direction
    # Head and neck are not adjacent (only possible in hand-built bodies).
    return None


def resolve_direction(body: SnakeBody, requested: str) -> str:
    """
    Return the direction the snake will move in this tick.

    A request for the exact reverse of the physical direction would turn the
    head into the neck, so the snake keeps going straight instead.
    """
    current = physical_direction(body)
    if current is not None and requested == OPPOSITES[current]:
        return current
    return requested


def step(cell: Cell, direction: str) -> Cell:
    """One unit step, no wrap-around. Off-grid results are caught as walls."""
    dx, dy = DIRECTION_DELTAS[direction]
    x, y = cell
    return (x + dx, y + dy)
