"""
Snake body entity for the game engine.
"""

from typing import List, Optional, Tuple

from .constants import DIRECTION_DELTAS

Cell = Tuple[int, int]


class SnakeBody:
    """
    A snake body stored in a fixed-capacity buffer.

    Attributes:
        cells: tuple of `capacity` cells; only the first `length` are live
        length: number of live segments, head at index 0

    Instances are immutable. `advance` returns a new body, which keeps the
    engine's pre-tick snapshot intact while the next state is computed.
    """

    __slots__ = ("cells", "length")

    def __init__(self, cells: Tuple[Cell, ...], length: int):
        if not 1 <= length <= len(cells):
            raise ValueError(f"length {length} outside 1..{len(cells)}")
        self.cells = tuple(cells)
        self.length = length

    @classmethod
    def from_positions(cls, positions: List[Cell], capacity: int) -> "SnakeBody":
        """Build a body from live positions, padding spare slots with the tail."""
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if len(positions) > capacity:
            raise ValueError(f"{len(positions)} segments exceed capacity {capacity}")
        padding = [positions[-1]] * (capacity - len(positions))
        return cls(tuple(positions) + tuple(padding), len(positions))

    @classmethod
    def extending_from(cls, head: Cell, heading: str, length: int, capacity: int) -> "SnakeBody":
        """Lay out `length` cells behind `head`, which is moving along `heading`."""
        dx, dy = DIRECTION_DELTAS[heading]
        hx, hy = head
        positions = [(hx - dx * i, hy - dy * i) for i in range(length)]
        return cls.from_positions(positions, capacity)

    @property
    def capacity(self) -> int:
        return len(self.cells)

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.cells[0]

    @property
    def tail(self) -> Cell:
        return self.cells[self.length - 1]

    @property
    def positions(self) -> List[Cell]:
        """Live segments, head first."""
        return list(self.cells[:self.length])

    def neck(self) -> Optional[Cell]:
        return self.cells[1] if self.length > 1 else None

    def occupies(self, cell: Cell, include_head: bool = True) -> bool:
        start = 0 if include_head else 1
        return cell in self.cells[start:self.length]

    def advance(self, new_head: Cell, grow: bool) -> "SnakeBody":
        """
        Shift every segment one slot toward the tail and place `new_head`.

        The slot just past the old tail receives the old tail position, so a
        growing snake reveals a segment exactly where its tail used to be.
        Growth is ignored once the buffer is full.
        """
        cells = list(self.cells)
        last = min(self.length, self.capacity - 1)
        for i in range(last, 0, -1):
            cells[i] = cells[i - 1]
        cells[0] = new_head
        length = min(self.length + 1, self.capacity) if grow else self.length
        return SnakeBody(tuple(cells), length)

    def __eq__(self, other):
        if not isinstance(other, SnakeBody):
            return NotImplemented
        return self.length == other.length and self.cells == other.cells

    def __hash__(self):
        return hash((self.cells, self.length))

    def __len__(self):
        return self.length

    def __repr__(self):
        return f"<SnakeBody length={self.length}/{self.capacity} head={self.head}>"
