"""
Tests for domain/snake.py - the fixed-capacity snake body.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RIGHT, UP
from domain.snake import SnakeBody


class TestSnakeBodyConstruction:
    """Tests for building bodies."""

    def test_from_positions_pads_with_tail(self):
        """Spare slots past the live length hold the tail cell."""
        body = SnakeBody.from_positions([(5, 5), (4, 5), (3, 5)], capacity=6)
        assert body.length == 3
        assert body.capacity == 6
        assert body.positions == [(5, 5), (4, 5), (3, 5)]
        assert body.cells[3:] == ((3, 5), (3, 5), (3, 5))

    def test_extending_from_lays_cells_behind_head(self):
        """A snake heading right has its body to the left of the head."""
        body = SnakeBody.extending_from((9, 15), RIGHT, 3, capacity=32)
        assert body.positions == [(9, 15), (8, 15), (7, 15)]

    def test_extending_from_heading_up(self):
        """A snake heading up (y decreasing) has its body below the head."""
        body = SnakeBody.extending_from((4, 4), UP, 2, capacity=8)
        assert body.positions == [(4, 4), (4, 5)]

    def test_empty_body_rejected(self):
        """A body needs at least one segment."""
        with pytest.raises(ValueError):
            SnakeBody.from_positions([], capacity=4)

    def test_over_capacity_rejected(self):
        """More segments than capacity is an error."""
        with pytest.raises(ValueError):
            SnakeBody.from_positions([(1, 1), (2, 1), (3, 1)], capacity=2)


class TestSnakeBodyQueries:
    """Tests for head, neck and occupancy."""

    def test_head_tail_and_neck(self):
        body = SnakeBody.from_positions([(5, 5), (4, 5), (3, 5)], capacity=4)
        assert body.head == (5, 5)
        assert body.neck() == (4, 5)
        assert body.tail == (3, 5)
        assert len(body) == 3

    def test_single_cell_has_no_neck(self):
        body = SnakeBody.from_positions([(5, 5)], capacity=4)
        assert body.neck() is None

    def test_occupies_ignores_dead_slots(self):
        """Only live segments count, not padding in the buffer."""
        body = SnakeBody(((5, 5), (4, 5), (9, 9)), length=2)
        assert body.occupies((4, 5))
        assert not body.occupies((9, 9))

    def test_occupies_can_exclude_head(self):
        body = SnakeBody.from_positions([(5, 5), (4, 5)], capacity=4)
        assert body.occupies((5, 5))
        assert not body.occupies((5, 5), include_head=False)


class TestSnakeBodyAdvance:
    """Tests for shifting, growth and the capacity cap."""

    def test_advance_without_growth_keeps_length(self):
        body = SnakeBody.from_positions([(5, 5), (4, 5), (3, 5)], capacity=8)
        moved = body.advance((6, 5), grow=False)
        assert moved.positions == [(6, 5), (5, 5), (4, 5)]
        assert moved.length == 3

    def test_advance_with_growth_reveals_old_tail(self):
        """The new tail segment sits where the tail was before the shift."""
        body = SnakeBody.from_positions([(5, 5), (4, 5), (3, 5)], capacity=8)
        grown = body.advance((6, 5), grow=True)
        assert grown.positions == [(6, 5), (5, 5), (4, 5), (3, 5)]
        assert grown.length == 4

    def test_growth_is_capped_at_capacity(self):
        body = SnakeBody.from_positions([(5, 5), (4, 5), (3, 5)], capacity=3)
        grown = body.advance((6, 5), grow=True)
        assert grown.length == 3
        assert grown.positions == [(6, 5), (5, 5), (4, 5)]

    def test_advance_returns_new_body(self):
        """The original body is left untouched."""
        body = SnakeBody.from_positions([(5, 5), (4, 5)], capacity=4)
        body.advance((6, 5), grow=True)
        assert body.positions == [(5, 5), (4, 5)]
        assert body.length == 2
