"""
Tests for the services package: food oracle, projectile feed, clocks and
replay storage.
"""

import json
import logging
import pytest
import random
import sys
import os
from dataclasses import FrozenInstanceError, replace
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.rules import GameRules
from domain.tick import BulletSnapshot, TickEvents
from engine.core import SimulationCore
from services.clock import SecondClock, TickClock
from services.food_oracle import FoodOracle
from services.projectile_feed import ProjectileFeed, TurretFeed
from services.replay import (
    ReplayFrame,
    build_replay,
    load_replay,
    save_replay,
    serialize_frame,
)

RULES = GameRules()


class TestFoodOracle:
    """Tests for food placement."""

    def test_food_always_in_interior(self):
        oracle = FoodOracle(RULES, rng=random.Random(11))
        for _ in range(200):
            cell = oracle.draw()
            assert RULES.is_interior(cell)

    def test_occupied_cells_are_retried(self):
        oracle = FoodOracle(RULES, rng=random.Random(5), max_retries=100000)
        target = (5, 5)
        assert oracle.draw(occupied=lambda c: c != target) == target

    def test_gives_up_after_max_retries(self, caplog):
        """A full board still yields food, with a warning."""
        oracle = FoodOracle(RULES, rng=random.Random(5), max_retries=3)
        with caplog.at_level(logging.WARNING, logger="services.food_oracle"):
            cell = oracle.draw(occupied=lambda c: True)
        assert RULES.is_interior(cell)
        assert oracle.current == cell
        assert "No free cell found after 3 retries" in caplog.text

    def test_occupancy_can_be_disabled(self):
        occupied = Mock(return_value=True)
        oracle = FoodOracle(RULES, rng=random.Random(5), enforce_occupancy=False)
        oracle.draw(occupied=occupied)
        occupied.assert_not_called()

    def test_on_eaten_counts_and_redraws(self):
        oracle = FoodOracle(RULES, rng=random.Random(2))
        first = oracle.reset()
        assert oracle.current == first
        oracle.on_eaten()
        oracle.on_eaten()
        assert oracle.eaten_count == 2
        assert RULES.is_interior(oracle.current)

    def test_reset_avoids_starting_snakes(self):
        state = SimulationCore(RULES).reset()
        oracle = FoodOracle(RULES, rng=random.Random(9))
        for _ in range(50):
            assert not state.occupied(oracle.reset(occupied=state.occupied))


class TestProjectileFeed:
    """Tests for the turrets."""

    def test_quiet_feed_never_fires(self):
        feed = ProjectileFeed()
        feed.advance()
        assert feed.snapshot() == (BulletSnapshot.inactive(), BulletSnapshot.inactive())

    def test_turrets_fire_and_bullets_travel(self):
        feed = TurretFeed(RULES, rng=random.Random(1), fire_chance=1.0)
        assert not any(b.active for b in feed.snapshot())

        feed.advance()
        down, right = feed.snapshot()
        assert down.active and right.active
        assert down.cell == (1, 1)
        assert right.cell == (1, 1)

        feed.advance()
        down, right = feed.snapshot()
        assert down.cell == (1, 2)
        assert right.cell == (2, 1)

    def test_bullets_stay_off_the_walls(self):
        feed = TurretFeed(RULES, rng=random.Random(4), fire_chance=0.5, patrol_every=1)
        for _ in range(500):
            feed.advance()
            for bullet in feed.snapshot():
                if bullet.active:
                    assert RULES.is_interior(bullet.cell)

    def test_turret_patrol_bounces(self):
        feed = TurretFeed(RULES, rng=random.Random(4), fire_chance=0.0, patrol_every=1)
        top = feed.turrets[0]
        seen = set()
        for _ in range(200):
            feed.advance()
            seen.add(top.position)
            assert 1 <= top.position <= RULES.width - 2
        assert seen == set(range(1, RULES.width - 1))

    def test_zero_fire_chance_never_fires(self):
        feed = TurretFeed(RULES, rng=random.Random(4), fire_chance=0.0)
        for _ in range(50):
            feed.advance()
            assert not any(b.active for b in feed.snapshot())


class TestClocks:
    def test_tick_clock_sleeps_in_realtime(self):
        sleep = Mock()
        clock = TickClock.from_rate(8, realtime=True, sleep=sleep)
        assert clock.wait() == pytest.approx(0.125)
        sleep.assert_called_once_with(0.125)
        assert clock.ticks == 1

    def test_tick_clock_skips_sleep_when_not_realtime(self):
        sleep = Mock()
        clock = TickClock.from_rate(8, sleep=sleep)
        clock.wait()
        sleep.assert_not_called()

    def test_invalid_rates_rejected(self):
        with pytest.raises(ValueError):
            TickClock.from_rate(0)
        with pytest.raises(ValueError):
            TickClock(-1.0)

    def test_second_clock_strobes_once_per_second(self):
        clock = SecondClock()
        fired = [clock.advance(0.125) for _ in range(16)]
        assert sum(fired) == 2
        assert fired[7] == 1
        assert fired[15] == 1

    def test_second_clock_tolerates_float_drift(self):
        clock = SecondClock()
        assert sum(clock.advance(0.1) for _ in range(10)) == 1

    def test_second_clock_long_step(self):
        clock = SecondClock()
        assert clock.advance(2.5) == 2
        assert clock.advance(0.5) == 1


class TestReplay:
    """Tests for replay serialisation and storage."""

    def _frame(self):
        state = SimulationCore(RULES).reset()
        bullets = (BulletSnapshot((4, 4)), BulletSnapshot.inactive())
        events = TickEvents(food_eaten=(True, False))
        return ReplayFrame(state, (12, 15), bullets, ("UP", None), events)

    def test_serialize_frame(self):
        data = serialize_frame(self._frame())
        assert data["tick"] == 0
        assert data["timer"] == 30
        assert data["snakes"]["0"] == [[9, 15], [8, 15], [7, 15]]
        assert data["lives"] == {"0": 3, "1": 3}
        assert data["food"] == [12, 15]
        assert data["bullets"] == [[4, 4]]
        assert data["moves"] == {"0": "UP", "1": None}
        assert data["events"]["food_eaten"] == [True, False]
        json.dumps(data)

    def test_frame_without_events(self):
        frame = replace(self._frame(), events=None)
        assert serialize_frame(frame)["events"]["game_over"] is False

    def test_frames_are_immutable(self):
        frame = self._frame()
        with pytest.raises(FrozenInstanceError):
            frame.food = (1, 1)

    def test_save_and_load(self, tmp_path):
        data = build_replay({"game_id": "abc"}, [self._frame()])
        path = save_replay("abc", data, replay_dir=str(tmp_path))
        assert path == os.path.join(str(tmp_path), "duel_abc.json")
        loaded = load_replay(path)
        assert loaded["metadata"] == {"game_id": "abc"}
        assert len(loaded["frames"]) == 1

    def test_load_missing_replay_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_replay(str(tmp_path / "missing.json"))
