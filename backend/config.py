"""
Configuration for Turret Duel.

Defaults come from domain.constants; any of them can be overridden through
environment variables (or a .env file picked up by python-dotenv):

    DUEL_WIDTH, DUEL_HEIGHT     board size including the walls
    DUEL_MAX_LEN, DUEL_INIT_LEN snake capacity and starting length
    DUEL_GAME_SECONDS           countdown length
    DUEL_TICK_RATE              ticks per second
    DUEL_REPLAY_DIR             where replays are written
    DUEL_SEED                   random seed for food and turrets
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain import constants
from domain.rules import GameRules
from services.replay import DEFAULT_REPLAY_DIR

load_dotenv()


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number, got '{raw}'") from None


@dataclass(frozen=True)
class RunSettings:
    """How a match is run, as opposed to the rules it is played under."""

    tick_rate: float = constants.TICK_RATE
    replay_dir: str = DEFAULT_REPLAY_DIR
    seed: Optional[int] = None


def load_rules() -> GameRules:
    return GameRules(
        width=_env_int("DUEL_WIDTH", constants.GRID_WIDTH),
        height=_env_int("DUEL_HEIGHT", constants.GRID_HEIGHT),
        max_len=_env_int("DUEL_MAX_LEN", constants.MAX_LEN),
        init_len=_env_int("DUEL_INIT_LEN", constants.INIT_LEN),
        game_seconds=_env_int("DUEL_GAME_SECONDS", constants.GAME_SECONDS),
    )


def load_settings() -> RunSettings:
    return RunSettings(
        tick_rate=_env_float("DUEL_TICK_RATE", constants.TICK_RATE),
        replay_dir=os.getenv("DUEL_REPLAY_DIR", DEFAULT_REPLAY_DIR),
        seed=_env_int("DUEL_SEED", None),
    )
