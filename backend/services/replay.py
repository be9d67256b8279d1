"""
Replay Storage

Serialises a finished match to JSON: a metadata block plus one frame per
committed tick (bodies, scores, lives, timer, food, bullets and events).
Replays are written to the local completed_games directory.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from domain.game_state import GameState
from domain.snake import Cell
from domain.tick import BulletSnapshot, TickEvents

logger = logging.getLogger(__name__)

DEFAULT_REPLAY_DIR = "completed_games"


@dataclass(frozen=True)
class ReplayFrame:
    """One committed round with the inputs it was computed from."""

    state: GameState
    food: Optional[Cell]
    bullets: Tuple[BulletSnapshot, BulletSnapshot]
    moves: Tuple[Optional[str], Optional[str]]
    events: Optional[TickEvents] = None


def serialize_frame(frame: ReplayFrame) -> Dict[str, Any]:
    """
    Convert one frame to a JSON-serializable dict. Tuples become lists,
    which is what json would do anyway.
    """
    state = frame.state
    events = frame.events or TickEvents()
    return {
        "tick": state.tick,
        "timer": state.timer,
        "snakes": {
            str(i): [list(cell) for cell in p.body.positions]
            for i, p in enumerate(state.players)
        },
        "scores": {str(i): p.score for i, p in enumerate(state.players)},
        "lives": {str(i): p.lives for i, p in enumerate(state.players)},
        "immunity": {str(i): p.immunity_ticks for i, p in enumerate(state.players)},
        "food": list(frame.food) if frame.food is not None else None,
        "bullets": [list(b.cell) for b in frame.bullets if b.active],
        "moves": {str(i): move for i, move in enumerate(frame.moves)},
        "events": {
            "food_eaten": list(events.food_eaten),
            "crashes": list(events.crashes),
            "hits": list(events.hits),
            "damaged": list(events.damaged),
            "game_over": events.game_over,
        },
    }


def serialize_history(frames: List[ReplayFrame]) -> List[Dict[str, Any]]:
    return [serialize_frame(frame) for frame in frames]


def build_replay(metadata: Dict[str, Any], frames: List[ReplayFrame]) -> Dict[str, Any]:
    return {"metadata": metadata, "frames": serialize_history(frames)}


def save_replay(game_id: str, data: Dict[str, Any], replay_dir: str = DEFAULT_REPLAY_DIR) -> str:
    """
    Write replay data to `<replay_dir>/duel_<game_id>.json`.

    Returns:
        The path of the written file
    """
    os.makedirs(replay_dir, exist_ok=True)
    path = os.path.join(replay_dir, f"duel_{game_id}.json")
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    logger.info(f"Saved replay for game {game_id} to {path}")
    return path


def load_replay(path: str) -> Dict[str, Any]:
    """Load replay data from a local JSON file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, 'r') as f:
        replay_data = json.load(f)

    logger.info(f"Loaded replay with {len(replay_data.get('frames', []))} frames")
    return replay_data
