import argparse
import json
import logging
import random
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from config import RunSettings, load_rules, load_settings
from domain.constants import PLAYER1, PLAYER2, DRAW, TICK_RATE
from domain.game_state import GameState
from domain.rules import GameRules
from domain.snake import Cell
from domain.tick import TickEvents, TickInputs
from engine.core import SimulationCore
from players.base import Player
from players.registry import AVAILABLE_PLAYERS, get_player_class
from players.scripted_player import ScriptedPlayer
from services.clock import SecondClock, TickClock
from services.food_oracle import FoodOracle
from services.projectile_feed import ProjectileFeed, TurretFeed
from services.replay import ReplayFrame, build_replay, save_replay

logger = logging.getLogger(__name__)

RESULT_KEYS = {PLAYER1: "0", PLAYER2: "1"}


def _rng(seed: Optional[int], stream: str) -> random.Random:
    """Independent, reproducible random stream per collaborator."""
    return random.Random(f"{seed}-{stream}") if seed is not None else random.Random()


class DuelGame:
    """
    Manages:
      - The simulation core and the committed GameState
      - Both players (direction inputs)
      - The food oracle and the projectile feed
      - Tick and second clocks
      - History for replay
    """

    def __init__(
        self,
        rules: GameRules = None,
        food_oracle: FoodOracle = None,
        projectile_feed: ProjectileFeed = None,
        tick_clock: TickClock = None,
        game_id: str = None,
    ):
        self.rules = rules or GameRules()
        self.core = SimulationCore(self.rules)
        self.food_oracle = food_oracle or FoodOracle(self.rules)
        self.projectile_feed = projectile_feed or ProjectileFeed()
        self.tick_clock = tick_clock or TickClock.from_rate(TICK_RATE)
        self.second_clock = SecondClock()
        self.players: Dict[int, Player] = {}
        self.start_time = datetime.now(timezone.utc)
        self.game_result: Optional[Dict[str, str]] = None

        self.game_id = game_id or str(uuid.uuid4())
        logger.info(f"Game ID: {self.game_id}")

        self.state: GameState = self.core.reset()
        self.food: Cell = self.food_oracle.reset(occupied=self.state.occupied)
        # Last requested heading per player; a player that returns None holds it.
        self.requested: List[str] = list(self.core.start_headings())
        self.last_events = TickEvents()
        self.history: List[ReplayFrame] = [
            ReplayFrame(self.state, self.food, self.projectile_feed.snapshot(), (None, None))
        ]

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def add_player(self, player: Player):
        index = player.player_index
        if index in self.players:
            raise ValueError(f"Player {index + 1} already exists.")
        self.players[index] = player
        logger.info(f"Added player {index + 1} ({player.name}) at {self.state.players[index].head}.")

    def get_current_state(self) -> GameState:
        return self.state

    def _sample_moves(self) -> Tuple[Optional[str], Optional[str]]:
        moves = []
        for index in (0, 1):
            player = self.players.get(index)
            move = player.get_move(self.state, self.food) if player else None
            if move is not None:
                self.requested[index] = move
            moves.append(move)
        return moves[0], moves[1]

    def run_round(self) -> TickEvents:
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Freeze this tick's inputs (moves, food, bullets)
          3) Let the core compute and commit the next state
          4) Forward the food-eaten event to the food oracle
          5) Advance turrets and clocks, strobing the countdown
          6) Record the round in the history once the timer has settled
        """
        if self.game_over:
            logger.info("Game is already over. No more rounds.")
            return TickEvents()

        moves = self._sample_moves()
        bullets = self.projectile_feed.snapshot()
        inputs = TickInputs(
            direction_1=self.requested[0],
            direction_2=self.requested[1],
            food=self.food,
            bullets=bullets,
        )

        self.state, events = self.core.tick(self.state, inputs)

        if events.any_food_eaten:
            self.food = self.food_oracle.on_eaten(occupied=self.state.occupied)

        for i, crash in enumerate(events.crashes):
            if crash is not None:
                logger.info(f"Player {i + 1} crashed ({crash}) on tick {self.state.tick}")
        for i, lost in enumerate(events.damaged):
            if lost:
                logger.info(f"Player {i + 1} was shot: {self.state.players[i].lives} lives left")

        self.projectile_feed.advance()
        dt = self.tick_clock.wait()
        for _ in range(self.second_clock.advance(dt)):
            self.state = self.core.second(self.state)
        if self.game_over and not events.game_over:
            # The countdown ended the game on this round.
            events = replace(events, game_over=True)
        self.last_events = events
        self.history.append(ReplayFrame(self.state, inputs.food, bullets, moves, events))

        logger.debug(f"\n{self.print_board()}")
        logger.debug(
            f"Finished tick {self.state.tick}. Timer: {self.state.timer}, "
            f"Lives: {self.state.lives}, Scores: {self.state.scores}"
        )

        if self.game_over:
            self.end_game()
        return events

    def print_board(self) -> str:
        bullets = [b.cell for b in self.projectile_feed.snapshot() if b.active]
        return self.state.print_board(food=self.food, bullets=bullets)

    def end_game(self):
        outcome = self.state.outcome
        if outcome.winner == DRAW:
            self.game_result = {"0": "tied", "1": "tied"}
            logger.info(f"Game Over: draw with scores {self.state.scores}.")
        else:
            winner = RESULT_KEYS[outcome.winner]
            loser = "1" if winner == "0" else "0"
            self.game_result = {winner: "won", loser: "lost"}
            logger.info(f"Game Over: the winner is {outcome.winner} with scores {self.state.scores}.")

    def metadata(self) -> Dict:
        return {
            "game_id": self.game_id,
            "start_time": self.start_time.isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "players": {str(i): p.name for i, p in self.players.items()},
            "board": {"width": self.rules.width, "height": self.rules.height},
            "winner": self.state.outcome.winner,
            "game_result": self.game_result,
            "final_scores": {str(i): p.score for i, p in enumerate(self.state.players)},
            "final_lives": {str(i): p.lives for i, p in enumerate(self.state.players)},
            "death_info": {
                str(i): {"reason": p.death_reason, "tick": p.death_tick}
                for i, p in enumerate(self.state.players)
                if not p.alive
            },
            "ticks": self.state.tick,
            "timer": self.state.timer,
        }

    def save_history_to_json(self, replay_dir: str) -> str:
        data = build_replay(self.metadata(), self.history)
        return save_replay(self.game_id, data, replay_dir=replay_dir)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player_keys: List[str],
    rules: GameRules,
    settings: RunSettings,
    turrets: bool = True,
    realtime: bool = False,
    save_replay_file: bool = True,
) -> Dict:
    """
    Runs a single match between two players.

    Args:
        player_keys: Two player type names (see players.registry).
        rules: The rules to play under.
        settings: Tick rate, replay directory and seed.
        turrets: Whether the turrets fire.
        realtime: Sleep between ticks instead of running flat out.
        save_replay_file: Write the replay JSON when the match ends.

    Returns:
        A dictionary summarizing the game results (game_id, winner, scores).
    """
    if len(player_keys) != 2:
        raise ValueError("Exactly two players must be provided for a match.")

    seed = settings.seed
    feed = TurretFeed(rules, rng=_rng(seed, "turrets")) if turrets else ProjectileFeed()
    game = DuelGame(
        rules=rules,
        food_oracle=FoodOracle(rules, rng=_rng(seed, "food")),
        projectile_feed=feed,
        tick_clock=TickClock.from_rate(settings.tick_rate, realtime=realtime),
    )

    for index, key in enumerate(player_keys):
        player_class = get_player_class(key)
        if player_class is ScriptedPlayer:
            player = player_class(index)
        else:
            player = player_class(index, rng=_rng(seed, f"player{index}"))
        game.add_player(player)

    while not game.game_over:
        game.run_round()

    replay_path = game.save_history_to_json(settings.replay_dir) if save_replay_file else None

    return {
        "game_id": game.game_id,
        "winner": game.state.outcome.winner,
        "final_scores": {"0": game.state.player1.score, "1": game.state.player2.score},
        "final_lives": {"0": game.state.player1.lives, "1": game.state.player2.lives},
        "game_result": game.game_result,
        "ticks": game.state.tick,
        "replay_path": replay_path,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a Turret Duel snake match between two players."
    )
    parser.add_argument("--players", type=str, nargs=2, default=["greedy", "random"],
                        choices=AVAILABLE_PLAYERS,
                        help="Player types for snake 1 and snake 2")
    parser.add_argument("--width", type=int, default=None,
                        help="Board width including walls")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height including walls")
    parser.add_argument("--seconds", type=int, default=None,
                        help="Countdown length in seconds")
    parser.add_argument("--tick-rate", type=float, default=None,
                        help="Ticks per second")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food, turrets and players")
    parser.add_argument("--turrets", action=argparse.BooleanOptionalAction, default=True,
                        help="Enable or disable the turrets")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks in real time")
    parser.add_argument("--replay-dir", type=str, default=None,
                        help="Directory for replay JSON files")
    parser.add_argument("--no-replay", action="store_true",
                        help="Do not write a replay file")
    parser.add_argument("--log-level", type=str, default="INFO",
                        help="Logging level (DEBUG prints the board every tick)")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rules = load_rules()
    overrides = {
        key: value for key, value in (
            ("width", args.width), ("height", args.height), ("game_seconds", args.seconds)
        ) if value is not None
    }
    if overrides:
        rules = replace(rules, **overrides)

    settings = load_settings()
    settings = RunSettings(
        tick_rate=args.tick_rate if args.tick_rate is not None else settings.tick_rate,
        replay_dir=args.replay_dir or settings.replay_dir,
        seed=args.seed if args.seed is not None else settings.seed,
    )

    result = run_simulation(
        args.players,
        rules,
        settings,
        turrets=args.turrets,
        realtime=args.realtime,
        save_replay_file=not args.no_replay,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
