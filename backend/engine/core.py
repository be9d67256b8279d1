"""
SimulationCore - the tick-driven heart of the game.

`tick` is a pure transition: it reads one immutable GameState plus the
inputs sampled for this tick and returns the next GameState together with
the events raised along the way. Nothing is observable half-way through a
tick, and both players are judged against the same pre-tick snapshot.

Order within a tick:
  1) resolve each player's direction and candidate head
  2) detect crashes and bullet hits for both players
  3) apply damage/immunity
  4) decide whether anybody died
  5) if the game is still on, move the survivors, grow and score
"""

import logging
from typing import List, Tuple

from domain.constants import LEFT, RIGHT
from domain.game_state import GameState, Outcome
from domain.player_state import PlayerState
from domain.rules import GameRules
from domain.snake import SnakeBody
from domain.tick import TickEvents, TickInputs

from . import outcome as outcomes
from .collision import detect
from .damage import apply_damage
from .direction import resolve_direction, step
from .movement import move

logger = logging.getLogger(__name__)


class SimulationCore:
    """
    Owns the rules of a match and the transitions between GameStates.

    The core keeps no mutable state of its own; callers hold the current
    GameState and feed it back in.
    """

    def __init__(self, rules: GameRules = None):
        self.rules = rules or GameRules()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_headings(self) -> Tuple[str, str]:
        """Player 1 starts on the left heading right; player 2 mirrors it."""
        return (RIGHT, LEFT)

    def reset(self) -> GameState:
        rules = self.rules
        mid_y = rules.height // 2
        heads = ((rules.start_offset, mid_y), (rules.width - 1 - rules.start_offset, mid_y))
        players = tuple(
            PlayerState(
                body=SnakeBody.extending_from(head, heading, rules.init_len, rules.max_len),
                lives=rules.start_lives,
            )
            for head, heading in zip(heads, self.start_headings())
        )
        return GameState(
            tick=0,
            width=rules.width,
            height=rules.height,
            players=players,
            timer=rules.game_seconds,
            outcome=Outcome.in_progress(),
        )

    # ------------------------------------------------------------------
    # Tick clock
    # ------------------------------------------------------------------

    def tick(self, state: GameState, inputs: TickInputs) -> Tuple[GameState, TickEvents]:
        """
        Compute the next committed state. Once the game is over the tick is
        a no-op and returns the state unchanged.
        """
        if state.game_over:
            return state, TickEvents()

        rules = self.rules
        bodies = (state.players[0].body, state.players[1].body)

        # 1) Direction and candidate heads
        candidates = []
        for body, requested in zip(bodies, inputs.directions):
            candidates.append(step(body.head, resolve_direction(body, requested)))

        # 2) Collisions, all from the pre-tick bodies
        collisions = [
            detect(rules, candidates[i], bodies[i], bodies[1 - i], inputs.bullets)
            for i in range(2)
        ]

        # 3) Damage and immunity
        damaged: List[bool] = []
        players: List[PlayerState] = []
        for player, collision in zip(state.players, collisions):
            updated, lost_life = apply_damage(rules, player, collision)
            if not updated.alive and updated.death_tick is None:
                updated = updated.evolve(death_tick=state.tick + 1)
            players.append(updated)
            damaged.append(lost_life)

        # 4) Lethal ticks end the game before anybody moves
        outcome = outcomes.after_damage((players[0], players[1]))

        # 5) Movement, growth and scoring for the survivors
        food_eaten = [False, False]
        if not outcome.over:
            for i in range(2):
                if collisions[i].crashed:
                    continue
                players[i], food_eaten[i] = move(rules, players[i], candidates[i], inputs.food)

        next_state = state.evolve(
            tick=state.tick + 1,
            players=(players[0], players[1]),
            outcome=outcome,
        )
        events = TickEvents(
            food_eaten=(food_eaten[0], food_eaten[1]),
            crashes=(collisions[0].crash, collisions[1].crash),
            hits=(collisions[0].hit, collisions[1].hit),
            damaged=(damaged[0], damaged[1]),
            game_over=outcome.over,
        )

        if outcome.over:
            logger.info(
                f"Game over on tick {next_state.tick}: winner={outcome.winner}, "
                f"lives={next_state.lives}, scores={next_state.scores}"
            )
        return next_state, events

    # ------------------------------------------------------------------
    # Second clock
    # ------------------------------------------------------------------

    def second(self, state: GameState) -> GameState:
        """Count the timer down by one second; zero ends the game on score."""
        if state.game_over or state.timer <= 0:
            return state
        timer = state.timer - 1
        if timer > 0:
            return state.evolve(timer=timer)
        outcome = outcomes.by_score(state.players)
        logger.info(f"Time up: winner={outcome.winner}, scores={state.scores}")
        return state.evolve(timer=0, outcome=outcome)
