"""
engine.py — Movement rules.

Advances the GameState one tick at a time. The step order is fixed and
deliberately asymmetric: the bot moves first against the player's old
body, then the player moves against the bot's new body.

Every terminal condition (self hit, cross hit, head-to-head, wall in
classic mode, full grid) is resolved the same way: reset().
"""

import logging

from .ai_brain import BotController
from .food import FoodSpawner
from .model import GameState

logger = logging.getLogger(__name__)


class MovementEngine:
    """Owns the tick loop and the reset primitive for one GameState."""

    def __init__(self, state: GameState, spawner: FoodSpawner, bot: BotController):
        self.state = state
        self.spawner = spawner
        self.bot = bot

    # ── Public API ───────────────────────────────────────────────
    def reset(self, reason: str = "manual") -> None:
        """Restore the session-start configuration and respawn food."""
        state = self.state
        state.reset()
        state.resets += 1
        logger.info("Session reset (%s), resets so far: %d", reason, state.resets)
        if not self.spawner.spawn(state):
            logger.warning(
                "No free cell for food on a fresh %dx%d grid", state.grid_w, state.grid_h
            )

    def update(self, dt: float) -> int:
        """
        Advance game logic by dt seconds using a fixed-step accumulator.
        Returns the number of ticks run.
        """
        state = self.state
        state.tick_accumulator += max(dt, 0.0)
        limit = state.config.max_ticks_per_frame
        ticks = 0
        while state.tick_accumulator >= state.tick_interval:
            if limit is not None and ticks >= limit:
                dropped = state.tick_accumulator - state.tick_accumulator % state.tick_interval
                state.tick_accumulator %= state.tick_interval
                logger.debug("Catch-up cap hit after %d ticks, dropped %.3fs", ticks, dropped)
                break
            state.tick_accumulator -= state.tick_interval
            self.step()
            ticks += 1
        return ticks

    def step(self) -> None:
        """Advance both snakes by exactly one cell."""
        state = self.state
        player, bot = state.player, state.bot

        player.heading.commit(len(player))

        # Bot first, against the player's unmoved body.
        bot_head = None
        if bot.body:
            bot.heading.pending = self.bot.choose_direction(state)
            bot_dir = bot.heading.commit(len(bot))
            bot_head = state.next_cell(bot.head, bot_dir)
            if bot_head is None:
                self.reset("bot hit a wall")
                return
            if bot.occupies(bot_head) or player.occupies(bot_head):
                self.reset("bot collided")
                return
            bot.push_head(bot_head)

        # Player second, against the bot's advanced body.
        new_head = state.next_cell(player.head, player.heading.current)
        if new_head is None:
            self.reset("player hit a wall")
            return
        if player.occupies(new_head) or bot.occupies(new_head):
            self.reset("player collided")
            return

        player.push_head(new_head)
        player_ate = state.eat(new_head)
        if not player_ate:
            player.drop_tail()

        bot_ate = False
        if bot_head is not None:
            bot_ate = state.eat(bot_head)
            if not bot_ate:
                bot.drop_tail()
            # Unreachable while the player check above includes the bot's new head.
            if bot_head == new_head:
                self.reset("head-to-head")
                return

        if player_ate or bot_ate:
            if not self.spawner.spawn(state):
                self.reset("grid full")
                return

        state.dirty = True
