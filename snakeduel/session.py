"""
session.py — One game session.

Glues state, food spawner, bot, input director, engine and geometry
together and exposes the once-per-frame entry point. The random source
is created and seeded here, once, and handed to the spawner and bot.
"""

import logging
import os
import random

from .ai_brain import BotController
from .config import GameConfig
from .director import InputDirector, Key, PointerEvent
from .engine import MovementEngine
from .food import FoodSpawner
from .geometry import GeometryBuilder, Quad
from .model import GameState

logger = logging.getLogger(__name__)


def entropy_seed() -> int:
    return int.from_bytes(os.urandom(8), "big")


class GameSession:
    """
    Top-level simulation object. The controller calls frame() once per
    rendered frame and forwards input events.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        self.config = config or GameConfig()
        self.seed = entropy_seed() if seed is None else seed
        self.rng = random.Random(self.seed)

        self.state = GameState(self.config)
        self.spawner = FoodSpawner(self.rng, self.config.target_food)
        self.bot = BotController(self.rng, self.config.bot_mistake_chance)
        self.engine = MovementEngine(self.state, self.spawner, self.bot)
        self.director = InputDirector(
            self.state, self.config.tap_threshold, on_reset=self.reset,
        )
        self.geometry = GeometryBuilder()

        self._last_time: float | None = None
        self._viewport: tuple[int, int] = (0, 0)

        logger.info(
            "Session start: %dx%d grid, seed=%d, wrap=%s, bot=%s",
            self.config.grid_w, self.config.grid_h, self.seed,
            self.config.wrap, self.config.bot_enabled,
        )
        if not self.spawner.spawn(self.state):
            logger.warning("No free cell for initial food")

    # ── Public API ───────────────────────────────────────────────
    @property
    def quads(self) -> list[Quad]:
        return self.geometry.quads

    def reset(self) -> None:
        self.engine.reset("input")

    def frame(self, now: float, width: int, height: int) -> int:
        """
        Advance to wall-clock time `now` (monotonic seconds) and refresh
        geometry for a viewport of `width` x `height` pixels.
        Returns the number of ticks run.
        """
        dt = 0.0 if self._last_time is None else now - self._last_time
        self._last_time = now

        if (width, height) != self._viewport:
            self._viewport = (width, height)
            self.director.viewport = (width, height)
            self.state.dirty = True

        ticks = self.engine.update(dt)
        self.geometry.rebuild(self.state, width, height)
        return ticks

    def handle_key(self, key: Key) -> None:
        self.director.on_key(key)

    def handle_pointer(self, event: PointerEvent) -> None:
        self.director.on_pointer(event)
