"""
food.py — Food placement.

Keeps the food list topped up to the target count, on cells no snake
occupies. The random source is injected so placement is reproducible.
"""

import logging
import random

from .model import Cell, GameState

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on free cells chosen by a shuffled scan of the grid."""

    def __init__(self, rng: random.Random, target: int):
        self.rng = rng
        self.target = target

    def free_cells(self, state: GameState) -> list[Cell]:
        """Every cell not on a snake and not already food, row by row."""
        blocked = state.occupied() | set(state.food)
        return [
            (x, y)
            for y in range(state.grid_h)
            for x in range(state.grid_w)
            if (x, y) not in blocked
        ]

    def spawn(self, state: GameState) -> bool:
        """
        Top food up to the target count.
        Returns False when the grid has no free cell left (deadlock);
        the caller decides how to recover.
        """
        missing = self.target - len(state.food)
        if missing <= 0:
            return True

        empty = self.free_cells(state)
        if not empty:
            return False

        self.rng.shuffle(empty)
        placed = empty[:missing]
        state.food.extend(placed)
        state.dirty = True
        logger.debug("Spawned %d food at %s", len(placed), placed)
        return True
