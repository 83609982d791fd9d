"""
ai_brain.py — Bot decision module.

Completely isolated from rendering and input.
Reads the game state and returns a Direction; never mutates anything.

Strategy:
  - With probability `mistake_chance`: pick a random safe direction (simulates mistakes).
  - Otherwise: one-step greedy. Among the safe next cells, take the one
    closest to any food, measured around the torus.
  - Fallback: if no direction is safe, keep the current heading and let
    the engine resolve the collision.
"""

import random

from .model import ALL_DIRS, Direction, GameState


class BotController:
    """Chooses the bot snake's heading once per tick."""

    def __init__(self, rng: random.Random, mistake_chance: float = 0.0):
        self.rng = rng
        self.mistake_chance = mistake_chance

    def choose_direction(self, state: GameState) -> Direction:
        """
        Return the Direction the bot wants to move this tick.

        Candidates are scanned in Up, Down, Left, Right order so that
        equal distances resolve to the earliest one.
        """
        bot = state.bot
        current = bot.heading.current
        if not bot.body:
            return current

        candidates = _safe_moves(state)
        if not candidates:
            return current

        if self.mistake_chance > 0 and self.rng.random() < self.mistake_chance:
            return self.rng.choice(candidates)[0]

        best_dir = current
        best_dist = None
        for d, cell in candidates:
            dist = _nearest_food_distance(state, cell)
            if best_dist is None or dist < best_dist:
                best_dir, best_dist = d, dist
        return best_dir


# ── Internal helpers ──────────────────────────────────────────────

def _safe_moves(state: GameState) -> list:
    """(direction, cell) pairs that don't step onto either snake or off the grid."""
    bot, player = state.bot, state.player
    moves = []
    for d in ALL_DIRS:
        if len(bot) > 1 and d.is_opposite(bot.heading.current):
            continue
        cell = state.next_cell(bot.head, d)
        if cell is None:
            continue
        if bot.occupies(cell) or player.occupies(cell):
            continue
        moves.append((d, cell))
    return moves


def _nearest_food_distance(state: GameState, cell) -> int:
    if not state.food:
        return 0
    return min(state.distance(cell, f) for f in state.food)
