"""
assets.py — Texture registry.

Owns every pygame Surface the view draws with, keyed by an opaque handle
(see TEX_* in config.py). Game state and geometry only ever hold handles.

If the player atlas image is missing, a procedural four-quarter atlas is
built instead: a bright head tile followed by three body shades.
"""

import logging
import os

import pygame

from .config import (
    ATLAS_CELL, BOT_COL, FOOD_COL, PLAYER_ATLAS_FILE, PLAYER_COL, PLAYER_DIM,
    TEX_BOT, TEX_FOOD, TEX_PLAYER,
)

logger = logging.getLogger(__name__)

# Player atlas expected next to this module: snakeduel/snake.png
ASSET_DIR = os.path.dirname(__file__)


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


def solid_color(color: tuple) -> pygame.Surface:
    """A 1x1 surface filled with `color`."""
    surf = pygame.Surface((1, 1))
    surf.fill(color)
    return surf


def procedural_atlas(cell: int = ATLAS_CELL) -> pygame.Surface:
    """Four `cell` x `cell` tiles side by side: head, then three body shades."""
    atlas = pygame.Surface((cell * 4, cell))
    atlas.fill(_brighten(PLAYER_COL, 1.4), pygame.Rect(0, 0, cell, cell))
    for i in range(1, 4):
        shade = _lerp_color(PLAYER_COL, PLAYER_DIM, (i - 1) / 2)
        atlas.fill(shade, pygame.Rect(i * cell, 0, cell, cell))
    return atlas


# ─────────────────────── TextureRegistry ─────────────────────────
class TextureRegistry:
    """Single owner of texture surfaces, looked up by handle."""

    def __init__(self):
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, handle: str) -> bool:
        return handle in self._textures

    def __len__(self) -> int:
        return len(self._textures)

    def register(self, handle: str, surface: pygame.Surface) -> None:
        self._textures[handle] = surface

    def get(self, handle: str) -> pygame.Surface:
        try:
            return self._textures[handle]
        except KeyError:
            raise KeyError(f"unknown texture handle {handle!r}") from None

    def load_defaults(self, asset_dir: str = ASSET_DIR) -> None:
        """Register the player atlas plus flat bot and food textures."""
        self.register(TEX_PLAYER, self._load_player_atlas(asset_dir))
        self.register(TEX_BOT, solid_color(BOT_COL))
        self.register(TEX_FOOD, solid_color(FOOD_COL))

    def release(self) -> None:
        self._textures.clear()

    # ── Helpers ──────────────────────────────────────────────────
    @staticmethod
    def _load_player_atlas(asset_dir: str) -> pygame.Surface:
        path = os.path.join(asset_dir, PLAYER_ATLAS_FILE)
        if not os.path.isfile(path):
            logger.warning("Player atlas not found at '%s', using procedural atlas", path)
            return procedural_atlas()
        try:
            return pygame.image.load(path)
        except pygame.error as exc:
            logger.warning("Could not load player atlas '%s': %s", path, exc)
            return procedural_atlas()
