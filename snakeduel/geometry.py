"""
geometry.py — Grid state to drawable quads.

World space is centred on the origin with a fixed half-height; its width
follows the viewport aspect ratio. Each occupied cell becomes one quad
with four (position, uv) vertices and two triangles.

Quads carry texture *handles* only; the renderer resolves them through
the TextureRegistry.
"""

from collections import namedtuple

from .config import PROJECTION_HALF_HEIGHT, TEX_BOT, TEX_FOOD, TEX_PLAYER
from .model import Cell, GameState

Vertex = namedtuple("Vertex", "x y z u v")
UVRect = namedtuple("UVRect", "u0 v0 u1 v1")
Quad = namedtuple("Quad", "texture vertices indices")

QUAD_INDICES = (0, 1, 2, 0, 2, 3)

FULL_UV = UVRect(0.0, 0.0, 1.0, 1.0)
# Four horizontal quarters of the player atlas: head, then three body tiles.
PLAYER_UVS = (
    UVRect(0.0,  0.0, 0.25, 1.0),
    UVRect(0.25, 0.0, 0.5,  1.0),
    UVRect(0.5,  0.0, 0.75, 1.0),
    UVRect(0.75, 0.0, 1.0,  1.0),
)


def player_uv(index: int) -> UVRect:
    if index == 0:
        return PLAYER_UVS[0]
    return PLAYER_UVS[1 + (index - 1) % (len(PLAYER_UVS) - 1)]


def world_bounds(width: int, height: int) -> tuple[float, float, float, float]:
    """(min_x, min_y, world_w, world_h) for a viewport of the given pixel size."""
    aspect = width / height
    world_h = PROJECTION_HALF_HEIGHT * 2.0
    world_w = world_h * aspect
    return -world_w / 2.0, -world_h / 2.0, world_w, world_h


def build_quads(state: GameState, width: int, height: int) -> list[Quad]:
    """
    Pure function: the ordered quad list for `state` in a viewport of
    `width` x `height` pixels. Player first, then bot, then food.
    Caller guarantees a strictly positive viewport.
    """
    min_x, min_y, world_w, world_h = world_bounds(width, height)
    cell_w = world_w / state.grid_w
    cell_h = world_h / state.grid_h
    half_w = cell_w / 2.0
    half_h = cell_h / 2.0

    def quad(cell: Cell, texture: str, uv: UVRect) -> Quad:
        cx = min_x + (cell[0] + 0.5) * cell_w
        cy = min_y + (cell[1] + 0.5) * cell_h
        vertices = (
            Vertex(cx + half_w, cy + half_h, 0.0, uv.u0, uv.v0),
            Vertex(cx - half_w, cy + half_h, 0.0, uv.u1, uv.v0),
            Vertex(cx - half_w, cy - half_h, 0.0, uv.u1, uv.v1),
            Vertex(cx + half_w, cy - half_h, 0.0, uv.u0, uv.v1),
        )
        return Quad(texture, vertices, QUAD_INDICES)

    quads = [quad(cell, TEX_PLAYER, player_uv(i)) for i, cell in enumerate(state.player.body)]
    quads.extend(quad(cell, TEX_BOT, FULL_UV) for cell in state.bot.body)
    quads.extend(quad(cell, TEX_FOOD, FULL_UV) for cell in state.food)
    return quads


class GeometryBuilder:
    """Holds the last built quads; rebuilds only when the state is dirty."""

    def __init__(self):
        self.quads: list[Quad] = []

    def rebuild(self, state: GameState, width: int, height: int) -> bool:
        """Returns True if the quads were rebuilt."""
        if not state.dirty:
            return False
        if width <= 0 or height <= 0:
            return False
        self.quads = build_quads(state, width, height)
        state.dirty = False
        return True
