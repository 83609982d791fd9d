"""
view.py — View layer.

Draws the quad list produced by geometry.py onto a pygame surface.
It reads quads and textures only and never touches game state.

Public API:
    GameView(screen, textures)          — bind to a surface and a TextureRegistry
    view.render(quads, width, height)   — draw the current frame
"""

import pygame

from .assets import TextureRegistry
from .config import BG
from .geometry import Quad, world_bounds


class GameView:
    """Renders textured world-space quads with an orthographic projection."""

    def __init__(self, screen: pygame.Surface, textures: TextureRegistry):
        self.screen = screen
        self.textures = textures
        self._viewport: tuple[int, int] = (0, 0)
        self._projection: tuple[float, float, float, float] | None = None
        self._tile_cache: dict = {}

    # ── Main entry ───────────────────────────────────────────────
    def render(self, quads: list[Quad], width: int, height: int) -> None:
        self._update_projection(width, height)
        self.screen.fill(BG)
        if self._projection is not None:
            for quad in quads:
                self._draw_quad(quad)
        pygame.display.flip()

    # ── Projection ───────────────────────────────────────────────
    def _update_projection(self, width: int, height: int) -> None:
        """Recompute only when the viewport changes and is valid."""
        if (width, height) == self._viewport:
            return
        if width <= 0 or height <= 0:
            return
        self._viewport = (width, height)
        self._projection = world_bounds(width, height)
        self._tile_cache.clear()

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        min_x, min_y, world_w, world_h = self._projection
        width, height = self._viewport
        sx = (x - min_x) / world_w * width
        sy = height - (y - min_y) / world_h * height
        return sx, sy

    # ── Quads ────────────────────────────────────────────────────
    def _draw_quad(self, quad: Quad) -> None:
        verts = quad.vertices
        left_v   = min(verts, key=lambda v: v.x)
        right_v  = max(verts, key=lambda v: v.x)
        top_v    = max(verts, key=lambda v: v.y)
        bottom_v = min(verts, key=lambda v: v.y)

        x0, y0 = self.world_to_screen(left_v.x, top_v.y)
        x1, y1 = self.world_to_screen(right_v.x, bottom_v.y)
        rect = pygame.Rect(round(x0), round(y0), max(1, round(x1) - round(x0)),
                           max(1, round(y1) - round(y0)))

        uv = (left_v.u, top_v.v, right_v.u, bottom_v.v)
        tile = self._tile(quad.texture, uv, rect.size)
        self.screen.blit(tile, rect)

    def _tile(self, handle: str, uv: tuple, size: tuple[int, int]) -> pygame.Surface:
        """The texture region under `uv`, oriented and scaled to `size`."""
        key = (handle, uv, size)
        tile = self._tile_cache.get(key)
        if tile is not None:
            return tile

        texture = self.textures.get(handle)
        tw, th = texture.get_size()
        u_left, v_top, u_right, v_bottom = uv
        u_lo, u_hi = sorted((u_left, u_right))
        v_lo, v_hi = sorted((v_top, v_bottom))
        px0, px1 = int(u_lo * tw), max(int(u_lo * tw) + 1, int(u_hi * tw))
        py0, py1 = int(v_lo * th), max(int(v_lo * th) + 1, int(v_hi * th))
        region = texture.subsurface(pygame.Rect(px0, py0, min(px1, tw) - px0, min(py1, th) - py0))

        region = pygame.transform.flip(region, u_left > u_right, v_top > v_bottom)
        tile = pygame.transform.scale(region, size)
        self._tile_cache[key] = tile
        return tile
