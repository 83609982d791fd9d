import pygame
import pytest

from conftest import make_state, place
from snakeduel.assets import TextureRegistry, solid_color
from snakeduel.config import BG, TEX_BOT, TEX_FOOD, TEX_PLAYER
from snakeduel.geometry import build_quads
from snakeduel.view import GameView

HEAD = (255, 0, 0)
BODY = [(0, 255, 0), (0, 0, 255), (255, 255, 0)]
FOOD = (255, 0, 255)


@pytest.fixture
def screen():
    pygame.display.init()
    surface = pygame.display.set_mode((100, 100))
    yield surface
    pygame.display.quit()


@pytest.fixture
def textures():
    atlas = pygame.Surface((4, 1))
    for i, color in enumerate([HEAD] + BODY):
        atlas.set_at((i, 0), color)
    registry = TextureRegistry()
    registry.register(TEX_PLAYER, atlas)
    registry.register(TEX_BOT, solid_color((0, 255, 255)))
    registry.register(TEX_FOOD, solid_color(FOOD))
    return registry


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def shown(surface, color):
    """`color` as the display format stores it."""
    return tuple(surface.unmap_rgb(surface.map_rgb(color)))[:3]


def test_draws_cells_where_the_grid_says(screen, textures):
    state = make_state(4, 4, bot_enabled=False)
    place(state, player=[(0, 0), (1, 0)], food=[(3, 3)])
    GameView(screen, textures).render(build_quads(state, 100, 100), 100, 100)

    # Grid y grows upward, so row 0 is the bottom of the window.
    assert rgb(screen, (12, 87)) == shown(screen, HEAD)
    assert rgb(screen, (37, 87)) == shown(screen, BODY[0])
    assert rgb(screen, (87, 12)) == shown(screen, FOOD)
    assert rgb(screen, (60, 40)) == shown(screen, BG)


def test_invalid_viewport_draws_background_only(screen, textures):
    state = make_state(4, 4, bot_enabled=False)
    quads = build_quads(state, 100, 100)
    GameView(screen, textures).render(quads, 0, 0)
    assert rgb(screen, (62, 37)) == shown(screen, BG)
