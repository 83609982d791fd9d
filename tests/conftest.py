import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snakeduel.ai_brain import BotController
from snakeduel.config import GameConfig
from snakeduel.engine import MovementEngine
from snakeduel.food import FoodSpawner
from snakeduel.model import Direction, GameState, Snake


def make_state(width=10, height=10, **overrides) -> GameState:
    return GameState(GameConfig(grid_w=width, grid_h=height, **overrides))


def place(state, player=None, player_dir=None, bot=None, bot_dir=None, food=None):
    """Overwrite parts of a state to stage a scenario."""
    if player is not None:
        state.player = Snake(player, player_dir or Direction.RIGHT)
    if bot is not None:
        state.bot = Snake(bot, bot_dir or Direction.LEFT)
    if food is not None:
        state.food = list(food)
    return state


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state():
    return make_state()


@pytest.fixture
def engine(state, rng):
    return MovementEngine(state, FoodSpawner(rng, state.config.target_food), BotController(rng))
