import random

import pytest

from conftest import make_state, place
from snakeduel.ai_brain import BotController
from snakeduel.config import GameConfig
from snakeduel.engine import MovementEngine
from snakeduel.food import FoodSpawner
from snakeduel.model import Direction, GameState

INITIAL_PLAYER = [(5, 5), (4, 5), (3, 5)]
INITIAL_BOT = [(5, 8), (6, 8), (7, 8)]


def make_engine(state, seed=0):
    rng = random.Random(seed)
    return MovementEngine(state, FoodSpawner(rng, state.config.target_food), BotController(rng))


def test_basic_tick(engine, state):
    place(state, food=[(9, 5)])
    state.dirty = False

    engine.step()

    assert list(state.player.body) == [(6, 5), (5, 5), (4, 5)]
    # Bot heads Down, the closest safe cell to (9, 5) around the torus.
    assert list(state.bot.body) == [(5, 7), (5, 8), (6, 8)]
    assert state.food == [(9, 5)]
    assert state.dirty
    assert state.resets == 0


def test_player_wraps_across_edge():
    state = make_state(bot_enabled=False)
    place(state, player=[(9, 4), (8, 4), (7, 4)], food=[(0, 0)])
    make_engine(state).step()
    assert state.player.head == (0, 4)


def test_player_grows_on_food():
    state = make_state(bot_enabled=False, target_food=1)
    place(state, food=[(6, 5)])
    make_engine(state).step()

    assert list(state.player.body) == [(6, 5)] + INITIAL_PLAYER
    assert len(state.food) == 1
    assert state.food[0] not in state.player.body


def test_bot_grows_on_food():
    state = make_state()
    place(state, food=[(4, 8)])
    make_engine(state).step()

    assert list(state.bot.body) == [(4, 8)] + INITIAL_BOT
    assert len(state.player) == 3
    assert len(state.food) == 3


def test_pending_heading_is_committed():
    state = make_state(bot_enabled=False)
    state.player.heading.pending = Direction.UP
    make_engine(state).step()
    assert state.player.head == (5, 6)
    assert state.player.heading.current == Direction.UP


def test_pending_reversal_is_ignored():
    state = make_state(bot_enabled=False)
    state.player.heading.pending = Direction.LEFT
    make_engine(state).step()
    assert state.player.head == (6, 5)
    assert state.player.heading.current == Direction.RIGHT


def test_single_segment_may_reverse():
    state = make_state(bot_enabled=False)
    place(state, player=[(5, 5)], player_dir=Direction.RIGHT, food=[(0, 0)])
    state.player.heading.pending = Direction.LEFT
    make_engine(state).step()
    assert list(state.player.body) == [(4, 5)]


def test_self_collision_resets():
    state = make_state(bot_enabled=False)
    place(state, player=[(5, 5), (5, 6), (4, 6), (4, 5), (4, 4)], player_dir=Direction.LEFT)
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.player.body) == INITIAL_PLAYER


def test_head_to_head_resets_both_snakes():
    state = make_state()
    place(
        state,
        bot=[(6, 6), (6, 7), (6, 8)], bot_dir=Direction.DOWN,
        food=[(6, 4)],
    )
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.player.body) == INITIAL_PLAYER
    assert list(state.bot.body) == INITIAL_BOT
    assert state.player.heading.current == Direction.RIGHT
    assert state.bot.heading.current == Direction.LEFT
    assert state.tick_accumulator == 0.0


def test_boxed_in_bot_hits_unmoved_player():
    state = make_state()
    place(
        state,
        player=[(4, 5), (5, 5), (5, 6), (5, 7), (4, 7)], player_dir=Direction.LEFT,
        bot=[(4, 6), (3, 6), (2, 6)], bot_dir=Direction.RIGHT,
        food=[(0, 0)],
    )
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.bot.body) == INITIAL_BOT


def test_player_hits_tail_the_bot_is_about_to_drop():
    state = make_state()
    place(
        state,
        bot=[(6, 7), (6, 6), (6, 5)], bot_dir=Direction.UP,
        food=[(6, 9)],
    )
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.player.body) == INITIAL_PLAYER


def test_bot_hits_tail_the_player_is_about_to_drop():
    state = make_state()
    # Left is the player, Right is the bot's own body, Up would reverse:
    # the bot keeps heading Down into the player's current tail.
    place(
        state,
        player=[(2, 6), (2, 5), (3, 5)], player_dir=Direction.UP,
        bot=[(3, 6), (3, 7), (4, 7), (4, 6)], bot_dir=Direction.DOWN,
        food=[(0, 0)],
    )
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.bot.body) == INITIAL_BOT


def test_wall_ends_round_without_wrap():
    state = GameState(GameConfig.classic(grid_w=10, grid_h=10))
    place(state, player=[(9, 5), (8, 5), (7, 5)], food=[(0, 0)])
    make_engine(state).step()

    assert state.resets == 1
    assert list(state.player.body) == INITIAL_PLAYER
    assert len(state.bot) == 0


def test_full_grid_resets():
    state = GameState(GameConfig(grid_w=4, grid_h=1, bot_enabled=False, target_food=1))
    engine = make_engine(state)
    engine.spawner.spawn(state)
    assert state.food == [(3, 0)]

    engine.step()

    assert state.resets == 1
    assert list(state.player.body) == [(2, 0), (1, 0), (0, 0)]
    assert state.food == [(3, 0)]


# ── update() ──────────────────────────────────────────────────────

def _quiet_state(**overrides):
    params = {"tick_interval": 0.25, "bot_enabled": False}
    params.update(overrides)
    return make_state(30, 30, **params)


def test_update_runs_whole_ticks():
    state = _quiet_state()
    engine = make_engine(state)
    assert engine.update(0.6) == 2
    assert state.tick_accumulator == pytest.approx(0.1)
    assert engine.update(0.2) == 1


def test_update_caps_catch_up():
    state = _quiet_state(max_ticks_per_frame=3)
    engine = make_engine(state)
    assert engine.update(10.0) == 3
    assert state.tick_accumulator < state.tick_interval


def test_update_unbounded_when_cap_disabled():
    state = _quiet_state(max_ticks_per_frame=None)
    assert make_engine(state).update(1.0) == 4


def test_update_ignores_negative_delta():
    state = _quiet_state()
    assert make_engine(state).update(-1.0) == 0
    assert state.tick_accumulator == 0.0


# ── invariants over a long run ────────────────────────────────────

def test_invariants_hold_over_many_ticks():
    state = make_state(12, 12, target_food=5)
    engine = make_engine(state, seed=99)
    engine.spawner.spawn(state)
    rng = random.Random(5)

    for _ in range(500):
        before = (len(state.player), len(state.bot), state.resets)
        state.player.heading.pending = rng.choice(
            [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
        )
        engine.step()

        if state.resets == before[2]:
            assert len(state.player) - before[0] in (0, 1)
            assert len(state.bot) - before[1] in (0, 1)

        player, bot = list(state.player.body), list(state.bot.body)
        assert len(set(player)) == len(player)
        assert len(set(bot)) == len(bot)
        assert not set(player) & set(bot)
        assert len(set(state.food)) == len(state.food) <= 5
        assert not set(state.food) & (set(player) | set(bot))
