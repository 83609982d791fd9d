"""
main.py — Entry point.

Run with:
    python main.py [--classic] [--width 40 --height 30] [--seed 7] [-v]

Requires:
    pip install pygame
"""

import argparse
import logging

from snakeduel.config import (
    DIFFICULTIES, GRID_H, GRID_W, MAX_TICKS_PER_FRAME, TARGET_FOOD, TICK_INTERVAL,
    GameConfig,
)
from snakeduel.controller import GameController


def build_config(args: argparse.Namespace) -> GameConfig:
    params = {
        "grid_w": args.width,
        "grid_h": args.height,
        "tick_interval": args.tick,
        "max_ticks_per_frame": args.max_catchup or None,
    }
    if args.classic:
        config = GameConfig.classic(**params)
    else:
        config = GameConfig(
            target_food=args.food,
            wrap=not args.no_wrap,
            bot_enabled=not args.no_bot,
            **params,
        )
    if args.difficulty is not None:
        config = config.with_difficulty(args.difficulty)
    return config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Player vs bot snake on a wrap-around grid.")
    parser.add_argument("--width", type=int, default=GRID_W, help="grid columns")
    parser.add_argument("--height", type=int, default=GRID_H, help="grid rows")
    parser.add_argument("--tick", type=float, default=TICK_INTERVAL,
                        help="seconds per simulation tick")
    parser.add_argument("--food", type=int, default=TARGET_FOOD,
                        help="food pellets kept on the grid")
    parser.add_argument("--seed", type=int, default=None,
                        help="fix the random seed (default: from OS entropy)")
    parser.add_argument("--classic", action="store_true",
                        help="single snake, single food, walls end the round")
    parser.add_argument("--no-wrap", action="store_true", help="walls instead of wrap-around")
    parser.add_argument("--no-bot", action="store_true", help="play without the bot snake")
    parser.add_argument("--difficulty", type=int, choices=sorted(DIFFICULTIES), default=None)
    parser.add_argument("--max-catchup", type=int, default=MAX_TICKS_PER_FRAME,
                        help="max ticks per frame after a stall (0 = unbounded)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(f"invalid configuration: {exc}")
    GameController(config, seed=args.seed).run()


if __name__ == "__main__":
    main()
