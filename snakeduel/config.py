"""
config.py — Shared constants and tunables for the entire application.
No game logic, no imports from internal modules.
"""

from dataclasses import dataclass, replace

# ── Grid & timing ─────────────────────────────────────────────────
GRID_W, GRID_H      = 100, 100
TICK_INTERVAL       = 0.2        # simulated seconds per tick
TARGET_FOOD         = 3
MAX_TICKS_PER_FRAME = 5          # catch-up cap; None = unbounded

# ── Input ─────────────────────────────────────────────────────────
TAP_THRESHOLD = 16.0             # screen units; smaller gestures are taps

# ── World projection ──────────────────────────────────────────────
PROJECTION_HALF_HEIGHT = 2.0     # world spans -2..2 vertically

# ── Window ────────────────────────────────────────────────────────
WIDTH, HEIGHT = 720, 720
FPS           = 60
CAPTION       = "SNAKE DUEL — Player vs Bot"

# ── Textures ──────────────────────────────────────────────────────
TEX_PLAYER = "player"
TEX_BOT    = "bot"
TEX_FOOD   = "food"

PLAYER_ATLAS_FILE = "snake.png"
ATLAS_CELL        = 16           # px per quarter in the procedural atlas

BG         = (100, 149, 237)
PLAYER_COL = (0x4C, 0xAF, 0x50)
PLAYER_DIM = (0x2E, 0x6B, 0x31)
BOT_COL    = (0x21, 0x96, 0xF3)
FOOD_COL   = (0xFF, 0x57, 0x22)

# ── Difficulty presets ────────────────────────────────────────────
DIFFICULTIES = {
    1: {"label": "EASY",   "tick": 0.25, "mistake": 0.30},
    2: {"label": "NORMAL", "tick": 0.20, "mistake": 0.12},
    3: {"label": "HARD",   "tick": 0.12, "mistake": 0.04},
    4: {"label": "INSANE", "tick": 0.08, "mistake": 0.00},
}


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a session. Immutable once the session starts."""
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    tick_interval: float = TICK_INTERVAL
    target_food: int = TARGET_FOOD
    tap_threshold: float = TAP_THRESHOLD
    wrap: bool = True
    bot_enabled: bool = True
    max_ticks_per_frame: int | None = MAX_TICKS_PER_FRAME
    bot_mistake_chance: float = 0.0

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        # Start layout: three cells in a row, bot three rows above the player.
        if self.grid_w < 3:
            raise ValueError(f"grid_w must be >= 3 to fit the start snake, got {self.grid_w}")
        if self.bot_enabled and self.grid_h < 4:
            raise ValueError(
                f"grid_h must be >= 4 to fit both start snakes, got {self.grid_h}"
            )
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.target_food < 0:
            raise ValueError(f"target_food must be >= 0, got {self.target_food}")
        if self.tap_threshold < 0:
            raise ValueError(f"tap_threshold must be >= 0, got {self.tap_threshold}")
        if self.max_ticks_per_frame is not None and self.max_ticks_per_frame <= 0:
            raise ValueError(
                f"max_ticks_per_frame must be positive or None, got {self.max_ticks_per_frame}"
            )
        if not 0.0 <= self.bot_mistake_chance <= 1.0:
            raise ValueError(
                f"bot_mistake_chance must be within [0, 1], got {self.bot_mistake_chance}"
            )

    @classmethod
    def classic(cls, **overrides) -> "GameConfig":
        """Single snake, single food, walls end the round."""
        params = {"wrap": False, "bot_enabled": False, "target_food": 1}
        params.update(overrides)
        return cls(**params)

    def with_difficulty(self, level: int) -> "GameConfig":
        if level not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty level {level}")
        preset = DIFFICULTIES[level]
        return replace(
            self,
            tick_interval=preset["tick"],
            bot_mistake_chance=preset["mistake"],
        )
