"""
model.py — Model layer.

Owns the canonical game state. Zero rendering, zero input handling,
zero movement rules (those live in engine.py).

Classes:
    Direction   — immutable (dx, dy) value object in world space
    Heading     — current + pending heading record for one snake
    Snake       — ordered body cells, head first
    GameState   — grid, both snakes, food, tick accumulator, dirty flag
"""

from collections import deque

from .config import GameConfig

Cell = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction. World Y points up."""
    UP    = None  # filled below after class definition
    DOWN  = None
    LEFT  = None
    RIGHT = None

    def __init__(self, name: str, x: int, y: int):
        self.name = name
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}"


Direction.UP    = Direction("UP",     0,  1)
Direction.DOWN  = Direction("DOWN",   0, -1)
Direction.LEFT  = Direction("LEFT",  -1,  0)
Direction.RIGHT = Direction("RIGHT",  1,  0)
# Enumeration order; the bot breaks distance ties by it.
ALL_DIRS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


# ──────────────────────────── Heading ────────────────────────────
class Heading:
    """Where a snake is going now, and where it has been asked to go next."""

    def __init__(self, start: Direction):
        self.current: Direction = start
        self.pending: Direction = start

    def commit(self, length: int) -> Direction:
        """
        Move the pending heading into current, unless it would reverse a
        snake longer than one segment. Pending is cleared either way.
        """
        if not self.pending.is_opposite(self.current) or length <= 1:
            self.current = self.pending
        self.pending = self.current
        return self.current

    def __repr__(self):
        return f"Heading(current={self.current!r}, pending={self.pending!r})"


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for one snake (player or bot).
    An empty body means the snake is disabled.
    """

    def __init__(self, cells, start_dir: Direction):
        self.body: deque[Cell] = deque(cells)
        self.heading = Heading(start_dir)

    def __len__(self) -> int:
        return len(self.body)

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    # ── Commands ─────────────────────────────────────────────────
    def push_head(self, cell: Cell) -> None:
        self.body.appendleft(cell)

    def drop_tail(self) -> Cell:
        return self.body.pop()

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: Cell) -> bool:
        return cell in self.body


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """
    Top-level model. The engine mutates it once per tick; reset()
    replaces every field with the session-start configuration.
    """

    def __init__(self, config: GameConfig | None = None):
        self.config: GameConfig = config or GameConfig()
        self.resets: int = 0
        self.player: Snake = None
        self.bot: Snake = None
        self.food: list[Cell] = []
        self.tick_accumulator: float = 0.0
        self.dirty: bool = True
        self.reset()

    # ── Grid ─────────────────────────────────────────────────────
    @property
    def grid_w(self) -> int:
        return self.config.grid_w

    @property
    def grid_h(self) -> int:
        return self.config.grid_h

    @property
    def tick_interval(self) -> float:
        return self.config.tick_interval

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_w and 0 <= y < self.grid_h

    def next_cell(self, cell: Cell, direction: Direction) -> Cell | None:
        """
        Step one cell. With wrap enabled coordinates are taken modulo the
        grid; otherwise leaving the grid returns None.
        """
        nx, ny = cell[0] + direction.x, cell[1] + direction.y
        if self.config.wrap:
            return nx % self.grid_w, ny % self.grid_h
        if not self.in_bounds((nx, ny)):
            return None
        return nx, ny

    def distance(self, a: Cell, b: Cell) -> int:
        """Manhattan distance, measured around the torus when wrapping."""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if self.config.wrap:
            dx = min(dx, self.grid_w - dx)
            dy = min(dy, self.grid_h - dy)
        return dx + dy

    # ── Occupancy ────────────────────────────────────────────────
    def occupied(self) -> set[Cell]:
        return set(self.player.body) | set(self.bot.body)

    def eat(self, cell: Cell) -> bool:
        """Remove the food at `cell`. Returns True if there was any."""
        if cell in self.food:
            self.food.remove(cell)
            return True
        return False

    # ── Lifecycle ────────────────────────────────────────────────
    def reset(self) -> None:
        """Restore the session-start snakes and headings; food is emptied."""
        w, h = self.grid_w, self.grid_h
        cx, cy = w // 2, h // 2
        self.player = Snake(
            [(cx % w, cy), ((cx - 1) % w, cy), ((cx - 2) % w, cy)],
            Direction.RIGHT,
        )
        if self.config.bot_enabled:
            by = (cy + 3) % h
            bot_cells = [(cx % w, by), ((cx + 1) % w, by), ((cx + 2) % w, by)]
        else:
            bot_cells = []
        self.bot = Snake(bot_cells, Direction.LEFT)
        self.food = []
        self.tick_accumulator = 0.0
        self.dirty = True
