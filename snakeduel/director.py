"""
director.py — Player input debouncing.

Turns key presses and pointer gestures into at most one pending heading
per tick. Knows nothing about pygame; the controller translates raw
events into the small value types below.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable

from .model import Direction, GameState

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESET = "reset"


class PointerAction(enum.Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"
    CANCEL = "cancel"


@dataclass
class PointerEvent:
    """One pointer event: the acting pointer is `pointers[index]`."""
    action: PointerAction
    pointers: list = field(default_factory=list)   # [(x, y), ...] in pixels
    index: int = 0


_KEY_DIRS = {
    Key.UP:    Direction.UP,
    Key.DOWN:  Direction.DOWN,
    Key.LEFT:  Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class InputDirector:
    """Writes the player's pending heading; the engine consumes it each tick."""

    def __init__(
        self,
        state: GameState,
        tap_threshold: float,
        on_reset: Callable[[], None] | None = None,
    ):
        self.state = state
        self.tap_threshold = tap_threshold
        self.on_reset = on_reset
        self.viewport: tuple[int, int] = (0, 0)
        self._touch_active = False
        self._touch_start = (0.0, 0.0)

    # ── Headings ─────────────────────────────────────────────────
    def queue_direction(self, direction: Direction) -> None:
        """Queue a heading change (ignored if it would reverse the snake)."""
        player = self.state.player
        if not direction.is_opposite(player.heading.current) or len(player) <= 1:
            player.heading.pending = direction

    def gesture_direction(self, start, end, width: int, height: int) -> Direction:
        """
        Direction of a swipe from `start` to `end` in screen pixels.
        A gesture shorter than the tap threshold on both axes is a tap,
        read as the vector from the viewport centre to the release point.
        """
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        if abs(dx) < self.tap_threshold and abs(dy) < self.tap_threshold:
            if width > 0 and height > 0:
                dx = end[0] - width / 2
                dy = end[1] - height / 2

        if abs(dx) > abs(dy):
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        # Screen y grows downward.
        return Direction.DOWN if dy > 0 else Direction.UP

    # ── Raw events ───────────────────────────────────────────────
    def on_pointer(self, event: PointerEvent) -> None:
        if not event.pointers:
            return
        index = min(max(event.index, 0), len(event.pointers) - 1)
        x, y = event.pointers[index]

        if event.action is PointerAction.PRESS:
            self._touch_active = True
            self._touch_start = (x, y)
        elif event.action is PointerAction.RELEASE:
            if self._touch_active:
                width, height = self.viewport
                self.queue_direction(
                    self.gesture_direction(self._touch_start, (x, y), width, height)
                )
                self._touch_active = False
        elif event.action is PointerAction.CANCEL:
            self._touch_active = False

    def on_key(self, key: Key) -> None:
        if key is Key.RESET:
            logger.debug("Reset requested from input")
            if self.on_reset is not None:
                self.on_reset()
            return
        self.queue_direction(_KEY_DIRS[key])
