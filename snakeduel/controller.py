"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard, mouse and touch events into director events.
  - Drive the frame: feed the session a monotonic timestamp and the
    window size, then ask the view to render the resulting quads.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Engine's job).

The controller is the only layer that reads pygame events.
"""

import logging
import sys
import time

import pygame

from .assets import TextureRegistry
from .config import CAPTION, DIFFICULTIES, FPS, HEIGHT, WIDTH, GameConfig
from .director import Key, PointerAction, PointerEvent
from .session import GameSession
from .view import GameView

logger = logging.getLogger(__name__)

_KEY_MAP = {
    pygame.K_UP:     Key.UP,
    pygame.K_w:      Key.UP,
    pygame.K_DOWN:   Key.DOWN,
    pygame.K_s:      Key.DOWN,
    pygame.K_LEFT:   Key.LEFT,
    pygame.K_a:      Key.LEFT,
    pygame.K_RIGHT:  Key.RIGHT,
    pygame.K_d:      Key.RIGHT,
    pygame.K_RETURN: Key.RESET,
    pygame.K_SPACE:  Key.RESET,
}

_DIFFICULTY_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
}


class GameController:
    """
    Owns the main loop.
    Glues Session <-> View without them knowing about each other.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(CAPTION)
        self._caption = CAPTION
        self.clock = pygame.time.Clock()
        self.textures = TextureRegistry()
        self.textures.load_defaults()
        self.seed = seed
        self.session = GameSession(config, seed=seed)
        self.view = GameView(self.screen, self.textures)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            width, height = self.screen.get_size()
            self.session.frame(time.monotonic(), width, height)
            self.view.render(self.session.quads, width, height)
            self._update_caption()

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self._dispatch(event)

    def _dispatch(self, event) -> None:
        if event.type == pygame.QUIT:
            self._quit()
        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            # Touches also arrive as FINGER* events.
            if not getattr(event, "touch", False):
                self._handle_mouse(event)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION):
            self._handle_finger(event)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pointer(PointerAction.CANCEL, [(0, 0)])

    def _handle_mouse(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer(PointerAction.PRESS, [event.pos])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer(PointerAction.RELEASE, [event.pos])
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self._pointer(PointerAction.MOVE, [event.pos])

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()
        elif key in _KEY_MAP:
            self.session.handle_key(_KEY_MAP[key])
        elif key in _DIFFICULTY_KEYS:
            self._set_difficulty(_DIFFICULTY_KEYS[key])

    def _handle_finger(self, event) -> None:
        # Finger coordinates are normalised to 0..1.
        width, height = self.screen.get_size()
        pos = (event.x * width, event.y * height)
        action = {
            pygame.FINGERDOWN:   PointerAction.PRESS,
            pygame.FINGERUP:     PointerAction.RELEASE,
            pygame.FINGERMOTION: PointerAction.MOVE,
        }[event.type]
        self._pointer(action, [pos])

    def _pointer(self, action: PointerAction, positions: list) -> None:
        self.session.handle_pointer(PointerEvent(action, positions, 0))

    # ── Difficulty ────────────────────────────────────────────────
    def _set_difficulty(self, level: int) -> None:
        """Start a fresh session with the preset's tick rate and bot accuracy."""
        config = self.session.config.with_difficulty(level)
        logger.debug("Difficulty set to %s", DIFFICULTIES[level]["label"])
        self.session = GameSession(config, seed=self.seed)

    # ── Utilities ─────────────────────────────────────────────────
    def _update_caption(self) -> None:
        state = self.session.state
        caption = f"{CAPTION}  |  YOU {len(state.player)}"
        if state.config.bot_enabled:
            caption += f"  BOT {len(state.bot)}"
        if caption != self._caption:
            self._caption = caption
            pygame.display.set_caption(caption)

    def _quit(self) -> None:
        self.textures.release()
        pygame.quit()
        sys.exit()
