"""
Game driver.

Owns the config, the playfield bounds, the session, the screen stack and
the collaborators (sound, renderer, scheduler, random source), and
dispatches each fixed-rate tick to the active screen.
"""

from __future__ import annotations

import random
from typing import Any, Callable

from mini_arcade_core.utils import logger

from invaders_core.clock import TickScheduler
from invaders_core.config import Config
from invaders_core.constants import FIRE_KEY, START_LIVES, Key
from invaders_core.errors import GameStateError
from invaders_core.geometry import GameBounds
from invaders_core.render import Renderer
from invaders_core.scenes import (
    GameOverScreen,
    LevelIntroScreen,
    PauseScreen,
    PlayScreen,
    WelcomeScreen,
)
from invaders_core.session import Session
from invaders_core.sound import SilentSoundSystem, SoundSystem
from invaders_core.state_stack import StateStack, call_hook


class Game:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """
    Space Invaders game.

    Call ``initialise`` with the canvas size, then ``start``. Input goes in
    through ``key_down``/``key_up`` (or the touch helpers) and the
    scheduler calls ``tick`` ``config.fps`` times per second.

    Usage:
        game = Game(renderer=renderer, sounds=sounds, scheduler=scheduler)
        game.initialise(800, 600)
        game.start()
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        config: Config | None = None,
        *,
        renderer: Renderer | None = None,
        sounds: SoundSystem | None = None,
        scheduler: TickScheduler | None = None,
        rng: random.Random | None = None,
        after_tick: Callable[[], None] | None = None,
    ):
        self.config = config if config is not None else Config()
        self.renderer = renderer
        self.sounds: SoundSystem = sounds if sounds is not None else SilentSoundSystem()
        self.scheduler = scheduler
        self.rng = rng if rng is not None else random.Random()
        self.after_tick = after_tick

        self.width = 0.0
        self.height = 0.0
        self.bounds = GameBounds(0.0, 0.0, 0.0, 0.0)
        self.session = Session()
        self.states = StateStack(owner=self)
        self.pressed_keys: set[int] = set()

        self._initialised = False
        self._running = False
        self._previous_touch_x = 0.0

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def initialise(self, canvas_width: float, canvas_height: float) -> None:
        """
        Size the game to the canvas and center the playfield in it.

        :param canvas_width: Width of the canvas
        :type canvas_width: float

        :param canvas_height: Height of the canvas
        :type canvas_height: float
        """
        self.width = canvas_width
        self.height = canvas_height
        self.bounds = GameBounds.centered(
            canvas_width,
            canvas_height,
            self.config.game_width,
            self.config.game_height,
        )
        self._initialised = True
        logger.debug(f"Initialised {canvas_width}x{canvas_height}, bounds {self.bounds}")

    def configure(self, **changes: Any) -> None:
        """
        Change config fields before the game starts.

        :raise GameStateError: If the game is already running
        :raise ConfigError: If a value is invalid
        """
        if self._running:
            raise GameStateError("Cannot reconfigure a running game")
        self.config = self.config.with_changes(**changes)
        if self._initialised:
            self.initialise(self.width, self.height)

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """
        Show the welcome screen and start ticking.

        :raise GameStateError: If ``initialise`` has not been called
        """
        if not self._initialised:
            raise GameStateError("initialise() must be called before start()")

        self.states.move_to_state(WelcomeScreen())
        self.session.lives = START_LIVES

        self._running = True
        if self.scheduler is not None:
            self.scheduler.start(self.tick, self.config.fps)
        logger.info(f"Game started at {self.config.fps} ticks per second")

    def stop(self) -> None:
        if self.scheduler is not None:
            self.scheduler.stop()
        self._running = False
        logger.info("Game stopped")

    def tick(self) -> None:
        """
        Update then draw the active screen with a fixed dt.

        ``after_tick``, if given, runs last, e.g. to flip the display.
        """
        current = self.states.current_state()
        if current is None:
            return

        dt = self.config.dt
        call_hook(current, "update", self, dt)
        if self.renderer is not None:
            call_hook(current, "draw", self, dt, self.renderer)
        if self.after_tick is not None:
            self.after_tick()

    # =========================================================================
    # SCREEN TRANSITIONS
    # =========================================================================

    def current_state(self):
        return self.states.current_state()

    def move_to_state(self, screen) -> None:
        self.states.move_to_state(screen)

    def push_state(self, screen) -> None:
        self.states.push_state(screen)

    def pop_state(self) -> None:
        self.states.pop_state()

    def new_game(self) -> None:
        self.session.reset()

    def show_level_intro(self, level: int) -> None:
        self.move_to_state(LevelIntroScreen(level))

    def start_level(self, level: int) -> None:
        self.move_to_state(PlayScreen(self.config, level))

    def game_over(self) -> None:
        self.move_to_state(GameOverScreen())

    def pause(self) -> None:
        self.push_state(PauseScreen())

    def resume(self) -> None:
        self.pop_state()

    # =========================================================================
    # INPUT
    # =========================================================================

    def is_key_held(self, key_code: int) -> bool:
        return key_code in self.pressed_keys

    def key_down(self, key_code: int) -> None:
        self.pressed_keys.add(key_code)
        current = self.states.current_state()
        if current is not None:
            call_hook(current, "key_down", self, key_code)

    def key_up(self, key_code: int) -> None:
        self.pressed_keys.discard(key_code)
        current = self.states.current_state()
        if current is not None:
            call_hook(current, "key_up", self, key_code)

    def touch_start(self) -> None:
        """A touch acts like pressing fire once."""
        current = self.states.current_state()
        if current is not None:
            call_hook(current, "key_down", self, FIRE_KEY)

    def touch_move(self, x: float) -> None:
        """
        Steer the ship by dragging: moving right holds RIGHT, left holds LEFT.

        :param x: Horizontal touch position
        :type x: float
        """
        if self._previous_touch_x > 0:
            if x > self._previous_touch_x:
                self.pressed_keys.discard(Key.LEFT)
                self.pressed_keys.add(Key.RIGHT)
            else:
                self.pressed_keys.discard(Key.RIGHT)
                self.pressed_keys.add(Key.LEFT)
        self._previous_touch_x = x

    def touch_end(self) -> None:
        self.pressed_keys.discard(Key.RIGHT)
        self.pressed_keys.discard(Key.LEFT)

    # =========================================================================
    # SOUND
    # =========================================================================

    def mute(self, mute: bool | None = None) -> None:
        """
        Mute, unmute, or toggle when called without argument.

        :param mute: True to mute, False to unmute, None to toggle
        :type mute: bool | None
        """
        if mute is None:
            mute = not self.sounds.muted
        self.sounds.set_mute(mute)
        logger.debug(f"Sound {'muted' if mute else 'unmuted'}")

    def play_sound(self, name: str) -> None:
        self.sounds.play_sound(name)
