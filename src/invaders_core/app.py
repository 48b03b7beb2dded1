"""
Desktop front end: a pygame window driving the game core.
"""

from __future__ import annotations

import pygame
from mini_arcade_core.utils import logger

from invaders_core.clock import PygameTickScheduler
from invaders_core.config import Config
from invaders_core.constants import WINDOW_SIZE, Key
from invaders_core.game import Game
from invaders_core.render import PygameRenderer
from invaders_core.sound import PygameSoundSystem, SilentSoundSystem
from invaders_core.utils import configure_logging

KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_p: Key.P,
}


class SpaceInvadersApp:
    """
    Owns the window and routes pygame events into ``Game``.
    """

    def __init__(
        self,
        config: Config,
        window_size: tuple[int, int] = WINDOW_SIZE,
        audio: bool = True,
    ):
        pygame.init()
        width, height = window_size
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Space Invaders")

        self.renderer = PygameRenderer(self._screen)
        self.scheduler = PygameTickScheduler()
        self.game = Game(
            config,
            renderer=self.renderer,
            sounds=PygameSoundSystem() if audio else SilentSoundSystem(),
            scheduler=self.scheduler,
            after_tick=self.renderer.present,
        )
        self.game.initialise(width, height)

    def handle_events(self) -> None:
        """
        Translate window events into game input.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self.game.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.game.stop()
                elif event.key == pygame.K_m:
                    self.game.mute()
                elif event.key in KEY_MAP:
                    self.game.key_down(KEY_MAP[event.key])
            elif event.type == pygame.KEYUP:
                if event.key in KEY_MAP:
                    self.game.key_up(KEY_MAP[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.game.touch_start()
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self.game.touch_move(event.pos[0])
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.game.touch_end()

    def run(self) -> None:
        """
        Run the game until the window is closed.
        """
        logger.info("Starting Space Invaders...")
        self.game.start()
        try:
            self.scheduler.run(pump=self.handle_events)
        finally:
            pygame.quit()


def run(config: Config | None = None, audio: bool = True) -> None:
    """
    Main entry point for Space Invaders.
    """
    config = config if config is not None else Config()
    configure_logging(config.debug_mode)
    SpaceInvadersApp(config, audio=audio).run()


if __name__ == "__main__":
    run()
