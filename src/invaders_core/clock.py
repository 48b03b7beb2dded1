"""
Fixed-rate tick scheduling.
"""

from __future__ import annotations

from typing import Callable, Protocol

import pygame
from mini_arcade_core.utils import logger


class TickScheduler(Protocol):
    def start(self, callback: Callable[[], None], rate: float) -> None: ...

    def stop(self) -> None: ...


class PygameTickScheduler:
    """
    Calls ``callback`` ``rate`` times per second from a blocking loop.

    Late ticks simply run late; nothing is skipped or caught up.
    """

    def __init__(self):
        self._clock = pygame.time.Clock()
        self._callback: Callable[[], None] | None = None
        self._rate = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, callback: Callable[[], None], rate: float) -> None:
        self._callback = callback
        self._rate = rate
        self._running = True
        logger.debug(f"Tick loop scheduled at {rate} Hz")

    def stop(self) -> None:
        self._running = False

    def run(self, pump: Callable[[], None] | None = None) -> None:
        """
        Run until ``stop`` is called.

        :param pump: Called before every tick, e.g. to process window events
        :type pump: Callable[[], None] | None
        """
        while self._running:
            self._clock.tick(self._rate)
            if pump is not None:
                pump()
            if self._running and self._callback is not None:
                self._callback()
