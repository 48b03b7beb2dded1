"""
Sound systems.

Sounds are fire-and-forget: a sound that failed to load, or any sound
while muted, is silently skipped when played.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Protocol

import pygame
from mini_arcade_core.utils import find_assets_root, logger


class SoundSystem(Protocol):
    muted: bool

    def init(self) -> None: ...

    def load_sound(self, name: str, data: bytes) -> None: ...

    def play_sound(self, name: str) -> None: ...

    def set_mute(self, mute: bool) -> None: ...


class SilentSoundSystem:
    """
    Sound system for headless runs; remembers names but never plays.
    """

    def __init__(self):
        self.muted = False
        self.loaded: set[str] = set()

    def init(self) -> None:
        pass

    def load_sound(self, name: str, data: bytes) -> None:
        self.loaded.add(name)

    def play_sound(self, name: str) -> None:
        pass

    def set_mute(self, mute: bool) -> None:
        self.muted = mute


class PygameSoundSystem:
    """
    Plays sounds through ``pygame.mixer``.
    """

    def __init__(self):
        self.muted = False
        self._ready = False
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}

    @property
    def ready(self) -> bool:
        return self._ready

    def init(self) -> None:
        """
        Initialise the mixer. Failure leaves the system silent.
        """
        if pygame.mixer.get_init():
            self._ready = True
            return

        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Audio unavailable, sounds disabled: {e}")
            self._ready = False
            return

        self._ready = True
        logger.debug("Mixer initialised")

    def load_sound(self, name: str, data: bytes) -> None:
        """
        Decode ``data`` (a complete audio file) under ``name``.

        :param name: Name used by ``play_sound``
        :type name: str

        :param data: Encoded audio, e.g. the bytes of a WAV file
        :type data: bytes
        """
        self._sounds[name] = None
        if not self._ready:
            logger.warning(f"Not loading sound {name}: mixer not initialised")
            return

        try:
            self._sounds[name] = pygame.mixer.Sound(file=io.BytesIO(data))
        except pygame.error as e:
            logger.warning(f"Failed to load sound {name}: {e}")
            return

        logger.debug(f"Loaded sound {name}")

    def is_loaded(self, name: str) -> bool:
        return self._sounds.get(name) is not None

    def play_sound(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is None or self.muted:
            return
        sound.play()

    def set_mute(self, mute: bool) -> None:
        self.muted = mute


def load_sound_assets(
    sounds: SoundSystem, names: Iterable[str], root: Path | None = None
) -> list[str]:
    """
    Read ``<root>/<name>.wav`` for each name and hand it to ``sounds``.

    Missing or unreadable files are logged and skipped.

    :param sounds: Sound system to load into
    :type sounds: SoundSystem

    :param names: Sound names
    :type names: Iterable[str]

    :param root: Directory holding the files, defaults to ``assets/sounds``
    :type root: Path | None

    :return: The names that were read from disk
    :rtype: list[str]
    """
    if root is None:
        try:
            root = find_assets_root(__file__) / "sounds"
        except FileNotFoundError as e:
            logger.warning(f"No sound assets: {e}")
            return []

    loaded = []
    for name in names:
        path = root / f"{name}.wav"
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning(f"Could not read sound {name} from {path}: {e}")
            continue
        sounds.load_sound(name, data)
        loaded.append(name)
    return loaded
