"""
Constants for the game.
"""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """
    Key codes understood by the screens.

    Values are the DOM key codes so that any input source can map onto them.
    """

    SPACE = 32
    LEFT = 37
    RIGHT = 39
    M = 77
    P = 80


FIRE_KEY = Key.SPACE
PAUSE_KEY = Key.P

START_LIVES = 3
START_LEVEL = 1
LEVEL_BONUS_POINTS = 50
INTRO_COUNTDOWN = 3.0

# Entity boxes (width, height)
SHIP_SIZE = (20.0, 16.0)
INVADER_SIZE = (18.0, 14.0)
ROCKET_SPAWN_OFFSET = 12.0

# Formation layout
FORMATION_WIDTH = 200.0
RANK_SPACING = 20.0

SOUND_SHOOT = "shoot"
SOUND_BANG = "bang"
SOUND_EXPLOSION = "explosion"
SOUND_NAMES = (SOUND_SHOOT, SOUND_BANG, SOUND_EXPLOSION)

WINDOW_SIZE = (800, 600)

WHITE = (255, 255, 255)
SHIP_COLOR = (153, 153, 153)
INVADER_COLOR = (0, 102, 0)
BOMB_COLOR = (255, 85, 85)
ROCKET_COLOR = (255, 0, 0)
DEBUG_COLOR = (255, 0, 0)
BACKGROUND_COLOR = (0, 0, 0)
