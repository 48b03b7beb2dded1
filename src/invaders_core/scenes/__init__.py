"""
Game screens.
"""

from invaders_core.scenes.play import PlayScreen
from invaders_core.scenes.screens import (
    GameOverScreen,
    LevelIntroScreen,
    PauseScreen,
    WelcomeScreen,
)

__all__ = [
    "GameOverScreen",
    "LevelIntroScreen",
    "PauseScreen",
    "PlayScreen",
    "WelcomeScreen",
]
