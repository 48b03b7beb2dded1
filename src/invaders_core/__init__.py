"""
Space Invaders game core.
"""

from invaders_core.config import Config
from invaders_core.constants import Key
from invaders_core.errors import ConfigError, GameStateError, InvadersError
from invaders_core.game import Game
from invaders_core.geometry import GameBounds
from invaders_core.session import Session

__all__ = [
    "Config",
    "ConfigError",
    "Game",
    "GameBounds",
    "GameStateError",
    "InvadersError",
    "Key",
    "Session",
]

__version__ = "0.1.0"
