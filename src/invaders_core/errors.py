"""
Exceptions raised by the game core.
"""


class InvadersError(Exception):
    """Base class for all errors raised by invaders_core."""


class ConfigError(InvadersError, ValueError):
    """A configuration value is out of range."""


class GameStateError(InvadersError, RuntimeError):
    """The driver was used in a way its lifecycle does not allow."""
