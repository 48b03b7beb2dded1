"""
Game configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping
from urllib.parse import parse_qs

from mini_arcade_core.utils import logger

from invaders_core.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:  # pylint: disable=too-many-instance-attributes
    """
    Per-run settings, read-only once the game starts.

    Level scaling (see ``LevelParameters``) is applied on top of these
    base values when a level is entered.
    """

    bomb_rate: float = 0.05
    bomb_min_velocity: float = 50.0
    bomb_max_velocity: float = 50.0
    invader_initial_velocity: float = 25.0
    invader_acceleration: float = 0.0
    invader_drop_distance: float = 20.0
    rocket_velocity: float = 120.0
    rocket_max_fire_rate: float = 2.0
    game_width: float = 400.0
    game_height: float = 300.0
    fps: float = 50.0
    debug_mode: bool = False
    invader_ranks: int = 5
    invader_files: int = 10
    ship_speed: float = 120.0
    level_difficulty_multiplier: float = 0.2
    points_per_invader: int = 5
    limit_level_increase: int = 25

    def __post_init__(self):
        self.validate()

    @property
    def dt(self) -> float:
        """Fixed simulation step in seconds."""
        return 1.0 / self.fps

    def validate(self) -> None:
        """
        Reject settings the simulation cannot run with.

        :raise ConfigError: If any value is out of range
        """
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")

        non_negative = (
            "bomb_rate",
            "bomb_min_velocity",
            "bomb_max_velocity",
            "invader_initial_velocity",
            "invader_acceleration",
            "invader_drop_distance",
            "rocket_velocity",
            "rocket_max_fire_rate",
            "ship_speed",
            "level_difficulty_multiplier",
            "points_per_invader",
        )
        for name in non_negative:
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} must not be negative, got {value}")

        if self.rocket_max_fire_rate == 0:
            raise ConfigError("rocket_max_fire_rate must be positive")
        if self.game_width <= 0 or self.game_height <= 0:
            raise ConfigError(
                f"playfield must have a positive size, got "
                f"{self.game_width}x{self.game_height}"
            )
        if self.invader_ranks < 1 or self.invader_files < 1:
            raise ConfigError(
                f"formation needs at least one rank and file, got "
                f"{self.invader_ranks}x{self.invader_files}"
            )
        if self.bomb_min_velocity > self.bomb_max_velocity:
            raise ConfigError(
                "bomb_min_velocity must not exceed bomb_max_velocity"
            )
        if self.limit_level_increase < 1:
            raise ConfigError("limit_level_increase must be at least 1")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Build a config from a settings mapping.

        Unknown keys are logged and ignored.

        :param data: Settings keyed by field name
        :type data: Mapping[str, Any]

        :return: Config
        :rtype: Config
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown config key {key!r}")
                continue
            values[key] = value
        config = cls(**values)
        logger.debug(f"Config loaded: {config}")
        return config

    def with_changes(self, **changes: Any) -> "Config":
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)

    def with_query(self, query: str) -> "Config":
        """
        Apply a URL-style query string, e.g. ``"debug=true"``.

        Only the ``debug`` parameter is recognised.
        """
        return self.with_changes(debug_mode=parse_debug_flag(query, self.debug_mode))


def parse_debug_flag(query: str, default: bool = False) -> bool:
    """
    Read the ``debug`` parameter of a URL or query string.

    :param query: A full URL or just its query part
    :type query: str

    :param default: Value used when the parameter is missing
    :type default: bool

    :return: bool
    """
    if "?" in query:
        query = query.split("?", 1)[1]
    params = parse_qs(query)
    if "debug" not in params:
        return default
    return params["debug"][-1].strip().lower() in _TRUTHY
