"""
Per-level difficulty scaling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from invaders_core.config import Config


@dataclass(frozen=True)
class LevelParameters:  # pylint: disable=too-many-instance-attributes
    """
    Values derived from the config for one level.

    Speeds and bomb rates grow with the level; formation size and fire
    rate stop growing at ``config.limit_level_increase``.
    """

    level: int
    ship_speed: float
    invader_initial_velocity: float
    bomb_rate: float
    bomb_min_velocity: float
    bomb_max_velocity: float
    rocket_max_fire_rate: float
    ranks: int
    files: int

    @classmethod
    def for_level(cls, config: Config, level: int) -> "LevelParameters":
        """
        Scale ``config`` for ``level``.

        :param config: Base settings
        :type config: Config

        :param level: Level number, starting at 1
        :type level: int

        :return: LevelParameters
        """
        level_multiplier = level * config.level_difficulty_multiplier
        limit_level = min(level, config.limit_level_increase)

        def scaled(base: float) -> float:
            return base + level_multiplier * base

        return cls(
            level=level,
            ship_speed=config.ship_speed,
            invader_initial_velocity=(
                config.invader_initial_velocity
                + 1.5 * level_multiplier * config.invader_initial_velocity
            ),
            bomb_rate=scaled(config.bomb_rate),
            bomb_min_velocity=scaled(config.bomb_min_velocity),
            bomb_max_velocity=scaled(config.bomb_max_velocity),
            rocket_max_fire_rate=config.rocket_max_fire_rate + 0.4 * limit_level,
            # fractional grid sizes are floored
            ranks=math.floor(config.invader_ranks + 0.1 * limit_level),
            files=math.floor(config.invader_files + 0.2 * limit_level),
        )

    @property
    def rocket_interval_ms(self) -> float:
        """Minimum time between two rockets, in milliseconds."""
        return 1000.0 / self.rocket_max_fire_rate
