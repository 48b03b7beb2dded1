"""
Space Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass

from invaders_core.constants import INVADER_SIZE, SHIP_SIZE
from invaders_core.geometry import Box


@dataclass
class Ship:
    """
    Ship entity

    The ship has a position and that's about it.
    """

    x: float
    y: float
    width: float = SHIP_SIZE[0]
    height: float = SHIP_SIZE[1]

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Rocket:
    """
    Rocket fired upwards by the ship.
    """

    x: float
    y: float
    velocity: float


@dataclass
class Bomb:
    """
    Bomb dropped downwards by an invader.
    """

    x: float
    y: float
    velocity: float


@dataclass
class Invader:
    """
    Invader entity, tagged with its place in the formation.
    """

    x: float
    y: float
    rank: int
    file: int
    width: float = INVADER_SIZE[0]
    height: float = INVADER_SIZE[1]

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


__all__ = ["Bomb", "Invader", "Rocket", "Ship"]
