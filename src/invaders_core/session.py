"""
Session bookkeeping: lives, score and level.
"""

from __future__ import annotations

from dataclasses import dataclass

from invaders_core.constants import LEVEL_BONUS_POINTS, START_LEVEL, START_LIVES


@dataclass
class Session:
    """
    Progress of the current game.

    Owned by the driver and mutated by the active screen's update.
    """

    lives: int = START_LIVES
    score: int = 0
    level: int = START_LEVEL

    def reset(self) -> None:
        self.lives = START_LIVES
        self.score = 0
        self.level = START_LEVEL

    @property
    def is_over(self) -> bool:
        return self.lives <= 0

    def award(self, points: int) -> None:
        self.score += points

    def lose_life(self) -> None:
        self.lives = max(0, self.lives - 1)

    def kill(self) -> None:
        """Lose every remaining life at once."""
        self.lives = 0

    def complete_level(self) -> int:
        """
        Award the level bonus and move to the next level.

        :return: The new level
        :rtype: int
        """
        self.score += self.level * LEVEL_BONUS_POINTS
        self.level += 1
        return self.level
