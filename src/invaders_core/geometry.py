"""
Playfield geometry.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameBounds:
    """
    The playfield rectangle in canvas coordinates.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def centered(
        cls,
        canvas_width: float,
        canvas_height: float,
        game_width: float,
        game_height: float,
    ) -> "GameBounds":
        """
        Center a ``game_width`` x ``game_height`` playfield in the canvas.

        :param canvas_width: Width of the canvas
        :type canvas_width: float

        :param canvas_height: Height of the canvas
        :type canvas_height: float

        :param game_width: Width of the playfield
        :type game_width: float

        :param game_height: Height of the playfield
        :type game_height: float

        :return: GameBounds
        """
        return cls(
            left=canvas_width / 2 - game_width / 2,
            top=canvas_height / 2 - game_height / 2,
            right=canvas_width / 2 + game_width / 2,
            bottom=canvas_height / 2 + game_height / 2,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned box given by its center and size.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2
