"""
Renderers.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from invaders_core.constants import BACKGROUND_COLOR, WHITE

Color = tuple[int, int, int]


class Renderer(Protocol):
    def clear(self) -> None: ...

    def draw_rect(
        self, x: float, y: float, w: float, h: float, color: Color
    ) -> None: ...

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: Color
    ) -> None: ...

    def draw_text(  # pylint: disable=too-many-arguments
        self,
        text: str,
        x: float,
        y: float,
        font: str = "16px Arial",
        align: str = "center",
        baseline: str = "middle",
        color: Color = WHITE,
    ) -> None: ...


def font_size(font: str) -> int:
    """
    Pull the pixel size out of a CSS-like font string such as ``"16px Arial"``.

    :param font: Font description
    :type font: str

    :return: int
    """
    for part in font.split():
        if part.endswith("px"):
            try:
                return int(float(part[:-2]))
            except ValueError:
                break
    return 16


class PygameRenderer:
    """
    Draws onto a pygame surface.

    :param surface: Target surface, usually the display surface
    :type surface: pygame.Surface
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, font: str) -> pygame.font.Font:
        size = font_size(font)
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear(self) -> None:
        self.surface.fill(BACKGROUND_COLOR)

    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def stroke_rect(
        self, x: float, y: float, w: float, h: float, color: Color
    ) -> None:
        pygame.draw.rect(
            self.surface, color, pygame.Rect(int(x), int(y), int(w), int(h)), width=1
        )

    def draw_text(  # pylint: disable=too-many-arguments
        self,
        text: str,
        x: float,
        y: float,
        font: str = "16px Arial",
        align: str = "center",
        baseline: str = "middle",
        color: Color = WHITE,
    ) -> None:
        image = self._font(font).render(text, True, color)
        rect = image.get_rect()

        if align == "left":
            rect.left = int(x)
        elif align == "right":
            rect.right = int(x)
        else:
            rect.centerx = int(x)

        if baseline == "top":
            rect.top = int(y)
        elif baseline in ("bottom", "alphabetic"):
            rect.bottom = int(y)
        else:
            rect.centery = int(y)

        self.surface.blit(image, rect)

    def present(self) -> None:
        pygame.display.flip()
