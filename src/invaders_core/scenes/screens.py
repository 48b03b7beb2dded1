"""
Welcome, level intro, pause and game over screens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from invaders_core.constants import (
    FIRE_KEY,
    INTRO_COUNTDOWN,
    PAUSE_KEY,
    SOUND_NAMES,
    WHITE,
)
from invaders_core.sound import load_sound_assets

if TYPE_CHECKING:
    from invaders_core.game import Game
    from invaders_core.render import Renderer


class WelcomeScreen:
    """
    Title screen. Loads the sounds and waits for SPACE.
    """

    def enter(self, game: "Game") -> None:
        game.sounds.init()
        load_sound_assets(game.sounds, SOUND_NAMES)

    def update(self, game: "Game", dt: float) -> None:
        pass

    def draw(self, game: "Game", dt: float, renderer: "Renderer") -> None:
        renderer.clear()
        renderer.draw_text(
            "Space Invaders",
            game.width / 2,
            game.height / 2 - 40,
            font="30px Arial",
            color=WHITE,
        )
        renderer.draw_text(
            "Press 'Space' or touch to start.",
            game.width / 2,
            game.height / 2,
            font="16px Arial",
            color=WHITE,
        )

    def key_down(self, game: "Game", key_code: int) -> None:
        if key_code == FIRE_KEY:
            game.new_game()
            game.show_level_intro(game.session.level)


class GameOverScreen:
    """
    Shows the final score; SPACE starts a new game.
    """

    def update(self, game: "Game", dt: float) -> None:
        pass

    def draw(self, game: "Game", dt: float, renderer: "Renderer") -> None:
        session = game.session
        renderer.clear()
        renderer.draw_text(
            "Game Over!",
            game.width / 2,
            game.height / 2 - 40,
            font="30px Arial",
            color=WHITE,
        )
        renderer.draw_text(
            f"You scored {session.score} and got to level {session.level}",
            game.width / 2,
            game.height / 2,
            font="16px Arial",
            color=WHITE,
        )
        renderer.draw_text(
            "Press 'Space' to play again.",
            game.width / 2,
            game.height / 2 + 40,
            font="16px Arial",
            color=WHITE,
        )

    def key_down(self, game: "Game", key_code: int) -> None:
        if key_code == FIRE_KEY:
            game.new_game()
            game.show_level_intro(1)


class PauseScreen:
    """
    Layered over the play screen; has no update so play stays frozen.
    """

    def draw(self, game: "Game", dt: float, renderer: "Renderer") -> None:
        renderer.clear()
        renderer.draw_text(
            "Paused",
            game.width / 2,
            game.height / 2,
            font="14px Arial",
            color=WHITE,
        )

    def key_down(self, game: "Game", key_code: int) -> None:
        if key_code == PAUSE_KEY:
            game.resume()


class LevelIntroScreen:
    """
    'Level X' with a three second countdown, then the level starts.
    """

    def __init__(self, level: int):
        self.level = level
        self.countdown = INTRO_COUNTDOWN
        self.countdown_message = "3"

    def update(self, game: "Game", dt: float) -> None:
        self.countdown -= dt

        if self.countdown < 2:
            self.countdown_message = "2"
        if self.countdown < 1:
            self.countdown_message = "1"
        if self.countdown <= 0:
            game.start_level(self.level)

    def draw(self, game: "Game", dt: float, renderer: "Renderer") -> None:
        renderer.clear()
        renderer.draw_text(
            f"Level {self.level}",
            game.width / 2,
            game.height / 2,
            font="36px Arial",
            color=WHITE,
        )
        renderer.draw_text(
            f"Ready in {self.countdown_message}",
            game.width / 2,
            game.height / 2 + 36,
            font="24px Arial",
            color=WHITE,
        )
