"""
Welcome, level intro, pause and game over screens.
"""
import pytest

from invaders_core.constants import SOUND_NAMES, Key
from invaders_core.scenes import (
    GameOverScreen,
    LevelIntroScreen,
    PauseScreen,
    PlayScreen,
    WelcomeScreen,
)

from tests.conftest import tick


class TestWelcome:
    """The title screen."""

    def test_start_shows_welcome(self, game):
        game.start()
        assert isinstance(game.current_state(), WelcomeScreen)

    def test_entering_loads_sounds(self, game, sounds):
        """The bundled sounds are handed to the sound system."""
        game.start()
        assert sounds.initialised
        assert set(sounds.loaded) == set(SOUND_NAMES)
        assert all(data.startswith(b"RIFF") for data in sounds.loaded.values())

    def test_space_starts_level_one(self, game):
        game.start()
        game.session.score = 99
        game.key_down(Key.SPACE)
        state = game.current_state()
        assert isinstance(state, LevelIntroScreen)
        assert state.level == 1
        assert game.session.score == 0

    def test_other_keys_are_ignored(self, game):
        game.start()
        game.key_down(Key.LEFT)
        assert isinstance(game.current_state(), WelcomeScreen)

    def test_draw(self, game, renderer):
        game.start()
        tick(game)
        assert "Space Invaders" in renderer.texts()


class TestLevelIntro:
    """The countdown before a level."""

    def test_countdown_messages(self, game):
        intro = LevelIntroScreen(3)
        game.move_to_state(intro)
        assert intro.countdown_message == "3"

        intro.update(game, 1.5)
        assert intro.countdown_message == "2"
        intro.update(game, 0.6)
        assert intro.countdown_message == "1"
        assert game.current_state() is intro

        intro.update(game, 1.0)
        state = game.current_state()
        assert isinstance(state, PlayScreen)
        assert state.level == 3

    def test_three_seconds_of_ticks(self, game):
        """At 50 fps the level starts after about 150 ticks."""
        game.show_level_intro(1)
        tick(game, 140)
        assert isinstance(game.current_state(), LevelIntroScreen)
        tick(game, 11)
        assert isinstance(game.current_state(), PlayScreen)

    def test_draw(self, game, renderer):
        game.show_level_intro(2)
        tick(game)
        assert "Level 2" in renderer.texts()
        assert "Ready in 3" in renderer.texts()


class TestPause:
    """Pausing layers a screen over play."""

    def test_pause_and_resume(self, game):
        game.start_level(1)
        play = game.current_state()

        game.key_down(Key.P)
        assert isinstance(game.current_state(), PauseScreen)
        assert game.states.depth == 2

        game.key_down(Key.P)
        assert game.current_state() is play
        assert game.states.depth == 1

    def test_play_is_frozen_while_paused(self, game):
        game.start_level(1)
        play = game.current_state()
        before = [(i.x, i.y) for i in play.invaders]

        game.key_down(Key.P)
        tick(game, 25)

        assert [(i.x, i.y) for i in play.invaders] == before
        assert play.clock == 0

    def test_fire_does_nothing_while_paused(self, game):
        game.start_level(1)
        play = game.current_state()
        game.key_down(Key.P)
        game.key_down(Key.SPACE)
        assert play.rockets == []
        assert isinstance(game.current_state(), PauseScreen)

    def test_draw(self, game, renderer):
        game.start_level(1)
        game.pause()
        tick(game)
        assert renderer.texts() == ["Paused"]


class TestGameOver:
    """After the last life."""

    def test_space_starts_a_new_game(self, game):
        game.session.lives = 0
        game.session.score = 300
        game.session.level = 4
        game.game_over()

        game.key_down(Key.SPACE)

        state = game.current_state()
        assert isinstance(state, LevelIntroScreen)
        assert state.level == 1
        assert (game.session.lives, game.session.score, game.session.level) == (3, 0, 1)

    def test_draw_shows_score(self, game, renderer):
        game.session.score = 42
        game.session.level = 2
        game.game_over()
        tick(game)
        assert "You scored 42 and got to level 2" in renderer.texts()


@pytest.mark.parametrize(
    "screen", [WelcomeScreen(), GameOverScreen(), PauseScreen(), LevelIntroScreen(1)]
)
def test_key_up_is_optional(game, screen):
    """Screens without a key_up hook ignore releases."""
    game.move_to_state(screen)
    game.key_up(Key.SPACE)
