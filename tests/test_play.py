"""
PLAY SCREEN TESTS

Whole ticks through the driver: movement, projectiles, the fire limiter,
collisions and the level outcome.
"""
import pytest
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from invaders_core.constants import Key
from invaders_core.entities import Bomb, Rocket
from invaders_core.formation import Velocity
from invaders_core.scenes import GameOverScreen, LevelIntroScreen, PlayScreen

from tests.conftest import tick


@pytest.fixture
def play(game):
    game.start_level(1)
    return game.current_state()


def single_invader_play(game):
    game.configure(invader_ranks=1, invader_files=1)
    game.start_level(1)
    return game.current_state()


class TestSetup:
    """Entering a level."""

    def test_ship_starts_bottom_center(self, game, play):
        assert play.ship.x == 400
        assert play.ship.y == game.bounds.bottom

    def test_formation_size(self, play):
        """Level one: five ranks of ten."""
        assert len(play.invaders) == 50

    def test_pipeline_is_engine_pipeline(self, play):
        assert isinstance(play.systems, SystemPipeline)

    def test_pipeline_order(self, play):
        """Systems run in a fixed order."""
        assert [s.name for s in play.systems.systems] == [
            "ship_control",
            "projectiles",
            "formation",
            "rocket_invader_collision",
            "bomb_drop",
            "bomb_ship_collision",
            "invader_ship_collision",
            "outcome",
        ]


class TestShip:
    """Ship movement."""

    def test_ship_moves_with_held_keys(self, game, play):
        game.key_down(Key.RIGHT)
        tick(game)
        assert play.ship.x == pytest.approx(400 + 120 * 0.02)

    @pytest.mark.parametrize("key", [Key.LEFT, Key.RIGHT])
    def test_ship_stays_in_bounds(self, game, play, key):
        """Holding a direction never takes the ship past the bounds."""
        game.key_down(key)
        for _ in range(250):
            tick(game)
            assert game.bounds.left <= play.ship.x <= game.bounds.right
        expected = game.bounds.left if key is Key.LEFT else game.bounds.right
        assert play.ship.x == expected

    def test_rocket_fires_from_clamped_position(self, game, play):
        """A ship pushing against the wall fires from inside the bounds."""
        play.ship.x = game.bounds.right
        game.pressed_keys.update({Key.RIGHT, Key.SPACE})

        tick(game)

        (rocket,) = play.rockets
        assert play.ship.x == game.bounds.right
        assert rocket.x == game.bounds.right


class TestProjectiles:
    """Bombs and rockets leaving the screen."""

    def test_bomb_below_screen_is_removed(self, game, play):
        play.bombs = [Bomb(x=10, y=game.height - 0.5, velocity=50)]
        tick(game)
        assert play.bombs == []

    def test_bomb_on_screen_is_kept(self, game, play):
        play.bombs = [Bomb(x=10, y=500, velocity=50)]
        tick(game)
        assert len(play.bombs) == 1
        assert play.bombs[0].y == pytest.approx(501)

    def test_rocket_above_screen_is_removed(self, game, play):
        play.rockets = [Rocket(x=10, y=0.5, velocity=120)]
        tick(game)
        assert play.rockets == []

    def test_rocket_moves_up(self, game, play):
        play.rockets = [Rocket(x=10, y=300, velocity=120)]
        tick(game)
        assert play.rockets[0].y == pytest.approx(297.6)


class TestFireLimiter:
    """One rocket per fire interval."""

    def test_two_requests_in_one_interval(self, game, play, sounds):
        """The second request inside the interval is refused."""
        assert play.fire_rocket(game)
        assert not play.fire_rocket(game)
        assert len(play.rockets) == 1
        assert sounds.played == ["shoot"]

    def test_requests_spaced_by_the_interval(self, game, play):
        """Spaced beyond the interval, every request fires."""
        assert play.fire_rocket(game)
        play.clock += 0.5
        assert play.fire_rocket(game)
        play.clock += 0.5
        assert play.fire_rocket(game)
        assert len(play.rockets) == 3

    def test_rocket_spawns_at_ship_nose(self, game, play):
        play.fire_rocket(game)
        (rocket,) = play.rockets
        assert rocket.x == play.ship.x
        assert rocket.y == play.ship.y - 12
        assert rocket.velocity == 120

    def test_held_fire(self, game, play):
        """Holding fire for a second yields three rockets at 2.4 per second."""
        game.key_down(Key.SPACE)
        tick(game, 50)
        assert len(play.rockets) == 3


class TestFormation:
    """The swarm during play."""

    def test_lockstep(self, game, play):
        before = [(i.x, i.y) for i in play.invaders]
        tick(game)
        dx = -play.params.invader_initial_velocity * game.config.dt
        for (x, y), invader in zip(before, play.invaders):
            assert invader.x - x == pytest.approx(dx)
            assert invader.y == y

    def test_reaching_bottom_ends_the_game(self, game):
        play = single_invader_play(game)
        invader = play.invaders[0]
        invader.x = 250
        invader.y = game.bounds.bottom - 0.1
        play.formation.velocity = Velocity(0, 10)
        tick(game)
        assert game.session.lives == 0
        assert isinstance(game.current_state(), GameOverScreen)


class TestCollisions:
    """Rockets, bombs and the ship."""

    def test_rocket_kills_single_invader(self, game, sounds):
        """Clearing the only invader scores it plus the level bonus."""
        play = single_invader_play(game)
        invader = play.invaders[0]
        assert invader.x == 400
        play.rockets = [Rocket(x=invader.x, y=invader.y + 3, velocity=120)]

        tick(game)

        assert len(play.invaders) == 0
        assert play.rockets == []
        assert game.session.score == game.config.points_per_invader + 50
        assert "bang" in sounds.played
        state = game.current_state()
        assert isinstance(state, LevelIntroScreen)
        assert state.level == 2
        assert game.session.level == 2

    def test_one_rocket_per_invader(self, game):
        """Two rockets inside one invader only destroy it once."""
        play = single_invader_play(game)
        invader = play.invaders[0]
        play.rockets = [
            Rocket(x=invader.x, y=invader.y + 3, velocity=120),
            Rocket(x=invader.x, y=invader.y + 4, velocity=120),
        ]
        tick(game)
        assert len(play.rockets) == 1
        assert game.session.score == 5 + 50

    def test_bomb_hits_ship(self, game, play, sounds):
        """The last life lost ends the game."""
        game.session.lives = 1
        play.bombs = [Bomb(x=play.ship.x, y=play.ship.y, velocity=50)]

        tick(game)

        assert game.session.lives == 0
        assert play.bombs == []
        assert "explosion" in sounds.played
        assert isinstance(game.current_state(), GameOverScreen)

    def test_bomb_costs_one_life(self, game, play):
        play.bombs = [Bomb(x=play.ship.x, y=play.ship.y, velocity=50)]
        tick(game)
        assert game.session.lives == 2
        assert game.current_state() is play

    def test_every_bomb_on_the_ship_costs_a_life(self, game, play, sounds):
        """Two bombs landing in the same tick take two lives."""
        play.bombs = [
            Bomb(x=play.ship.x - 2, y=play.ship.y, velocity=50),
            Bomb(x=play.ship.x + 2, y=play.ship.y, velocity=50),
        ]

        tick(game)

        assert game.session.lives == 1
        assert play.bombs == []
        assert sounds.played.count("explosion") == 2
        assert game.current_state() is play

    def test_touching_invader_does_not_kill(self, game):
        """An invader sharing an edge with the ship is a miss."""
        play = single_invader_play(game)
        invader = play.invaders[0]
        invader.x = play.ship.x
        invader.y = play.ship.y - (play.ship.height + invader.height) / 2

        tick(game)

        assert game.session.lives == 3
        assert game.current_state() is play

    def test_overlapping_invader_kills(self, game):
        """One pixel of overlap destroys the ship."""
        play = single_invader_play(game)
        invader = play.invaders[0]
        invader.x = play.ship.x
        invader.y = play.ship.y - (play.ship.height + invader.height) / 2 + 1

        tick(game)

        assert game.session.lives == 0
        assert isinstance(game.current_state(), GameOverScreen)


class TestGameOver:
    """The terminal state."""

    def test_ticks_do_not_change_the_session(self, game):
        game.session.score = 120
        game.session.level = 3
        game.session.lives = 0
        game.game_over()

        tick(game, 20)

        assert (game.session.lives, game.session.score, game.session.level) == (0, 120, 3)
        assert isinstance(game.current_state(), GameOverScreen)


class TestDraw:
    """What the play screen draws."""

    def test_draws_entities_and_info(self, game, play, renderer):
        tick(game)
        assert renderer.commands("clear")
        # ship plus fifty invaders
        assert len(renderer.commands("draw_rect")) == 51
        assert "Lives: 3" in renderer.texts()
        assert "Score: 0, Level: 1" in renderer.texts()
        assert renderer.commands("stroke_rect") == []

    def test_debug_bounds(self, game, renderer):
        game.configure(debug_mode=True)
        game.start_level(1)
        tick(game)
        assert len(renderer.commands("stroke_rect")) == 2

    def test_play_screen_type(self, play):
        assert isinstance(play, PlayScreen)
