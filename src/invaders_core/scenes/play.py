"""
Play Scene
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.utils import logger

from invaders_core.collision import boxes_overlap, point_in_box
from invaders_core.config import Config
from invaders_core.constants import (
    BOMB_COLOR,
    DEBUG_COLOR,
    FIRE_KEY,
    INVADER_COLOR,
    PAUSE_KEY,
    ROCKET_COLOR,
    ROCKET_SPAWN_OFFSET,
    SHIP_COLOR,
    SOUND_BANG,
    SOUND_EXPLOSION,
    SOUND_SHOOT,
    WHITE,
    Key,
)
from invaders_core.entities import Bomb, Rocket, Ship
from invaders_core.formation import Edge, InvaderFormation
from invaders_core.levels import LevelParameters

if TYPE_CHECKING:
    from invaders_core.game import Game
    from invaders_core.render import Renderer


@dataclass
class PlayTickContext:
    """
    Everything a system needs for one tick.
    """

    game: "Game"
    play: "PlayScreen"
    dt: float


@dataclass
class ShipControlSystem:
    """
    Move the ship from held keys and keep it in bounds, then fire if held.
    """

    name: str = "ship_control"
    order: int = 10

    def step(self, ctx: PlayTickContext):
        game, play = ctx.game, ctx.play
        ship = play.ship
        speed = play.params.ship_speed

        if game.is_key_held(Key.LEFT):
            ship.x -= speed * ctx.dt
        if game.is_key_held(Key.RIGHT):
            ship.x += speed * ctx.dt

        bounds = game.bounds
        ship.x = max(bounds.left, min(bounds.right, ship.x))

        if game.is_key_held(FIRE_KEY):
            play.fire_rocket(game)


@dataclass
class ProjectileSystem:
    """Advance bombs and rockets, dropping the ones that left the screen."""

    name: str = "projectiles"
    order: int = 20

    def step(self, ctx: PlayTickContext):
        play = ctx.play

        bombs = []
        for bomb in play.bombs:
            bomb.y += bomb.velocity * ctx.dt
            if bomb.y <= ctx.game.height:
                bombs.append(bomb)
        play.bombs = bombs

        rockets = []
        for rocket in play.rockets:
            rocket.y -= rocket.velocity * ctx.dt
            if rocket.y >= 0:
                rockets.append(rocket)
        play.rockets = rockets


@dataclass
class FormationSystem:
    """
    Move the swarm, finish or start drops, end the game at the bottom.
    """

    name: str = "formation"
    order: int = 30

    def step(self, ctx: PlayTickContext):
        formation = ctx.play.formation
        edge = formation.advance(ctx.dt, ctx.game.bounds)
        formation.update_drop(ctx.dt)
        formation.react(edge, ctx.play.config.invader_acceleration)

        if edge is Edge.BOTTOM:
            logger.debug("Invaders reached the bottom")
            ctx.game.session.kill()


@dataclass
class RocketInvaderCollisionSystem:
    """Each invader takes at most one rocket; both are removed."""

    name: str = "rocket_invader_collision"
    order: int = 40

    def step(self, ctx: PlayTickContext):
        play = ctx.play
        if not play.rockets or not play.formation.invaders:
            return

        rockets = list(play.rockets)
        destroyed = []
        for invader in play.formation.invaders:
            box = invader.collider
            for idx, rocket in enumerate(rockets):
                if point_in_box(rocket.x, rocket.y, box):
                    del rockets[idx]
                    destroyed.append(invader)
                    ctx.game.session.award(play.config.points_per_invader)
                    ctx.game.play_sound(SOUND_BANG)
                    break

        play.rockets = rockets
        play.formation.remove(destroyed)


@dataclass
class BombDropSystem:
    """Let front-rank invaders drop bombs."""

    name: str = "bomb_drop"
    order: int = 50

    def step(self, ctx: PlayTickContext):
        params = ctx.play.params
        ctx.play.bombs.extend(
            ctx.play.formation.drop_bombs(
                ctx.dt,
                ctx.game.rng,
                params.bomb_rate,
                params.bomb_min_velocity,
                params.bomb_max_velocity,
            )
        )


@dataclass
class BombShipCollisionSystem:
    """Every bomb that hits the ship costs one life."""

    name: str = "bomb_ship_collision"
    order: int = 60

    def step(self, ctx: PlayTickContext):
        play = ctx.play
        if not play.bombs:
            return

        box = play.ship.collider
        bombs = []
        for bomb in play.bombs:
            if point_in_box(bomb.x, bomb.y, box):
                ctx.game.session.lose_life()
                ctx.game.play_sound(SOUND_EXPLOSION)
            else:
                bombs.append(bomb)
        play.bombs = bombs


@dataclass
class InvaderShipCollisionSystem:
    """An invader touching the ship destroys it outright."""

    name: str = "invader_ship_collision"
    order: int = 70

    def step(self, ctx: PlayTickContext):
        box = ctx.play.ship.collider
        for invader in ctx.play.formation.invaders:
            if boxes_overlap(invader.collider, box):
                ctx.game.session.kill()
                ctx.game.play_sound(SOUND_EXPLOSION)


@dataclass
class OutcomeSystem:
    """
    Lose when out of lives, otherwise win when the swarm is gone.
    """

    name: str = "outcome"
    order: int = 90

    def step(self, ctx: PlayTickContext):
        game = ctx.game
        if game.session.is_over:
            logger.info(
                f"Game over at level {game.session.level}, "
                f"score {game.session.score}"
            )
            game.game_over()
        elif not ctx.play.formation.invaders:
            level = game.session.complete_level()
            logger.info(f"Level cleared, moving to level {level}")
            game.show_level_intro(level)


def default_systems() -> list:
    return [
        ShipControlSystem(),
        ProjectileSystem(),
        FormationSystem(),
        RocketInvaderCollisionSystem(),
        BombDropSystem(),
        BombShipCollisionSystem(),
        InvaderShipCollisionSystem(),
        OutcomeSystem(),
    ]


class PlayScreen:  # pylint: disable=too-many-instance-attributes
    """
    The level being played.

    Holds the ship, the formation and the projectiles; a fixed pipeline of
    systems advances them once per tick.
    """

    def __init__(self, config: Config, level: int):
        self.config = config
        self.level = level

        self.params: LevelParameters = LevelParameters.for_level(config, level)
        self.ship: Ship = Ship(0.0, 0.0)
        self.formation = InvaderFormation()
        self.rockets: list[Rocket] = []
        self.bombs: list[Bomb] = []

        # simulation time, used by the fire limiter
        self.clock = 0.0
        self.last_rocket_time: float | None = None

        self.systems: SystemPipeline[PlayTickContext] = SystemPipeline()
        self.systems.extend(default_systems())

    @property
    def invaders(self):
        return self.formation.invaders

    def enter(self, game: "Game") -> None:
        self.params = LevelParameters.for_level(self.config, self.level)
        self.ship = Ship(game.width / 2, game.bounds.bottom)
        self.formation = InvaderFormation.build(
            center_x=game.width / 2,
            top=game.bounds.top,
            ranks=self.params.ranks,
            files=self.params.files,
            initial_velocity=self.params.invader_initial_velocity,
            drop_distance=self.config.invader_drop_distance,
        )
        self.rockets = []
        self.bombs = []
        self.clock = 0.0
        self.last_rocket_time = None

        logger.debug(f"Level {self.level} set up: {self.params}")

    def update(self, game: "Game", dt: float) -> None:
        self.clock += dt
        self.systems.step(PlayTickContext(game=game, play=self, dt=dt))

    def can_fire(self) -> bool:
        if self.last_rocket_time is None:
            return True
        elapsed_ms = (self.clock - self.last_rocket_time) * 1000.0
        return elapsed_ms > self.params.rocket_interval_ms

    def fire_rocket(self, game: "Game") -> bool:
        """
        Fire a rocket from the ship's nose if the fire rate allows it.

        :return: Whether a rocket was fired
        :rtype: bool
        """
        if not self.can_fire():
            return False

        self.rockets.append(
            Rocket(
                x=self.ship.x,
                y=self.ship.y - ROCKET_SPAWN_OFFSET,
                velocity=self.config.rocket_velocity,
            )
        )
        self.last_rocket_time = self.clock
        game.play_sound(SOUND_SHOOT)
        return True

    def key_down(self, game: "Game", key_code: int) -> None:
        if key_code == FIRE_KEY:
            self.fire_rocket(game)
        if key_code == PAUSE_KEY:
            game.pause()

    def draw(self, game: "Game", dt: float, renderer: "Renderer") -> None:
        # pylint: disable=unused-argument
        renderer.clear()

        ship = self.ship
        renderer.draw_rect(
            ship.x - ship.width / 2,
            ship.y - ship.height / 2,
            ship.width,
            ship.height,
            SHIP_COLOR,
        )

        for invader in self.formation.invaders:
            renderer.draw_rect(
                invader.x - invader.width / 2,
                invader.y - invader.height / 2,
                invader.width,
                invader.height,
                INVADER_COLOR,
            )

        for bomb in self.bombs:
            renderer.draw_rect(bomb.x - 2, bomb.y - 2, 4, 4, BOMB_COLOR)

        for rocket in self.rockets:
            renderer.draw_rect(rocket.x, rocket.y - 2, 1, 4, ROCKET_COLOR)

        bounds = game.bounds
        text_y = bounds.bottom + (game.height - bounds.bottom) / 2 + 14 / 2
        renderer.draw_text(
            f"Lives: {game.session.lives}",
            bounds.left,
            text_y,
            font="14px Arial",
            align="left",
            color=WHITE,
        )
        renderer.draw_text(
            f"Score: {game.session.score}, Level: {game.session.level}",
            bounds.right,
            text_y,
            font="14px Arial",
            align="right",
            color=WHITE,
        )

        if self.config.debug_mode:
            renderer.stroke_rect(0, 0, game.width, game.height, DEBUG_COLOR)
            renderer.stroke_rect(
                bounds.left,
                bounds.top,
                bounds.width,
                bounds.height,
                DEBUG_COLOR,
            )
