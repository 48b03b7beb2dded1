"""
Invader formation controller.

The whole swarm shares one velocity. It moves sideways until any invader
would leave the playfield, then drops by a fixed distance and comes back the
other way. Only the front-rank invader of each file may drop bombs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from random import Random

from mini_arcade_core.utils import logger

from invaders_core.constants import FORMATION_WIDTH, RANK_SPACING
from invaders_core.entities import Bomb, Invader
from invaders_core.geometry import GameBounds


class Edge(str, Enum):
    """Which playfield edge the swarm ran into this tick."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Velocity:
    vx: float
    vy: float


@dataclass
class InvaderFormation:  # pylint: disable=too-many-instance-attributes
    """
    Invader swarm state.
    """

    invaders: list[Invader] = field(default_factory=list)
    velocity: Velocity = Velocity(0.0, 0.0)
    current_velocity: float = 0.0
    drop_distance: float = 20.0
    dropping: bool = False
    dropped: float = 0.0
    next_velocity: Velocity | None = None

    @classmethod
    def build(  # pylint: disable=too-many-arguments
        cls,
        center_x: float,
        top: float,
        ranks: int,
        files: int,
        initial_velocity: float,
        drop_distance: float = 20.0,
    ) -> "InvaderFormation":
        """
        Lay out a ``ranks`` x ``files`` grid, moving left.

        File 0 is the rightmost column and rank 0 the top row.

        :param center_x: Horizontal center of the formation
        :type center_x: float

        :param top: Y of the first rank
        :type top: float

        :param ranks: Number of rows
        :type ranks: int

        :param files: Number of columns
        :type files: int

        :param initial_velocity: Horizontal speed of the swarm
        :type initial_velocity: float

        :param drop_distance: How far the swarm drops at an edge
        :type drop_distance: float

        :return: InvaderFormation
        """
        spacing = FORMATION_WIDTH / files
        invaders = []
        for rank in range(ranks):
            for file in range(files):
                invaders.append(
                    Invader(
                        x=center_x + ((files - 1) / 2 - file) * spacing,
                        y=top + rank * RANK_SPACING,
                        rank=rank,
                        file=file,
                    )
                )

        logger.debug(f"Formation built: {ranks} ranks x {files} files")

        return cls(
            invaders=invaders,
            velocity=Velocity(-initial_velocity, 0.0),
            current_velocity=initial_velocity,
            drop_distance=drop_distance,
        )

    def __len__(self) -> int:
        return len(self.invaders)

    def advance(self, dt: float, bounds: GameBounds) -> Edge:
        """
        Move the swarm one step unless some invader would cross a bound.

        The first invader (in insertion order) that would cross decides
        the edge; left is checked before right, right before bottom.
        Nobody moves on a tick where an edge is hit.

        :return: Edge
        """
        tentative = []
        edge = Edge.NONE
        for invader in self.invaders:
            new_x = invader.x + self.velocity.vx * dt
            new_y = invader.y + self.velocity.vy * dt
            if new_x < bounds.left:
                edge = Edge.LEFT
            elif new_x > bounds.right:
                edge = Edge.RIGHT
            elif new_y > bounds.bottom:
                edge = Edge.BOTTOM
            if edge is not Edge.NONE:
                break
            tentative.append((new_x, new_y))

        if edge is Edge.NONE:
            for invader, (x, y) in zip(self.invaders, tentative):
                invader.x = x
                invader.y = y

        return edge

    def update_drop(self, dt: float) -> None:
        """Finish a drop once the swarm has descended far enough."""
        if not self.dropping:
            return

        self.dropped += self.velocity.vy * dt
        if self.dropped >= self.drop_distance:
            self.dropping = False
            if self.next_velocity is not None:
                self.velocity = self.next_velocity
            self.next_velocity = None
            self.dropped = 0.0

    def react(self, edge: Edge, acceleration: float) -> None:
        """
        Start a drop after a side edge was hit.

        The swarm speeds up by ``acceleration`` and will come back the
        other way once the drop is done. A bottom hit is left to the caller.
        """
        if edge not in (Edge.LEFT, Edge.RIGHT):
            return

        self.current_velocity += acceleration
        self.velocity = Velocity(0.0, self.current_velocity)
        self.dropping = True
        direction = 1.0 if edge is Edge.LEFT else -1.0
        self.next_velocity = Velocity(direction * self.current_velocity, 0.0)

        logger.debug(
            f"Formation hit {edge.value} edge, speed now {self.current_velocity}"
        )

    def remove(self, doomed: list[Invader]) -> None:
        """Drop the given invaders from the swarm."""
        if not doomed:
            return
        gone = {id(i) for i in doomed}
        self.invaders = [i for i in self.invaders if id(i) not in gone]

    def front_rank(self) -> dict[int, Invader]:
        """
        Map each file to its invader closest to the ship.

        :return: dict[int, Invader]
        """
        best: dict[int, Invader] = {}
        for invader in self.invaders:
            cur = best.get(invader.file)
            if cur is None or invader.rank > cur.rank:
                best[invader.file] = invader
        return best

    def drop_bombs(  # pylint: disable=too-many-arguments
        self,
        dt: float,
        rng: Random,
        rate: float,
        min_velocity: float,
        max_velocity: float,
    ) -> list[Bomb]:
        """
        Give each front-rank invader a chance to drop a bomb.

        Files are visited in ascending order and each one consumes one
        draw from ``rng``; a bomb also consumes one for its velocity.

        :return: list[Bomb]
        """
        chance = rate * dt
        front = self.front_rank()
        bombs = []
        for file in sorted(front):
            invader = front[file]
            if chance > rng.random():
                bombs.append(
                    Bomb(
                        x=invader.x,
                        y=invader.y + invader.height / 2,
                        velocity=rng.uniform(min_velocity, max_velocity),
                    )
                )
        return bombs
