"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, Optional

from .config import GameConfig
from .data_models import Actor, Obstacle


def collides(actor: Actor, obstacle: Obstacle, config: GameConfig) -> bool:
    """
    True iff the actor overlaps the obstacle horizontally and is not
    entirely inside its gap.
    """
    horizontal = (actor.x < obstacle.x + config.obstacle_width
                  and actor.right > obstacle.x)
    if not horizontal:
        return False

    gap_top, gap_bottom = obstacle.gap_bounds(config.gap_height)
    return actor.y < gap_top or actor.bottom > gap_bottom


class PhysicsCore:
    """
    Deterministic physics shared by the engine and any replay or test harness.
    One call advances exactly one tick; there is no delta-time scaling.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def spawn_actor(self) -> Actor:
        """Creates a fresh actor, vertically centred and at rest."""
        cfg = self.config
        return Actor(
            x=float(cfg.actor_x),
            y=cfg.playfield_height / 2 - cfg.actor_height / 2,
            width=cfg.actor_width,
            height=cfg.actor_height,
        )

    def apply_gravity_step(self, actor: Actor) -> bool:
        """
        Semi-implicit Euler step: velocity first, then position.
        Returns True if the actor hit the floor (fatal). The ceiling clamps
        the actor but is not fatal.
        """
        actor.velocity += self.config.gravity
        actor.y += actor.velocity

        # 1. Floor
        if actor.y > self.config.floor_y:
            actor.y = self.config.floor_y
            actor.velocity = 0.0
            return True

        # 2. Ceiling
        if actor.y < 0:
            actor.y = 0.0
            actor.velocity = 0.0

        return False

    def flap(self, actor: Actor):
        """Sets the actor's velocity to the flap impulse."""
        actor.velocity = self.config.flap_impulse

    def check_collision(self, actor: Actor, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
        """Returns the first obstacle the actor collides with, in stream order."""
        for obstacle in obstacles:
            if collides(actor, obstacle, self.config):
                return obstacle
        return None
