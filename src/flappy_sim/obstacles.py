"""
obstacles.py: Spawning, scrolling, scoring and pruning of obstacle pairs.
"""

import logging
import random
from typing import Iterator, List, Optional

from .config import GameConfig
from .data_models import Actor, Obstacle

logger = logging.getLogger(__name__)


class ObstacleStream:
    """
    Ordered collection of obstacles. Spawn order is scan and render order.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.obstacles: List[Obstacle] = []
        self.last_spawn_time: float = 0

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __len__(self) -> int:
        return len(self.obstacles)

    def clear(self):
        self.obstacles = []

    def reset(self):
        """Empties the stream and rewinds the spawn clock."""
        self.clear()
        self.last_spawn_time = 0

    def _spawn_obstacle(self, now: float) -> Obstacle:
        """Generates a new obstacle at the trailing (right) edge of the playfield."""
        top_height = self.rng.randint(self.config.min_top_height, self.config.max_top_height)
        obstacle = Obstacle(x=float(self.config.playfield_width), top_height=float(top_height))
        self.obstacles.append(obstacle)
        self.last_spawn_time = now
        logger.debug("Spawned obstacle top=%s at t=%s", top_height, now)
        return obstacle

    def maybe_spawn(self, now: float) -> Optional[Obstacle]:
        """
        Spawns one obstacle if more than spawn_interval_ms elapsed since the
        last spawn. Missed intervals are not back-filled.
        """
        if now - self.last_spawn_time > self.config.spawn_interval_ms:
            return self._spawn_obstacle(now)
        return None

    def advance(self, actor: Actor) -> int:
        """
        Scrolls every obstacle, marks newly passed ones and prunes the ones
        that left the playfield. Returns the points awarded.
        """
        width = self.config.obstacle_width

        # 1. Move
        for obstacle in self.obstacles:
            obstacle.x -= self.config.obstacle_speed

        # 2. Score, once per obstacle
        points = 0
        for obstacle in self.obstacles:
            if not obstacle.passed and obstacle.x + width < actor.x:
                obstacle.passed = True
                points += 1

        # 3. Prune
        self.obstacles = [o for o in self.obstacles if o.x + width >= 0]

        return points
