"""
config.py: Validated, immutable game configuration.
"""

import logging
from dataclasses import dataclass, fields, replace

from .constants import (
    ACTOR_HEIGHT, ACTOR_WIDTH, ACTOR_X, FLAP_IMPULSE, GAP_HEIGHT, GRAVITY,
    MIN_SEGMENT_HEIGHT, OBSTACLE_SPEED, OBSTACLE_WIDTH, PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH, SPAWN_INTERVAL_MS
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """
    Every numeric constant the engine needs, fixed at construction.
    Fails fast with ConfigurationError when the geometry is unplayable.
    """
    playfield_width: int = PLAYFIELD_WIDTH
    playfield_height: int = PLAYFIELD_HEIGHT
    actor_x: float = ACTOR_X
    actor_width: float = ACTOR_WIDTH
    actor_height: float = ACTOR_HEIGHT
    obstacle_width: float = OBSTACLE_WIDTH
    gap_height: int = GAP_HEIGHT
    min_segment_height: int = MIN_SEGMENT_HEIGHT
    obstacle_speed: float = OBSTACLE_SPEED
    spawn_interval_ms: float = SPAWN_INTERVAL_MS
    gravity: float = GRAVITY
    flap_impulse: float = FLAP_IMPULSE

    def __post_init__(self):
        # Obstacle heights are drawn with randint, so the vertical geometry is integral.
        for name in ("playfield_height", "gap_height", "min_segment_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not float(value).is_integer():
                raise ConfigurationError(f"{name} must be a whole number, got {value}")
            object.__setattr__(self, name, int(value))

        for name in ("playfield_width", "playfield_height", "actor_width",
                     "actor_height", "obstacle_width", "gap_height",
                     "obstacle_speed", "spawn_interval_ms", "gravity"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")

        if self.min_segment_height < 0:
            raise ConfigurationError(
                f"min_segment_height must not be negative, got {self.min_segment_height}")
        if self.flap_impulse >= 0:
            raise ConfigurationError(
                f"flap_impulse must be negative (upward), got {self.flap_impulse}")

        # The top barrier range must be non-empty for spawning to be possible.
        if self.max_top_height < self.min_top_height:
            raise ConfigurationError(
                f"gap_height {self.gap_height} leaves no room for two "
                f"{self.min_segment_height}px segments in a {self.playfield_height}px playfield")

        if self.actor_height > self.gap_height:
            raise ConfigurationError(
                f"actor_height {self.actor_height} does not fit through gap_height {self.gap_height}")
        if not 0 <= self.actor_x <= self.playfield_width - self.actor_width:
            raise ConfigurationError(
                f"actor_x {self.actor_x} places the actor outside the playfield")

    @property
    def min_top_height(self) -> int:
        return self.min_segment_height

    @property
    def max_top_height(self) -> int:
        return self.playfield_height - self.gap_height - self.min_segment_height

    @property
    def floor_y(self) -> float:
        """Largest y the actor may occupy."""
        return self.playfield_height - self.actor_height

    @classmethod
    def from_overrides(cls, **overrides) -> "GameConfig":
        """Builds a config from the defaults, replacing only the given fields."""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown config fields: {', '.join(sorted(unknown))}")
        config = replace(cls(), **overrides)
        logger.debug("Built config with overrides %s", overrides)
        return config
