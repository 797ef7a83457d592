"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class RunState(Enum):
    """Lifecycle of a run: IDLE -> RUNNING -> ENDED -> RUNNING ..."""
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class Command(Enum):
    """Device-independent inputs accepted by the engine."""
    START = "start"
    FLAP = "flap"


@dataclass
class Actor:
    """The falling/flapping object. Only y and velocity change during a run."""
    x: float
    y: float
    width: float
    height: float
    velocity: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Obstacle:
    """A top and bottom barrier sharing one x position and a fixed gap."""
    x: float
    top_height: float
    passed: bool = False

    def gap_bounds(self, gap_height: float) -> Tuple[float, float]:
        """Returns (gap_top, gap_bottom) in playfield coordinates."""
        return self.top_height, self.top_height + gap_height


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only copy of everything the presentation layer draws."""
    actor: Actor
    obstacles: Tuple[Obstacle, ...]
    score: int
    state: RunState
    tick: int = 0
    final_score: Optional[int] = None


@dataclass
class RunResult:
    """Outcome of a headless run."""
    ticks: int
    score: int
    state: RunState
    flaps: int = 0
    snapshots: list = field(default_factory=list, repr=False)
