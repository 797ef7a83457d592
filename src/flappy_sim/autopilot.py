"""
autopilot.py: Non-human input sources and a headless runner.
"""

import logging
from typing import Callable, Optional

from .data_models import Command, Obstacle, RenderSnapshot, RunResult, RunState
from .engine import SimulationEngine

logger = logging.getLogger(__name__)

Policy = Callable[[RenderSnapshot], Optional[Command]]


class Autopilot:
    """
    Heuristic policy: keep the actor's bottom edge just above the bottom of
    the next gap, flapping only while falling.
    """

    def __init__(self, gap_height: float, playfield_height: float, margin: float = 10.0):
        self.gap_height = gap_height
        self.playfield_height = playfield_height
        self.margin = margin

    @classmethod
    def for_engine(cls, engine: SimulationEngine, **kwargs) -> "Autopilot":
        return cls(engine.config.gap_height, engine.config.playfield_height, **kwargs)

    def next_obstacle(self, snapshot: RenderSnapshot) -> Optional[Obstacle]:
        """First obstacle in stream order the actor has not cleared yet."""
        for obstacle in snapshot.obstacles:
            if not obstacle.passed:
                return obstacle
        return None

    def target_line(self, snapshot: RenderSnapshot) -> float:
        obstacle = self.next_obstacle(snapshot)
        if obstacle is None:
            return self.playfield_height / 2 + snapshot.actor.height / 2
        _, gap_bottom = obstacle.gap_bounds(self.gap_height)
        return gap_bottom - self.margin

    def decide(self, snapshot: RenderSnapshot) -> Optional[Command]:
        if snapshot.state is not RunState.RUNNING:
            return None
        actor = snapshot.actor
        if actor.bottom > self.target_line(snapshot) and actor.velocity >= 0:
            return Command.FLAP
        return None

    __call__ = decide


def run_headless(engine: SimulationEngine,
                 policy: Optional[Policy] = None,
                 max_ticks: int = 10_000,
                 frame_ms: float = 1000 / 60,
                 start_ms: float = 0.0,
                 keep_snapshots: bool = False) -> RunResult:
    """
    Starts a run and steps it with synthetic timestamps until it ends or
    max_ticks elapse. The policy sees each snapshot and may return a command.
    """
    engine.start()
    snapshot = engine.snapshot()
    result = RunResult(ticks=0, score=0, state=snapshot.state)

    while result.ticks < max_ticks and snapshot.state is RunState.RUNNING:
        if policy is not None:
            command = policy(snapshot)
            if command is not None:
                engine.submit(command)
                if command is Command.FLAP:
                    result.flaps += 1

        snapshot = engine.step(start_ms + result.ticks * frame_ms)
        result.ticks += 1
        if keep_snapshots:
            result.snapshots.append(snapshot)

    result.score = snapshot.score
    result.state = snapshot.state
    logger.info("Headless run finished: %d ticks, score %d, %s",
                result.ticks, result.score, result.state.value)
    return result
