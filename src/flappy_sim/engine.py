"""
engine.py: The authoritative single-player simulation and run state machine.
"""

import logging
import random
import threading
from collections import deque
from dataclasses import replace
from typing import Deque, Optional, Tuple

from .config import GameConfig
from .data_models import Actor, Command, Obstacle, RenderSnapshot, RunState
from .obstacles import ObstacleStream
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def command_for_press(state: RunState) -> Command:
    """Maps the single "press" input (key or click) to a command for the given state."""
    if state is RunState.RUNNING:
        return Command.FLAP
    return Command.START


class SimulationEngine:
    """
    Owns the actor, the obstacle stream, the score and the run state, and
    advances them one tick per step(). Every public operation holds the
    engine lock, so a host with several threads sees one logical thread.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config if config is not None else GameConfig()
        self.core = PhysicsCore(self.config)
        self.stream = ObstacleStream(self.config, rng)

        self._actor: Actor = self.core.spawn_actor()
        self._state = RunState.IDLE
        self._score = 0
        self._final_score: Optional[int] = None
        self._tick = 0

        self._pending: Deque[Command] = deque()
        self._lock = threading.RLock()

    # -------- Read-only views --------

    @property
    def actor(self) -> Actor:
        """A copy of the actor; the engine's own state changes only through its operations."""
        return replace(self._actor)

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return tuple(replace(o) for o in self.stream)

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def tick(self) -> int:
        return self._tick

    def get_state(self) -> RunState:
        return self._state

    def get_score(self) -> int:
        return self._score

    def get_final_score(self) -> Optional[int]:
        """Score frozen when the last run ended, or None if no run has ended."""
        return self._final_score

    # -------- Transitions --------

    def start(self):
        """Resets all run state and enters RUNNING. Valid from any state."""
        with self._lock:
            self._actor = self.core.spawn_actor()
            self.stream.reset()
            self._score = 0
            self._final_score = None
            self._tick = 0
            self._pending.clear()
            self._state = RunState.RUNNING
            logger.info("Run started")

    restart = start

    def end_run(self):
        """Ends the current run and freezes the final score. Idempotent."""
        with self._lock:
            if self._state is not RunState.RUNNING:
                return
            self._state = RunState.ENDED
            self._final_score = self._score
            logger.info("Run ended after %d ticks. Final score: %d", self._tick, self._score)

    def flap(self):
        """Applies the flap impulse. No-op unless RUNNING."""
        with self._lock:
            if self._state is RunState.RUNNING:
                self.core.flap(self._actor)

    # -------- Commands --------

    def submit(self, command: Command):
        """Queues a command to be applied at the start of the next step()."""
        with self._lock:
            self._pending.append(command)

    def dispatch(self, command: Command):
        """Applies a command immediately."""
        with self._lock:
            if command is Command.START:
                self.start()
            elif command is Command.FLAP:
                self.flap()
            else:
                raise ValueError(f"Unknown command: {command!r}")

    def _drain_commands(self):
        while self._pending:
            self.dispatch(self._pending.popleft())

    # -------- Tick --------

    def snapshot(self) -> RenderSnapshot:
        """Copies the renderable state so callers can never mutate the engine."""
        with self._lock:
            a = self._actor
            return RenderSnapshot(
                actor=Actor(x=a.x, y=a.y, width=a.width, height=a.height, velocity=a.velocity),
                obstacles=tuple(
                    Obstacle(x=o.x, top_height=o.top_height, passed=o.passed) for o in self.stream
                ),
                score=self._score,
                state=self._state,
                tick=self._tick,
                final_score=self._final_score,
            )

    def step(self, now: float) -> RenderSnapshot:
        """
        Advances one tick at timestamp `now` (milliseconds).
        Termination found during the tick is applied once at its end, so a
        pass scored earlier in the same tick still counts.
        """
        with self._lock:
            self._drain_commands()
            if self._state is not RunState.RUNNING:
                return self.snapshot()

            # 1. Actor physics
            hit_floor = self.core.apply_gravity_step(self._actor)

            # 2. Spawn and move obstacles
            self.stream.maybe_spawn(now)
            points = self.stream.advance(self._actor)
            if points:
                self._score += points
                logger.debug("Score: %d", self._score)

            # 3. Collision check
            hit = self.core.check_collision(self._actor, self.stream)

            self._tick += 1
            if hit_floor or hit is not None:
                self.end_run()

            return self.snapshot()
