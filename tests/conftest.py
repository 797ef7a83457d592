from __future__ import annotations

import random

import pytest

from flappy_sim.config import GameConfig
from flappy_sim.engine import SimulationEngine


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def engine(config: GameConfig) -> SimulationEngine:
    """Engine with a seeded RNG so obstacle heights are reproducible."""
    return SimulationEngine(config, rng=random.Random(1234))


@pytest.fixture()
def running_engine(engine: SimulationEngine) -> SimulationEngine:
    engine.start()
    return engine
