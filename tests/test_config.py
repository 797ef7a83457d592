from __future__ import annotations

import dataclasses
import random

import pytest

from flappy_sim.config import GameConfig
from flappy_sim.engine import SimulationEngine
from flappy_sim.errors import ConfigurationError, FlappySimError


def test_defaults_match_classic_layout() -> None:
    cfg = GameConfig()
    assert (cfg.playfield_width, cfg.playfield_height) == (320, 480)
    assert (cfg.actor_width, cfg.actor_height) == (34, 24)
    assert cfg.min_top_height == 50
    assert cfg.max_top_height == 480 - 120 - 50
    assert cfg.floor_y == 480 - 24


def test_config_is_frozen() -> None:
    cfg = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.gravity = 1.0  # type: ignore[misc]


def test_gap_taller_than_playfield_allows_fails_fast() -> None:
    with pytest.raises(ConfigurationError, match="gap_height"):
        GameConfig(gap_height=400)


def test_gap_that_exactly_fits_is_accepted() -> None:
    cfg = GameConfig(gap_height=380)
    assert cfg.min_top_height == cfg.max_top_height == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"playfield_width": 0},
        {"obstacle_speed": -1},
        {"spawn_interval_ms": 0},
        {"gravity": 0},
        {"flap_impulse": 3.0},
        {"min_segment_height": -5},
        {"gap_height": 20},
        {"actor_x": 400},
    ],
)
def test_invalid_values_raise_configuration_error(overrides: dict) -> None:
    with pytest.raises(ConfigurationError):
        GameConfig(**overrides)


def test_configuration_error_is_a_value_error() -> None:
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigurationError, FlappySimError)


def test_from_overrides_replaces_only_given_fields() -> None:
    cfg = GameConfig.from_overrides(gravity=0.5, spawn_interval_ms=1000)
    assert cfg.gravity == 0.5
    assert cfg.spawn_interval_ms == 1000
    assert cfg.gap_height == GameConfig().gap_height


def test_from_overrides_rejects_unknown_fields() -> None:
    with pytest.raises(ConfigurationError, match="bird_size"):
        GameConfig.from_overrides(bird_size=3)


@pytest.mark.parametrize(
    ("name", "value"),
    [("playfield_height", 480.5), ("gap_height", 120.25), ("min_segment_height", 50.5)],
)
def test_fractional_vertical_geometry_is_rejected(name: str, value: float) -> None:
    with pytest.raises(ConfigurationError, match=name):
        GameConfig(**{name: value})


@pytest.mark.parametrize("name", ["playfield_height", "gap_height", "min_segment_height"])
def test_whole_float_geometry_is_stored_as_int(name: str) -> None:
    value = float(getattr(GameConfig(), name))
    cfg = GameConfig(**{name: value})
    assert getattr(cfg, name) == int(value)
    assert type(getattr(cfg, name)) is int


def test_whole_float_geometry_spawns_obstacles() -> None:
    cfg = GameConfig(playfield_height=480.0, gap_height=120.0, min_segment_height=50.0)
    engine = SimulationEngine(cfg, rng=random.Random(5))
    engine.start()
    snap = engine.step(2000)
    assert len(snap.obstacles) == 1
    assert 50 <= snap.obstacles[0].top_height <= 310
