from __future__ import annotations

import pytest

from flappy_sim.config import GameConfig
from flappy_sim.data_models import Actor, Obstacle
from flappy_sim.physics_core import collides


def _actor(y: float = 228.0) -> Actor:
    return Actor(x=50, y=y, width=34, height=24)


def test_overlapping_top_barrier_collides(config: GameConfig) -> None:
    # Gap spans 300..420, actor spans 228..252.
    assert collides(_actor(), Obstacle(x=40, top_height=300), config) is True


def test_overlapping_bottom_barrier_collides(config: GameConfig) -> None:
    # Gap spans 100..220.
    assert collides(_actor(), Obstacle(x=40, top_height=100), config) is True


def test_beside_the_pipe_is_not_a_collision(config: GameConfig) -> None:
    # Vertically the actor would hit the barrier, but the pipe is still ahead.
    assert collides(_actor(), Obstacle(x=100, top_height=300), config) is False


def test_inside_the_gap_is_not_a_collision(config: GameConfig) -> None:
    # Horizontally overlapping, but the actor flies through the gap.
    assert collides(_actor(), Obstacle(x=40, top_height=200), config) is False


@pytest.mark.parametrize("x", [84.0, -2.0])
def test_touching_edges_do_not_overlap(config: GameConfig, x: float) -> None:
    assert collides(_actor(), Obstacle(x=x, top_height=300), config) is False


def test_actor_flush_with_gap_edges_does_not_collide(config: GameConfig) -> None:
    obstacle = Obstacle(x=40, top_height=200)
    assert collides(_actor(y=200), obstacle, config) is False
    assert collides(_actor(y=296), obstacle, config) is False
    assert collides(_actor(y=296.5), obstacle, config) is True
    assert collides(_actor(y=199.5), obstacle, config) is True
