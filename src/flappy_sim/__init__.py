"""
flappy_sim: a deterministic single-screen flappy game engine with a pygame front end.
"""

from .config import GameConfig
from .data_models import Actor, Command, Obstacle, RenderSnapshot, RunResult, RunState
from .engine import SimulationEngine, command_for_press
from .errors import ConfigurationError, FlappySimError
from .obstacles import ObstacleStream
from .physics_core import PhysicsCore, collides

__all__ = [
    "Actor", "Command", "ConfigurationError", "FlappySimError", "GameConfig",
    "Obstacle", "ObstacleStream", "PhysicsCore", "RenderSnapshot", "RunResult",
    "RunState", "SimulationEngine", "collides", "command_for_press",
]
