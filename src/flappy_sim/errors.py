"""
errors.py: Exceptions raised by the simulation.
"""


class FlappySimError(Exception):
    """Base class for all flappy_sim errors."""


class ConfigurationError(FlappySimError, ValueError):
    """A GameConfig that cannot produce a playable game."""
