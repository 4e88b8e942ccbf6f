"""
Core utilities shared by every simulation component.

    types           — Vec3, BodyState, CameraPose
    coords          — small vector helpers
    errors          — exception taxonomy
    time_controller — SimulationClock (external frame driver)
    log             — loguru setup
    config          — SceneConfig (import explicitly: it pulls in every
                      component's settings model)
"""
from .types import Vec3, ORIGIN, BodyState, CameraPose
from .errors import OrreryError, ConfigurationError, CatalogueError

__all__ = [
    "Vec3",
    "ORIGIN",
    "BodyState",
    "CameraPose",
    "OrreryError",
    "ConfigurationError",
    "CatalogueError",
]
