from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# Scene-space vector (x, y, z). Orbits lie in the XZ plane, Y is "up".
Vec3 = Tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)

@dataclass(slots=True, frozen=True)
class BodyState:
    """Position and mass of one body at one tick, handed to the renderer."""
    name: str
    position: Vec3
    mass: float

@dataclass(slots=True, frozen=True)
class CameraPose:
    position: Vec3
    look_at: Vec3
