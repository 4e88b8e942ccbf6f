
from __future__ import annotations
import math

from .types import Vec3

def vec_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

def polar_xz(radius: float, angle_rad: float, y: float = 0.0) -> Vec3:
    """
    Point on a circle of given radius in the XZ plane.
    angle measured from +X towards +Z.
    """
    return (radius * math.cos(angle_rad), y, radius * math.sin(angle_rad))
