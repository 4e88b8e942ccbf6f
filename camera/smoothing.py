"""Exponential smoothing helpers for camera motion."""

from __future__ import annotations
import math

from core.types import Vec3


def lerp(a: float, b: float, s: float) -> float:
    return a + (b - a) * s


def lerp_vec(a: Vec3, b: Vec3, s: float) -> Vec3:
    """Move a towards b by fraction s (one smoothing tick)."""
    return (a[0] + (b[0] - a[0]) * s,
            a[1] + (b[1] - a[1]) * s,
            a[2] + (b[2] - a[2]) * s)


def ticks_to_converge(epsilon: float, smoothing: float,
                      initial_distance: float = 1.0) -> int:
    """
    Ticks needed for a fixed target to be within epsilon, given that each
    tick shrinks the remaining distance by (1 - smoothing).
    """
    if not 0.0 < smoothing <= 1.0:
        raise ValueError(f"smoothing must be in (0, 1], got {smoothing}")
    if epsilon <= 0.0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    if initial_distance <= epsilon:
        return 0
    if smoothing == 1.0:
        return 1
    return math.ceil(math.log(epsilon / initial_distance) / math.log(1.0 - smoothing))
