"""
Falloff kernels — raw accumulated field → bounded "warp".

The raw field is the additive sum  Σ mass_i / (d_i + 1)  over all sources.
A kernel shapes it for display:

    LINEAR                warp = raw                       (unbounded)
    EXPONENTIAL           warp = 1 - exp(-raw·k)           [0, 1)
    SMOOTHED_EXPONENTIAL  warp = sqrt(1 - exp(-raw·k))     [0, 1), flatter peak
    CONICAL               warp = D·(1 - r/R)²  for r < R   radius-limited cone

k = sensitivity, R = dip_radius, D = max_dip. CONICAL ignores masses: it
only needs the in-plane distance r from the dominant source.
"""
from __future__ import annotations
import math
from enum import Enum
from typing import Tuple

import numpy as np


class FalloffKernel(str, Enum):
    LINEAR               = "linear"
    EXPONENTIAL          = "exponential"
    SMOOTHED_EXPONENTIAL = "smoothed_exponential"
    CONICAL              = "conical"

    @property
    def uses_mass(self) -> bool:
        return self is not FalloffKernel.CONICAL


class SurfacePlane(str, Enum):
    """
    Plane spanned by the deformable surface. The remaining axis is the
    displacement axis and is ignored when measuring distances.
    """
    XZ = "xz"   # ground plane, Y up (default scene orientation)
    XY = "xy"   # wall plane, Z out of screen
    YZ = "yz"

    @property
    def axes(self) -> Tuple[int, int]:
        return _PLANE_AXES[self]

    @property
    def normal_axis(self) -> int:
        return _PLANE_NORMAL[self]


_PLANE_AXES = {
    SurfacePlane.XZ: (0, 2),
    SurfacePlane.XY: (0, 1),
    SurfacePlane.YZ: (1, 2),
}

_PLANE_NORMAL = {
    SurfacePlane.XZ: 1,
    SurfacePlane.XY: 2,
    SurfacePlane.YZ: 0,
}


# ── Scalar kernels ───────────────────────────────────────────────────────────

def linear_warp(raw: float) -> float:
    return raw


def exponential_warp(raw: float, sensitivity: float) -> float:
    # expm1 keeps precision for tiny raw values: 1 - e^-x == -expm1(-x)
    return -math.expm1(-raw * sensitivity)


def smoothed_exponential_warp(raw: float, sensitivity: float) -> float:
    return math.sqrt(max(0.0, exponential_warp(raw, sensitivity)))


def conical_warp(r: float, dip_radius: float, max_dip: float) -> float:
    if r >= dip_radius:
        return 0.0
    f = 1.0 - r / dip_radius
    return max_dip * f * f


# ── Vectorised kernels (numpy) ───────────────────────────────────────────────

def exponential_warp_array(raw: np.ndarray, sensitivity: float) -> np.ndarray:
    return -np.expm1(-raw * sensitivity)


def smoothed_exponential_warp_array(raw: np.ndarray,
                                    sensitivity: float) -> np.ndarray:
    return np.sqrt(np.clip(exponential_warp_array(raw, sensitivity), 0.0, None))


def conical_warp_array(r: np.ndarray, dip_radius: float,
                       max_dip: float) -> np.ndarray:
    f = np.clip(1.0 - r / dip_radius, 0.0, None)
    return max_dip * f * f
