"""
GravityFieldSampler — scalar "warp" of a deformable surface.

Every query is a pure function of (point, sources, config):

    raw  = Σ  mass_i / (d_i + 1)        d_i = in-plane distance point → source_i
    warp = kernel(raw)                  see gravity.kernels

The sampler never owns or iterates a surface grid. A deformer asks for
single points (sample) or for a batch of its own vertices (sample_points)
and applies the vertical offset itself; sign and scale are its business.

Sums are taken in a canonical order (math.fsum for single points, sorted
terms for batches) so the result does not depend on how the caller ordered
the sources.
"""
from __future__ import annotations
import math
from typing import Iterable, NamedTuple, Optional, Sequence

import numpy as np

from core.types import BodyState, Vec3
from .config import FieldConfig
from .kernels import (
    FalloffKernel,
    SurfacePlane,
    linear_warp,
    exponential_warp,
    smoothed_exponential_warp,
    conical_warp,
    exponential_warp_array,
    smoothed_exponential_warp_array,
    conical_warp_array,
)


class FieldSource(NamedTuple):
    """A massive point feeding the field. Plain (position, mass) tuples work too."""
    position: Vec3
    mass: float


def sources_from_states(states: Iterable[BodyState]) -> list[FieldSource]:
    return [FieldSource(s.position, s.mass) for s in states]


def plane_distance(a: Vec3, b: Vec3,
                   plane: SurfacePlane = SurfacePlane.XZ) -> float:
    """Distance between a and b ignoring the plane's normal axis."""
    i, j = plane.axes
    return math.hypot(a[i] - b[i], a[j] - b[j])


def raw_field(point: Vec3, sources: Sequence[FieldSource],
              plane: SurfacePlane = SurfacePlane.XZ) -> float:
    """Σ mass / (distance + 1). Empty source list → 0.0."""
    return math.fsum(mass / (plane_distance(point, pos, plane) + 1.0)
                     for pos, mass in sources)


def _dominant_distance(point: Vec3, sources: Sequence[FieldSource],
                       plane: SurfacePlane) -> Optional[float]:
    """
    In-plane distance to the most massive source (nearest one on ties).
    None when there are no sources.
    """
    if not sources:
        return None
    top = max(mass for _, mass in sources)
    return min(plane_distance(point, pos, plane)
               for pos, mass in sources if mass == top)


class GravityFieldSampler:
    """
    Stateless field sampler with a selectable falloff kernel.

    Parameters
    ----------
    config : FieldConfig (default: exponential kernel, sensitivity 0.1, XZ plane)
    """

    def __init__(self, config: Optional[FieldConfig] = None):
        self._config = config if config is not None else FieldConfig()

    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def kernel(self) -> FalloffKernel:
        return self._config.kernel

    @property
    def plane(self) -> SurfacePlane:
        return self._config.plane

    # ── Single point ─────────────────────────────────────────────────────────

    def sample_raw(self, point: Vec3, sources: Sequence[FieldSource]) -> float:
        return raw_field(point, sources, self._config.plane)

    def sample(self, point: Vec3, sources: Sequence[FieldSource]) -> float:
        """Warp at point. O(len(sources)), no side effects."""
        cfg = self._config
        k = cfg.kernel

        if k is FalloffKernel.CONICAL:
            r = _dominant_distance(point, sources, cfg.plane)
            if r is None:
                return 0.0
            return conical_warp(r, cfg.dip_radius, cfg.max_dip)

        raw = raw_field(point, sources, cfg.plane)
        if k is FalloffKernel.LINEAR:
            return linear_warp(raw)
        if k is FalloffKernel.EXPONENTIAL:
            return exponential_warp(raw, cfg.sensitivity)
        return smoothed_exponential_warp(raw, cfg.sensitivity)

    # ── Batch (numpy) ────────────────────────────────────────────────────────

    def sample_points(self, points, sources: Sequence[FieldSource]) -> np.ndarray:
        """
        Warp for an (m, 3) array of query points, shape (m,).
        Same values as calling sample() per point, up to float rounding.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        m = pts.shape[0]
        cfg = self._config

        if not sources:
            return np.zeros(m, dtype=np.float64)

        pos = np.array([s[0] for s in sources], dtype=np.float64).reshape(-1, 3)
        mass = np.array([s[1] for s in sources], dtype=np.float64)

        i, j = cfg.plane.axes
        # (m, n) in-plane distances
        d = np.hypot(pts[:, i, None] - pos[None, :, i],
                     pts[:, j, None] - pos[None, :, j])

        if cfg.kernel is FalloffKernel.CONICAL:
            dominant = mass == mass.max()
            r = d[:, dominant].min(axis=1)
            return conical_warp_array(r, cfg.dip_radius, cfg.max_dip)

        terms = mass[None, :] / (d + 1.0)
        raw = np.sort(terms, axis=1).sum(axis=1)

        if cfg.kernel is FalloffKernel.LINEAR:
            return raw
        if cfg.kernel is FalloffKernel.EXPONENTIAL:
            return exponential_warp_array(raw, cfg.sensitivity)
        return smoothed_exponential_warp_array(raw, cfg.sensitivity)

    def __repr__(self) -> str:
        c = self._config
        return (f"<GravityFieldSampler kernel={c.kernel.value} "
                f"plane={c.plane.value} k={c.sensitivity}>")
