"""
Gravity package — visual "gravity well" field for a deformable surface.

Usage:
    from gravity import GravityFieldSampler, FieldConfig, FalloffKernel
    sampler = GravityFieldSampler(FieldConfig(kernel=FalloffKernel.EXPONENTIAL))
    warp = sampler.sample((x, 0.0, z), frame.field_sources)
"""
from .kernels import FalloffKernel, SurfacePlane
from .config import FieldConfig
from .field_sampler import (
    GravityFieldSampler,
    FieldSource,
    sources_from_states,
    plane_distance,
    raw_field,
)

__all__ = [
    "FalloffKernel",
    "SurfacePlane",
    "FieldConfig",
    "GravityFieldSampler",
    "FieldSource",
    "sources_from_states",
    "plane_distance",
    "raw_field",
]
