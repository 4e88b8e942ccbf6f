"""Field sampler settings."""

from pydantic import BaseModel, ConfigDict, Field

from .kernels import FalloffKernel, SurfacePlane


class FieldConfig(BaseModel):
    """
    Gravity field sampler configuration.

    sensitivity is used by the exponential kernels, dip_radius and max_dip by
    the conical kernel. Out-of-range values are rejected, never clamped.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kernel: FalloffKernel = Field(default=FalloffKernel.EXPONENTIAL)
    sensitivity: float = Field(default=0.1, gt=0.0)
    dip_radius: float = Field(default=30.0, gt=0.0)
    max_dip: float = Field(default=1.0, gt=0.0)
    plane: SurfacePlane = Field(default=SurfacePlane.XZ)
