"""Camera sequencer settings and the target sequence."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class CameraConfig(BaseModel):
    """
    Orbiting demo camera.

    orbit_radius    base distance from the locked target (scene units)
    orbit_speed     angular speed around the target (rad/s)
    zoom_amplitude  amplitude of the radius oscillation
    zoom_speed      frequency of the radius oscillation (rad/s)
    vertical_offset height above the target
    smoothing       lerp factor per tick, in (0, 1]
    time_scale      simulation seconds per wall-clock second (used by the clock)
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    orbit_radius: float = Field(default=150.0)
    orbit_speed: float = Field(default=1.0)
    zoom_amplitude: float = Field(default=50.0)
    zoom_speed: float = Field(default=1.0)
    vertical_offset: float = Field(default=50.0)
    smoothing: float = Field(default=0.1, gt=0.0, le=1.0)
    time_scale: float = Field(default=1.0)
    initial_position: Tuple[float, float, float] = Field(default=(0.0, 40.0, 100.0))


class CameraSegment(BaseModel):
    """Lock onto body `name` for `duration` simulation seconds."""
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    name: str = Field(min_length=1)
    duration: float = Field(gt=0.0)


DEFAULT_TARGET_SEQUENCE: tuple[CameraSegment, ...] = (
    CameraSegment(name="Earth", duration=5.0),
    CameraSegment(name="Jupiter", duration=5.0),
    CameraSegment(name="Uranus", duration=5.0),
    CameraSegment(name="Neptune", duration=5.0),
)
