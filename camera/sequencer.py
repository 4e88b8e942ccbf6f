"""
CameraSequencer — demo camera that cycles through bodies.

The target sequence is cyclic with period  P = Σ duration.  At time t:

    cycle_time = t mod P
    segment    = first segment whose cumulative end  >  cycle_time

i.e. segments are half-open intervals [start, end). When the segment index
changes, the orbit centre is re-locked to the target body's position at that
instant and then stays fixed for the rest of the segment.

Every tick the camera orbits the locked centre on a breathing radius

    R = orbit_radius + zoom_amplitude · sin(zoom_speed · t)
    a = orbit_speed · t
    desired = locked + (R cos a, vertical_offset, R sin a)

and its position is lerped towards `desired` by `smoothing`. The look-at point
is the locked centre, not smoothed.

State transitions are explicit:  tick(state, t) -> (state', pose).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from core.coords import polar_xz, vec_add
from core.errors import ConfigurationError
from core.log import get_logger
from core.types import CameraPose, Vec3, ORIGIN
from universe.catalogue import BodyCatalogue
from universe.kinematics import position
from .config import CameraConfig, CameraSegment, DEFAULT_TARGET_SEQUENCE
from .smoothing import lerp_vec

log = get_logger(__name__)


@dataclass(frozen=True)
class CameraSequencerState:
    segment_index:      int
    locked_target:      Vec3
    segment_start_time: float
    camera_position:    Vec3

    @property
    def pose(self) -> CameraPose:
        return CameraPose(self.camera_position, self.locked_target)


# ── Segment lookup ───────────────────────────────────────────────────────────

def total_period(segments: Sequence[CameraSegment]) -> float:
    return sum(seg.duration for seg in segments)


def segment_index_at(segments: Sequence[CameraSegment], t: float,
                     period: Optional[float] = None) -> int:
    """
    Index of the segment active at time t (half-open [start, end) intervals).
    Negative t wraps like any other time.
    """
    if period is None:
        period = total_period(segments)
    cycle_time = t % period
    accumulated = 0.0
    for i, seg in enumerate(segments):
        accumulated += seg.duration
        if cycle_time < accumulated:
            return i
    # cycle_time rounded up to the full period: same as the cycle start
    return 0


def desired_camera_position(locked: Vec3, t: float, cfg: CameraConfig) -> Vec3:
    radius = cfg.orbit_radius + cfg.zoom_amplitude * math.sin(cfg.zoom_speed * t)
    angle = t * cfg.orbit_speed
    return vec_add(locked, polar_xz(radius, angle, cfg.vertical_offset))


# ── Sequencer ────────────────────────────────────────────────────────────────

class CameraSequencer:
    """
    Stateless transition logic for the demo camera.

    Parameters
    ----------
    catalogue : BodyCatalogue used for target lookups (by exact name)
    segments  : target sequence (default Earth → Jupiter → Uranus → Neptune)
    config    : CameraConfig
    """

    def __init__(self,
                 catalogue: BodyCatalogue,
                 segments: Optional[Sequence[CameraSegment]] = None,
                 config: Optional[CameraConfig] = None):
        segments = tuple(DEFAULT_TARGET_SEQUENCE if segments is None else segments)
        if not segments:
            raise ConfigurationError("Camera target sequence is empty")

        self._catalogue = catalogue
        self._segments = segments
        self._config = config if config is not None else CameraConfig()
        self._period = total_period(segments)

        missing = [s.name for s in segments if s.name not in catalogue]
        if missing:
            log.warning(f"Camera targets not in catalogue, will lock on origin: {missing}")

    @property
    def segments(self) -> tuple[CameraSegment, ...]:
        return self._segments

    @property
    def config(self) -> CameraConfig:
        return self._config

    @property
    def period(self) -> float:
        return self._period

    # ------------------------------------------------------------------

    def resolve_target(self, segment_index: int, t: float) -> Vec3:
        """Current position of the segment's target; origin if unknown."""
        name = self._segments[segment_index].name
        body = self._catalogue.find(name)
        if body is None:
            log.warning(f"Camera target '{name}' not found, locking on origin")
            return ORIGIN
        return position(body, t)

    def initial_state(self) -> CameraSequencerState:
        return CameraSequencerState(
            segment_index=0,
            locked_target=self.resolve_target(0, 0.0),
            segment_start_time=0.0,
            camera_position=tuple(self._config.initial_position),
        )

    def tick(self, state: CameraSequencerState,
             t: float) -> tuple[CameraSequencerState, CameraPose]:
        """
        Advance the camera to time t. Returns the new state and the pose to
        render. A non-finite t leaves the state untouched.
        """
        if not math.isfinite(t):
            log.warning(f"Ignoring camera tick with non-finite time {t!r}")
            return state, state.pose

        idx = segment_index_at(self._segments, t, self._period)
        if idx != state.segment_index:
            locked = self.resolve_target(idx, t)
            start = t
            log.debug(f"Camera segment {idx} -> '{self._segments[idx].name}' at t={t:.3f}")
        else:
            locked = state.locked_target
            start = state.segment_start_time

        desired = desired_camera_position(locked, t, self._config)
        cam_pos = lerp_vec(state.camera_position, desired, self._config.smoothing)

        new_state = CameraSequencerState(
            segment_index=idx,
            locked_target=locked,
            segment_start_time=start,
            camera_position=cam_pos,
        )
        return new_state, CameraPose(cam_pos, locked)


class CameraRig:
    """
    Holds a CameraSequencerState between frames for callers that prefer
    `pose = rig.update(t)` over threading the state themselves.
    """

    def __init__(self, sequencer: CameraSequencer):
        self._sequencer = sequencer
        self._state = sequencer.initial_state()

    @property
    def state(self) -> CameraSequencerState:
        return self._state

    def update(self, t: float) -> CameraPose:
        self._state, pose = self._sequencer.tick(self._state, t)
        return pose

    def reset(self):
        self._state = self._sequencer.initial_state()
