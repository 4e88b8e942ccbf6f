"""
SolarSystemSimulation — one synchronous tick of the whole core.

Order inside a tick (all steps see the same t):

    1. kinematics   body positions for t
    2. field        (position, mass) sources for the surface deformer
    3. camera       sequencer transition + smoothed pose

The tick returns a FrameSnapshot: plain data the renderer copies into its own
buffers. The core never holds references into renderer-owned memory.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from core.config import SceneConfig
from core.log import get_logger, setup_logging
from core.time_controller import SimulationClock
from core.types import BodyState, CameraPose, Vec3
from camera.config import CameraConfig, CameraSegment
from camera.sequencer import CameraSequencer, CameraSequencerState
from gravity.config import FieldConfig
from gravity.field_sampler import FieldSource, GravityFieldSampler, sources_from_states
from universe.catalogue import BodyCatalogue
from universe.kinematics import body_states

log = get_logger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one frame."""
    time:   float
    bodies: tuple[BodyState, ...]
    camera: CameraPose

    @property
    def field_sources(self) -> list[FieldSource]:
        return sources_from_states(self.bodies)

    def position_of(self, name: str) -> Optional[Vec3]:
        for b in self.bodies:
            if b.name == name:
                return b.position
        return None


@dataclass(frozen=True)
class SimulationState:
    """Mutable-by-replacement state carried between ticks (camera only)."""
    camera: CameraSequencerState
    last_time: Optional[float] = None


class SolarSystemSimulation:
    """
    Wires catalogue, kinematics, field sampler and camera sequencer together.

    Usage:
        sim = SolarSystemSimulation.from_config(SceneConfig.load(path))
        state = sim.initial_state()
        clock = sim.make_clock()
        while running:
            state, frame = sim.tick(state, clock.step(dt_wall))
            heights = sim.sample_points(vertices, frame)
    """

    def __init__(self,
                 catalogue: BodyCatalogue,
                 field_config: Optional[FieldConfig] = None,
                 camera_config: Optional[CameraConfig] = None,
                 targets: Optional[Sequence[CameraSegment]] = None):
        self._catalogue = catalogue
        self._sampler = GravityFieldSampler(field_config)
        self._camera = CameraSequencer(catalogue, targets, camera_config)

    @classmethod
    def from_config(cls, config: Optional[SceneConfig] = None,
                    catalogue: Optional[BodyCatalogue] = None,
                    configure_logging: bool = False
                    ) -> 'SolarSystemSimulation':
        """
        Build the core from a SceneConfig. configure_logging=True also
        installs the log sinks described in config.logging.
        """
        config = config if config is not None else SceneConfig()
        if configure_logging:
            lc = config.logging
            setup_logging(lc.level, lc.file, lc.max_size_mb, lc.backup_count)
        catalogue = catalogue if catalogue is not None else BodyCatalogue.default()
        sim = cls(catalogue,
                  field_config=config.field,
                  camera_config=config.camera,
                  targets=config.targets)
        log.info(f"Simulation ready: {len(catalogue)} bodies, "
                 f"kernel={config.field.kernel.value}, "
                 f"camera cycle={sim.camera.period:g}s")
        return sim

    # ── Components ───────────────────────────────────────────────────────────

    @property
    def catalogue(self) -> BodyCatalogue:
        return self._catalogue

    @property
    def sampler(self) -> GravityFieldSampler:
        return self._sampler

    @property
    def camera(self) -> CameraSequencer:
        return self._camera

    def make_clock(self, start: float = 0.0) -> SimulationClock:
        """Driver clock using the camera config's time_scale."""
        return SimulationClock(time_scale=self._camera.config.time_scale, start=start)

    # ── Tick ─────────────────────────────────────────────────────────────────

    def initial_state(self) -> SimulationState:
        return SimulationState(camera=self._camera.initial_state())

    def tick(self, state: SimulationState,
             t: float) -> tuple[SimulationState, FrameSnapshot]:
        """
        Compute the frame for time t. A non-finite t is skipped: the
        previous state is kept and the frame repeats the last good time.
        """
        if not math.isfinite(t):
            log.warning(f"Skipping tick with non-finite time {t!r}")
            prev_t = state.last_time if state.last_time is not None else 0.0
            frame = FrameSnapshot(
                time=prev_t,
                bodies=tuple(body_states(self._catalogue, prev_t)),
                camera=state.camera.pose,
            )
            return state, frame

        bodies = tuple(body_states(self._catalogue, t))
        cam_state, pose = self._camera.tick(state.camera, t)
        frame = FrameSnapshot(time=t, bodies=bodies, camera=pose)
        return SimulationState(camera=cam_state, last_time=t), frame

    # ── Field queries against a frame ────────────────────────────────────────

    def sample(self, point: Vec3, frame: FrameSnapshot) -> float:
        return self._sampler.sample(point, frame.field_sources)

    def sample_points(self, points, frame: FrameSnapshot) -> np.ndarray:
        return self._sampler.sample_points(points, frame.field_sources)
