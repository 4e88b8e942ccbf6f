"""
Camera package — target-locking demo camera.

Main exports:
    CameraSequencer       — tick(state, t) -> (state', CameraPose)
    CameraSequencerState  — segment index, locked target, camera position
    CameraRig             — stateful wrapper around a sequencer
    CameraConfig          — orbit/zoom/smoothing settings
    CameraSegment         — {name, duration} entry of the target sequence
"""
from .config import CameraConfig, CameraSegment, DEFAULT_TARGET_SEQUENCE
from .smoothing import lerp, lerp_vec, ticks_to_converge
from .sequencer import (
    CameraSequencer,
    CameraSequencerState,
    CameraRig,
    total_period,
    segment_index_at,
    desired_camera_position,
)

__all__ = [
    "CameraConfig",
    "CameraSegment",
    "DEFAULT_TARGET_SEQUENCE",
    "lerp",
    "lerp_vec",
    "ticks_to_converge",
    "CameraSequencer",
    "CameraSequencerState",
    "CameraRig",
    "total_period",
    "segment_index_at",
    "desired_camera_position",
]
