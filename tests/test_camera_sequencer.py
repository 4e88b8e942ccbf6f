import math

import pytest
from pydantic import ValidationError

from camera import (
    CameraConfig,
    CameraRig,
    CameraSegment,
    CameraSequencer,
    desired_camera_position,
    lerp_vec,
    segment_index_at,
    ticks_to_converge,
    total_period,
)
from core.errors import ConfigurationError
from universe import position


SEQ = [CameraSegment(name="Inner", duration=2.0),
       CameraSegment(name="Outer", duration=3.0),
       CameraSegment(name="Sun", duration=1.0)]


@pytest.fixture
def sequencer(toy_catalogue):
    return CameraSequencer(toy_catalogue, SEQ, CameraConfig(smoothing=0.25))


# ── Segment lookup ───────────────────────────────────────────────────────────

def test_total_period():
    assert total_period(SEQ) == 6.0


@pytest.mark.parametrize("t, expected", [
    (0.0, 0), (1.999, 0), (2.0, 1), (4.99, 1), (5.0, 2), (5.999, 2),
    (6.0, 0), (8.5, 1), (-0.5, 2), (-6.0, 0), (600.0, 0),
])
def test_half_open_segments(t, expected):
    assert segment_index_at(SEQ, t) == expected


def test_cycle_closure(sequencer):
    state = sequencer.initial_state()
    visited = [state.segment_index]
    dt = 0.0625
    steps = round(sequencer.period / dt)
    for k in range(1, steps + 1):
        state, _ = sequencer.tick(state, k * dt)
        if state.segment_index != visited[-1]:
            visited.append(state.segment_index)
    assert visited == [0, 1, 2, 0]


# ── Target locking ───────────────────────────────────────────────────────────

def test_initial_state_locks_first_target(sequencer, toy_catalogue):
    state = sequencer.initial_state()
    assert state.segment_index == 0
    assert state.segment_start_time == 0.0
    assert state.locked_target == position(toy_catalogue.find("Inner"), 0.0)
    assert state.camera_position == (0.0, 40.0, 100.0)


def test_target_locked_on_segment_entry(sequencer, toy_catalogue):
    state = sequencer.initial_state()
    state, _ = sequencer.tick(state, 1.0)
    state, pose = sequencer.tick(state, 2.5)
    outer = toy_catalogue.find("Outer")
    assert state.segment_index == 1
    assert state.segment_start_time == 2.5
    assert state.locked_target == position(outer, 2.5)
    assert pose.look_at == position(outer, 2.5)

    # stays locked while the body keeps moving
    state, pose = sequencer.tick(state, 4.0)
    assert state.locked_target == position(outer, 2.5)
    assert state.segment_start_time == 2.5
    assert pose.look_at == position(outer, 2.5)


def test_unknown_target_falls_back_to_origin(toy_catalogue):
    seq = CameraSequencer(toy_catalogue, [CameraSegment(name="Inner", duration=1.0),
                                          CameraSegment(name="Vulcan", duration=1.0)])
    state = seq.initial_state()
    state, pose = seq.tick(state, 1.5)
    assert state.segment_index == 1
    assert state.locked_target == (0.0, 0.0, 0.0)
    assert pose.look_at == (0.0, 0.0, 0.0)
    # and keeps running afterwards
    state, _ = seq.tick(state, 2.2)
    assert state.segment_index == 0
    assert state.locked_target == position(toy_catalogue.find("Inner"), 2.2)


# ── Per-tick motion ──────────────────────────────────────────────────────────

def test_camera_lerps_towards_desired(sequencer):
    state = sequencer.initial_state()
    t = 0.5
    desired = desired_camera_position(state.locked_target, t, sequencer.config)
    new_state, pose = sequencer.tick(state, t)
    expected = lerp_vec(state.camera_position, desired, 0.25)
    assert new_state.camera_position == pytest.approx(expected)
    assert pose.position == new_state.camera_position


def test_desired_position_formula():
    cfg = CameraConfig(orbit_radius=100.0, orbit_speed=0.5, zoom_amplitude=20.0,
                       zoom_speed=2.0, vertical_offset=30.0)
    locked = (10.0, 0.0, -5.0)
    t = 1.7
    r = 100.0 + 20.0 * math.sin(2.0 * t)
    a = 0.5 * t
    assert desired_camera_position(locked, t, cfg) == pytest.approx(
        (10.0 + r * math.cos(a), 30.0, -5.0 + r * math.sin(a)))


def test_smoothing_one_jumps_to_desired(toy_catalogue):
    seq = CameraSequencer(toy_catalogue, SEQ, CameraConfig(smoothing=1.0))
    state, pose = seq.tick(seq.initial_state(), 0.3)
    desired = desired_camera_position(state.locked_target, 0.3, seq.config)
    assert pose.position == pytest.approx(desired)


def test_smoothing_convergence():
    s = 0.1
    target = (10.0, -4.0, 7.0)
    pos = (0.0, 0.0, 0.0)

    def dist(p):
        return math.dist(p, target)

    d0 = dist(pos)
    prev = d0
    n = ticks_to_converge(1e-3, s, initial_distance=d0)
    assert n == math.ceil(math.log(1e-3 / d0) / math.log(1 - s))
    for _ in range(n):
        pos = lerp_vec(pos, target, s)
        assert dist(pos) == pytest.approx(prev * (1 - s), rel=1e-9)
        prev = dist(pos)
    assert dist(pos) <= 1e-3


def test_ticks_to_converge_edges():
    assert ticks_to_converge(0.01, 1.0) == 1
    assert ticks_to_converge(2.0, 0.5, initial_distance=1.0) == 0
    assert ticks_to_converge(0.01, 0.5) == 7
    with pytest.raises(ValueError):
        ticks_to_converge(0.01, 0.0)


def test_non_finite_time_keeps_state(sequencer):
    state = sequencer.initial_state()
    state, _ = sequencer.tick(state, 1.0)
    same, pose = sequencer.tick(state, float("nan"))
    assert same is state
    assert pose == state.pose
    after, _ = sequencer.tick(same, 2.5)
    assert after.segment_index == 1


def test_rig_tracks_state(sequencer):
    rig = CameraRig(sequencer)
    rig.update(0.5)
    rig.update(2.1)
    assert rig.state.segment_index == 1
    rig.reset()
    assert rig.state == sequencer.initial_state()


# ── Configuration ────────────────────────────────────────────────────────────

def test_camera_defaults():
    cfg = CameraConfig()
    assert (cfg.orbit_radius, cfg.orbit_speed, cfg.zoom_amplitude, cfg.zoom_speed,
            cfg.vertical_offset, cfg.smoothing, cfg.time_scale) == \
        (150.0, 1.0, 50.0, 1.0, 50.0, 0.1, 1.0)


@pytest.mark.parametrize("smoothing", [0.0, -0.1, 1.5])
def test_invalid_smoothing_rejected(smoothing):
    with pytest.raises(ValidationError):
        CameraConfig(smoothing=smoothing)


@pytest.mark.parametrize("duration", [0.0, -5.0])
def test_invalid_duration_rejected(duration):
    with pytest.raises(ValidationError):
        CameraSegment(name="Earth", duration=duration)


def test_empty_sequence_rejected(toy_catalogue):
    with pytest.raises(ConfigurationError):
        CameraSequencer(toy_catalogue, [])
