import pytest

from core.errors import ConfigurationError
from core.time_controller import SPEEDS, SimulationClock


def test_step_applies_time_scale():
    clock = SimulationClock(time_scale=2.0)
    assert clock.step(0.5) == pytest.approx(1.0)
    assert clock.step(0.25) == pytest.approx(1.5)
    assert clock.t == pytest.approx(1.5)


def test_pause_freezes_time():
    clock = SimulationClock()
    clock.step(1.0)
    clock.toggle_pause()
    assert clock.paused
    assert clock.speed == 0.0
    assert clock.step(10.0) == pytest.approx(1.0)
    clock.toggle_pause()
    assert clock.step(1.0) == pytest.approx(2.0)


def test_reverse_runs_backwards():
    clock = SimulationClock(start=5.0)
    clock.reverse()
    assert clock.step(2.0) == pytest.approx(3.0)
    assert clock.speed_label.startswith("◀◀")


def test_speed_steps():
    clock = SimulationClock()
    clock.speed_up()
    assert clock.speed == SPEEDS[clock.speed_idx] == 2
    for _ in range(20):
        clock.speed_down()
    assert clock.paused
    assert clock.speed_label == "PAUSED"
    clock.speed_up()
    assert not clock.paused
    assert clock.speed > 0


def test_jump_and_reset():
    clock = SimulationClock(start=1.0)
    clock.jump(-4.0)
    assert clock.t == pytest.approx(-3.0)
    clock.reverse()
    clock.reset()
    assert clock.t == 1.0
    assert clock.step(1.0) == pytest.approx(2.0)


def test_invalid_time_scale():
    with pytest.raises(ConfigurationError):
        SimulationClock(time_scale=float("inf"))
