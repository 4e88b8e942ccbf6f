"""
Simulation package — per-frame orchestration of the core.

    from simulation import SolarSystemSimulation
    sim = SolarSystemSimulation.from_config()
    state = sim.initial_state()
    state, frame = sim.tick(state, t)
"""
from .scene import SolarSystemSimulation, SimulationState, FrameSnapshot

__all__ = [
    "SolarSystemSimulation",
    "SimulationState",
    "FrameSnapshot",
]
