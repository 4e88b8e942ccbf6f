"""
Cinematica orbitale — posizione dei corpi in funzione del tempo simulato.

Orbite circolari complanari (piano XZ, Y = 0):

    angle = t · angular_speed + initial_phase
    x = r · cos(angle)
    z = r · sin(angle)

Le posizioni dipendono solo dal tempo assoluto t, mai dal frame precedente:
il tempo può essere fermato, riavvolto o fatto scorrere all'indietro senza
accumulo di errore. Corpi con angular_speed <= 0 (corpo centrale o periodo
degenere) restano fissi nell'origine.
"""

from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

from core.coords import polar_xz
from core.types import BodyState, Vec3, ORIGIN
from .celestial_body import CelestialBody, TWO_PI


def orbit_angle(body: CelestialBody, t: float) -> float:
    """Angle (rad, unwrapped) of the body at time t."""
    return t * body.angular_speed + body.initial_phase


def position(body: CelestialBody, t: float) -> Vec3:
    """Scene position of body at simulation time t. Pure."""
    if body.angular_speed <= 0.0:
        return ORIGIN
    return polar_xz(body.orbit_radius, orbit_angle(body, t))


def orbital_period(body: CelestialBody) -> Optional[float]:
    """Time for one full revolution, None for stationary bodies."""
    if body.angular_speed <= 0.0:
        return None
    return TWO_PI / body.angular_speed


def body_states(bodies: Iterable[CelestialBody], t: float) -> list[BodyState]:
    """Positions + masses of every body at t, in catalogue order."""
    return [BodyState(b.name, position(b, t), b.mass) for b in bodies]


def find_position(bodies: Iterable[CelestialBody], name: str,
                  t: float) -> Optional[Vec3]:
    """Position of the body called name, None when no body matches."""
    for b in bodies:
        if b.name == name:
            return position(b, t)
    return None


def positions_array(bodies: Iterable[CelestialBody], t: float) -> np.ndarray:
    """
    Vectorised positions, shape (n, 3). Stationary bodies get (0, 0, 0),
    same branch as position().
    """
    bodies = list(bodies)
    r     = np.array([b.orbit_radius  for b in bodies], dtype=np.float64)
    omega = np.array([b.angular_speed for b in bodies], dtype=np.float64)
    phase = np.array([b.initial_phase for b in bodies], dtype=np.float64)

    moving = omega > 0.0
    angle = t * omega + phase
    out = np.zeros((len(bodies), 3), dtype=np.float64)
    out[:, 0] = np.where(moving, r * np.cos(angle), 0.0)
    out[:, 2] = np.where(moving, r * np.sin(angle), 0.0)
    return out
