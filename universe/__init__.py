"""
Universe module — body catalogue and orbital kinematics.

Usage:
    from universe import BodyCatalogue, position, body_states
    catalogue = BodyCatalogue.default()
    earth = catalogue.find("Earth")
    x, y, z = position(earth, t)
    states = body_states(catalogue, t)
"""

from .celestial_body import (
    CelestialBody,
    AU_SCALE,
    SECONDS_PER_YEAR,
    angular_speed_from_period,
    build_solar_system,
)
from .catalogue import BodyCatalogue
from .kinematics import (
    position,
    orbit_angle,
    orbital_period,
    body_states,
    find_position,
    positions_array,
)

__all__ = [
    "CelestialBody",
    "AU_SCALE",
    "SECONDS_PER_YEAR",
    "angular_speed_from_period",
    "build_solar_system",
    "BodyCatalogue",
    "position",
    "orbit_angle",
    "orbital_period",
    "body_states",
    "find_position",
    "positions_array",
]
