import math

import pytest

from universe import BodyCatalogue, CelestialBody


@pytest.fixture
def catalogue():
    return BodyCatalogue.default()


@pytest.fixture
def earth():
    # period 1 → angular speed 2π
    return CelestialBody.from_period("Earth", mass=1.0, orbit_radius=20.0, period=1.0)


@pytest.fixture
def toy_catalogue():
    return BodyCatalogue([
        CelestialBody("Sun", mass=1000.0),
        CelestialBody("Inner", mass=1.0, orbit_radius=10.0,
                      angular_speed=0.5, initial_phase=0.3),
        CelestialBody("Outer", mass=300.0, orbit_radius=40.0,
                      angular_speed=0.1, initial_phase=math.pi),
    ])
