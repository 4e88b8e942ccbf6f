"""
CelestialBody — immutable descriptor of one body of the toy solar system.

Orbits are circular, coplanar (XZ plane) and centred on the origin. A body is
fully described by its orbit radius, angular speed and phase at t=0; the
position at any time is computed by universe.kinematics, never stored here.

Scene units:
    orbit_radius  — scene units (AU × AU_SCALE for the default catalogue)
    angular_speed — radians per simulation second
    initial_phase — radians at t=0
    mass          — arbitrary units (Earth = 1, Sun = 1000)

visual_radius and color are passed through to the renderer untouched.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from core.errors import CatalogueError


# Earth's orbit (1 AU) maps to 20 scene units
AU_SCALE = 20.0

# Simulation seconds per Earth year in the default catalogue
SECONDS_PER_YEAR = 20.0

TWO_PI = 2.0 * math.pi


def angular_speed_from_period(period: float) -> float:
    """2π / period for period > 0, otherwise 0 (stationary body)."""
    if period > 0.0 and math.isfinite(period):
        return TWO_PI / period
    return 0.0


@dataclass(frozen=True)
class CelestialBody:
    name:          str
    mass:          float
    orbit_radius:  float = 0.0
    angular_speed: float = 0.0
    initial_phase: float = 0.0
    visual_radius: float = 1.0
    color:         str   = "white"

    def __post_init__(self):
        if not self.name:
            raise CatalogueError("Body name must be a non-empty string")
        for attr in ("mass", "orbit_radius", "angular_speed", "initial_phase"):
            if not math.isfinite(getattr(self, attr)):
                raise CatalogueError(f"{self.name}: {attr} must be finite")
        if self.mass <= 0.0:
            raise CatalogueError(f"{self.name}: mass must be positive, got {self.mass}")
        if self.orbit_radius < 0.0:
            raise CatalogueError(
                f"{self.name}: orbit_radius must be >= 0, got {self.orbit_radius}")

    @classmethod
    def from_period(cls, name: str, mass: float, orbit_radius: float,
                    period: float, initial_phase: float = 0.0,
                    visual_radius: float = 1.0,
                    color: str = "white") -> 'CelestialBody':
        """Build a body from its orbital period (same time unit as t)."""
        return cls(
            name=name,
            mass=mass,
            orbit_radius=orbit_radius,
            angular_speed=angular_speed_from_period(period),
            initial_phase=initial_phase,
            visual_radius=visual_radius,
            color=color,
        )

    @property
    def is_central(self) -> bool:
        return self.orbit_radius == 0.0

    @property
    def is_stationary(self) -> bool:
        return self.angular_speed <= 0.0

    def __repr__(self) -> str:
        return (f"<CelestialBody '{self.name}' m={self.mass:g} "
                f"r={self.orbit_radius:g} ω={self.angular_speed:.4f}>")


# ---------------------------------------------------------------------------
# Default catalogue — Sun + 8 planets
# ---------------------------------------------------------------------------

# (name, color, orbit AU, size rel. Earth, period Earth years, mass Earth=1, phase rad)
_PLANET_TABLE = [
    ("Mercury", "gray",       0.39,  0.38,   0.24,  0.055, 0.0),
    ("Venus",   "yellow",     0.72,  0.95,   0.62,  0.815, 1.0),
    ("Earth",   "blue",       1.00,  1.00,   1.00,  1.0,   2.0),
    ("Mars",    "red",        1.52,  0.53,   1.88,  0.107, 3.0),
    ("Jupiter", "orange",     5.20, 11.21,  11.86, 317.8,  4.0),
    ("Saturn",  "goldenrod",  9.58,  9.45,  29.46,  95.2,  5.0),
    ("Uranus",  "lightblue", 19.20,  4.01,  84.01,  14.5,  6.0),
    ("Neptune", "blue",      30.05,  3.88, 164.8,   17.1,  7.0),
]

SUN_MASS = 1000.0
SUN_VISUAL_RADIUS = 10.0   # ~109 Earth radii in reality, shrunk for the view


def build_solar_system(au_scale: float = AU_SCALE,
                       seconds_per_year: float = SECONDS_PER_YEAR
                       ) -> list[CelestialBody]:
    """
    Return the default bodies: a stationary Sun at the origin followed by
    the eight planets in order of distance.
    """
    sun = CelestialBody(
        name="Sun",
        mass=SUN_MASS,
        orbit_radius=0.0,
        angular_speed=0.0,
        visual_radius=SUN_VISUAL_RADIUS,
        color="yellow",
    )

    planets = [
        CelestialBody.from_period(
            name=name,
            mass=mass,
            orbit_radius=orbit_au * au_scale,
            period=period_yr * seconds_per_year,
            initial_phase=phase,
            visual_radius=size,
            color=color,
        )
        for name, color, orbit_au, size, period_yr, mass, phase in _PLANET_TABLE
    ]
    return [sun] + planets
