"""
BodyCatalogue — the single, read-only list of bodies.

Built once at startup and handed to every component that needs bodies
(kinematics, camera sequencer, scene). Nothing may add or remove bodies
afterwards.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional

from loguru import logger

from core.errors import CatalogueError
from .celestial_body import CelestialBody, build_solar_system


class BodyCatalogue:
    """
    Immutable ordered collection of CelestialBody with unique names.

    Invariants checked at construction:
      - names are unique
      - at most one body has orbit_radius == 0 (the central body)
    Orbiting bodies with a non-positive angular speed are accepted; kinematics
    pins them to the origin.
    """

    __slots__ = ("_bodies", "_by_name", "_central")

    def __init__(self, bodies: Iterable[CelestialBody]):
        bodies = tuple(bodies)
        by_name: dict[str, CelestialBody] = {}
        central: list[CelestialBody] = []

        for body in bodies:
            if body.name in by_name:
                raise CatalogueError(f"Duplicate body name: {body.name!r}")
            by_name[body.name] = body
            if body.is_central:
                central.append(body)
            elif body.is_stationary:
                logger.warning(f"{body.name}: orbiting body without angular speed, "
                               f"will stay at the origin")

        if len(central) > 1:
            names = ", ".join(b.name for b in central)
            raise CatalogueError(f"More than one central body: {names}")

        self._bodies = bodies
        self._by_name = by_name
        self._central = central[0] if central else None

    @classmethod
    def default(cls) -> 'BodyCatalogue':
        return cls(build_solar_system())

    # ------------------------------------------------------------------

    def find(self, name: str) -> Optional[CelestialBody]:
        """Exact name match, None when absent."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def central_body(self) -> Optional[CelestialBody]:
        return self._central

    @property
    def names(self) -> list[str]:
        return [b.name for b in self._bodies]

    @property
    def bodies(self) -> tuple[CelestialBody, ...]:
        return self._bodies

    def __iter__(self) -> Iterator[CelestialBody]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __getitem__(self, idx: int) -> CelestialBody:
        return self._bodies[idx]

    def __repr__(self) -> str:
        return f"<BodyCatalogue {len(self._bodies)} bodies: {', '.join(self.names)}>"
