"""
Purpose: Value types for restricted-access zones.
What it does:
Defines the two zone shapes as separate immutable records (no shared struct
with optional fields):
- CircleZone (id, center, radius_m)
- PolygonZone (id, points) - ring is implicitly closed, simplicity is never checked

Zone = CircleZone | PolygonZone

Rule: No geometry tests, no editing logic. Models + construction invariants only.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from geo import LatLon

from .policy import ZonePolicy, default_zone_policy

MIN_POLYGON_POINTS = 3


class InvalidGeometry(ValueError):
    """Raised when a zone would be built in an illegal state."""
    pass


class ZoneShape(str, Enum):
    CIRCLE = "circle"
    POLYGON = "polygon"


@dataclass(frozen=True)
class CircleZone:
    """
    Circular zone. radius_m is in meters and must be > 0.
    """
    id: str
    center: LatLon
    radius_m: float

    def __post_init__(self):
        if not self.radius_m > 0:
            raise InvalidGeometry(f"Circle radius must be > 0, got {self.radius_m}")
        object.__setattr__(self, "center", (float(self.center[0]), float(self.center[1])))

    @property
    def shape(self) -> ZoneShape:
        return ZoneShape.CIRCLE

    @classmethod
    def new(
        cls,
        lat: float,
        lon: float,
        radius_m: Optional[float] = None,
        zone_id: Optional[str] = None,
        policy: Optional[ZonePolicy] = None,
    ) -> CircleZone:
        policy = policy or default_zone_policy()

        return cls(
            id=zone_id or str(uuid.uuid4()),
            center=(lat, lon),
            radius_m=policy.default_circle_radius_m if radius_m is None else radius_m,
        )


@dataclass(frozen=True)
class PolygonZone:
    """
    Polygon zone over an implicitly closed ring of (lat, lon) points.

    The ring may self-intersect; downstream geometry copes with it and
    nothing here tries to repair it.
    """
    id: str
    points: Tuple[LatLon, ...]

    def __post_init__(self):
        points = tuple((float(lat), float(lon)) for lat, lon in self.points)
        if len(points) < MIN_POLYGON_POINTS:
            raise InvalidGeometry(
                f"Polygon needs at least {MIN_POLYGON_POINTS} points, got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    @property
    def shape(self) -> ZoneShape:
        return ZoneShape.POLYGON

    @property
    def edges(self) -> Iterable[Tuple[LatLon, LatLon]]:
        """(points[i], points[(i+1) % n]) for every i, closing edge included."""
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    @classmethod
    def new(cls, points: Iterable[LatLon], zone_id: Optional[str] = None) -> PolygonZone:
        return cls(id=zone_id or str(uuid.uuid4()), points=tuple(points))


Zone = Union[CircleZone, PolygonZone]
