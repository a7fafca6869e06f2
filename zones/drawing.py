"""
Purpose: Click-by-click polygon construction.
What it does:
Accumulates the points an operator clicks while drawing a polygon zone. The
draft is complete as soon as it holds the policy's minimum ring size, which
is when a map shell closes the polygon and turns it into a PolygonZone.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from geo import LatLon

from .models import InvalidGeometry, PolygonZone
from .policy import ZonePolicy, default_zone_policy


@dataclass(frozen=True)
class PolygonDraft:
    points: Tuple[LatLon, ...] = ()
    policy: ZonePolicy = field(default_factory=default_zone_policy)

    def add_point(self, point: LatLon) -> PolygonDraft:
        return replace(self, points=self.points + (point,))

    @property
    def is_complete(self) -> bool:
        return len(self.points) >= self.policy.min_polygon_points

    def build(self, zone_id: Optional[str] = None) -> PolygonZone:
        if not self.is_complete:
            raise InvalidGeometry(
                f"Draft has {len(self.points)} points, needs {self.policy.min_polygon_points}"
            )
        return PolygonZone.new(self.points, zone_id=zone_id)
