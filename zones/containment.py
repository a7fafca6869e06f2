"""
Purpose: Zone containment and straight-segment crossing tests.
What it does:
- point_in_zone / contains_point: is a point inside a circle or polygon zone
- segment_crosses_zone / crosses: does a straight segment touch a zone
- route_crosses_any_zone: same test against a whole zone set (short-circuits)
- zones_containing / zone_at: hit-testing helpers for map clicks

The crossing test always works on the straight segment between two points,
never on a fetched road polyline, so the answer does not depend on a
directions provider being reachable.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from geo import (
    LatLon,
    point_in_circle,
    point_in_polygon,
    segment_intersects_circle,
    segments_intersect,
)

from .models import CircleZone, PolygonZone, Zone


def point_in_zone(point: LatLon, zone: Zone) -> bool:
    if isinstance(zone, CircleZone):
        return point_in_circle(point, zone.center, zone.radius_m)
    if isinstance(zone, PolygonZone):
        return point_in_polygon(point, zone.points)
    raise TypeError(f"Unsupported zone type: {type(zone).__name__}")


def contains_point(zone: Zone, point: LatLon) -> bool:
    """Hit-test entry point, zone first."""
    return point_in_zone(point, zone)


def segment_crosses_zone(start: LatLon, end: LatLon, zone: Zone) -> bool:
    """
    Circle: the segment comes within the radius of the center.
    Polygon: the segment cuts an edge, or either endpoint lies inside the ring
    (covers segments fully inside the zone that never touch an edge).
    """
    if isinstance(zone, CircleZone):
        return segment_intersects_circle(start, end, zone.center, zone.radius_m)

    if isinstance(zone, PolygonZone):
        for edge_start, edge_end in zone.edges:
            if segments_intersect(start, end, edge_start, edge_end):
                return True
        return point_in_polygon(start, zone.points) or point_in_polygon(end, zone.points)

    raise TypeError(f"Unsupported zone type: {type(zone).__name__}")


def crosses(start: LatLon, end: LatLon, zone: Zone) -> bool:
    return segment_crosses_zone(start, end, zone)


def route_crosses_any_zone(start: LatLon, end: LatLon, zones: Iterable[Zone]) -> bool:
    return any(segment_crosses_zone(start, end, zone) for zone in zones)


def zones_containing(point: LatLon, zones: Iterable[Zone]) -> List[Zone]:
    """All zones holding the point, in input order."""
    return [zone for zone in zones if point_in_zone(point, zone)]


def zone_at(point: LatLon, zones: Iterable[Zone]) -> Optional[Zone]:
    for zone in zones:
        if point_in_zone(point, zone):
            return zone
    return None
