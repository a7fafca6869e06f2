"""
Purpose: Geometry primitives shared by zones, parking and routing.
What it does:
- great-circle distance in meters (haversine)
- point-in-circle / point-in-polygon tests
- segment/segment and segment/circle intersection tests

Everything here works on raw (lat, lon) tuples. Except for `distance`, degrees
are treated as a locally flat plane (x = longitude, y = latitude), which is
good enough at city scale.

Rule: pure functions only, no zone/vehicle types. Degenerate input (coincident
points, zero-length edges) returns a plain bool/float and never divides by zero.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

#internal coordinate type :(lat,lon)
LatLon = Tuple[float, float]

EARTH_RADIUS_M = 6_371_000.0


def distance(a: LatLon, b: LatLon) -> float:
    """
    Haversine distance between two (lat, lon) points, in meters.
    """
    lat1 = math.radians(a[0])
    lat2 = math.radians(b[0])
    delta_lat = math.radians(b[0] - a[0])
    delta_lon = math.radians(b[1] - a[1])

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    )
    # rounding can push h a hair outside [0, 1] for antipodal/identical points
    h = min(1.0, max(0.0, h))

    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def point_in_circle(point: LatLon, center: LatLon, radius_m: float) -> bool:
    """Boundary inclusive."""
    return distance(point, center) <= radius_m


def point_in_polygon(point: LatLon, ring: Sequence[LatLon]) -> bool:
    """
    Even-odd ray cast over the implicitly closed ring.

    Edges are (ring[i-1], ring[i]) for every i, which covers the closing edge
    (last -> first). Horizontal and zero-length edges never toggle the result.
    """
    lat, lon = point
    inside = False

    n = len(ring)
    j = n - 1
    for i in range(n):
        yi, xi = ring[i]
        yj, xj = ring[j]

        #only edges that straddle the horizontal through the point can cross it,
        #so yj - yi is never zero when we divide
        if (yi > lat) != (yj > lat):
            crossing_lon = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lon < crossing_lon:
                inside = not inside
        j = i

    return inside


def segments_intersect(p1: LatLon, p2: LatLon, p3: LatLon, p4: LatLon) -> bool:
    """
    Parametric intersection of segments p1-p2 and p3-p4.

    Parallel and collinear segments (zero denominator) are reported as NOT
    intersecting, overlapping collinear segments included. Touching at an
    endpoint counts as an intersection.
    """
    y1, x1 = p1
    y2, x2 = p2
    y3, x3 = p3
    y4, x4 = p4

    denominator = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
    if denominator == 0:
        return False

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator

    return 0 <= ua <= 1 and 0 <= ub <= 1


def segment_intersects_circle(
        start: LatLon,
        end: LatLon,
        center: LatLon,
        radius_m: float,
) -> bool:
    """
    True if the segment start-end comes within radius_m of center.

    The closest point is found in degree space (projection clamped to the
    segment), the radius check itself uses the haversine distance.
    """
    dx = end[1] - start[1]
    dy = end[0] - start[0]
    length = math.hypot(dx, dy)

    #zero-length segment: the closest point is the segment itself
    if length == 0:
        return distance(start, center) <= radius_m

    nx = dx / length
    ny = dy / length

    cx = center[1] - start[1]
    cy = center[0] - start[0]

    projection = max(0.0, min(length, cx * nx + cy * ny))
    closest = (start[0] + ny * projection, start[1] + nx * projection)

    return distance(closest, center) <= radius_m


def midpoint(a: LatLon, b: LatLon) -> LatLon:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def planar_offset_m(a: LatLon, b: LatLon, meters_per_degree: float) -> float:
    """
    Flat-plane length of a-b scaled by a fixed meters-per-degree factor.
    Used by drag handles, which are placed with the same factor.
    """
    return math.hypot(b[0] - a[0], b[1] - a[1]) * meters_per_degree
