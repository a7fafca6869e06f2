"""
Purpose: Pure transforms for interactive zone edits.
What it does:
Takes a zone plus one edit instruction and returns either a new zone or an
EditRejected result. The input zone is never mutated, so on rejection the
caller simply keeps the zone it already has.

Edit instructions:
- MoveCenter(center)          circle: new center, radius unchanged
- Resize(radius_m)            circle: explicit radius, must be > 0
- ResizeFromHandle(handle)    circle: radius from the dragged resize handle
- MovePoint(index, point)     polygon: replace one vertex
- InsertPoint(index, point)   polygon: insert a vertex (usually an edge midpoint)
- RemovePoint(index)          polygon: drop a vertex, never below the minimum ring size

Also exposes the handle positions a map shell needs to draw edit markers
(resize_handle_position, edge_midpoints).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple, Union

from geo import LatLon, midpoint, planar_offset_m

from .models import CircleZone, InvalidGeometry, PolygonZone, Zone
from .policy import ZonePolicy, default_zone_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveCenter:
    center: LatLon


@dataclass(frozen=True)
class Resize:
    radius_m: float


@dataclass(frozen=True)
class ResizeFromHandle:
    """
    The resize handle was dropped at `handle`. The radius is measured from the
    zone's current center, so a center move applied first is taken into account.
    """
    handle: LatLon


@dataclass(frozen=True)
class MovePoint:
    index: int
    point: LatLon


@dataclass(frozen=True)
class InsertPoint:
    index: int
    point: LatLon


@dataclass(frozen=True)
class RemovePoint:
    index: int


ZoneEdit = Union[MoveCenter, Resize, ResizeFromHandle, MovePoint, InsertPoint, RemovePoint]

CIRCLE_EDITS = (MoveCenter, Resize, ResizeFromHandle)
POLYGON_EDITS = (MovePoint, InsertPoint, RemovePoint)


@dataclass(frozen=True)
class EditRejected:
    """
    Result of an edit that would leave the zone in an illegal state.
    `zone` is the untouched pre-edit zone. Falsy, so `if result:` reads naturally.
    """
    zone: Zone
    edit: ZoneEdit
    reason: str

    def __bool__(self) -> bool:
        return False


EditResult = Union[CircleZone, PolygonZone, EditRejected]


def apply_zone_edit(zone: Zone, edit: ZoneEdit, policy: Optional[ZonePolicy] = None) -> EditResult:
    """
    Apply one edit instruction and return the new zone, or EditRejected.
    """
    policy = policy or default_zone_policy()

    try:
        if isinstance(zone, CircleZone):
            if not isinstance(edit, CIRCLE_EDITS):
                return _reject(zone, edit, f"{type(edit).__name__} does not apply to a circle zone")
            return _edit_circle(zone, edit, policy)

        if isinstance(zone, PolygonZone):
            if not isinstance(edit, POLYGON_EDITS):
                return _reject(zone, edit, f"{type(edit).__name__} does not apply to a polygon zone")
            return _edit_polygon(zone, edit, policy)

    except InvalidGeometry as exc:
        return _reject(zone, edit, str(exc))

    raise TypeError(f"Unsupported zone type: {type(zone).__name__}")


def apply_zone_edits(
    zone: Zone,
    edits: Iterable[ZoneEdit],
    policy: Optional[ZonePolicy] = None,
) -> EditResult:
    """
    Apply edits in order, all or nothing. On the first rejection the result
    carries the zone passed in, not the partly edited one, along with the
    failing edit and its reason.
    """
    current: EditResult = zone
    for edit in edits:
        current = apply_zone_edit(current, edit, policy)
        if isinstance(current, EditRejected):
            return replace(current, zone=zone)
    return current


def resize_handle_position(circle: CircleZone, policy: Optional[ZonePolicy] = None) -> LatLon:
    """Where the resize handle is drawn: due north of the center, one radius away."""
    policy = policy or default_zone_policy()
    lat, lon = circle.center
    return (lat + circle.radius_m / policy.meters_per_degree, lon)


def edge_midpoints(polygon: PolygonZone) -> List[Tuple[int, LatLon]]:
    """
    One (insert_index, midpoint) per edge. Feeding the pair straight into
    InsertPoint splits that edge in two.
    """
    return [
        (index + 1, midpoint(edge_start, edge_end))
        for index, (edge_start, edge_end) in enumerate(polygon.edges)
    ]


def _edit_circle(zone: CircleZone, edit, policy: ZonePolicy) -> EditResult:
    if isinstance(edit, MoveCenter):
        return replace(zone, center=edit.center)

    if isinstance(edit, Resize):
        radius_m = edit.radius_m
    else:
        radius_m = planar_offset_m(zone.center, edit.handle, policy.meters_per_degree)

    #replace() re-runs __post_init__, which rejects radius <= 0
    return replace(zone, radius_m=radius_m)


def _edit_polygon(zone: PolygonZone, edit, policy: ZonePolicy) -> EditResult:
    points = list(zone.points)
    n = len(points)

    if isinstance(edit, MovePoint):
        if not 0 <= edit.index < n:
            return _reject(zone, edit, f"Vertex index {edit.index} out of range for {n} points")
        points[edit.index] = edit.point

    elif isinstance(edit, InsertPoint):
        #inserting at n appends after the last vertex
        if not 0 <= edit.index <= n:
            return _reject(zone, edit, f"Insert index {edit.index} out of range for {n} points")
        points.insert(edit.index, edit.point)

    else:
        if not 0 <= edit.index < n:
            return _reject(zone, edit, f"Vertex index {edit.index} out of range for {n} points")
        if n - 1 < policy.min_polygon_points:
            return _reject(
                zone, edit,
                f"Polygon cannot have fewer than {policy.min_polygon_points} points",
            )
        del points[edit.index]

    return replace(zone, points=tuple(points))


def _reject(zone: Zone, edit: ZoneEdit, reason: str) -> EditRejected:
    logger.info("Rejected %s on zone %s: %s", type(edit).__name__, zone.id, reason)
    return EditRejected(zone=zone, edit=edit, reason=reason)
