#Marks zones as a package.
#Re-exports zone value types, containment/crossing tests and the edit
#transforms so callers import from zones without knowing internal file names.
#No business logic.

from .models import CircleZone, InvalidGeometry, PolygonZone, Zone, ZoneShape
from .policy import ZonePolicy, default_zone_policy
from .containment import (
    contains_point,
    crosses,
    point_in_zone,
    route_crosses_any_zone,
    segment_crosses_zone,
    zone_at,
    zones_containing,
)
from .editing import (
    EditRejected,
    InsertPoint,
    MoveCenter,
    MovePoint,
    RemovePoint,
    Resize,
    ResizeFromHandle,
    ZoneEdit,
    apply_zone_edit,
    apply_zone_edits,
    edge_midpoints,
    resize_handle_position,
)
from .drawing import PolygonDraft

__all__ = [
    "CircleZone",
    "PolygonZone",
    "Zone",
    "ZoneShape",
    "InvalidGeometry",
    "ZonePolicy",
    "default_zone_policy",
    "contains_point",
    "crosses",
    "point_in_zone",
    "route_crosses_any_zone",
    "segment_crosses_zone",
    "zone_at",
    "zones_containing",
    "EditRejected",
    "InsertPoint",
    "MoveCenter",
    "MovePoint",
    "RemovePoint",
    "Resize",
    "ResizeFromHandle",
    "ZoneEdit",
    "apply_zone_edit",
    "apply_zone_edits",
    "edge_midpoints",
    "resize_handle_position",
    "PolygonDraft",
]
