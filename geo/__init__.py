#Marks geo as a package.
#Re-exports the flat-plane / haversine primitives so zones, parking and routing
#import from geo without knowing internal file names.
#No business logic.

from .primitives import (
    EARTH_RADIUS_M,
    LatLon,
    distance,
    midpoint,
    planar_offset_m,
    point_in_circle,
    point_in_polygon,
    segment_intersects_circle,
    segments_intersect,
)

__all__ = [
    "EARTH_RADIUS_M",
    "LatLon",
    "distance",
    "midpoint",
    "planar_offset_m",
    "point_in_circle",
    "point_in_polygon",
    "segment_intersects_circle",
    "segments_intersect",
]
