"""
Purpose: Central configuration for zone creation and editing.
What it does:

Stores the tunables used when zones are created or edited interactively:

DEFAULT_CIRCLE_RADIUS_M = 500
METERS_PER_DEGREE = 111000 (flat approximation used by drag handles)
MIN_POLYGON_POINTS = 3

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ZonePolicy:
    """
    Central configuration for zone geometry.
    """

    # --- Creation ---
    # Radius given to a circle zone dropped on the map with a single click.
    default_circle_radius_m: float = 500.0

    # --- Drag handles ---
    # The resize handle sits radius / meters_per_degree north of the center,
    # and a dragged handle is converted back with the same factor.
    meters_per_degree: float = 111_000.0

    # --- Ring size ---
    # A polygon ring can never drop below this many points.
    min_polygon_points: int = 3

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.default_circle_radius_m <= 0:
            raise ValueError("default_circle_radius_m must be > 0")

        if self.meters_per_degree <= 0:
            raise ValueError("meters_per_degree must be > 0")

        if self.min_polygon_points < 3:
            raise ValueError("min_polygon_points must be at least 3")


def default_zone_policy() -> ZonePolicy:
    """
    Convenience factory for the default policy.
    """
    p = ZonePolicy()
    p.validate()
    return p
