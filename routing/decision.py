"""
Purpose: The routing decision procedure (single entry point for routing requests).
What it does:
Given a vehicle, a requested destination, the zone set and the parking lots,
decides whether the direct route is allowed or has to become a two-leg detour
through a parking lot.

- allowed vehicles always get the direct route
- restricted vehicles whose destination is in a zone, or whose straight path
  crosses one, are sent through the best feasible parking lot. The leg to the
  lot may enter only the lot's own zones, the leg from the lot only the
  destination's zones; any other zone makes the lot infeasible.
- if no lot is feasible the decision stays restricted with no detour: the
  caller must surface that as unresolved, not draw a direct route

Rule: pure function of its inputs, no state, no I/O. The decision is always
made on the straight segment vehicle -> destination, never on a fetched polyline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from geo import LatLon
from parking import ParkingLot, best_parking_lot
from vehicles import Vehicle
from zones import Zone, point_in_zone, route_crosses_any_zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutingDecision:
    """
    Output of evaluate_route. Built fresh per request, never mutated.

    destination: where the user asked to go
    detour_point: parking lot position to stop at first, if any
    restricted: the destination lay in, or behind, a restricted zone
    """
    destination: LatLon
    detour_point: Optional[LatLon] = None
    restricted: bool = False

    @property
    def has_detour(self) -> bool:
        return self.detour_point is not None

    @property
    def is_unresolved(self) -> bool:
        """Restricted but no safe detour exists."""
        return self.restricted and self.detour_point is None

    def waypoints(self, origin: LatLon) -> List[LatLon]:
        """
        Ordered straight-leg endpoints: [origin, lot, destination] for a
        detour, [origin, destination] otherwise, [] when unresolved.
        """
        if self.is_unresolved:
            return []
        if self.has_detour:
            return [origin, self.detour_point, self.destination]
        return [origin, self.destination]


def evaluate_route(
        vehicle: Vehicle,
        destination: LatLon,
        zones: Sequence[Zone],
        parking_lots: Sequence[ParkingLot],
) -> RoutingDecision:
    destination_restricted = any(point_in_zone(destination, zone) for zone in zones)
    path_restricted = route_crosses_any_zone(vehicle.position, destination, zones)

    if not vehicle.is_restricted or not (destination_restricted or path_restricted):
        logger.debug("Vehicle %s: direct route to %s", vehicle.id, destination)
        return RoutingDecision(destination=destination)

    #each leg may enter only the zones holding the point it stops at
    detour = best_parking_lot(
        vehicle.position, destination, parking_lots, zones,
        exempt_endpoint_zones=True,
    )

    if detour is None:
        logger.info(
            "Vehicle %s: no feasible parking lot for %s (destination_restricted=%s, path_restricted=%s)",
            vehicle.id, destination, destination_restricted, path_restricted,
        )
        return RoutingDecision(destination=destination, restricted=True)

    logger.debug("Vehicle %s: detour via %s (%s)", vehicle.id, detour.name, detour.id)
    return RoutingDecision(
        destination=destination,
        detour_point=detour.position,
        restricted=True,
    )
