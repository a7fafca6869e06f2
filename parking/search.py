"""
Purpose: Business rules and distance math for choosing a parking lot.
What it does:
- nearest_parking_lot: closest lot to a point, no zone rules
- feasible_parking_lots: lots reachable without either leg touching a zone
- best_parking_lot: feasible lot with the shortest start -> lot -> end detour
- rank_parking_lots: all feasible lots, shortest detour first

Ties always go to the lot seen first in the input order.
None means "nothing to recommend", which callers must not confuse with
"no detour needed".
"""

from typing import Iterable, List, Optional, Sequence

from geo import LatLon, distance
from zones import Zone, point_in_zone, route_crosses_any_zone

from .models import ParkingLot


def nearest_parking_lot(point: LatLon, lots: Iterable[ParkingLot]) -> Optional[ParkingLot]:
    nearest = None
    nearest_distance = None

    for lot in lots:
        lot_distance = distance(point, lot.position)
        #strict < keeps the first lot on ties
        if nearest is None or lot_distance < nearest_distance:
            nearest = lot
            nearest_distance = lot_distance

    return nearest


def _leg_blocked(start: LatLon, end: LatLon, zones: Sequence[Zone], exempt_end_zones: bool) -> bool:
    if exempt_end_zones:
        zones = [zone for zone in zones if not point_in_zone(end, zone)]
    return route_crosses_any_zone(start, end, zones)


def feasible_parking_lots(
    start: LatLon,
    end: LatLon,
    lots: Iterable[ParkingLot],
    zones: Sequence[Zone],
    *,
    exempt_endpoint_zones: bool = False,
) -> List[ParkingLot]:
    """
    Returns only lots where neither start -> lot nor lot -> end crosses
    any zone. Input order is kept.

    With exempt_endpoint_zones, each leg ignores the zones holding the point
    it drives to: start -> lot ignores the lot's zones, lot -> end ignores
    the destination's zones. Everything else still blocks the leg.
    """
    feasible = []

    for lot in lots:
        if _leg_blocked(start, lot.position, zones, exempt_endpoint_zones):
            continue

        if _leg_blocked(lot.position, end, zones, exempt_endpoint_zones):
            continue

        feasible.append(lot)

    return feasible


def detour_distance(start: LatLon, end: LatLon, lot: ParkingLot) -> float:
    """Total straight-line length of start -> lot -> end, in meters."""
    return distance(start, lot.position) + distance(lot.position, end)


def best_parking_lot(
    start: LatLon,
    end: LatLon,
    lots: Iterable[ParkingLot],
    zones: Sequence[Zone],
    *,
    exempt_endpoint_zones: bool = False,
) -> Optional[ParkingLot]:
    best = None
    best_distance = None

    feasible = feasible_parking_lots(start, end, lots, zones, exempt_endpoint_zones=exempt_endpoint_zones)
    for lot in feasible:
        total = detour_distance(start, end, lot)
        if best is None or total < best_distance:
            best = lot
            best_distance = total

    return best


def rank_parking_lots(
    start: LatLon,
    end: LatLon,
    lots: Iterable[ParkingLot],
    zones: Sequence[Zone],
    *,
    exempt_endpoint_zones: bool = False,
) -> List[ParkingLot]:
    """
    Feasible lots sorted by detour distance, shortest first.
    sorted() is stable, so equal detours keep their input order.
    """
    return sorted(
        feasible_parking_lots(start, end, lots, zones, exempt_endpoint_zones=exempt_endpoint_zones),
        key=lambda lot: detour_distance(start, end, lot),
    )
