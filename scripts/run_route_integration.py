import logging
import os

from parking import ParkingLot
from routing import DirectionsClient, evaluate_route, resolve_route
from vehicles import AccessClass, Vehicle
from zones import CircleZone, PolygonZone


def build_scenario():
    # Central Paris: a 500 m restricted circle around Hotel de Ville
    zones = [
        CircleZone.new(48.8566, 2.3522, radius_m=500, zone_id="hotel-de-ville"),
        PolygonZone.new(
            [(48.8600, 2.3300), (48.8620, 2.3300), (48.8620, 2.3350), (48.8600, 2.3350)],
            zone_id="louvre-block",
        ),
    ]

    parking_lots = [
        ParkingLot.new(48.8580, 2.3500, ordinal=1, lot_id="p1"),
        ParkingLot.new(48.8700, 2.3600, ordinal=2, lot_id="p2"),
    ]

    vehicles = [
        Vehicle.new(48.8600, 2.3450, AccessClass.RESTRICTED, vehicle_id="van-1"),
        Vehicle.new(48.8600, 2.3450, AccessClass.ALLOWED, vehicle_id="car-1"),
    ]

    return zones, parking_lots, vehicles


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    zones, parking_lots, vehicles = build_scenario()
    destination = (48.8566, 2.3522)

    client = DirectionsClient(timeout=10) if os.getenv("OSRM_BASE_URL") else None

    for vehicle in vehicles:
        decision = evaluate_route(vehicle, destination, zones, parking_lots)

        print(
            f"\n{vehicle.id} ({vehicle.access_class.value}) -> {destination}: "
            f"restricted={decision.restricted} detour={decision.detour_point} "
            f"unresolved={decision.is_unresolved}"
        )

        if client is None:
            print("  OSRM_BASE_URL not set, skipping road paths")
            continue

        plan = resolve_route(vehicle.position, decision, client)
        for index, leg in enumerate(plan.legs, start=1):
            source = "straight line" if leg.fallback else "road path"
            print(f"  leg {index}: {leg.start} -> {leg.end}, {len(leg.path)} points ({source})")


if __name__ == "__main__":
    main()
