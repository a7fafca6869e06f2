import pytest

from parking import ParkingLot
from routing import RoutingDecision, evaluate_route
from vehicles import AccessClass, Vehicle
from zones import CircleZone, PolygonZone


@pytest.fixture
def paris_zone():
    return CircleZone.new(48.8566, 2.3522, radius_m=500, zone_id="paris")


@pytest.fixture
def paris_lot():
    return ParkingLot.new(48.8580, 2.3500, lot_id="p1")


@pytest.fixture
def equator_scenario():
    """
    Vehicle west of a 10 km circle, destination east of it: the straight
    path is blocked, the destination itself is free.
    """
    zones = [CircleZone.new(0, 0, radius_m=10_000, zone_id="blocker")]
    destination = (0, 1)
    return zones, destination


def test_allowed_vehicle_ignores_zones(paris_zone, paris_lot):
    vehicle = Vehicle.new(48.8700, 2.3300, AccessClass.ALLOWED)

    decision = evaluate_route(vehicle, (48.8566, 2.3522), [paris_zone], [paris_lot])

    assert decision.restricted is False
    assert decision.detour_point is None
    assert decision.destination == (48.8566, 2.3522)


def test_restricted_vehicle_destination_in_zone_gets_parking_detour(paris_zone, paris_lot):
    vehicle = Vehicle.new(48.8700, 2.3300, AccessClass.RESTRICTED)
    destination = (48.8566, 2.3522)

    decision = evaluate_route(vehicle, destination, [paris_zone], [paris_lot])

    assert decision.restricted is True
    assert decision.detour_point == (48.8580, 2.3500)
    assert decision.destination == destination


def test_restricted_vehicle_path_blocked_gets_detour(equator_scenario):
    zones, destination = equator_scenario
    vehicle = Vehicle.new(0, -1, "restricted")
    lots = [ParkingLot.new(0, 0, lot_id="inside"), ParkingLot.new(0.5, 0, lot_id="north")]

    decision = evaluate_route(vehicle, destination, zones, lots)

    assert decision.restricted is True
    assert decision.detour_point == (0.5, 0)
    assert decision.waypoints(vehicle.position) == [(0, -1), (0.5, 0), (0, 1)]


def test_restricted_vehicle_without_parking_is_unresolved(paris_zone):
    vehicle = Vehicle.new(48.8700, 2.3300, AccessClass.RESTRICTED)

    decision = evaluate_route(vehicle, (48.8566, 2.3522), [paris_zone], [])

    assert decision.restricted is True
    assert decision.detour_point is None
    assert decision.is_unresolved
    assert decision.waypoints(vehicle.position) == []


def test_restricted_vehicle_only_lot_behind_another_zone_is_unresolved(equator_scenario):
    zones, _ = equator_scenario
    destination = (0, 0)  # inside the circle
    # a block on the way to the only lot
    zones = zones + [
        PolygonZone.new([(0.2, -0.55), (0.3, -0.55), (0.3, -0.45), (0.2, -0.45)], zone_id="block"),
    ]
    vehicle = Vehicle.new(0, -1, AccessClass.RESTRICTED)

    decision = evaluate_route(vehicle, destination, zones, [ParkingLot.new(0.5, 0)])

    assert decision.is_unresolved


def test_restricted_vehicle_clear_path_goes_direct(paris_zone, paris_lot):
    vehicle = Vehicle.new(48.8700, 2.3300, AccessClass.RESTRICTED)
    destination = (48.8750, 2.3200)

    decision = evaluate_route(vehicle, destination, [paris_zone], [paris_lot])

    assert decision == RoutingDecision(destination=destination, detour_point=None, restricted=False)
    assert decision.waypoints(vehicle.position) == [vehicle.position, destination]


def test_no_zones_always_direct():
    vehicle = Vehicle.new(0, 0, AccessClass.RESTRICTED)

    decision = evaluate_route(vehicle, (1, 1), [], [ParkingLot.new(0.5, 0.5)])

    assert not decision.restricted
    assert not decision.has_detour


def test_repeated_calls_are_independent(paris_zone, paris_lot, equator_scenario):
    restricted = Vehicle.new(48.8700, 2.3300, AccessClass.RESTRICTED)
    allowed = Vehicle.new(48.8700, 2.3300, AccessClass.ALLOWED)
    destination = (48.8566, 2.3522)

    first = evaluate_route(restricted, destination, [paris_zone], [paris_lot])
    evaluate_route(allowed, destination, [paris_zone], [paris_lot])
    evaluate_route(restricted, destination, [paris_zone], [])
    again = evaluate_route(restricted, destination, [paris_zone], [paris_lot])

    assert first == again


def test_legacy_access_class_value():
    assert Vehicle.new(0, 0, "notAllowed").access_class == AccessClass.RESTRICTED


@pytest.fixture
def destination_in_circle():
    """
    Vehicle 1 degree west of a 10 km circle, destination at its center.
    """
    zones = [CircleZone.new(0, 0, radius_m=10_000, zone_id="center")]
    vehicle = Vehicle.new(0, -1, AccessClass.RESTRICTED)
    return vehicle, (0, 0), zones


def test_lot_inside_destination_zone_is_accepted(destination_in_circle):
    vehicle, destination, zones = destination_in_circle
    lot = ParkingLot.new(0, -0.05, lot_id="inside")

    decision = evaluate_route(vehicle, destination, zones, [lot])

    assert decision.detour_point == (0, -0.05)
    assert decision.restricted


def test_lot_beyond_destination_zone_is_rejected(destination_in_circle):
    """
    Reaching a lot on the far side means driving straight through the zone,
    so there is no safe detour.
    """
    vehicle, destination, zones = destination_in_circle
    lot = ParkingLot.new(0, 0.2, lot_id="far-side")

    decision = evaluate_route(vehicle, destination, zones, [lot])

    assert decision.is_unresolved
    assert decision.detour_point is None


def test_far_side_lot_skipped_for_lot_inside(destination_in_circle):
    vehicle, destination, zones = destination_in_circle
    lots = [ParkingLot.new(0, 0.2, lot_id="far-side"), ParkingLot.new(0, -0.05, lot_id="inside")]

    decision = evaluate_route(vehicle, destination, zones, lots)

    assert decision.detour_point == (0, -0.05)
