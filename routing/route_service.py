#Purpose: Route computation for display.
#Turns a RoutingDecision into the legs a map should draw:
#direct: origin -> destination
#detour: origin -> parking lot, parking lot -> destination
#unresolved: nothing (never a direct line through the restriction)
#Each leg asks the directions client for the road path. If the provider fails,
#that leg falls back to the straight segment and is flagged as such.
#It's the "I need an actual path" module, while decision.py is "where may the route go".

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import requests

from .decision import RoutingDecision
from .directions_client import DirectionsClient, DirectionsError, LatLon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteLeg:
    start: LatLon
    end: LatLon
    path: Tuple[LatLon, ...]
    fallback: bool = False # True when path is the straight segment, not a road path


@dataclass(frozen=True)
class RoutePlan:
    decision: RoutingDecision
    legs: List[RouteLeg] = field(default_factory=list)

    @property
    def unresolved(self) -> bool:
        return self.decision.is_unresolved

    @property
    def path(self) -> List[LatLon]:
        """All legs joined, shared endpoints not repeated."""
        points: List[LatLon] = []
        for leg in self.legs:
            for point in leg.path:
                if not points or points[-1] != point:
                    points.append(point)
        return points


def fetch_leg(client: DirectionsClient, start: LatLon, end: LatLon) -> RouteLeg:
    try:
        path = client.fetch_path(start, end)
    except (DirectionsError, requests.RequestException) as exc:
        logger.warning("Directions failed for %s -> %s, using straight line: %s", start, end, exc)
        return RouteLeg(start=start, end=end, path=(start, end), fallback=True)

    return RouteLeg(start=start, end=end, path=tuple(path))


def resolve_route(origin: LatLon, decision: RoutingDecision, client: DirectionsClient) -> RoutePlan:
    """
    Fetch a road path for every leg of the decision.
    Unresolved decisions come back with no legs.
    """
    if decision.is_unresolved:
        logger.info("No safe route to %s, nothing to draw", decision.destination)
        return RoutePlan(decision=decision)

    waypoints = decision.waypoints(origin)
    legs = [
        fetch_leg(client, start, end)
        for start, end in zip(waypoints, waypoints[1:])
    ]

    return RoutePlan(decision=decision, legs=legs)
