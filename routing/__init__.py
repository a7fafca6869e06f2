#Marks routing as a package.
#Re-exports clean public APIs (evaluate_route, RoutingDecision, DirectionsClient,
#resolve_route) so other modules import from routing without knowing internal file names.
#No business logic.

from .decision import RoutingDecision, evaluate_route
from .directions_client import DirectionsClient, DirectionsError
from .route_service import RouteLeg, RoutePlan, resolve_route

__all__ = [
    "RoutingDecision",
    "evaluate_route",
    "DirectionsClient",
    "DirectionsError",
    "RouteLeg",
    "RoutePlan",
    "resolve_route",
]
