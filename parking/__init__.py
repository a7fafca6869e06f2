#Marks parking as a package.
#Re-exports the ParkingLot model and the facility search functions.
#No business logic.

from .models import ParkingLot
from .search import (
    best_parking_lot,
    detour_distance,
    feasible_parking_lots,
    nearest_parking_lot,
    rank_parking_lots,
)

__all__ = [
    "ParkingLot",
    "best_parking_lot",
    "detour_distance",
    "feasible_parking_lots",
    "nearest_parking_lot",
    "rank_parking_lots",
]
