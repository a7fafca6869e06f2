"""
Purpose: Core data model for parking lots.
What it does:
Defines a ParkingLot: a fixed position a restricted vehicle can stop at
instead of driving into a restricted zone. The name is display-only.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from geo import LatLon


@dataclass(frozen=True)
class ParkingLot:
    id: str
    position: LatLon
    name: str

    @classmethod
    def new(
        cls,
        lat: float,
        lon: float,
        ordinal: int = 1,
        name: Optional[str] = None,
        lot_id: Optional[str] = None,
    ) -> ParkingLot:
        """
        ordinal is the 1-based number used for the default "Parking N" name.
        """
        return cls(
            id=lot_id or str(uuid.uuid4()),
            position=(lat, lon),
            name=name or f"Parking {ordinal}",
        )
