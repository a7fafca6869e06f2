"""
Purpose: Core data models for the vehicles domain.
What it does:
Defines the structure of a Vehicle and its access class. The access class
decides whether the vehicle may drive into restricted zones.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geo import LatLon


class AccessClass(str, Enum):
    """
    Whether a vehicle may enter restricted zones.
    """
    ALLOWED = "allowed"
    RESTRICTED = "restricted"

    @classmethod
    def _missing_(cls, value):
        # map shells still send the old "notAllowed" car type
        if value == "notAllowed":
            return cls.RESTRICTED
        return None


@dataclass(frozen=True)
class Vehicle:
    """
    A purely stateless representation of a vehicle at a specific point in time.
    """
    id: str
    position: LatLon
    access_class: AccessClass

    @property
    def is_restricted(self) -> bool:
        return self.access_class == AccessClass.RESTRICTED

    @classmethod
    def new(
        cls,
        lat: float,
        lon: float,
        access_class: str | AccessClass = AccessClass.ALLOWED,
        vehicle_id: Optional[str] = None,
    ) -> Vehicle:
        if isinstance(access_class, str):
            access_class = AccessClass(access_class)

        return cls(
            id=vehicle_id or str(uuid.uuid4()),
            position=(lat, lon),
            access_class=access_class,
        )
