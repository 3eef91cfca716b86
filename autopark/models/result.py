"""
Load and Trip Outcome Models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LoadFailure(Enum):
    """Reasons a cargo operation can fail"""

    INVALID_CARGO = "invalid_cargo"
    TYPE_NOT_SUPPORTED = "type_not_supported"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    NO_TRAILER_AVAILABLE = "no_trailer_available"
    UNFIT_FOR_ROUTE = "unfit_for_route"
    NO_VEHICLE_AVAILABLE = "no_vehicle_available"


@dataclass
class LoadResult:
    """Outcome of loading one cargo item onto a vehicle"""

    success: bool
    message: str
    failure: Optional[LoadFailure] = None
    compartment: Optional[str] = None  # "main" or "trailer" on success

    def __bool__(self):
        return self.success


@dataclass
class TripCheck:
    """Outcome of a fleet-wide load and range check"""

    success: bool
    distance: int
    message: str = ""
    failure: Optional[LoadFailure] = None
    loaded_vehicles: List = field(default_factory=list)  # one entry per placed cargo item

    def __bool__(self):
        return self.success

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "distance": self.distance,
            "message": self.message,
            "failure": self.failure.value if self.failure else None,
            "loaded_vehicles": [v.display_name for v in self.loaded_vehicles],
        }
