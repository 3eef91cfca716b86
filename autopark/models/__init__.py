from .cargo import CargoType, Fragile, Perishable, Bulk, Cargo
from .result import LoadFailure, LoadResult, TripCheck
from .vehicle import Vehicle
from .truck import Truck
from .fleet import Fleet

__all__ = [
    "CargoType",
    "Fragile",
    "Perishable",
    "Bulk",
    "Cargo",
    "LoadFailure",
    "LoadResult",
    "TripCheck",
    "Vehicle",
    "Truck",
    "Fleet",
]
