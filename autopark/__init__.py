"""
Autopark - Fleet Cargo Loading and Range Feasibility
"""

__version__ = "1.0.0"

from autopark.models import Cargo, Fragile, Perishable, Bulk, Vehicle, Truck, Fleet, LoadFailure
from autopark.constraints import CargoConstraintChecker, FleetValidator

__all__ = [
    "Cargo",
    "Fragile",
    "Perishable",
    "Bulk",
    "Vehicle",
    "Truck",
    "Fleet",
    "LoadFailure",
    "CargoConstraintChecker",
    "FleetValidator",
]
