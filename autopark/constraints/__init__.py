from .checker import CargoConstraintChecker, FUEL_CONSUMPTION_RATE, USABLE_FUEL_FRACTION
from .validator import FleetValidator

__all__ = ["CargoConstraintChecker", "FleetValidator", "FUEL_CONSUMPTION_RATE", "USABLE_FUEL_FRACTION"]
