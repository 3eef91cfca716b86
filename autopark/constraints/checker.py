"""
Cargo Constraint Checking Utilities
"""
import math
from typing import Optional, Set, Tuple
from ..models.cargo import Cargo, CargoType
from ..models.result import LoadFailure

# Range rule: only half the tank is budgeted, at a fixed consumption rate
FUEL_CONSUMPTION_RATE = 9.0  # distance units per fuel unit
USABLE_FUEL_FRACTION = 0.5

CheckResult = Tuple[bool, Optional[LoadFailure], str]


class CargoConstraintChecker:
    """Quick constraint checks for placing cargo into a compartment"""

    @staticmethod
    def check_main_compartment(
        cargo: Cargo,
        capacity: int,
        current_load: int,
        allowed_types: Optional[Set[CargoType]] = None,
    ) -> CheckResult:
        """
        Check if cargo fits the main compartment of a vehicle
        Returns: (can_load, failure, reason)
        """
        # 1. Type restriction (None accepts everything)
        if allowed_types is not None and cargo.type not in allowed_types:
            return (
                False,
                LoadFailure.TYPE_NOT_SUPPORTED,
                f"Cargo type {cargo.type.label} is not supported by this vehicle",
            )

        # 2. Capacity check
        if current_load + cargo.weight > capacity:
            return False, LoadFailure.CAPACITY_EXCEEDED, "Vehicle capacity exceeded"

        return True, None, "OK"

    @staticmethod
    def check_trailer(
        cargo: Cargo,
        trailer_attached: bool,
        trailer_capacity: Optional[int],
        trailer_current_load: int,
        trailer_allowed_types: Optional[Set[CargoType]] = None,
    ) -> CheckResult:
        """
        Check if cargo fits a truck trailer
        Returns: (can_load, failure, reason)
        """
        # 1. Trailer must be attached and sized
        if not trailer_attached or trailer_capacity is None:
            return (
                False,
                LoadFailure.NO_TRAILER_AVAILABLE,
                "Cargo fits neither the main compartment nor a trailer",
            )

        # 2. Capacity check
        if trailer_current_load + cargo.weight > trailer_capacity:
            return False, LoadFailure.CAPACITY_EXCEEDED, "Cargo exceeds the trailer capacity"

        # 3. Type restriction (None accepts nothing on a trailer)
        if trailer_allowed_types is None or cargo.type not in trailer_allowed_types:
            return (
                False,
                LoadFailure.TYPE_NOT_SUPPORTED,
                f"Cargo type {cargo.type.label} is not supported by the trailer",
            )

        return True, None, "OK"

    @staticmethod
    def max_distance(fuel_tank_capacity: float, consumption_rate: float = FUEL_CONSUMPTION_RATE) -> int:
        """Maximum distance coverable on the usable share of the tank"""
        return math.floor((fuel_tank_capacity * USABLE_FUEL_FRACTION) * consumption_rate)

    @staticmethod
    def is_range_feasible(distance: int, fuel_tank_capacity: float) -> bool:
        """Check if a distance is within the half-tank range"""
        return distance <= CargoConstraintChecker.max_distance(fuel_tank_capacity)
