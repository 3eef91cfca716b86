"""
Fleet Load Validation System
"""
from typing import List, Tuple


class FleetValidator:
    """Validates load invariants across a fleet"""

    def validate_fleet(self, fleet) -> Tuple[bool, List[str]]:
        """
        Validate load counters of every vehicle in the fleet
        Returns: (is_valid, list_of_violations)
        """
        violations = []

        for vehicle in fleet:
            violations.extend(self.validate_vehicle(vehicle))

        return len(violations) == 0, violations

    def validate_vehicle(self, vehicle) -> List[str]:
        """Check main compartment and trailer loads of a single vehicle"""
        from ..models.truck import Truck

        violations = []

        # 1. Main compartment
        if not self._check_load(vehicle.current_load, vehicle.capacity):
            violations.append(
                f"Vehicle {vehicle.display_name} load out of range: "
                f"{vehicle.current_load} not in [0, {vehicle.capacity}]"
            )

        # 2. Trailer (only meaningful when attached and sized)
        if isinstance(vehicle, Truck) and vehicle.has_usable_trailer:
            if not self._check_load(vehicle.trailer_current_load, vehicle.trailer_capacity):
                violations.append(
                    f"Truck {vehicle.display_name} trailer load out of range: "
                    f"{vehicle.trailer_current_load} not in [0, {vehicle.trailer_capacity}]"
                )

        return violations

    def _check_load(self, load: int, capacity: int) -> bool:
        return 0 <= load <= capacity
