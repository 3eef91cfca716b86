"""
Vehicle (Fleet) Model
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Set
from .cargo import Cargo, CargoType
from .result import LoadResult
from ..constraints.checker import CargoConstraintChecker

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Vehicle:
    """Represents a cargo vehicle with a single main compartment"""

    make: str
    model: str
    year: int
    capacity: int  # kg
    fuel_tank_capacity: float  # fuel units

    # Cargo restrictions
    allowed_types: Optional[Set[CargoType]] = None  # If None, accepts all types

    current_load: int = field(default=0, init=False)

    def __post_init__(self):
        if self.allowed_types is not None:
            self.allowed_types = set(self.allowed_types)

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model}"

    def accepts(self, cargo_type: CargoType) -> bool:
        """Check if the main compartment takes this cargo type"""
        return self.allowed_types is None or cargo_type in self.allowed_types

    def load_cargo(self, cargo: Cargo) -> LoadResult:
        """Load cargo into the main compartment"""
        result = self._load_main(cargo)
        self._log_result(result)
        return result

    def _load_main(self, cargo: Cargo) -> LoadResult:
        can_load, failure, reason = CargoConstraintChecker.check_main_compartment(
            cargo, self.capacity, self.current_load, self.allowed_types
        )
        if not can_load:
            return LoadResult(success=False, message=f"{self.display_name}: {reason}", failure=failure)

        self.current_load += cargo.weight
        return LoadResult(
            success=True,
            message=f"{cargo.description} loaded. Current load: {self.current_load} kg",
            compartment="main",
        )

    def _log_result(self, result: LoadResult):
        if result.success:
            logger.info(result.message)
        else:
            logger.warning(result.message)

    def unload_cargo(self):
        """Remove all cargo from the main compartment"""
        self.current_load = 0
        logger.info("Cargo fully unloaded from vehicle '%s'", self.display_name)

    def max_distance(self) -> int:
        """Maximum route length on half a tank"""
        return CargoConstraintChecker.max_distance(self.fuel_tank_capacity)

    def can_go(self, distance: int) -> bool:
        """Check if the vehicle can cover a distance"""
        return CargoConstraintChecker.is_range_feasible(distance, self.fuel_tank_capacity)

    def get_remaining_capacity(self) -> int:
        """Get remaining main compartment capacity"""
        return max(0, self.capacity - self.current_load)

    def get_load_utilization(self) -> float:
        """Get capacity utilization percentage"""
        if self.capacity == 0:
            return 0.0
        return (self.current_load / self.capacity) * 100

    def to_dict(self) -> dict:
        return {
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "capacity": self.capacity,
            "fuel_tank_capacity": self.fuel_tank_capacity,
            "allowed_types": (
                [t.to_dict() for t in self.allowed_types] if self.allowed_types is not None else None
            ),
            "current_load": self.current_load,
            "max_distance": self.max_distance(),
        }

    def __str__(self):
        return f"Vehicle({self.display_name}, {self.year}, {self.current_load}/{self.capacity}kg)"

    def __repr__(self):
        return self.__str__()
