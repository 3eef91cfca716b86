"""
Truck Model - Vehicle with an optional trailer
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, Set
from .cargo import Cargo, CargoType
from .result import LoadResult
from .vehicle import Vehicle
from ..constraints.checker import CargoConstraintChecker

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Truck(Vehicle):
    """Represents a truck that may pull a trailer"""

    trailer_attached: bool = False
    trailer_capacity: Optional[int] = None  # kg
    trailer_allowed_types: Optional[Set[CargoType]] = None  # If None, the trailer takes nothing

    trailer_current_load: int = field(default=0, init=False)

    def __post_init__(self):
        super().__post_init__()
        if self.trailer_allowed_types is not None:
            self.trailer_allowed_types = set(self.trailer_allowed_types)

    @property
    def has_usable_trailer(self) -> bool:
        return self.trailer_attached and self.trailer_capacity is not None

    def load_cargo(self, cargo: Cargo) -> LoadResult:
        """
        Load cargo into the main compartment, falling back to the trailer

        Any main compartment rejection (type or capacity) gives the trailer a try.
        """
        result = self._load_main(cargo)
        if result.success:
            self._log_result(result)
            return result

        logger.debug(result.message)
        result = self._load_trailer(cargo)
        self._log_result(result)
        return result

    def _load_trailer(self, cargo: Cargo) -> LoadResult:
        can_load, failure, reason = CargoConstraintChecker.check_trailer(
            cargo,
            self.trailer_attached,
            self.trailer_capacity,
            self.trailer_current_load,
            self.trailer_allowed_types,
        )
        if not can_load:
            return LoadResult(success=False, message=f"{self.display_name}: {reason}", failure=failure)

        self.trailer_current_load += cargo.weight
        return LoadResult(
            success=True,
            message=f"{cargo.description} loaded into trailer. Current trailer load: {self.trailer_current_load} kg",
            compartment="trailer",
        )

    def unload_cargo(self):
        """Remove all cargo from the main compartment and the trailer"""
        super().unload_cargo()
        self.trailer_current_load = 0
        logger.info("Cargo fully unloaded from trailer of '%s'", self.display_name)

    def get_trailer_remaining_capacity(self) -> int:
        """Get remaining trailer capacity (0 without a usable trailer)"""
        if not self.has_usable_trailer:
            return 0
        return max(0, self.trailer_capacity - self.trailer_current_load)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "trailer_attached": self.trailer_attached,
                "trailer_capacity": self.trailer_capacity,
                "trailer_allowed_types": (
                    [t.to_dict() for t in self.trailer_allowed_types]
                    if self.trailer_allowed_types is not None
                    else None
                ),
                "trailer_current_load": self.trailer_current_load,
            }
        )
        return data

    def __str__(self):
        trailer_str = ""
        if self.has_usable_trailer:
            trailer_str = f", trailer {self.trailer_current_load}/{self.trailer_capacity}kg"
        return f"Truck({self.display_name}, {self.year}, {self.current_load}/{self.capacity}kg{trailer_str})"

    def __repr__(self):
        return self.__str__()
