"""
Fleet Model - Ordered collection of vehicles with first-fit cargo assignment
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import numpy as np
from .cargo import Cargo
from .result import LoadFailure, TripCheck
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass
class Fleet:
    """Represents a fleet of vehicles (plain vehicles and trucks)"""

    vehicles: List[Vehicle] = field(default_factory=list)

    def add_vehicle(self, vehicle: Vehicle):
        """Append a vehicle; order decides first-fit assignment"""
        self.vehicles.append(vehicle)

    def total_capacity(self) -> int:
        """Sum of main compartment capacities (trailers excluded)"""
        return sum(v.capacity for v in self.vehicles)

    def total_current_load(self) -> int:
        """Sum of main compartment loads (trailers excluded)"""
        return sum(v.current_load for v in self.vehicles)

    def info(self) -> Dict[str, int]:
        """Summary of the fleet size and load"""
        summary = {
            "num_vehicles": len(self.vehicles),
            "total_capacity": self.total_capacity(),
            "total_current_load": self.total_current_load(),
        }
        logger.info(
            "Fleet has %d vehicles, total capacity %d kg, current load %d kg",
            summary["num_vehicles"],
            summary["total_capacity"],
            summary["total_current_load"],
        )
        return summary

    def unload_all(self):
        """Unload every vehicle in the fleet"""
        for vehicle in self.vehicles:
            vehicle.unload_cargo()

    def can_go(self, cargo: Iterable[Cargo], distance: int) -> TripCheck:
        """
        Load cargo first-fit and check the loaded vehicles can cover the distance

        Algorithm:
        1. For each cargo item, the first vehicle (in fleet order) that accepts it carries it
        2. Stop at the first item no vehicle accepts
        3. Every vehicle that received cargo must be able to cover the distance

        Loads placed before a failure stay on the vehicles.
        """
        logger.info("Checking whether the fleet can carry cargo over %d km", distance)

        loaded_vehicles: List[Vehicle] = []

        for item in cargo:
            carrier = self._find_carrier(item)

            if carrier is None:
                message = f"No vehicle available to carry '{item.description}' ({item.type.label})"
                logger.warning(message)
                return TripCheck(
                    success=False,
                    distance=distance,
                    message=message,
                    failure=LoadFailure.NO_VEHICLE_AVAILABLE,
                    loaded_vehicles=loaded_vehicles,
                )

            loaded_vehicles.append(carrier)

        for vehicle in loaded_vehicles:
            if not vehicle.can_go(distance):
                message = (
                    f"'{vehicle.display_name}' cannot cover {distance} km "
                    f"(max {vehicle.max_distance()} km on its fuel budget)"
                )
                logger.warning(message)
                return TripCheck(
                    success=False,
                    distance=distance,
                    message=message,
                    failure=LoadFailure.UNFIT_FOR_ROUTE,
                    loaded_vehicles=loaded_vehicles,
                )

        return TripCheck(
            success=True,
            distance=distance,
            message=f"All cargo loaded and every loaded vehicle can cover {distance} km",
            loaded_vehicles=loaded_vehicles,
        )

    def _find_carrier(self, cargo: Cargo) -> Optional[Vehicle]:
        """Load cargo onto the first vehicle that accepts it"""
        for vehicle in self.vehicles:
            if vehicle.load_cargo(cargo):
                return vehicle
        return None

    def get_utilization_stats(self) -> Dict[str, float]:
        """Get main compartment utilization statistics across vehicles"""
        if not self.vehicles:
            return {"min": 0, "max": 0, "avg": 0, "std": 0}

        utils = [v.get_load_utilization() for v in self.vehicles]

        return {
            "min": min(utils),
            "max": max(utils),
            "avg": float(np.mean(utils)),
            "std": float(np.std(utils)),
        }

    def to_dict(self) -> dict:
        """Convert fleet to dictionary for export"""
        data = self.info()
        data["utilization"] = {k: round(v, 2) for k, v in self.get_utilization_stats().items()}
        data["vehicles"] = [v.to_dict() for v in self.vehicles]
        return data

    def __iter__(self):
        return iter(self.vehicles)

    def __str__(self):
        return f"Fleet({len(self.vehicles)} vehicles, {self.total_current_load()}/{self.total_capacity()}kg)"
