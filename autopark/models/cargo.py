"""
Cargo and Cargo Type Models
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from .result import LoadFailure

logger = logging.getLogger(__name__)


def parse_bool(value) -> bool:
    """Read a flag that may come in as a bool or as text ("true", "false", "yes", "1")"""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


class CargoType(ABC):
    """Base class for cargo classifications"""

    kind: str = ""

    @property
    def label(self) -> str:
        return self.kind.capitalize()

    @abstractmethod
    def to_dict(self) -> dict:
        pass

    @staticmethod
    def from_dict(data: dict) -> "CargoType":
        """
        Build a cargo type from a mapping such as {"kind": "perishable", "temp_required": -10}
        """
        kind = str(data["kind"]).strip().lower()

        if kind == Fragile.kind:
            return Fragile(in_package=parse_bool(data.get("in_package", False)))
        if kind == Perishable.kind:
            return Perishable(temp_required=int(data.get("temp_required", 0)))
        if kind == Bulk.kind:
            return Bulk(in_container=parse_bool(data.get("in_container", False)))

        raise ValueError(f"Unknown cargo kind: {data['kind']}")


@dataclass(frozen=True)
class Fragile(CargoType):
    """Fragile cargo, optionally packaged"""

    in_package: bool = False
    kind = "fragile"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "in_package": self.in_package}


@dataclass(frozen=True)
class Perishable(CargoType):
    """Perishable cargo with a required temperature (°C)"""

    temp_required: int = 0
    kind = "perishable"

    @property
    def label(self) -> str:
        return f"Perishable (temperature: {self.temp_required}°C)"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "temp_required": self.temp_required}


@dataclass(frozen=True)
class Bulk(CargoType):
    """Bulk cargo, optionally in a container"""

    in_container: bool = False
    kind = "bulk"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "in_container": self.in_container}


@dataclass(frozen=True)
class Cargo:
    """A single cargo item"""

    description: str
    weight: int  # kg
    type: CargoType

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Cargo weight cannot be negative: {self.weight}")

    @classmethod
    def create(cls, description: str, weight: int, type: CargoType) -> Optional["Cargo"]:
        """
        Create a cargo item
        Returns None when the weight is negative
        """
        if weight < 0:
            logger.warning(
                "Cargo '%s' rejected (%s): weight cannot be negative (%s)",
                description,
                LoadFailure.INVALID_CARGO.value,
                weight,
            )
            return None
        return cls(description=description, weight=weight, type=type)

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "weight": self.weight,
            "type": self.type.to_dict(),
        }

    def __str__(self):
        return f"Cargo({self.description}, {self.weight}kg, {self.type.label})"
