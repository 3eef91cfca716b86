"""
Data Loading Utilities
"""
import json
import csv
import logging
from typing import List, Optional
import pandas as pd
import yaml
from ..models import Cargo, CargoType, Fleet, Truck, Vehicle
from ..models.cargo import parse_bool

logger = logging.getLogger(__name__)


class DataLoader:
    """Load fleets and cargo from various formats"""

    @staticmethod
    def vehicle_from_dict(item: dict) -> Vehicle:
        """Build a Vehicle or Truck from a mapping"""
        allowed_types = DataLoader._parse_types(item.get("allowed_types"))

        common = dict(
            make=item["make"],
            model=item["model"],
            year=int(item["year"]),
            capacity=int(item["capacity"]),
            fuel_tank_capacity=float(item["fuel_tank_capacity"]),
            allowed_types=allowed_types,
        )

        if str(item.get("vehicle_type", "vehicle")).lower() != "truck":
            return Vehicle(**common)

        trailer_capacity = item.get("trailer_capacity")
        return Truck(
            **common,
            trailer_attached=parse_bool(item.get("trailer_attached", False)),
            trailer_capacity=int(trailer_capacity) if trailer_capacity is not None else None,
            trailer_allowed_types=DataLoader._parse_types(item.get("trailer_allowed_types")),
        )

    @staticmethod
    def cargo_from_dict(item: dict) -> Optional[Cargo]:
        """Build a Cargo from a mapping; None if the cargo is invalid"""
        return Cargo.create(
            description=item["description"],
            weight=int(item["weight"]),
            type=CargoType.from_dict(item["type"]),
        )

    @staticmethod
    def _parse_types(data) -> Optional[set]:
        if data is None:
            return None
        return {CargoType.from_dict(t) for t in data}

    @staticmethod
    def load_fleet_from_json(file_path: str) -> Fleet:
        """Load a fleet from a JSON list of vehicles"""
        with open(file_path, "r") as f:
            data = json.load(f)

        return DataLoader._build_fleet(data)

    @staticmethod
    def load_fleet_from_yaml(file_path: str) -> Fleet:
        """Load a fleet from a YAML list of vehicles (or a mapping with a 'vehicles' key)"""
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or []

        if isinstance(data, dict):
            data = data.get("vehicles", [])

        return DataLoader._build_fleet(data)

    @staticmethod
    def _build_fleet(data: List[dict]) -> Fleet:
        fleet = Fleet()
        for item in data:
            fleet.add_vehicle(DataLoader.vehicle_from_dict(item))

        logger.info("Loaded %d vehicles", len(fleet.vehicles))
        return fleet

    @staticmethod
    def load_cargo_from_json(file_path: str) -> List[Cargo]:
        """Load cargo items from JSON file"""
        with open(file_path, "r") as f:
            data = json.load(f)

        return DataLoader._build_cargo(data)

    @staticmethod
    def load_cargo_from_yaml(file_path: str) -> List[Cargo]:
        """Load cargo items from YAML file (a list, or a mapping with a 'cargo' key)"""
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or []

        if isinstance(data, dict):
            data = data.get("cargo", [])

        return DataLoader._build_cargo(data)

    @staticmethod
    def _build_cargo(data: List[dict]) -> List[Cargo]:
        cargo_list = []
        for item in data:
            cargo = DataLoader.cargo_from_dict(item)
            if cargo is not None:
                cargo_list.append(cargo)

        logger.info("Loaded %d of %d cargo items", len(cargo_list), len(data))
        return cargo_list

    @staticmethod
    def load_cargo_from_csv(file_path: str) -> List[Cargo]:
        """
        Load cargo items from CSV
        Expected columns: description, weight, kind
        Optional: in_package, temp_required, in_container
        """
        df = pd.read_csv(file_path)
        cargo_list = []

        for _, row in df.iterrows():
            type_data = {"kind": row["kind"]}
            for column in ("in_package", "in_container"):
                if column in df.columns and pd.notna(row.get(column)):
                    type_data[column] = parse_bool(row[column])
            if "temp_required" in df.columns and pd.notna(row.get("temp_required")):
                type_data["temp_required"] = int(row["temp_required"])

            cargo = Cargo.create(
                description=str(row["description"]),
                weight=int(row["weight"]),
                type=CargoType.from_dict(type_data),
            )
            if cargo is not None:
                cargo_list.append(cargo)

        logger.info("Loaded %d of %d cargo items from %s", len(cargo_list), len(df), file_path)
        return cargo_list

    @staticmethod
    def load_fleet_from_csv(file_path: str) -> Fleet:
        """
        Load a fleet from CSV (cargo type restrictions are not supported in CSV)
        Expected columns: make, model, year, capacity, fuel_tank_capacity
        Optional: vehicle_type, trailer_attached, trailer_capacity
        """
        df = pd.read_csv(file_path)
        fleet = Fleet()

        for _, row in df.iterrows():
            item = {
                "make": str(row["make"]),
                "model": str(row["model"]),
                "year": row["year"],
                "capacity": row["capacity"],
                "fuel_tank_capacity": row["fuel_tank_capacity"],
            }
            if "vehicle_type" in df.columns and pd.notna(row.get("vehicle_type")):
                item["vehicle_type"] = str(row["vehicle_type"])
            if "trailer_attached" in df.columns and pd.notna(row.get("trailer_attached")):
                item["trailer_attached"] = parse_bool(row["trailer_attached"])
            if "trailer_capacity" in df.columns and pd.notna(row.get("trailer_capacity")):
                item["trailer_capacity"] = row["trailer_capacity"]

            fleet.add_vehicle(DataLoader.vehicle_from_dict(item))

        logger.info("Loaded %d vehicles from %s", len(fleet.vehicles), file_path)
        return fleet

    @staticmethod
    def save_fleet_to_json(fleet: Fleet, file_path: str):
        """Save fleet report to JSON file"""
        with open(file_path, "w") as f:
            json.dump(fleet.to_dict(), f, indent=2)

    @staticmethod
    def save_fleet_to_csv(fleet: Fleet, file_path: str):
        """Save fleet report to CSV file (one row per vehicle)"""
        with open(file_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(
                [
                    "vehicle",
                    "year",
                    "vehicle_type",
                    "capacity",
                    "current_load",
                    "utilization_%",
                    "trailer_capacity",
                    "trailer_current_load",
                    "max_distance",
                ]
            )

            for vehicle in fleet:
                is_truck = isinstance(vehicle, Truck)
                writer.writerow(
                    [
                        vehicle.display_name,
                        vehicle.year,
                        "truck" if is_truck else "vehicle",
                        vehicle.capacity,
                        vehicle.current_load,
                        round(vehicle.get_load_utilization(), 2),
                        vehicle.trailer_capacity if is_truck and vehicle.trailer_capacity is not None else "",
                        vehicle.trailer_current_load if is_truck else "",
                        vehicle.max_distance(),
                    ]
                )
