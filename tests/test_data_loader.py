"""Tests for fleet and cargo file loading and report export."""

import csv
import json

import pytest

from autopark.models import Bulk, Fragile, Perishable, Truck, Vehicle
from autopark.utils import DataLoader

VEHICLES = [
    {
        "vehicle_type": "truck",
        "make": "Volvo",
        "model": "FH16",
        "year": 2020,
        "capacity": 500,
        "fuel_tank_capacity": 300,
        "trailer_attached": True,
        "trailer_capacity": 500,
        "trailer_allowed_types": [{"kind": "fragile", "in_package": True}],
    },
    {
        "make": "Mercedes",
        "model": "Sprinter",
        "year": 2018,
        "capacity": 500,
        "fuel_tank_capacity": 100,
        "allowed_types": [{"kind": "perishable", "temp_required": -10}],
    },
]

CARGO = [
    {"description": "TV set", "weight": 100, "type": {"kind": "fragile", "in_package": True}},
    {"description": "Milk", "weight": 200, "type": {"kind": "perishable", "temp_required": -10}},
    {"description": "Ghost", "weight": -5, "type": {"kind": "bulk"}},
]


class TestJsonLoading:
    def test_load_fleet(self, tmp_path):
        path = tmp_path / "vehicles.json"
        path.write_text(json.dumps(VEHICLES))

        fleet = DataLoader.load_fleet_from_json(str(path))
        truck, van = fleet.vehicles
        assert isinstance(truck, Truck)
        assert truck.trailer_allowed_types == {Fragile(in_package=True)}
        assert type(van) is Vehicle
        assert van.allowed_types == {Perishable(temp_required=-10)}

    def test_load_cargo_skips_invalid(self, tmp_path):
        path = tmp_path / "cargo.json"
        path.write_text(json.dumps(CARGO))

        cargo = DataLoader.load_cargo_from_json(str(path))
        assert [c.description for c in cargo] == ["TV set", "Milk"]

    def test_text_flags_are_parsed(self, tmp_path):
        path = tmp_path / "vehicles.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "vehicle_type": "truck",
                        "make": "DAF",
                        "model": "XF",
                        "year": 2020,
                        "capacity": 0,
                        "fuel_tank_capacity": 200,
                        "trailer_attached": "false",
                        "trailer_capacity": 500,
                        "trailer_allowed_types": [{"kind": "fragile", "in_package": "false"}],
                    }
                ]
            )
        )

        truck = DataLoader.load_fleet_from_json(str(path)).vehicles[0]
        assert truck.trailer_attached is False
        assert truck.trailer_allowed_types == {Fragile(in_package=False)}

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            DataLoader.cargo_from_dict({"description": "Oil", "weight": 5, "type": {"kind": "liquid"}})


class TestYamlLoading:
    def test_load_fleet_and_cargo_from_one_file(self, tmp_path):
        path = tmp_path / "autopark.yaml"
        path.write_text(
            """
vehicles:
  - make: Volvo
    model: FH16
    year: 2020
    capacity: 500
    fuel_tank_capacity: 300
    vehicle_type: truck
    trailer_attached: true
    trailer_capacity: 500
    trailer_allowed_types:
      - kind: fragile
        in_package: true
cargo:
  - description: Gravel
    weight: 50
    type:
      kind: bulk
      in_container: true
"""
        )

        fleet = DataLoader.load_fleet_from_yaml(str(path))
        cargo = DataLoader.load_cargo_from_yaml(str(path))

        assert len(fleet.vehicles) == 1
        assert fleet.vehicles[0].has_usable_trailer
        assert cargo[0].type == Bulk(in_container=True)
        assert fleet.can_go(cargo, 100)

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert DataLoader.load_fleet_from_yaml(str(path)).vehicles == []
        assert DataLoader.load_cargo_from_yaml(str(path)) == []


class TestCsvLoading:
    def test_load_cargo(self, tmp_path):
        path = tmp_path / "cargo.csv"
        path.write_text(
            "description,weight,kind,in_package,temp_required,in_container\n"
            "TV set,100,fragile,true,,\n"
            "Milk,200,perishable,,-10,\n"
            "Ghost,-5,bulk,,,false\n"
        )

        cargo = DataLoader.load_cargo_from_csv(str(path))
        assert len(cargo) == 2
        assert cargo[0].type == Fragile(in_package=True)
        assert cargo[1].type == Perishable(temp_required=-10)

    def test_load_fleet(self, tmp_path):
        path = tmp_path / "vehicles.csv"
        path.write_text(
            "make,model,year,capacity,fuel_tank_capacity,vehicle_type,trailer_attached,trailer_capacity\n"
            "Volvo,FH16,2020,500,300,truck,true,500\n"
            "Mercedes,Sprinter,2018,500,100,,,\n"
        )

        fleet = DataLoader.load_fleet_from_csv(str(path))
        truck, van = fleet.vehicles
        assert isinstance(truck, Truck)
        assert truck.trailer_capacity == 500
        assert truck.trailer_allowed_types is None
        assert not isinstance(van, Truck)
        assert van.max_distance() == 450


class TestReportExport:
    def test_save_json(self, tmp_path, fleet, fragile_cargo):
        fleet.can_go([fragile_cargo], 100)
        path = tmp_path / "report.json"
        DataLoader.save_fleet_to_json(fleet, str(path))

        data = json.loads(path.read_text())
        assert data["total_current_load"] == 100
        assert data["vehicles"][1]["model"] == "Sprinter"

    def test_save_csv(self, tmp_path, fleet):
        path = tmp_path / "report.csv"
        DataLoader.save_fleet_to_csv(fleet, str(path))

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["vehicle_type"] for r in rows] == ["truck", "vehicle"]
        assert rows[0]["trailer_capacity"] == "500"
        assert rows[1]["trailer_capacity"] == ""
