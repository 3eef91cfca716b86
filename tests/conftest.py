"""Shared test fixtures."""

import pytest

from autopark.models import Bulk, Cargo, Fleet, Fragile, Perishable, Truck, Vehicle


@pytest.fixture
def fragile_cargo():
    return Cargo(description="TV set", weight=100, type=Fragile(in_package=True))


@pytest.fixture
def perishable_cargo():
    return Cargo(description="Milk", weight=200, type=Perishable(temp_required=-10))


@pytest.fixture
def bulk_cargo():
    return Cargo(description="Gravel", weight=1, type=Bulk(in_container=False))


@pytest.fixture
def van():
    return Vehicle(make="Mercedes", model="Sprinter", year=2018, capacity=500, fuel_tank_capacity=100)


@pytest.fixture
def truck():
    return Truck(
        make="Volvo",
        model="FH16",
        year=2020,
        capacity=500,
        fuel_tank_capacity=300,
        trailer_attached=True,
        trailer_capacity=500,
        trailer_allowed_types={Fragile(in_package=True)},
    )


@pytest.fixture
def fleet(truck, van):
    f = Fleet()
    f.add_vehicle(truck)
    f.add_vehicle(van)
    return f
