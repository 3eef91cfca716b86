"""
Example: Fleet Cargo Loading
Demonstrates loading cargo onto a truck and a van and checking a route
"""
import logging

from autopark.models import Cargo, Fragile, Perishable, Vehicle, Truck, Fleet
from autopark.constraints import FleetValidator


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Autopark Example")
    print("=" * 60)

    # Step 1: Create cargo
    print("\n1. Creating cargo...")
    fragile_cargo = Cargo.create("TV set", 100, Fragile(in_package=True))
    perishable_cargo = Cargo.create("Milk", 200, Perishable(temp_required=-10))
    print(f"   {fragile_cargo}")
    print(f"   {perishable_cargo}")

    # Step 2: Create vehicles and fleet
    print("\n2. Building fleet...")
    truck = Truck(
        make="Volvo",
        model="FH16",
        year=2020,
        capacity=500,
        fuel_tank_capacity=300,
        trailer_attached=True,
        trailer_capacity=500,
        trailer_allowed_types={Fragile(in_package=True)},
    )
    van = Vehicle(make="Mercedes", model="Sprinter", year=2018, capacity=500, fuel_tank_capacity=100)

    fleet = Fleet()
    fleet.add_vehicle(truck)
    fleet.add_vehicle(van)

    # Step 3: Load cargo
    print("\n3. Loading cargo...")
    print(f"   Truck: {truck.load_cargo(fragile_cargo).message}")
    print(f"   Van:   {van.load_cargo(perishable_cargo).message}")

    info = fleet.info()
    print(f"   Vehicles: {info['num_vehicles']}")
    print(f"   Total capacity: {info['total_capacity']} kg")
    print(f"   Current load: {info['total_current_load']} kg")

    is_valid, violations = FleetValidator().validate_fleet(fleet)
    print(f"   Load invariants hold: {is_valid} {violations if violations else ''}")

    # Step 4: Unload and check a route
    print("\n4. Checking a 100 km route...")
    fleet.unload_all()
    check = fleet.can_go([fragile_cargo], 100)
    print(f"   Can the fleet cover 100 km? {bool(check)}")
    print(f"   {check.message}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
