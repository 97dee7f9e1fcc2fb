#!/usr/bin/env python3
"""
Lichen Taxonomy Demo
- A small vehicle taxonomy
- Signatures compared under the product order
- A guarded transition, and one whose guard is degraded
- The transition as JSON
"""
import logging

from lichen import (
    AllOf,
    Clade,
    GreaterThanOrEqual,
    Not,
    Signature,
    Transition,
    compare_signatures,
)
from lichen.interchange import from_json, to_json


def build_taxonomy():
    sedan = Clade.new("sedan")
    coupe = Clade.new("coupe")
    car = Clade.new("car", [sedan, coupe])
    pickup = Clade.new("pickup")
    truck = Clade.new("truck", [pickup])
    vehicle = Clade.new("vehicle", [car, truck])
    return vehicle


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    vehicle = build_taxonomy()
    print(vehicle.to_mermaid())

    car = vehicle.get(vehicle.query("car"))
    sedan = vehicle.get(vehicle.query("sedan"))
    coupe = vehicle.get(vehicle.query("coupe"))
    pickup = vehicle.get(vehicle.query("pickup"))

    wide = Signature.of(car, pickup)
    narrow = Signature.of(sedan, pickup)
    print(f"{wide} vs {narrow}: {compare_signatures(wide, narrow).name}")
    print(f"{wide} admits [pickup, coupe]: {wide.admits([pickup, coupe])}")

    ferry = Transition.create(
        "ferry",
        input={"dock": Signature.named({"passenger": car, "hauler": vehicle})},
        output={"shore": Signature.of(car, vehicle)},
        guard=AllOf([GreaterThanOrEqual("passenger", car), Not("passenger", coupe)]),
    )
    print(f"{ferry.name} admits sedan: {ferry.admits({'passenger': sedan})}")
    print(f"{ferry.name} admits coupe: {ferry.admits({'passenger': coupe})}")

    # References a slot the input does not have, so the guard is dropped
    broken = Transition.create(
        "broken",
        input={"dock": Signature.named({"passenger": car})},
        guard=GreaterThanOrEqual("cargo", vehicle),
    )
    print(f"{broken.name} guard: {broken.guard!r}")

    text = to_json(ferry)
    print(text)
    print(f"Reloaded: {from_json(text)!r}")


if __name__ == "__main__":
    main()
