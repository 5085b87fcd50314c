"""
Vehicles component - Describing vehicles and cars.
"""

from __future__ import annotations

from .models import Car, DescribeVehicleInput, VehicleDescription


def run_describe(inp: DescribeVehicleInput) -> VehicleDescription:
    """Describe a vehicle, including the model line for cars."""
    vehicle = inp.vehicle
    model = vehicle.get_model() if isinstance(vehicle, Car) else None
    return VehicleDescription(info=vehicle.get_info(), model=model)


def run(inp: DescribeVehicleInput) -> VehicleDescription:
    """Main entry point for the vehicles component."""
    if isinstance(inp, DescribeVehicleInput):
        return run_describe(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
