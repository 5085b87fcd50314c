"""
Vehicles component - Describing vehicles and cars.
"""

from .component import run, run_describe
from .models import Car, DescribeVehicleInput, Vehicle, VehicleDescription

__all__ = [
    "run",
    "run_describe",
    "Car",
    "DescribeVehicleInput",
    "Vehicle",
    "VehicleDescription",
]
