"""
Vehicles component models.

Car extends Vehicle with a model name; it overrides nothing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    make: str
    year: int

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True)
class Car(Vehicle):
    model: str

    def get_model(self) -> str:
        return f"Model: {self.model}"


# --- Input Models ---


@dataclass(frozen=True)
class DescribeVehicleInput:
    """Input for describing a vehicle."""

    vehicle: Vehicle


# --- Output Models ---


@dataclass(frozen=True)
class VehicleDescription:
    """Output for describe operation. model is None for a plain Vehicle."""

    info: str
    model: str | None = None
