"""Specialised, type-safe wrappers over `PhysicalQuantityBase`."""

from physquant.quantities.base import SpecificQuantity
from physquant.quantities.electrical import ElectricCurrent, Power, Resistance, Voltage
from physquant.quantities.mechanical import Displacement, Energy, Force, Torque, Velocity

__all__ = [
    "SpecificQuantity",
    "Force",
    "Displacement",
    "Velocity",
    "Energy",
    "Torque",
    "Voltage",
    "ElectricCurrent",
    "Resistance",
    "Power",
]
