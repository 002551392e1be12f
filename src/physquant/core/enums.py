"""
physquant.core.enums
====================

Closed tag sets used throughout the dimensional-analysis engine:

- `QuantityNature`: how a quantity behaves under reflection.
- `OperationType`: which operation produced a value (resolution key only).
- `PhysicalQuantityType`: the named vocabulary of supported quantities.
"""

from __future__ import annotations

from enum import Enum


class QuantityNature(Enum):
    SCALAR = "Scalar"              # energy, mass, time, temperature
    VECTOR = "Vector"              # force, velocity, displacement
    PSEUDOVECTOR = "Pseudovector"  # torque, angular momentum, magnetic field

    def __str__(self) -> str:
        return self.value


class OperationType(Enum):
    DIRECT = "Direct"                   # created directly by the caller
    SCALAR_MULTIPLY = "ScalarMultiply"  # scalar × scalar, scalar × vector, division
    DOT_PRODUCT = "DotProduct"          # vector · vector → scalar
    CROSS_PRODUCT = "CrossProduct"      # vector × vector → pseudovector

    def __str__(self) -> str:
        return self.value


class PhysicalQuantityType(Enum):
    """Named physical quantities. The value is the display name."""

    DIMENSIONLESS = "Dimensionless"

    # Base SI quantities
    MASS = "Mass"
    LENGTH = "Length"
    TIME = "Time"
    TEMPERATURE = "Temperature"

    # Geometric
    AREA = "Area"
    VOLUME = "Volume"

    # Mechanical
    DISPLACEMENT = "Displacement"
    VELOCITY = "Velocity"
    ACCELERATION = "Acceleration"
    FORCE = "Force"
    MOMENTUM = "Momentum"
    ENERGY = "Energy"
    POWER = "Power"
    TORQUE = "Torque"
    ANGULAR_MOMENTUM = "AngularMomentum"
    PRESSURE = "Pressure"
    DENSITY = "Density"

    # Electrical / magnetic
    VOLTAGE = "Voltage"
    CURRENT = "Current"
    RESISTANCE = "Resistance"
    CHARGE = "Charge"
    CAPACITANCE = "Capacitance"
    INDUCTANCE = "Inductance"
    CONDUCTANCE = "Conductance"
    ELECTRIC_FIELD = "ElectricField"
    MAGNETIC_FIELD = "MagneticField"
    MAGNETIC_FLUX = "MagneticFlux"
    FREQUENCY = "Frequency"
    RESISTIVITY = "Resistivity"
    CONDUCTIVITY = "Conductivity"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "PhysicalQuantityType":
        """Look a type up by member name or display name, ignoring case.

        >>> PhysicalQuantityType.from_name("electricfield")
        <PhysicalQuantityType.ELECTRIC_FIELD: 'ElectricField'>
        """
        key = name.strip().replace("_", "").replace(" ", "").casefold()
        for member in cls:
            if key in (member.value.casefold(), member.name.replace("_", "").casefold()):
                return member
        raise ValueError(f"Unknown physical quantity type: {name!r}")


__all__ = ["QuantityNature", "OperationType", "PhysicalQuantityType"]
