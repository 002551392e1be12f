"""Named wrappers for circuit quantities (all scalars)."""

from physquant.core.enums import PhysicalQuantityType, QuantityNature
from physquant.quantities.base import SpecificQuantity


class Voltage(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.VOLTAGE
    nature = QuantityNature.SCALAR


class ElectricCurrent(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.CURRENT
    nature = QuantityNature.SCALAR


class Resistance(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.RESISTANCE
    nature = QuantityNature.SCALAR


class Power(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.POWER
    nature = QuantityNature.SCALAR


__all__ = ["Voltage", "ElectricCurrent", "Resistance", "Power"]
