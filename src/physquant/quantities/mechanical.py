"""
physquant.quantities.mechanical
===============================

Named wrappers for mechanical quantities.

Vector wrappers combine through explicit products::

    >>> f = Force(10)
    >>> d = Displacement(5)
    >>> Energy.from_result(f.dot(d)).magnitude
    50.0
    >>> Torque.from_result(d.cross(f)).magnitude
    50.0
"""

from physquant.core.enums import PhysicalQuantityType, QuantityNature
from physquant.quantities.base import SpecificQuantity


class Force(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.FORCE
    nature = QuantityNature.VECTOR


class Displacement(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.DISPLACEMENT
    nature = QuantityNature.VECTOR


class Velocity(SpecificQuantity):
    __slots__ = ()
    quantity_type = PhysicalQuantityType.VELOCITY
    nature = QuantityNature.VECTOR


class Energy(SpecificQuantity):
    """Work or energy in joules; the scalar outcome of Force · Displacement."""

    __slots__ = ()
    quantity_type = PhysicalQuantityType.ENERGY
    nature = QuantityNature.SCALAR


class Torque(SpecificQuantity):
    """Torque in N·m. Shares Energy's formula but is a pseudovector."""

    __slots__ = ()
    quantity_type = PhysicalQuantityType.TORQUE
    nature = QuantityNature.PSEUDOVECTOR


__all__ = ["Force", "Displacement", "Velocity", "Energy", "Torque"]
