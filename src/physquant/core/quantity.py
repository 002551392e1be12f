"""
physquant.core.quantity
=======================

Defines `PhysicalQuantity`, the public value type of physquant.

A quantity stores:
- its magnitude, always normalised to SI base units (no prefix retained);
- a `PhysicalQuantityType` tag;
- an integer exponent applied to the unit symbol (V² is Voltage with
  exponent 2);
- its nature (scalar, vector or pseudovector), derived from the type.

Arithmetic between quantities consults the dimensional analysis engine, which
either produces a well-typed result or raises. Prefixes only matter at
construction and when reading values back out (`get_value_in`, `to_string`).
"""

from __future__ import annotations

from typing import Tuple, Union

from physquant.core.dimensions import DimensionalFormula
from physquant.core.engine import DEFAULT_ENGINE, Operand, combine_same_type
from physquant.core.enums import PhysicalQuantityType, QuantityNature
from physquant.core.errors import IncompatibleOperandsError, UnresolvableDimensionError
from physquant.core.result import OperationResult
from physquant.core.utils import format_number, join_unit
from physquant.units.prefixes import UnitPrefix, from_base, prefix_from_symbol, symbol_for, to_base

Number = Union[int, float]

# Absolute tolerance for value equality; absorbs prefix round-trip noise.
ABS_TOL = 1e-12


class PhysicalQuantity:
    """
    A physical quantity with a value in SI base units, a type, and a unit
    exponent.

    Parameters
    ----------
    value : float
        Magnitude expressed in ``prefix`` units.
    quantity_type : PhysicalQuantityType
        What the quantity is (Voltage, Force, ...).
    exponent : int, default 1
        Power applied to the unit symbol.
    prefix : UnitPrefix, default UnitPrefix.BASE
        Scale of ``value``; the stored value is ``value * multiplier ** exponent``.

    Examples
    --------
    >>> v = PhysicalQuantity(12, PhysicalQuantityType.VOLTAGE)
    >>> r = PhysicalQuantity(4, PhysicalQuantityType.RESISTANCE)
    >>> str(v / r)
    '3 A'
    """

    __slots__ = ("_value", "_type", "_exponent", "_nature")

    def __init__(
        self,
        value: Number,
        quantity_type: PhysicalQuantityType,
        exponent: int = 1,
        prefix: UnitPrefix = UnitPrefix.BASE,
    ) -> None:
        if not isinstance(quantity_type, PhysicalQuantityType):
            raise TypeError(f"quantity_type must be a PhysicalQuantityType, got {quantity_type!r}")
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an int, got {exponent!r}")
        self._value = to_base(value, prefix, exponent)
        self._type = quantity_type
        self._exponent = exponent
        self._nature = DEFAULT_ENGINE.registry.get_nature(quantity_type)

    @classmethod
    def _from_si(cls, value: float, quantity_type: PhysicalQuantityType, exponent: int = 1) -> "PhysicalQuantity":
        return cls(value, quantity_type, exponent)

    # --- read-only state ---------------------------------------------------
    @property
    def value(self) -> float:
        """Magnitude in SI base units."""
        return self._value

    @property
    def quantity_type(self) -> PhysicalQuantityType:
        return self._type

    @property
    def exponent(self) -> int:
        return self._exponent

    @property
    def nature(self) -> QuantityNature:
        return self._nature

    @property
    def formula(self) -> DimensionalFormula:
        """Dimensional formula of the type raised to the unit exponent."""
        return DEFAULT_ENGINE.formula_of(self.as_operand())

    @property
    def symbol(self) -> str:
        """Unit symbol in base units, including the exponent glyph."""
        return join_unit("", DEFAULT_ENGINE.registry.get_symbol(self._type), self._exponent)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_nature"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def as_operand(self) -> Operand:
        return Operand(self._type, self._nature, self._exponent)

    def get_value_in(self, prefix: UnitPrefix) -> float:
        """Value expressed in ``prefix`` units (``value / multiplier ** exponent``)."""
        return from_base(self._value, prefix, self._exponent)

    def is_compatible_for_addition(self, other: "PhysicalQuantity") -> bool:
        return self._type is other._type and self._exponent == other._exponent

    def _check_compatible(self, other: "PhysicalQuantity", verb: str) -> None:
        if not self.is_compatible_for_addition(other):
            raise IncompatibleOperandsError(
                f"Cannot {verb} incompatible quantities: "
                f"{self._type}^{self._exponent} and {other._type}^{other._exponent}",
                self,
                other,
            )

    # --- arithmetic --------------------------------------------------------
    def __add__(self, other: "PhysicalQuantity") -> "PhysicalQuantity":
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "add")
        return self._from_si(self._value + other._value, self._type, self._exponent)

    def __sub__(self, other: "PhysicalQuantity") -> "PhysicalQuantity":
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "subtract")
        return self._from_si(self._value - other._value, self._type, self._exponent)

    def __neg__(self) -> "PhysicalQuantity":
        return self._from_si(-self._value, self._type, self._exponent)

    def __abs__(self) -> "PhysicalQuantity":
        return self._from_si(abs(self._value), self._type, self._exponent)

    def __mul__(self, other: "PhysicalQuantity | Number") -> "PhysicalQuantity":
        # quantity × scalar
        if isinstance(other, (int, float)):
            return self._from_si(self._value * float(other), self._type, self._exponent)
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented

        value = self._value * other._value
        if self._type is other._type:
            new_type, new_exp = combine_same_type(self._type, self._exponent + other._exponent)
            return self._from_si(value, new_type, new_exp)

        resolved = DEFAULT_ENGINE.multiply(self.as_operand(), other.as_operand())
        return self._from_si(value, resolved.quantity_type)

    def __rmul__(self, other: Number) -> "PhysicalQuantity":
        # allows 3 * (2 V) -> 6 V
        if isinstance(other, (int, float)):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other: "PhysicalQuantity | Number") -> "PhysicalQuantity":
        # quantity / scalar
        if isinstance(other, (int, float)):
            return self._from_si(self._value / float(other), self._type, self._exponent)
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented

        value = self._value / other._value
        if self._type is other._type:
            new_type, new_exp = combine_same_type(self._type, self._exponent - other._exponent)
            return self._from_si(value, new_type, new_exp)

        resolved = DEFAULT_ENGINE.divide(self.as_operand(), other.as_operand())
        return self._from_si(value, resolved.quantity_type)

    def __rtruediv__(self, other: Number) -> "PhysicalQuantity":
        # scalar / quantity -> inverse dimension, resolved like any division;
        # an unregistered reciprocal keeps the type with a negated exponent (1/V -> V^-1)
        if not isinstance(other, (int, float)):
            return NotImplemented
        try:
            return PhysicalQuantity(other, PhysicalQuantityType.DIMENSIONLESS) / self
        except UnresolvableDimensionError:
            new_type, new_exp = combine_same_type(self._type, -self._exponent)
            return self._from_si(float(other) / self._value, new_type, new_exp)

    def __pow__(self, n: int) -> "PhysicalQuantity":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        new_type, new_exp = combine_same_type(self._type, self._exponent * n)
        return self._from_si(self._value ** n, new_type, new_exp)

    # --- vector products ---------------------------------------------------
    @staticmethod
    def _require_quantity(other: object, what: str) -> None:
        if not isinstance(other, PhysicalQuantity):
            raise TypeError(f"Cannot take the {what} product with {type(other).__name__}")

    def dot(self, other: "PhysicalQuantity") -> OperationResult:
        """Dot product of two vector quantities; the result is a scalar."""
        self._require_quantity(other, "dot")
        resolved = DEFAULT_ENGINE.dot(self.as_operand(), other.as_operand())
        return OperationResult(self._value * other._value, resolved.formula, resolved.nature, resolved.operation)

    def cross(self, other: "PhysicalQuantity") -> OperationResult:
        """Cross product of two vector quantities; the result is a pseudovector."""
        self._require_quantity(other, "cross")
        resolved = DEFAULT_ENGINE.cross(self.as_operand(), other.as_operand())
        return OperationResult(self._value * other._value, resolved.formula, resolved.nature, resolved.operation)

    # --- comparisons -------------------------------------------------------
    def _is_close(self, other_value: float) -> bool:
        return abs(self._value - other_value) < ABS_TOL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        return self.is_compatible_for_addition(other) and self._is_close(other._value)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        return not self.__eq__(other)

    # The standard __hash__ is not implemented because __eq__ is tolerant.
    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "PhysicalQuantity") -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self._value < other._value and not self._is_close(other._value)

    def __le__(self, other: "PhysicalQuantity") -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self._value < other._value or self._is_close(other._value)

    def __gt__(self, other: "PhysicalQuantity") -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self._value > other._value and not self._is_close(other._value)

    def __ge__(self, other: "PhysicalQuantity") -> bool:
        if not isinstance(other, PhysicalQuantity):
            return NotImplemented
        self._check_compatible(other, "compare")
        return self._value > other._value or self._is_close(other._value)

    def as_key(self, precision: int = 12) -> Tuple[PhysicalQuantityType, int, float]:
        """
        Returns a hashable, discretized key for this quantity.

        Use this to put quantities in dicts or sets: the caller picks the
        rounding precision instead of relying on the tolerant `__eq__`.

        >>> a = PhysicalQuantity(1.0 + 1e-13, PhysicalQuantityType.LENGTH)
        >>> b = PhysicalQuantity(1.0 - 1e-13, PhysicalQuantityType.LENGTH)
        >>> a.as_key(9) == b.as_key(9)
        True
        """
        rounded = round(self._value, precision)
        # -0.0 and 0.0 compare equal but must share one key
        if rounded == 0.0:
            rounded = 0.0
        return (self._type, self._exponent, rounded)

    # --- formatting --------------------------------------------------------
    def to_string(self, prefix: UnitPrefix = UnitPrefix.BASE) -> str:
        """Render in ``prefix`` units, e.g. ``'12500 mV'``."""
        value = self.get_value_in(prefix)
        unit = join_unit(symbol_for(prefix), DEFAULT_ENGINE.registry.get_symbol(self._type), self._exponent)
        text = format_number(value)
        return f"{text} {unit}" if unit else text

    def __str__(self) -> str:
        return self.to_string(UnitPrefix.BASE)

    def __repr__(self) -> str:
        args = f"{self._value!r}, PhysicalQuantityType.{self._type.name}"
        if self._exponent != 1:
            args += f", exponent={self._exponent}"
        return f"PhysicalQuantity({args})"

    def __format__(self, spec: str) -> str:
        """
        Format with an optional prefix given by symbol or name.

        >>> q = PhysicalQuantity(1000, PhysicalQuantityType.RESISTANCE)
        >>> f"{q:k}"
        '1 kΩ'
        >>> f"{q:kilo}"
        '1 kΩ'

        Raises
        ------
        ValueError
            If the format specifier is not a known prefix.
        """
        spec = (spec or "").strip()
        if not spec:
            return str(self)
        prefix = prefix_from_symbol(spec)
        if prefix is None:
            prefix = UnitPrefix.parse(spec)
        return self.to_string(prefix)


__all__ = ["ABS_TOL", "PhysicalQuantity"]
