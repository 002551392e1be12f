"""
physquant.quantities.base
=========================

`SpecificQuantity`: thin named wrappers around `PhysicalQuantityBase`.

A wrapper fixes one quantity type and nature. Every operator forwards to the
underlying base state and returns an `OperationResult`; getting back to a
named wrapper is an explicit, validated narrowing step::

    work = Energy.from_result(force.dot(displacement))   # raises on mismatch
    maybe = Torque.try_from(force.dot(displacement))     # None: not a pseudovector
"""

from __future__ import annotations

from typing import ClassVar, Optional, Type, TypeVar, Union

from physquant.core.dimensions import DimensionalFormula
from physquant.core.enums import OperationType, PhysicalQuantityType, QuantityNature
from physquant.core.errors import InvalidNarrowingError, RegistryConfigurationError
from physquant.core.quantity import ABS_TOL, PhysicalQuantity
from physquant.core.result import OperationResult, PhysicalQuantityBase
from physquant.core.utils import format_number
from physquant.units.prefixes import UnitPrefix, to_base
from physquant.units.registry import DEFAULT_REGISTRY

Number = Union[int, float]
S = TypeVar("S", bound="SpecificQuantity")
Operand = Union["SpecificQuantity", PhysicalQuantityBase]


def _base_of(other: object) -> Optional[PhysicalQuantityBase]:
    if isinstance(other, SpecificQuantity):
        return other.base
    if isinstance(other, PhysicalQuantityBase):
        return other
    if isinstance(other, OperationResult):
        return other.base
    return None


class SpecificQuantity:
    """Base class for named quantity wrappers.

    Subclasses set `quantity_type` and `nature`; the expected formula and
    symbol come from the registry definition of that type, and the declared
    nature must agree with it.
    """

    __slots__ = ("_base",)

    quantity_type: ClassVar[PhysicalQuantityType]
    nature: ClassVar[QuantityNature]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        registered = DEFAULT_REGISTRY.get_nature(cls.quantity_type)
        if cls.nature is not registered:
            raise RegistryConfigurationError(
                f"{cls.__name__} declares {cls.nature}, registry says {registered}"
            )

    def __init__(self, magnitude: Number, prefix: UnitPrefix = UnitPrefix.BASE) -> None:
        self._base = PhysicalQuantityBase(
            to_base(magnitude, prefix),
            self.expected_dimensions(),
            self.expected_nature(),
            OperationType.DIRECT,
        )

    @classmethod
    def expected_dimensions(cls) -> DimensionalFormula:
        return DEFAULT_REGISTRY.get_dimensions(cls.quantity_type)

    @classmethod
    def expected_nature(cls) -> QuantityNature:
        return cls.nature

    @classmethod
    def _wrap(cls: Type[S], base: PhysicalQuantityBase) -> S:
        obj = cls.__new__(cls)
        obj._base = base
        return obj

    # --- narrowing ---------------------------------------------------------
    @classmethod
    def from_result(cls: Type[S], result: OperationResult) -> S:
        """Narrow ``result`` into this type, checking formula and nature."""
        base = result.base
        expected = cls.expected_dimensions()
        if base.dimensions != expected:
            raise InvalidNarrowingError(
                f"Cannot convert {base.dimensions} to {cls.__name__} (expected {expected})"
            )
        nature = cls.expected_nature()
        if base.nature is not nature:
            raise InvalidNarrowingError(
                f"Cannot convert {base.nature} to {cls.__name__} (must be {nature})"
            )
        return cls._wrap(base)

    @classmethod
    def try_from(cls: Type[S], result: OperationResult) -> Optional[S]:
        """Like `from_result`, but returns None instead of raising."""
        try:
            return cls.from_result(result)
        except InvalidNarrowingError:
            return None

    # --- state -------------------------------------------------------------
    @property
    def base(self) -> PhysicalQuantityBase:
        return self._base

    @property
    def magnitude(self) -> float:
        """Magnitude in SI base units."""
        return self._base.value

    @property
    def value(self) -> float:
        return self._base.value

    @property
    def created_by(self) -> OperationType:
        return self._base.created_by

    def get_value_in(self, prefix: UnitPrefix) -> float:
        return self._base.value / prefix.multiplier

    def to_quantity(self) -> PhysicalQuantity:
        return PhysicalQuantity(self._base.value, self.quantity_type)

    def as_result(self) -> OperationResult:
        return OperationResult.from_base(self._base)

    # --- operators (all forward to the base) -------------------------------
    def dot(self, other: Operand) -> OperationResult:
        return self._base.dot(_require_base(other))

    def cross(self, other: Operand) -> OperationResult:
        return self._base.cross(_require_base(other))

    def __mul__(self, other: "Operand | Number") -> OperationResult:
        if isinstance(other, (int, float)):
            return self._base.scalar_multiply(other)
        base = _base_of(other)
        if base is None:
            return NotImplemented
        return self._base * base

    def __rmul__(self, other: Number) -> OperationResult:
        if isinstance(other, (int, float)):
            return self._base.scalar_multiply(other)
        return NotImplemented

    def __truediv__(self, other: "Operand | Number") -> OperationResult:
        if isinstance(other, (int, float)):
            return self._base.scalar_multiply(1.0 / float(other))
        base = _base_of(other)
        if base is None:
            return NotImplemented
        return self._base / base

    def __neg__(self: S) -> S:
        return self._wrap(self._base.scalar_multiply(-1).base)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpecificQuantity) or type(other) is not type(self):
            return NotImplemented
        return abs(self._base.value - other._base.value) < ABS_TOL

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base.value!r})"

    def __str__(self) -> str:
        symbol = DEFAULT_REGISTRY.get_symbol(self.quantity_type)
        return f"{format_number(self._base.value)} {symbol}"


def _require_base(other: object) -> PhysicalQuantityBase:
    base = _base_of(other)
    if base is None:
        raise TypeError(f"Expected a quantity, got {type(other).__name__}")
    return base


__all__ = ["SpecificQuantity"]
