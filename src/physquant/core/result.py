"""
physquant.core.result
=====================

Type-erased carriers for the outcome of vector/scalar operations.

`PhysicalQuantityBase` holds the raw state (SI value, formula, nature and the
operation that produced it). `OperationResult` wraps one and is the only way
back to a named type: narrowing into a specific wrapper (``Force``,
``Voltage``…) or into a generic `PhysicalQuantity` is explicit and validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Type, TypeVar, Union

from physquant.core.dimensions import DimensionalFormula
from physquant.core.engine import division_nature, multiplication_nature, require_vectors
from physquant.core.enums import OperationType, PhysicalQuantityType, QuantityNature
from physquant.core.errors import InvalidNarrowingError
from physquant.core.utils import format_number

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from physquant.core.quantity import PhysicalQuantity
    from physquant.quantities.base import SpecificQuantity
    from physquant.units.registry import QuantityRegistry

    W = TypeVar("W", bound=SpecificQuantity)

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class PhysicalQuantityBase:
    """Raw quantity state shared by every specialised wrapper."""

    value: float
    dimensions: DimensionalFormula
    nature: QuantityNature
    created_by: OperationType = OperationType.DIRECT

    def dot(self, other: "PhysicalQuantityBase") -> "OperationResult":
        """this · other, always a scalar."""
        require_vectors(self.nature, other.nature, "Dot product")
        return OperationResult(
            self.value * other.value,
            self.dimensions * other.dimensions,
            QuantityNature.SCALAR,
            OperationType.DOT_PRODUCT,
        )

    def cross(self, other: "PhysicalQuantityBase") -> "OperationResult":
        """this × other, always a pseudovector."""
        require_vectors(self.nature, other.nature, "Cross product")
        return OperationResult(
            self.value * other.value,
            self.dimensions * other.dimensions,
            QuantityNature.PSEUDOVECTOR,
            OperationType.CROSS_PRODUCT,
        )

    def scalar_multiply(self, scalar: Number) -> "OperationResult":
        """Scale by a plain number; the nature is preserved."""
        return OperationResult(
            self.value * float(scalar),
            self.dimensions,
            self.nature,
            OperationType.SCALAR_MULTIPLY,
        )

    def __mul__(self, other: "PhysicalQuantityBase | Number") -> "OperationResult":
        if isinstance(other, (int, float)):
            return self.scalar_multiply(other)
        if not isinstance(other, PhysicalQuantityBase):
            return NotImplemented
        nature, operation = multiplication_nature(self.nature, other.nature)
        return OperationResult(
            self.value * other.value,
            self.dimensions * other.dimensions,
            nature,
            operation,
        )

    def __rmul__(self, other: Number) -> "OperationResult":
        if isinstance(other, (int, float)):
            return self.scalar_multiply(other)
        return NotImplemented

    def __truediv__(self, other: "PhysicalQuantityBase | Number") -> "OperationResult":
        if isinstance(other, (int, float)):
            return self.scalar_multiply(1.0 / float(other))
        if not isinstance(other, PhysicalQuantityBase):
            return NotImplemented
        # Division is treated as a scalar operation.
        return OperationResult(
            self.value / other.value,
            self.dimensions / other.dimensions,
            division_nature(self.nature, other.nature),
            OperationType.SCALAR_MULTIPLY,
        )


class OperationResult:
    """Transient outcome of an operation, narrowed explicitly by the caller."""

    __slots__ = ("_base",)

    def __init__(
        self,
        value: float,
        dimensions: DimensionalFormula,
        nature: QuantityNature,
        created_by: OperationType,
    ) -> None:
        self._base = PhysicalQuantityBase(float(value), dimensions, nature, created_by)

    @classmethod
    def from_base(cls, base: PhysicalQuantityBase) -> "OperationResult":
        obj = cls.__new__(cls)
        obj._base = base
        return obj

    @property
    def base(self) -> PhysicalQuantityBase:
        return self._base

    @property
    def value(self) -> float:
        return self._base.value

    @property
    def dimensions(self) -> DimensionalFormula:
        return self._base.dimensions

    @property
    def nature(self) -> QuantityNature:
        return self._base.nature

    @property
    def created_by(self) -> OperationType:
        return self._base.created_by

    # --- narrowing ---------------------------------------------------------
    def narrow(self, wrapper: "Type[W]") -> "W":
        """Convert into ``wrapper``; raises `InvalidNarrowingError` on mismatch."""
        return wrapper.from_result(self)

    def try_narrow(self, wrapper: "Type[W]") -> "Optional[W]":
        return wrapper.try_from(self)

    def resolve_type(self, registry: "QuantityRegistry | None" = None) -> PhysicalQuantityType:
        """Look this result up in the (nature-aware) registry."""
        if registry is None:
            from physquant.units.registry import DEFAULT_REGISTRY
            registry = DEFAULT_REGISTRY
        return registry.find_quantity_type(self.dimensions, self.nature, self.created_by)

    def to_physical_quantity(self) -> "PhysicalQuantity":
        """Convert a scalar result into a generic `PhysicalQuantity`.

        The type is found through the scalar-only formula map; non-scalar
        results cannot be represented and raise `InvalidNarrowingError`.
        """
        from physquant.core.quantity import PhysicalQuantity
        from physquant.units.registry import DEFAULT_REGISTRY

        if self.nature is not QuantityNature.SCALAR:
            raise InvalidNarrowingError(
                f"Cannot convert {self.nature} to PhysicalQuantity (only scalars supported)"
            )
        quantity_type = DEFAULT_REGISTRY.scalar_map().find_quantity_type(self.dimensions)
        return PhysicalQuantity(self.value, quantity_type)

    # --- chaining ----------------------------------------------------------
    def __mul__(self, scalar: Number) -> "OperationResult":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self._base.scalar_multiply(scalar)

    def __rmul__(self, scalar: Number) -> "OperationResult":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Number) -> "OperationResult":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self._base.scalar_multiply(1.0 / float(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperationResult):
            return NotImplemented
        return self._base == other._base

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"OperationResult({self.value!r}, {self.dimensions!r}, "
            f"{self.nature}, {self.created_by})"
        )

    def __str__(self) -> str:
        return f"{format_number(self.value)} [{self.dimensions}] ({self.nature})"


__all__ = ["PhysicalQuantityBase", "OperationResult"]
