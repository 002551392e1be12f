"""
physquant.core.engine
=====================

Dimensional analysis engine.

Given two operands' (type, nature, exponent) and the operation performed, the
engine computes the combined `DimensionalFormula`, infers the nature of the
result, and resolves the triple through the registry:

- Multiplication: Scalar×Scalar → Scalar; Scalar×X → X ("scaling");
  Vector×Vector through the generic operator is a dot product → Scalar.
  Cross products must be requested explicitly.
- Division: Vector÷Scalar → Vector; Pseudovector÷Scalar → Pseudovector;
  anything else → Scalar.
- Dot: Vector·Vector → Scalar. Cross: Vector×Vector → Pseudovector.

`ScalarDimensionalAnalysisEngine` is the nature-blind variant that resolves
purely by formula.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, NamedTuple, Tuple

from physquant.core.dimensions import DimensionalFormula
from physquant.core.enums import OperationType, PhysicalQuantityType, QuantityNature
from physquant.core.errors import UnsupportedNatureError
from physquant.units.registry import DEFAULT_REGISTRY, QuantityRegistry, ScalarQuantityMap

N = QuantityNature
Op = OperationType


class Operand(NamedTuple):
    quantity_type: PhysicalQuantityType
    nature: QuantityNature
    exponent: int = 1


class Resolution(NamedTuple):
    quantity_type: PhysicalQuantityType
    formula: DimensionalFormula
    nature: QuantityNature
    operation: OperationType


# --- nature inference --------------------------------------------------------

def multiplication_nature(a: QuantityNature, b: QuantityNature) -> Tuple[QuantityNature, OperationType]:
    if a is N.SCALAR:
        return b, Op.SCALAR_MULTIPLY
    if b is N.SCALAR:
        return a, Op.SCALAR_MULTIPLY
    if a is N.VECTOR and b is N.VECTOR:
        return N.SCALAR, Op.DOT_PRODUCT
    return N.SCALAR, Op.SCALAR_MULTIPLY


def division_nature(a: QuantityNature, b: QuantityNature) -> QuantityNature:
    if b is N.SCALAR and a in (N.VECTOR, N.PSEUDOVECTOR):
        return a
    return N.SCALAR


def require_vectors(a: QuantityNature, b: QuantityNature, what: str) -> None:
    if a is not N.VECTOR or b is not N.VECTOR:
        raise UnsupportedNatureError(f"{what} requires two vectors, got {a} and {b}")


def combine_same_type(quantity_type: PhysicalQuantityType, exponent: int) -> Tuple[PhysicalQuantityType, int]:
    """Same-type rule: the exponent moves, the type stays.

    An exponent of 0 collapses to (Dimensionless, 1); Dimensionless itself
    never carries an exponent.
    """
    if exponent == 0 or quantity_type is PhysicalQuantityType.DIMENSIONLESS:
        return PhysicalQuantityType.DIMENSIONLESS, 1
    return quantity_type, exponent


# --- exploration ---------------------------------------------------------------

def _ways_to_create(
    target: PhysicalQuantityType,
    target_dim: DimensionalFormula,
    candidates: Iterable[Tuple[PhysicalQuantityType, DimensionalFormula]],
) -> List[str]:
    pairs = [(t, d) for t, d in candidates if t is not PhysicalQuantityType.DIMENSIONLESS]
    results: set[str] = set()

    for type_a, dim_a in pairs:
        dim_a_sq = dim_a ** 2
        for type_b, dim_b in pairs:
            dim_b_sq = dim_b ** 2

            # Basic operations
            if dim_a * dim_b == target_dim:
                results.add(f"{type_a} × {type_b} = {target}")
            if dim_a / dim_b == target_dim:
                results.add(f"{type_a} ÷ {type_b} = {target}")

            # Squared A
            if dim_a_sq * dim_b == target_dim:
                results.add(f"{type_a}² × {type_b} = {target}")
            if dim_a_sq / dim_b == target_dim:
                results.add(f"{type_a}² ÷ {type_b} = {target}")

            # Squared B
            if dim_a / dim_b_sq == target_dim:
                results.add(f"{type_a} ÷ {type_b}² = {target}")

    return sorted(results)


# --- engines -----------------------------------------------------------------

class DimensionalAnalysisEngine:
    """Nature- and provenance-aware resolution of operation results."""

    def __init__(self, registry: QuantityRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry

    def formula_of(self, operand: Operand) -> DimensionalFormula:
        return self.registry.get_dimensions(operand.quantity_type) ** operand.exponent

    def _resolve(
        self,
        formula: DimensionalFormula,
        nature: QuantityNature,
        operation: OperationType,
    ) -> Resolution:
        found = self.registry.find_quantity_type(formula, nature, operation)
        return Resolution(found, formula, nature, operation)

    def multiply(self, a: Operand, b: Operand) -> Resolution:
        formula = self.formula_of(a) * self.formula_of(b)
        nature, operation = multiplication_nature(a.nature, b.nature)
        return self._resolve(formula, nature, operation)

    def divide(self, a: Operand, b: Operand) -> Resolution:
        formula = self.formula_of(a) / self.formula_of(b)
        nature = division_nature(a.nature, b.nature)
        return self._resolve(formula, nature, Op.SCALAR_MULTIPLY)

    def dot(self, a: Operand, b: Operand) -> Resolution:
        require_vectors(a.nature, b.nature, "Dot product")
        return self._resolve(self.formula_of(a) * self.formula_of(b), N.SCALAR, Op.DOT_PRODUCT)

    def cross(self, a: Operand, b: Operand) -> Resolution:
        require_vectors(a.nature, b.nature, "Cross product")
        return self._resolve(self.formula_of(a) * self.formula_of(b), N.PSEUDOVECTOR, Op.CROSS_PRODUCT)

    combine_same_type = staticmethod(combine_same_type)

    def find_all_ways_to_create(self, target: PhysicalQuantityType) -> List[str]:
        """List every 'A ∘ B = target' expression over the registered types.

        Exhaustive O(n²) search, for exploration and debugging only.
        """
        return _ways_to_create(
            target,
            self.registry.get_dimensions(target),
            ((d.quantity_type, d.formula) for d in self.registry),
        )


class ScalarDimensionalAnalysisEngine:
    """Resolution by dimensional formula only (no nature, no provenance)."""

    def __init__(self, scalar_map: ScalarQuantityMap | None = None) -> None:
        self.scalar_map = scalar_map if scalar_map is not None else DEFAULT_REGISTRY.scalar_map()

    def _dimensions(self, quantity_type: PhysicalQuantityType, exponent: int) -> DimensionalFormula:
        if quantity_type not in self.scalar_map:
            raise UnsupportedNatureError(f"{quantity_type} is not a registered scalar quantity")
        return self.scalar_map.get_dimensions(quantity_type) ** exponent

    def _combine(
        self,
        type_a: PhysicalQuantityType,
        exponent_a: int,
        type_b: PhysicalQuantityType,
        exponent_b: int,
        op: Callable[[DimensionalFormula, DimensionalFormula], DimensionalFormula],
    ) -> PhysicalQuantityType:
        dim_a = self._dimensions(type_a, exponent_a)
        dim_b = self._dimensions(type_b, exponent_b)
        return self.scalar_map.find_quantity_type(op(dim_a, dim_b))

    def multiply(
        self,
        type_a: PhysicalQuantityType,
        exponent_a: int,
        type_b: PhysicalQuantityType,
        exponent_b: int,
    ) -> PhysicalQuantityType:
        return self._combine(type_a, exponent_a, type_b, exponent_b, DimensionalFormula.__mul__)

    def divide(
        self,
        type_a: PhysicalQuantityType,
        exponent_a: int,
        type_b: PhysicalQuantityType,
        exponent_b: int,
    ) -> PhysicalQuantityType:
        return self._combine(type_a, exponent_a, type_b, exponent_b, DimensionalFormula.__truediv__)

    def find_all_ways_to_create(self, target: PhysicalQuantityType) -> List[str]:
        return _ways_to_create(
            target,
            self._dimensions(target, 1),
            ((t, self.scalar_map.get_dimensions(t)) for t in self.scalar_map.types()),
        )


DEFAULT_ENGINE = DimensionalAnalysisEngine()


__all__ = [
    "Operand",
    "Resolution",
    "multiplication_nature",
    "division_nature",
    "combine_same_type",
    "DimensionalAnalysisEngine",
    "ScalarDimensionalAnalysisEngine",
    "DEFAULT_ENGINE",
]
