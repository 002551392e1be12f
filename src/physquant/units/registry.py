"""
physquant.units.registry
========================

The quantity-type registry: a fixed, process-wide table mapping every
legitimate (dimensional formula, nature, operation) combination to one member
of `PhysicalQuantityType`, and back.

Design
------
- Data-driven: one `QuantityDefinition` row per quantity type lists its
  formula, default nature, base symbol, and the operations it may arise from.
- Built once by `_bootstrap_default_registry()` at import; read-only after.
  No locking is needed because nothing mutates it.
- Inconsistent tables (two rows claiming the same exact key, a type defined
  twice, ambiguous reverse lookups in the scalar-only map) are rejected when
  the registry is built, never at call time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar

from physquant.core.dimensions import DimensionalFormula
from physquant.core.enums import OperationType, PhysicalQuantityType, QuantityNature
from physquant.core.errors import RegistryConfigurationError, UnresolvableDimensionError

logger = logging.getLogger(__name__)

Q = PhysicalQuantityType
N = QuantityNature
Op = OperationType

ResolutionKey = Tuple[DimensionalFormula, QuantityNature, OperationType]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True, slots=True)
class QuantityDefinition:
    """One row of the physics definitions table."""

    quantity_type: PhysicalQuantityType
    formula: DimensionalFormula
    nature: QuantityNature
    symbol: str
    operations: frozenset[OperationType] = frozenset({Op.DIRECT, Op.SCALAR_MULTIPLY})

    def keys(self) -> Iterator[ResolutionKey]:
        for op in sorted(self.operations, key=lambda o: o.value):
            yield (self.formula, self.nature, op)


def _define(
    quantity_type: PhysicalQuantityType,
    symbol: str,
    nature: QuantityNature = N.SCALAR,
    extra_ops: Iterable[OperationType] = (),
    **exponents: int,
) -> QuantityDefinition:
    ops = frozenset({Op.DIRECT, Op.SCALAR_MULTIPLY, *extra_ops})
    return QuantityDefinition(quantity_type, DimensionalFormula(**exponents), nature, symbol, ops)


# ---------------------------------------------------------------------------
# Physics definitions
# ---------------------------------------------------------------------------
DEFINITIONS: Tuple[QuantityDefinition, ...] = (
    _define(Q.DIMENSIONLESS, ""),

    # Base SI quantities (all scalar)
    _define(Q.MASS, "kg", mass=1),
    _define(Q.LENGTH, "m", length=1),
    _define(Q.TIME, "s", time=1),
    _define(Q.TEMPERATURE, "K", temperature=1),
    _define(Q.CURRENT, "A", current=1),

    # Geometric
    _define(Q.AREA, "m²", length=2),
    _define(Q.VOLUME, "m³", length=3),

    # Kinematics / mechanics (vectors)
    _define(Q.DISPLACEMENT, "m", N.VECTOR, length=1),
    _define(Q.VELOCITY, "m/s", N.VECTOR, length=1, time=-1),
    _define(Q.ACCELERATION, "m/s²", N.VECTOR, length=1, time=-2),
    _define(Q.FORCE, "N", N.VECTOR, mass=1, length=1, time=-2),
    _define(Q.MOMENTUM, "kg·m/s", N.VECTOR, mass=1, length=1, time=-1),

    # Mechanics (scalars); work and power also arise as dot products
    _define(Q.ENERGY, "J", N.SCALAR, (Op.DOT_PRODUCT,), mass=1, length=2, time=-2),
    _define(Q.POWER, "W", N.SCALAR, (Op.DOT_PRODUCT,), mass=1, length=2, time=-3),
    _define(Q.PRESSURE, "Pa", mass=1, length=-1, time=-2),
    _define(Q.DENSITY, "kg/m³", mass=1, length=-3),

    # Pseudovectors arise from cross products
    _define(Q.TORQUE, "N·m", N.PSEUDOVECTOR, (Op.CROSS_PRODUCT,), mass=1, length=2, time=-2),
    _define(Q.ANGULAR_MOMENTUM, "kg·m²/s", N.PSEUDOVECTOR, (Op.CROSS_PRODUCT,), mass=1, length=2, time=-1),

    # Electrical quantities (scalar)
    _define(Q.VOLTAGE, "V", mass=1, length=2, time=-3, current=-1),
    _define(Q.RESISTANCE, "Ω", mass=1, length=2, time=-3, current=-2),
    _define(Q.CHARGE, "C", current=1, time=1),
    _define(Q.CAPACITANCE, "F", mass=-1, length=-2, time=4, current=2),
    _define(Q.INDUCTANCE, "H", mass=1, length=2, time=-2, current=-2),
    _define(Q.CONDUCTANCE, "S", mass=-1, length=-2, time=3, current=2),
    _define(Q.MAGNETIC_FLUX, "Wb", mass=1, length=2, time=-2, current=-1),
    _define(Q.FREQUENCY, "Hz", time=-1),
    _define(Q.RESISTIVITY, "Ω·m", mass=1, length=3, time=-3, current=-2),
    _define(Q.CONDUCTIVITY, "S/m", mass=-1, length=-3, time=3, current=2),

    # Fields
    _define(Q.ELECTRIC_FIELD, "V/m", N.VECTOR, mass=1, length=1, time=-3, current=-1),
    _define(Q.MAGNETIC_FIELD, "T", N.PSEUDOVECTOR, mass=1, time=-2, current=-1),
)


# ---------------------------------------------------------------------------
# One-to-one frozen mapping
# ---------------------------------------------------------------------------
class FrozenBiMap(Generic[K, V]):
    """Immutable one-to-one mapping with O(1) lookups in both directions."""

    __slots__ = ("_forward", "_reverse")

    def __init__(self, mapping: Mapping[K, V]) -> None:
        reverse: Dict[V, K] = {}
        for key, value in mapping.items():
            if value in reverse:
                raise RegistryConfigurationError(
                    f"Ambiguous reverse lookup: {reverse[value]!r} and {key!r} both map to {value!r}"
                )
            reverse[value] = key
        self._forward: Mapping[K, V] = MappingProxyType(dict(mapping))
        self._reverse: Mapping[V, K] = MappingProxyType(reverse)

    @property
    def forward(self) -> Mapping[K, V]:
        return self._forward

    @property
    def reverse(self) -> Mapping[V, K]:
        return self._reverse

    def get_by_key(self, key: K) -> Optional[V]:
        return self._forward.get(key)

    def get_by_value(self, value: V) -> Optional[K]:
        return self._reverse.get(value)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward


class ScalarQuantityMap:
    """Scalar-only registry: resolves a type purely from its formula.

    Only scalar-natured definitions participate, so e.g. Torque (which shares
    its formula with Energy) and Displacement (which shares it with Length)
    stay out of the map.
    """

    def __init__(self, definitions: Iterable[QuantityDefinition]) -> None:
        forward: Dict[DimensionalFormula, PhysicalQuantityType] = {}
        for d in definitions:
            if d.nature is not N.SCALAR:
                continue
            if d.formula in forward:
                raise RegistryConfigurationError(
                    f"Ambiguous scalar formula {d.formula}: {forward[d.formula]} and {d.quantity_type}"
                )
            forward[d.formula] = d.quantity_type
        self._map: FrozenBiMap[DimensionalFormula, PhysicalQuantityType] = FrozenBiMap(forward)

    def find_quantity_type(self, formula: DimensionalFormula) -> PhysicalQuantityType:
        found = self._map.get_by_key(formula)
        if found is None:
            logger.debug("No scalar quantity registered for %s", formula)
            raise UnresolvableDimensionError(formula)
        return found

    def get_dimensions(self, quantity_type: PhysicalQuantityType) -> DimensionalFormula:
        found = self._map.get_by_value(quantity_type)
        if found is None:
            raise KeyError(f"{quantity_type} is not a registered scalar quantity")
        return found

    def types(self) -> Tuple[PhysicalQuantityType, ...]:
        return tuple(self._map.reverse)

    def __contains__(self, quantity_type: object) -> bool:
        return quantity_type in self._map.reverse

    def __len__(self) -> int:
        return len(self._map)


# ---------------------------------------------------------------------------
# Quantity registry
# ---------------------------------------------------------------------------
class QuantityRegistry:
    """Read-only registry resolving (formula, nature, operation) keys to types.

    Parameters
    ----------
    definitions : iterable of QuantityDefinition
        The physics table. Order matters only for the relaxed fallback:
        the first definition registered for a (formula, nature) pair wins.
    relaxed_operation_match : bool, default True
        When the exact (formula, nature, operation) key is missing, retry with
        (formula, nature) regardless of how the value was produced.
    """

    def __init__(
        self,
        definitions: Iterable[QuantityDefinition] = DEFINITIONS,
        relaxed_operation_match: bool = True,
    ) -> None:
        self.relaxed_operation_match = relaxed_operation_match

        by_type: Dict[PhysicalQuantityType, QuantityDefinition] = {}
        by_key: Dict[ResolutionKey, PhysicalQuantityType] = {}
        by_formula_nature: Dict[Tuple[DimensionalFormula, QuantityNature], PhysicalQuantityType] = {}

        for d in definitions:
            if d.quantity_type in by_type:
                raise RegistryConfigurationError(f"{d.quantity_type} is defined more than once")
            by_type[d.quantity_type] = d
            for key in d.keys():
                if key in by_key:
                    raise RegistryConfigurationError(
                        f"{d.quantity_type} and {by_key[key]} both claim "
                        f"({key[0]}, {key[1]}, {key[2]})"
                    )
                by_key[key] = d.quantity_type
            by_formula_nature.setdefault((d.formula, d.nature), d.quantity_type)

        self._definitions: Mapping[PhysicalQuantityType, QuantityDefinition] = MappingProxyType(by_type)
        self._by_key: Mapping[ResolutionKey, PhysicalQuantityType] = MappingProxyType(by_key)
        self._by_formula_nature = MappingProxyType(by_formula_nature)
        self._scalar_map: ScalarQuantityMap | None = None

        logger.debug(
            "Quantity registry built: %d definitions, %d resolution keys",
            len(by_type), len(by_key),
        )

    # -------------------------- lookups ------------------------------------
    def find_quantity_type(
        self,
        formula: DimensionalFormula,
        nature: QuantityNature,
        operation: OperationType,
    ) -> PhysicalQuantityType:
        """Resolve a key to a quantity type.

        Raises `UnresolvableDimensionError` if neither the exact key nor (when
        relaxed) the (formula, nature) pair is registered.
        """
        found = self._by_key.get((formula, nature, operation))
        if found is not None:
            return found

        if self.relaxed_operation_match:
            found = self._by_formula_nature.get((formula, nature))
            if found is not None:
                logger.debug(
                    "Relaxed match: (%s, %s, %s) resolved to %s ignoring operation",
                    formula, nature, operation, found,
                )
                return found

        logger.debug("Unresolved key: (%s, %s, %s)", formula, nature, operation)
        raise UnresolvableDimensionError(formula, nature, operation)

    def definition(self, quantity_type: PhysicalQuantityType) -> QuantityDefinition:
        try:
            return self._definitions[quantity_type]
        except KeyError:
            raise KeyError(f"Unknown quantity type: {quantity_type}") from None

    def get_dimensions(self, quantity_type: PhysicalQuantityType) -> DimensionalFormula:
        return self.definition(quantity_type).formula

    def get_nature(self, quantity_type: PhysicalQuantityType) -> QuantityNature:
        return self.definition(quantity_type).nature

    def get_symbol(self, quantity_type: PhysicalQuantityType) -> str:
        return self.definition(quantity_type).symbol

    def types(self) -> Tuple[PhysicalQuantityType, ...]:
        return tuple(self._definitions)

    def keys(self) -> Tuple[ResolutionKey, ...]:
        return tuple(self._by_key)

    def scalar_map(self) -> ScalarQuantityMap:
        if self._scalar_map is None:
            self._scalar_map = ScalarQuantityMap(self._definitions.values())
        return self._scalar_map

    def __contains__(self, quantity_type: object) -> bool:
        return quantity_type in self._definitions

    def __iter__(self) -> Iterator[QuantityDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


# ---------------------------------------------------------------------------
# Bootstrap a default registry
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> QuantityRegistry:
    reg = QuantityRegistry(DEFINITIONS)
    # Force the scalar map now so an ambiguous table fails at import.
    reg.scalar_map()
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: QuantityRegistry = _bootstrap_default_registry()


__all__ = [
    "QuantityDefinition",
    "DEFINITIONS",
    "FrozenBiMap",
    "ScalarQuantityMap",
    "QuantityRegistry",
    "DEFAULT_REGISTRY",
]
