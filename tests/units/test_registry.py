import logging

import pytest

from physquant.core.dimensions import DimensionalFormula
from physquant.core.enums import OperationType as Op
from physquant.core.enums import PhysicalQuantityType as Q
from physquant.core.enums import QuantityNature as N
from physquant.core.errors import RegistryConfigurationError, UnresolvableDimensionError
from physquant.units.registry import (
    DEFINITIONS,
    FrozenBiMap,
    QuantityDefinition,
    QuantityRegistry,
    ScalarQuantityMap,
)

ENERGY = DimensionalFormula(mass=1, length=2, time=-2)


# -------------------------------
# Default table
# -------------------------------

def test_every_type_is_registered_once(registry):
    assert set(registry.types()) == set(Q)
    assert len(registry) == len(Q)

@pytest.mark.parametrize("qtype,nature", [
    (Q.FORCE, N.VECTOR),
    (Q.ELECTRIC_FIELD, N.VECTOR),
    (Q.MAGNETIC_FIELD, N.PSEUDOVECTOR),
    (Q.TORQUE, N.PSEUDOVECTOR),
    (Q.ENERGY, N.SCALAR),
    (Q.VOLTAGE, N.SCALAR),
])
def test_default_natures(registry, qtype, nature):
    assert registry.get_nature(qtype) is nature

@pytest.mark.parametrize("qtype,symbol", [
    (Q.VOLTAGE, "V"),
    (Q.RESISTANCE, "Ω"),
    (Q.POWER, "W"),
    (Q.MASS, "kg"),
    (Q.DIMENSIONLESS, ""),
])
def test_symbols(registry, qtype, symbol):
    assert registry.get_symbol(qtype) == symbol

def test_unknown_type_raises_keyerror():
    reg = QuantityRegistry(d for d in DEFINITIONS if d.quantity_type is not Q.DENSITY)
    with pytest.raises(KeyError):
        reg.get_dimensions(Q.DENSITY)
    assert Q.DENSITY not in reg


# -------------------------------
# Resolution
# -------------------------------

def test_energy_and_torque_are_told_apart_by_nature(registry):
    assert registry.find_quantity_type(ENERGY, N.SCALAR, Op.DOT_PRODUCT) is Q.ENERGY
    assert registry.find_quantity_type(ENERGY, N.PSEUDOVECTOR, Op.CROSS_PRODUCT) is Q.TORQUE

def test_forward_and_reverse_agree(registry):
    for d in registry:
        for formula, nature, op in d.keys():
            assert registry.find_quantity_type(formula, nature, op) is d.quantity_type
        assert registry.get_dimensions(d.quantity_type) == d.formula

def test_unknown_formula_raises(registry):
    weird = DimensionalFormula(temperature=1, current=1, time=1)
    with pytest.raises(UnresolvableDimensionError) as exc:
        registry.find_quantity_type(weird, N.SCALAR, Op.SCALAR_MULTIPLY)
    assert exc.value.formula == weird
    assert "Unknown dimensional/nature combination" in str(exc.value)

def test_wrong_nature_is_not_resolved(registry):
    # Energy as a vector does not exist
    with pytest.raises(UnresolvableDimensionError):
        registry.find_quantity_type(ENERGY, N.VECTOR, Op.SCALAR_MULTIPLY)


@pytest.mark.regression(reason="Relaxed fallback ignores provenance but never nature")
def test_relaxed_fallback_can_be_disabled():
    work_only_direct = tuple(
        QuantityDefinition(d.quantity_type, d.formula, d.nature, d.symbol)
        if d.quantity_type is Q.ENERGY else d
        for d in DEFINITIONS
    )
    relaxed = QuantityRegistry(work_only_direct)
    strict = QuantityRegistry(work_only_direct, relaxed_operation_match=False)

    assert relaxed.find_quantity_type(ENERGY, N.SCALAR, Op.DOT_PRODUCT) is Q.ENERGY
    with pytest.raises(UnresolvableDimensionError):
        strict.find_quantity_type(ENERGY, N.SCALAR, Op.DOT_PRODUCT)

def test_relaxed_fallback_logs_at_debug(caplog):
    reg = QuantityRegistry(DEFINITIONS)
    with caplog.at_level(logging.DEBUG, logger="physquant.units.registry"):
        # Voltage is only registered for direct and scalar products
        assert reg.find_quantity_type(
            reg.get_dimensions(Q.VOLTAGE), N.SCALAR, Op.DOT_PRODUCT
        ) is Q.VOLTAGE
    assert any("Relaxed match" in r.getMessage() for r in caplog.records)


# -------------------------------
# Table validation
# -------------------------------

def test_duplicate_type_rejected():
    with pytest.raises(RegistryConfigurationError):
        QuantityRegistry(DEFINITIONS + (DEFINITIONS[1],))

def test_duplicate_exact_key_rejected():
    clash = QuantityDefinition(Q.TORQUE, ENERGY, N.SCALAR, "N·m")
    table = tuple(d for d in DEFINITIONS if d.quantity_type is not Q.TORQUE) + (clash,)
    with pytest.raises(RegistryConfigurationError):
        QuantityRegistry(table)

def test_definition_keys_cover_operations():
    d = next(d for d in DEFINITIONS if d.quantity_type is Q.TORQUE)
    assert {op for _, _, op in d.keys()} == {Op.DIRECT, Op.SCALAR_MULTIPLY, Op.CROSS_PRODUCT}


# -------------------------------
# Scalar-only map
# -------------------------------

def test_scalar_map_skips_non_scalars(registry):
    smap = registry.scalar_map()
    assert Q.TORQUE not in smap
    assert Q.FORCE not in smap
    assert smap.find_quantity_type(ENERGY) is Q.ENERGY
    assert smap.get_dimensions(Q.VOLTAGE) == registry.get_dimensions(Q.VOLTAGE)

def test_scalar_map_is_cached(registry):
    assert registry.scalar_map() is registry.scalar_map()

def test_scalar_map_errors(registry):
    smap = registry.scalar_map()
    with pytest.raises(UnresolvableDimensionError):
        smap.find_quantity_type(DimensionalFormula(luminous=3))
    with pytest.raises(KeyError):
        smap.get_dimensions(Q.FORCE)

def test_scalar_map_rejects_ambiguous_formulas():
    a = QuantityDefinition(Q.ENERGY, ENERGY, N.SCALAR, "J")
    b = QuantityDefinition(Q.TORQUE, ENERGY, N.SCALAR, "N·m")
    with pytest.raises(RegistryConfigurationError):
        ScalarQuantityMap([a, b])


def test_frozen_bimap():
    bimap = FrozenBiMap({"a": 1, "b": 2})
    assert bimap.get_by_key("a") == 1
    assert bimap.get_by_value(2) == "b"
    assert bimap.get_by_key("z") is None
    assert len(bimap) == 2 and "a" in bimap
    with pytest.raises(TypeError):
        bimap.forward["c"] = 3  # type: ignore[index]
    with pytest.raises(RegistryConfigurationError):
        FrozenBiMap({"a": 1, "b": 1})
