import pytest

from physquant.core.dimensions import DimensionalFormula
from physquant.core.enums import OperationType as Op
from physquant.core.enums import PhysicalQuantityType as Q
from physquant.core.enums import QuantityNature as N
from physquant.core.errors import InvalidNarrowingError, UnsupportedNatureError
from physquant.core.quantity import PhysicalQuantity
from physquant.core.result import OperationResult, PhysicalQuantityBase

ENERGY = DimensionalFormula(mass=1, length=2, time=-2)
FORCE = DimensionalFormula(mass=1, length=1, time=-2)
LENGTH = DimensionalFormula(length=1)


def vec(value, dims):
    return PhysicalQuantityBase(value, dims, N.VECTOR)


def test_base_defaults_to_direct():
    b = PhysicalQuantityBase(1.0, LENGTH, N.VECTOR)
    assert b.created_by is Op.DIRECT

def test_base_is_frozen():
    b = PhysicalQuantityBase(1.0, LENGTH, N.VECTOR)
    with pytest.raises(AttributeError):
        b.value = 2.0  # type: ignore[misc]

def test_dot_and_cross_natures():
    f, d = vec(10, FORCE), vec(5, LENGTH)
    dot = f.dot(d)
    cross = d.cross(f)
    assert (dot.value, dot.dimensions, dot.nature, dot.created_by) == (50.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT)
    assert (cross.value, cross.dimensions, cross.nature, cross.created_by) == (
        50.0, ENERGY, N.PSEUDOVECTOR, Op.CROSS_PRODUCT
    )

def test_dot_requires_vectors():
    s = PhysicalQuantityBase(2.0, ENERGY, N.SCALAR)
    with pytest.raises(UnsupportedNatureError):
        s.dot(vec(1, LENGTH))

def test_base_operator_natures():
    f = vec(10, FORCE)
    t = PhysicalQuantityBase(2.0, DimensionalFormula(time=1), N.SCALAR)
    assert (f * t).nature is N.VECTOR
    assert (f / t).nature is N.VECTOR
    assert (t / f).nature is N.SCALAR
    assert (f * vec(1, LENGTH)).created_by is Op.DOT_PRODUCT
    assert (3 * f).created_by is Op.SCALAR_MULTIPLY

def test_scalar_multiply_keeps_formula_and_nature():
    r = vec(10, FORCE).scalar_multiply(3)
    assert r.value == 30.0
    assert r.dimensions == FORCE
    assert r.nature is N.VECTOR


# --- OperationResult -----------------------------------------------------------

def test_result_chaining_with_numbers():
    r = OperationResult(50.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT)
    assert (r * 2).value == 100.0
    assert (2 * r).value == 100.0
    assert (r / 4).value == 12.5
    assert (r * 2).created_by is Op.SCALAR_MULTIPLY

def test_result_rejects_non_numbers():
    r = OperationResult(50.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT)
    with pytest.raises(TypeError):
        r * "x"

def test_resolve_type(registry):
    assert OperationResult(1.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT).resolve_type() is Q.ENERGY
    assert OperationResult(1.0, ENERGY, N.PSEUDOVECTOR, Op.CROSS_PRODUCT).resolve_type(registry) is Q.TORQUE

def test_to_physical_quantity_for_scalars():
    q = OperationResult(50.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT).to_physical_quantity()
    assert q == PhysicalQuantity(50, Q.ENERGY)

def test_to_physical_quantity_rejects_non_scalars():
    with pytest.raises(InvalidNarrowingError):
        OperationResult(50.0, ENERGY, N.PSEUDOVECTOR, Op.CROSS_PRODUCT).to_physical_quantity()

def test_str_and_equality():
    r = OperationResult(50.0, ENERGY, N.SCALAR, Op.DOT_PRODUCT)
    assert str(r) == "50 [Mass Length^2 Time^-2] (Scalar)"
    assert r == OperationResult(50, ENERGY, N.SCALAR, Op.DOT_PRODUCT)
    assert r != OperationResult(50, ENERGY, N.SCALAR, Op.DIRECT)
    with pytest.raises(TypeError):
        hash(r)
