import pytest

import physquant.units.registry as regmod
from physquant.units.registry import _bootstrap_default_registry


@pytest.fixture()
def fresh_registry():
    return _bootstrap_default_registry()


def test__get_default_registry_returns_DEFAULT(monkeypatch, fresh_registry):
    # Patch the DEFAULT_REGISTRY and verify the helper returns it
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import physquant.units as units
    get_default = getattr(units, "_get_default_registry")

    assert get_default() is fresh_registry


def test_lazy_default_registry_binds_to_patched_registry(monkeypatch, fresh_registry):
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    from physquant.units import default_registry
    assert default_registry is fresh_registry


def test_quantity_types_lists_registered_types():
    import physquant.units as units
    from physquant.core.enums import PhysicalQuantityType

    assert set(units.quantity_types) == set(PhysicalQuantityType)


def test_unknown_module_attribute_raises_attributeerror():
    import physquant.units as units
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")


def test_dir_includes_lazy_names():
    import physquant.units as units
    names = dir(units)
    assert "default_registry" in names
    assert "quantity_types" in names
    # Should be sorted for better discoverability
    assert names == sorted(names)
