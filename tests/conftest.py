# tests/conftest.py
import pytest
from physquant.core.engine import DimensionalAnalysisEngine
from physquant.units.registry import DEFAULT_REGISTRY as _registry



@pytest.fixture(scope="session")
def registry():
    return _registry

@pytest.fixture(scope="session")
def engine(registry):
    return DimensionalAnalysisEngine(registry)
