"""
physquant: dimensional analysis for physical quantities.

physquant builds, combines and converts physical quantities while a
dimensional-analysis engine infers what each operation produces (Voltage ÷
Resistance is a Current, Force · Displacement is Energy, Displacement ×
Force is Torque) and rejects combinations that have no physical meaning.
This module exposes a minimal, stable public API. The main types are imported
lazily so that importing the package has no side effects beyond logging setup.
"""

import logging
from importlib import metadata as _metadata
from typing import Any


__author__ = "physquant developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("physquant")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Library code never configures output; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public name -> defining module, resolved on first access.
_LAZY = {
    "PhysicalQuantity": "physquant.core.quantity",
    "PhysicalQuantityType": "physquant.core.enums",
    "QuantityNature": "physquant.core.enums",
    "OperationType": "physquant.core.enums",
    "DimensionalFormula": "physquant.core.dimensions",
    "OperationResult": "physquant.core.result",
    "DimensionalAnalysisEngine": "physquant.core.engine",
    "UnitPrefix": "physquant.units.prefixes",
    "parse_quantity": "physquant.units.parser",
    "format_quantity": "physquant.units.parser",
}

__all__ = ["__version__", "__author__", "__license__", *_LAZY]


def __getattr__(name: str) -> Any:
    module_name = _LAZY.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    value = getattr(import_module(module_name), name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(_LAZY))
