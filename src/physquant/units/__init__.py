from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from physquant.units.registry import QuantityRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "QuantityRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from physquant.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. 'default_registry' resolves to the package's default
    registry; 'quantity_types' lists the types it defines.
    """
    if name == "default_registry":
        return _get_default_registry()
    if name == "quantity_types":
        return _get_default_registry().types()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["default_registry", "quantity_types"])
