"""
physquant.core.errors
=====================

Exceptions raised by the dimensional-analysis core. Each one also derives
from the builtin the equivalent plain-Python failure would raise, so callers
catching ``TypeError``/``ValueError`` keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from physquant.core.dimensions import DimensionalFormula
    from physquant.core.enums import OperationType, QuantityNature


class PhysicalQuantityError(Exception):
    """Base class for every physquant error."""


class IncompatibleOperandsError(PhysicalQuantityError, TypeError):
    """Addition, subtraction or ordering across different types or exponents."""

    def __init__(self, message: str, left: Any = None, right: Any = None) -> None:
        super().__init__(message)
        self.left = left
        self.right = right


class UnresolvableDimensionError(PhysicalQuantityError, ValueError):
    """No registered quantity matches a (formula, nature[, operation]) key."""

    def __init__(
        self,
        formula: "DimensionalFormula",
        nature: "QuantityNature | None" = None,
        operation: "OperationType | None" = None,
    ) -> None:
        self.formula = formula
        self.nature = nature
        self.operation = operation
        detail = str(formula)
        if nature is not None:
            detail += f", nature={nature}"
        if operation is not None:
            detail += f", operation={operation}"
        super().__init__(f"Unknown dimensional/nature combination: {detail}")


class InvalidNarrowingError(PhysicalQuantityError, TypeError):
    """An operation result does not match the requested quantity type."""


class UnsupportedNatureError(PhysicalQuantityError, TypeError):
    """Dot/cross product requested on an operand that is not a vector."""


class RegistryConfigurationError(PhysicalQuantityError, ValueError):
    """The quantity definitions are inconsistent (duplicate or ambiguous keys)."""


__all__ = [
    "PhysicalQuantityError",
    "IncompatibleOperandsError",
    "UnresolvableDimensionError",
    "InvalidNarrowingError",
    "UnsupportedNatureError",
    "RegistryConfigurationError",
]
