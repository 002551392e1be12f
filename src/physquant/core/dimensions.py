# physquant.core.dimensions

from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple, Union

from physquant.core.utils import format_dim

# --- Public typing -----------------------------------------------------------
DimTuple = Tuple[int, int, int, int, int, int, int]
DimLike = Union["DimensionalFormula", DimTuple, Iterable[int]]

# Order of the SI base dimensions inside the vector.
BASE_DIMENSIONS: Tuple[str, ...] = (
    "mass",
    "length",
    "time",
    "current",
    "temperature",
    "amount",
    "luminous",
)

_DISPLAY_NAMES: Tuple[str, ...] = (
    "Mass",
    "Length",
    "Time",
    "ElectricCurrent",
    "Temperature",
    "AmountOfSubstance",
    "LuminousIntensity",
)

# Exponents are stored as small signed integers.
EXPONENT_LIMIT = 127


def _as_exponent(x: Any) -> int:
    if isinstance(x, bool):
        raise TypeError("Dimension exponents must be integers, got bool")
    if isinstance(x, int):
        e = x
    elif isinstance(x, float) and x.is_integer():
        e = int(x)
    else:
        raise TypeError(f"Dimension exponents must be integers, got {x!r}")
    if abs(e) > EXPONENT_LIMIT:
        raise ValueError(f"Dimension exponent {e} outside [-{EXPONENT_LIMIT}, {EXPONENT_LIMIT}]")
    return e


# --- Core object -------------------------------------------------------------

class DimensionalFormula(tuple):
    """
    Immutable 7-length vector of integer exponents over the SI base dimensions
    (mass, length, time, current, temperature, amount, luminous).

    Tuple subclass => hashable, comparable and usable as dict keys. Two
    formulas are equal exactly when every exponent matches.
    """

    __slots__ = ()

    def __new__(
        cls,
        mass: int = 0,
        length: int = 0,
        time: int = 0,
        current: int = 0,
        temperature: int = 0,
        amount: int = 0,
        luminous: int = 0,
    ) -> "DimensionalFormula":
        exps = (mass, length, time, current, temperature, amount, luminous)
        return tuple.__new__(cls, (_as_exponent(x) for x in exps))

    def __getnewargs__(self) -> DimTuple:  # type: ignore[override]
        # copy/pickle call __new__ positionally
        return tuple(self)  # type: ignore[return-value]

    @classmethod
    def from_exponents(cls, data: DimLike) -> "DimensionalFormula":
        """Build from a dense iterable of seven exponents."""
        if isinstance(data, DimensionalFormula):
            return data
        t = tuple(data)
        if len(t) != 7:
            raise ValueError("DimensionalFormula must have length 7 (M, L, T, I, Θ, N, J).")
        return cls(*t)

    @classmethod
    def from_mapping(cls, data: Mapping[str, int]) -> "DimensionalFormula":
        """Build from a sparse mapping such as ``{"length": 1, "time": -1}``."""
        unknown = set(data) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown base dimension(s): {', '.join(sorted(unknown))}")
        return cls(**data)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "DimensionalFormula":  # type: ignore[override]
        o = DimensionalFormula.from_exponents(other)
        return DimensionalFormula(*(x + y for x, y in zip(self, o, strict=True)))

    def __truediv__(self, other: DimLike) -> "DimensionalFormula":
        o = DimensionalFormula.from_exponents(other)
        return DimensionalFormula(*(x - y for x, y in zip(self, o, strict=True)))

    def __rtruediv__(self, other: DimLike) -> "DimensionalFormula":
        """Handles (tuple / DimensionalFormula)."""
        return DimensionalFormula.from_exponents(other) / self

    def __pow__(self, n: int, modulo: Any | None = None) -> "DimensionalFormula":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for DimensionalFormula.")
        return self.raise_to_power(n)

    def raise_to_power(self, n: int) -> "DimensionalFormula":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        if n == 1:
            return self
        if n == 0:
            return DIMENSIONLESS
        return DimensionalFormula(*(e * n for e in self))

    def __rmul__(self, other: Any) -> "DimensionalFormula":
        """Prevent (int * DimensionalFormula) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "DimensionalFormula":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "DimensionalFormula":
        return NotImplemented

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_dict(self) -> dict[str, int]:
        """Sparse view: only the non-zero exponents."""
        return {name: e for name, e in zip(BASE_DIMENSIONS, self, strict=True) if e != 0}

    def si_units(self) -> str:
        """Render in base SI symbols, e.g. 'kg·m²/s³'."""
        return format_dim(self)

    def __str__(self) -> str:
        parts = [
            name if e == 1 else f"{name}^{e}"
            for name, e in zip(_DISPLAY_NAMES, self, strict=True)
            if e != 0
        ]
        return " ".join(parts) if parts else "Dimensionless"

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v}" for k, v in self.as_dict().items())
        return f"DimensionalFormula({args})"


# --- Function shims ----------------------------------------------------------

def dim_mul(a: DimLike, b: DimLike) -> DimensionalFormula:
    return DimensionalFormula.from_exponents(a) * b


def dim_div(a: DimLike, b: DimLike) -> DimensionalFormula:
    return DimensionalFormula.from_exponents(a) / b


def dim_pow(a: DimLike, n: int) -> DimensionalFormula:
    return DimensionalFormula.from_exponents(a) ** n


# --- Public constants --------------------------------------------------------

DIMENSIONLESS = DimensionalFormula()
MASS = DimensionalFormula(mass=1)
LENGTH = DimensionalFormula(length=1)
TIME = DimensionalFormula(time=1)
CURRENT = DimensionalFormula(current=1)
TEMPERATURE = DimensionalFormula(temperature=1)
AMOUNT = DimensionalFormula(amount=1)
LUMINOUS = DimensionalFormula(luminous=1)


__all__ = [
    "BASE_DIMENSIONS",
    "EXPONENT_LIMIT",
    "DimensionalFormula",
    "dim_mul",
    "dim_div",
    "dim_pow",
    "DIMENSIONLESS",
    "MASS",
    "LENGTH",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOUS",
]
