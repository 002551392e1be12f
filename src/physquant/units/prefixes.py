"""
physquant.units.prefixes
========================

Power-of-ten unit prefixes used for input normalisation and display.

Values handed to a `PhysicalQuantity` are normalised to SI base units at
construction (``value * multiplier ** exponent``) and denormalised for display
(``base_value / multiplier ** exponent``).
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Any, Dict, Tuple


class UnitPrefix(Enum):
    """SI prefix; the member value is the power of ten."""

    NANO = -9
    MICRO = -6
    MILLI = -3
    BASE = 0
    KILO = 3
    MEGA = 6
    GIGA = 9

    @property
    def multiplier(self) -> float:
        return multiplier_for(self)

    @property
    def symbol(self) -> str:
        return symbol_for(self)

    @property
    def long_name(self) -> str:
        return name_for(self)

    @classmethod
    def parse(cls, text: str) -> "UnitPrefix":
        """Resolve a prefix from its symbol ('k', 'µ', 'u'), long name or enum name."""
        s = unicodedata.normalize("NFC", text.strip())
        if s in _BY_SYMBOL:
            return _BY_SYMBOL[s]
        folded = s.casefold()
        for member in cls:
            if folded in (member.name.casefold(), name_for(member)):
                return member
        raise ValueError(f"Unknown unit prefix: {text!r}")


# (multiplier, symbol, long name)
_TABLE: Dict[UnitPrefix, Tuple[float, str, str]] = {
    UnitPrefix.NANO:  (1e-9, "n", "nano"),
    UnitPrefix.MICRO: (1e-6, "µ", "micro"),
    UnitPrefix.MILLI: (1e-3, "m", "milli"),
    UnitPrefix.BASE:  (1.0,  "",  ""),
    UnitPrefix.KILO:  (1e3,  "k", "kilo"),
    UnitPrefix.MEGA:  (1e6,  "M", "mega"),
    UnitPrefix.GIGA:  (1e9,  "G", "giga"),
}

_BY_SYMBOL: Dict[str, UnitPrefix] = {sym: p for p, (_, sym, _) in _TABLE.items()}
# ASCII and Greek-letter spellings of micro
_BY_SYMBOL["u"] = UnitPrefix.MICRO
_BY_SYMBOL["μ"] = UnitPrefix.MICRO

# Ordered list of prefix symbols by descending length for robust matching
PREFIX_SYMBOLS_DESC: Tuple[str, ...] = tuple(
    sorted((s for s in _BY_SYMBOL if s), key=len, reverse=True)
)

PREFIXES: Tuple[UnitPrefix, ...] = tuple(UnitPrefix)


# Unknown prefixes fall back to the base scale; these are used on display paths.
def multiplier_for(prefix: Any) -> float:
    entry = _TABLE.get(prefix) if isinstance(prefix, UnitPrefix) else None
    return entry[0] if entry else 1.0


def symbol_for(prefix: Any) -> str:
    entry = _TABLE.get(prefix) if isinstance(prefix, UnitPrefix) else None
    return entry[1] if entry else ""


def name_for(prefix: Any) -> str:
    entry = _TABLE.get(prefix) if isinstance(prefix, UnitPrefix) else None
    return entry[2] if entry else ""


def prefix_from_symbol(symbol: str) -> UnitPrefix | None:
    return _BY_SYMBOL.get(unicodedata.normalize("NFC", symbol))


def to_base(value: float, prefix: Any, exponent: int = 1) -> float:
    """Normalise ``value`` given in ``prefix`` units into SI base units."""
    return float(value) * multiplier_for(prefix) ** exponent


def from_base(value: float, prefix: Any, exponent: int = 1) -> float:
    """Express an SI base ``value`` in ``prefix`` units."""
    return float(value) / multiplier_for(prefix) ** exponent


__all__ = [
    "UnitPrefix",
    "PREFIXES",
    "PREFIX_SYMBOLS_DESC",
    "multiplier_for",
    "symbol_for",
    "name_for",
    "prefix_from_symbol",
    "to_base",
    "from_base",
]
