"""
physquant.units.parser
======================

Text <-> quantity helpers for display and data-entry paths.

``parse_quantity`` accepts a number with an optional unit suffix made of a
prefix symbol and the type's base symbol::

    parse_quantity("12.5 mV")                      # 0.0125 V
    parse_quantity("4.7 kohm", "Resistance")       # 4700 Ω
    parse_quantity("3", PhysicalQuantityType.CURRENT, UnitPrefix.MILLI)

The formatting helpers render a quantity in a chosen prefix, or pick an
engineering prefix automatically when none is given.
"""

from __future__ import annotations

import logging
import math
import re
import unicodedata
from typing import TYPE_CHECKING, Optional, Union

from physquant.core.enums import PhysicalQuantityType
from physquant.core.quantity import PhysicalQuantity
from physquant.core.utils import format_number
from physquant.units.prefixes import UnitPrefix, prefix_from_symbol
from physquant.units.registry import DEFAULT_REGISTRY

if TYPE_CHECKING:
    from physquant.quantities.base import SpecificQuantity

logger = logging.getLogger(__name__)

# number, then whatever follows it (the unit)
_NUMBER_RE = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>.*?)\s*$"
)
_OHM_RE = re.compile(r"ohms?$", re.IGNORECASE)

# Prefixes tried by automatic formatting, largest first.
_AUTO_PREFIXES = sorted(UnitPrefix, key=lambda p: p.value, reverse=True)

QuantityLike = Union[PhysicalQuantity, "SpecificQuantity"]


def _coerce_type(quantity_type: Union[PhysicalQuantityType, str]) -> PhysicalQuantityType:
    if isinstance(quantity_type, PhysicalQuantityType):
        return quantity_type
    if isinstance(quantity_type, str):
        return PhysicalQuantityType.from_name(quantity_type)
    raise TypeError(f"quantity_type must be a PhysicalQuantityType or str, got {quantity_type!r}")


def _prefix_from_unit(unit: str, quantity_type: PhysicalQuantityType) -> UnitPrefix:
    text = _OHM_RE.sub("Ω", unicodedata.normalize("NFC", unit))
    symbol = DEFAULT_REGISTRY.get_symbol(quantity_type)
    if not symbol:
        # dimensionless values carry at most a prefix ("2.5 k")
        prefix = prefix_from_symbol(text)
        if prefix is not None:
            return prefix
    elif text.endswith(symbol):
        head = text[: len(text) - len(symbol)]
        if not head:
            return UnitPrefix.BASE
        prefix = prefix_from_symbol(head)
        if prefix is not None:
            return prefix
    raise ValueError(f"Unit {unit!r} is not a unit of {quantity_type}")


def parse_quantity(
    text: str,
    quantity_type: Union[PhysicalQuantityType, str] = PhysicalQuantityType.VOLTAGE,
    prefix: UnitPrefix = UnitPrefix.BASE,
) -> PhysicalQuantity:
    """
    Parse ``text`` into a `PhysicalQuantity` of ``quantity_type``.

    Parameters
    ----------
    text : str
        A number, optionally followed by a unit such as ``'mV'`` or ``'kΩ'``.
    quantity_type : PhysicalQuantityType or str, default Voltage
        Target type; names are resolved with `PhysicalQuantityType.from_name`.
    prefix : UnitPrefix, default UnitPrefix.BASE
        Scale of the number when ``text`` carries no unit.

    Raises
    ------
    ValueError
        If the number is malformed, the type name is unknown, or the unit
        does not belong to ``quantity_type``.
    """
    qtype = _coerce_type(quantity_type)

    match = _NUMBER_RE.match(text)
    if match is None:
        # lets float() accept 'inf'/'nan' and raise on anything else
        return PhysicalQuantity(float(text), qtype, prefix=prefix)

    value = float(match.group("number"))
    unit = match.group("unit")
    if unit:
        prefix = _prefix_from_unit(unit, qtype)
    logger.debug("Parsed %r as %r %s (%s)", text, value, qtype, prefix.name)
    return PhysicalQuantity(value, qtype, prefix=prefix)


def _as_quantity(q: QuantityLike) -> PhysicalQuantity:
    if isinstance(q, PhysicalQuantity):
        return q
    to_quantity = getattr(q, "to_quantity", None)
    if to_quantity is None:
        raise TypeError(f"Expected a quantity, got {type(q).__name__}")
    return to_quantity()


def best_prefix(q: PhysicalQuantity) -> UnitPrefix:
    """Largest prefix that keeps the displayed magnitude at or above 1."""
    magnitude = abs(q.value)
    if magnitude == 0 or not math.isfinite(magnitude):
        return UnitPrefix.BASE
    for prefix in _AUTO_PREFIXES:
        if abs(q.get_value_in(prefix)) >= 1:
            return prefix
    return _AUTO_PREFIXES[-1]


def format_quantity(q: QuantityLike, prefix: Optional[UnitPrefix] = None) -> str:
    """Render ``q`` with its unit, e.g. ``'12.5 mV'``; ``prefix=None`` picks one."""
    quantity = _as_quantity(q)
    return quantity.to_string(best_prefix(quantity) if prefix is None else prefix)


def format_value(q: QuantityLike, prefix: Optional[UnitPrefix] = None) -> str:
    """Numeric part only, as used by entry fields (``'12.5'``)."""
    quantity = _as_quantity(q)
    chosen = best_prefix(quantity) if prefix is None else prefix
    return format_number(quantity.get_value_in(chosen))


__all__ = ["parse_quantity", "format_quantity", "format_value", "best_prefix"]
