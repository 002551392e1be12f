"""
physquant.core.utils
====================

Utility functions for formatting and displaying physical dimensions and unit
symbols within physquant.

This module provides helper functions for representing dimensional exponents
and unit strings in a readable scientific format (e.g., 'kg·m²/s³').
"""

from __future__ import annotations

from typing import List, Sequence

# Number of significant digits used when rendering magnitudes (general format).
SIGNIFICANT_DIGITS = 6

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

_EXPONENT_GLYPHS = {1: "", 2: "²", 3: "³", 4: "⁴"}


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def exponent_glyph(exponent: int) -> str:
    """Return the suffix appended to a unit symbol for ``exponent``.

    1 → '', 2 → '²', 3 → '³', 4 → '⁴', anything else → '^n'.
    """
    return _EXPONENT_GLYPHS.get(exponent, f"^{exponent}")


def format_number(value: float, digits: int = SIGNIFICANT_DIGITS) -> str:
    """General-format ``value`` with ``digits`` significant digits."""
    text = f"{value:.{digits}g}"
    # avoid printing '-0'
    return "0" if text == "-0" else text


def format_dim(dim: Sequence[int]) -> str:
    """
    Turn a dimension vector (M,L,T,I,Θ,N,J) into 'kg·m²/s³' style.
    """
    labels: List[str] = ["kg", "m", "s", "A", "K", "mol", "cd"]

    num: List[str] = []
    den: List[str] = []
    for label, e in zip(labels, dim, strict=True):
        if e > 0:
            num.append(label + _sup(e))
        elif e < 0:
            den.append(label + _sup(-e))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator


def join_unit(prefix_symbol: str, base_symbol: str, exponent: int) -> str:
    """Compose the displayed unit, e.g. ('k', 'Ω', 1) -> 'kΩ', ('', 'V', 2) -> 'V²'."""
    if not base_symbol:
        # dimensionless: only the prefix is shown
        return f"{prefix_symbol}{exponent_glyph(exponent)}" if prefix_symbol else ""
    return f"{prefix_symbol}{base_symbol}{exponent_glyph(exponent)}"


__all__ = [
    "SIGNIFICANT_DIGITS",
    "exponent_glyph",
    "format_number",
    "format_dim",
    "join_unit",
]
