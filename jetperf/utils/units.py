"""Unit conversion utilities for JetPerf.

Provides a lightweight unit conversion system built on top of pint,
with convenience functions for the quantities that appear in a
parameter file and in the performance summary.
"""

from __future__ import annotations

import re
from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()

Q_ = _ureg.Quantity

# "<number> [unit]" with the unit part optional
_QUANTITY_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(.*?)\s*$")


@lru_cache(maxsize=64)
def _scale(from_unit: str, to_unit: str) -> float:
    """Factor converting *from_unit* to *to_unit* (multiplicative units only)."""
    return Q_(1.0, from_unit).to(to_unit).magnitude


# --- Display conversions ---


def pressure_from_si(value_pa: float, unit: str) -> float:
    """Convert pressure from Pascals to target unit.

    Args:
        value_pa: Pressure in Pa.
        unit: Target unit string (e.g. "kPa", "psi", "bar", "atm").
    """
    return value_pa * _scale("Pa", unit)


def tsfc_from_si(value: float, unit: str) -> float:
    """Convert TSFC from kg/(N·s) to a display unit.

    Args:
        value: TSFC in kg/(N·s).
        unit: Target unit, e.g. "mg/(N*s)", "kg/(N*h)" or "lb/(lbf*h)".
    """
    return value * _scale("kg/(N*s)", unit)


# --- Parameter input ---


def parse_quantity(text: str, si_unit: str) -> float:
    """Parse a value such as ``"22.632 kPa"`` and return it in *si_unit*.

    A bare number is taken to already be in *si_unit*. Offset units
    (degC, degF) go through pint's non-multiplicative conversion.

    Raises:
        ValueError: If the text cannot be parsed or has the wrong dimension.
    """
    m = _QUANTITY_RE.match(text)
    if m is None:
        raise ValueError(f"Cannot parse quantity {text!r}")

    magnitude = float(m.group(1))
    unit = m.group(2)
    if not unit:
        return magnitude

    try:
        return float(Q_(magnitude, unit).to(si_unit).magnitude)
    except pint.errors.PintError as e:
        raise ValueError(f"Cannot convert {text!r} to {si_unit}: {e}") from e
