"""Physical length ratios and number formatting. Absolute units are expressed per inch."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

UNITS_PER_INCH = {
    "px": 96.0,
    "cm": 2.54,
    "mm": 25.4,
    "Q": 101.6,
    "in": 1.0,
    "pc": 6.0,
    "pt": 72.0,
}

ABSOLUTE_UNITS = set(UNITS_PER_INCH.keys())


def convert_absolute(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a value between two absolute length units."""
    if from_unit not in UNITS_PER_INCH:
        raise ValueError(f"Unknown unit '{from_unit}'. Valid: {ABSOLUTE_UNITS}")
    if to_unit not in UNITS_PER_INCH:
        raise ValueError(f"Unknown unit '{to_unit}'. Valid: {ABSOLUTE_UNITS}")
    if not math.isfinite(value):
        return value / UNITS_PER_INCH[from_unit] * UNITS_PER_INCH[to_unit]
    # Exact rational ratio, rounded to float once.
    ratio = Fraction(str(UNITS_PER_INCH[to_unit])) / Fraction(str(UNITS_PER_INCH[from_unit]))
    return float(Fraction(value) * ratio)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def format_number(value: float) -> str:
    """Shortest positional decimal for a float: 96.0 -> '96', 1e-05 -> '0.00001'."""
    if not math.isfinite(value):
        return repr(float(value))
    if value == int(value):
        return str(int(value))
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
