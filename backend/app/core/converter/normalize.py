"""Resolve a CSS length to a plain pixel number."""

from __future__ import annotations

import math

from app.core.converter.context import ElementLike
from app.core.converter.engine import convert_units
from app.core.converter.grammar import UnitSuffix, is_unit_value, split_unit_value

_VIA_PIXEL_CONVERSION = frozenset({
    UnitSuffix.POINT, UnitSuffix.CENTIMETER, UnitSuffix.EM, UnitSuffix.INCH,
    UnitSuffix.MILLIMETER, UnitSuffix.PICA, UnitSuffix.QUARTER, UnitSuffix.REM,
    UnitSuffix.VIEW_HEIGHT, UnitSuffix.VIEW_MAX, UnitSuffix.VIEW_MIN, UnitSuffix.VIEW_WIDTH,
})


def normalize_to_pixel(css_length: str, element: ElementLike | None = None, direction: str = "w") -> float:
    """Best-effort pixel value of ``css_length``.

    Behaves like a numeric coercion: NaN for text that is not a unit value.
    Percentages are taken of the parent element's client height (for both
    directions) and are 0 without an element. Other units go through
    convert_units with the default context.
    """
    if not is_unit_value(css_length):
        return math.nan

    parsed = split_unit_value(css_length)
    suffix = parsed.unit_suffix

    if suffix in (UnitSuffix.NONE, UnitSuffix.PIXEL):
        return parsed.value

    if suffix == UnitSuffix.PERCENT:
        if direction not in ("w", "h"):
            raise ValueError(f"Invalid direction '{direction}'. Must be 'w' or 'h'.")
        if element is None:
            return 0
        parent = getattr(element, "parent", None)
        # Height is used for the width direction too.
        parent_height = parent.client_height if parent is not None else 0
        return parsed.value * parent_height / 100

    if suffix in _VIA_PIXEL_CONVERSION:
        return split_unit_value(convert_units(css_length, UnitSuffix.PIXEL)).value

    raise AssertionError(f"unhandled unit suffix {suffix!r}")
