"""Grammar for CSS unit values such as 12px, 1.5rem or 50%."""

from __future__ import annotations

import re
from enum import Enum
from dataclasses import dataclass

from app.core.converter.errors import InvalidValue
from app.utils.units import format_number


class UnitSuffix(str, Enum):
    PIXEL = "px"
    CENTIMETER = "cm"
    MILLIMETER = "mm"
    QUARTER = "Q"
    INCH = "in"
    PICA = "pc"
    POINT = "pt"
    REM = "rem"
    EM = "em"
    VIEW_WIDTH = "vw"
    VIEW_HEIGHT = "vh"
    VIEW_MIN = "vmin"
    VIEW_MAX = "vmax"
    PERCENT = "%"
    NONE = ""           # unitless, pixel equivalent
    MAGNIFICATION = "x"  # output only, not part of the value grammar

    def __str__(self) -> str:
        return self.value


ABSOLUTE_SUFFIXES = frozenset({
    UnitSuffix.PIXEL, UnitSuffix.CENTIMETER, UnitSuffix.MILLIMETER,
    UnitSuffix.QUARTER, UnitSuffix.INCH, UnitSuffix.PICA, UnitSuffix.POINT,
})
FONT_RELATIVE_SUFFIXES = frozenset({UnitSuffix.REM, UnitSuffix.EM})
VIEWPORT_SUFFIXES = frozenset({
    UnitSuffix.VIEW_WIDTH, UnitSuffix.VIEW_HEIGHT, UnitSuffix.VIEW_MIN, UnitSuffix.VIEW_MAX,
})
RATIO_SUFFIXES = frozenset({UnitSuffix.PERCENT, UnitSuffix.MAGNIFICATION})

# Magnitude is 0 or has no leading zero, no sign, at most one decimal point.
_UNIT_VALUE_RE = re.compile(
    r"^((?:[1-9]\d*|0)(?:\.\d+)?)(px|cm|mm|Q|in|pc|pt|rem|em|vw|vh|vmin|vmax|%|)$"
)


@dataclass(frozen=True)
class ParsedValue:
    value: float
    unit_suffix: UnitSuffix


def _match(text: object) -> re.Match[str] | None:
    if not isinstance(text, str):
        return None
    # fullmatch so a trailing newline is not accepted by '$'
    return _UNIT_VALUE_RE.fullmatch(text)


def split_unit_value(text: str) -> ParsedValue:
    """Split a unit value into its magnitude and unit suffix.

    Raises InvalidValue when the text does not match the grammar. No
    whitespace trimming is done.
    """
    m = _match(text)
    if m is None:
        raise InvalidValue(text)
    return ParsedValue(value=float(m.group(1)), unit_suffix=UnitSuffix(m.group(2)))


def is_unit_value(text: object) -> bool:
    """Same check as split_unit_value, without raising."""
    return _match(text) is not None


def format_unit_value(value: float, unit_suffix: UnitSuffix | str) -> str:
    return f"{format_number(value)}{UnitSuffix(unit_suffix).value}"
