"""Conversion graph: source unit -> target unit -> formula.

Each formula takes the magnitude in the source unit and the per-call
ContextAccessors, and calls an accessor only when the formula needs it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from app.core.converter.context import ContextAccessors
from app.core.converter.grammar import ABSOLUTE_SUFFIXES, UnitSuffix
from app.utils.units import convert_absolute, safe_divide

ConverterFn = Callable[[float, ContextAccessors], float]


def no_convert(value: float, context: ContextAccessors) -> float:
    return value


def _absolute(from_unit: UnitSuffix, to_unit: UnitSuffix) -> ConverterFn:
    if from_unit == to_unit:
        return no_convert

    def convert(value: float, context: ContextAccessors) -> float:
        return convert_absolute(value, from_unit.value, to_unit.value)
    return convert


def _absolute_table(source: UnitSuffix) -> dict[UnitSuffix, ConverterFn]:
    return {target: _absolute(source, target) for target in ABSOLUTE_SUFFIXES}


# ── Font relative ───────────────────────────────────────────────────────

def rem_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * context.rem_pixel_value()


def pixel_to_rem(value: float, context: ContextAccessors) -> float:
    return safe_divide(value, context.rem_pixel_value())


def em_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * context.em_pixel_value()


def pixel_to_em(value: float, context: ContextAccessors) -> float:
    return safe_divide(value, context.em_pixel_value())


# ── Viewport: 1vw is one hundredth of the viewport width ────────────────

def _view_min(context: ContextAccessors) -> float:
    return min(context.view_width_pixel_value(), context.view_height_pixel_value())


def _view_max(context: ContextAccessors) -> float:
    return max(context.view_width_pixel_value(), context.view_height_pixel_value())


def view_width_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * context.view_width_pixel_value() / 100


def pixel_to_view_width(value: float, context: ContextAccessors) -> float:
    return safe_divide(value * 100, context.view_width_pixel_value())


def view_height_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * context.view_height_pixel_value() / 100


def pixel_to_view_height(value: float, context: ContextAccessors) -> float:
    return safe_divide(value * 100, context.view_height_pixel_value())


def view_min_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * _view_min(context) / 100


def pixel_to_view_min(value: float, context: ContextAccessors) -> float:
    return safe_divide(value * 100, _view_min(context))


def view_max_to_pixel(value: float, context: ContextAccessors) -> float:
    return value * _view_max(context) / 100


def pixel_to_view_max(value: float, context: ContextAccessors) -> float:
    return safe_divide(value * 100, _view_max(context))


# ── Ratios ──────────────────────────────────────────────────────────────

def percent_to_magnification(value: float, context: ContextAccessors) -> float:
    return value / 100


def magnification_to_percent(value: float, context: ContextAccessors) -> float:
    return value * 100


def _build() -> Mapping[UnitSuffix, Mapping[UnitSuffix, ConverterFn]]:
    table: dict[UnitSuffix, dict[UnitSuffix, ConverterFn]] = {
        source: _absolute_table(source) for source in ABSOLUTE_SUFFIXES
    }
    pixel = table[UnitSuffix.PIXEL]
    pixel.update({
        UnitSuffix.REM: pixel_to_rem,
        UnitSuffix.EM: pixel_to_em,
        UnitSuffix.VIEW_WIDTH: pixel_to_view_width,
        UnitSuffix.VIEW_HEIGHT: pixel_to_view_height,
        UnitSuffix.VIEW_MIN: pixel_to_view_min,
        UnitSuffix.VIEW_MAX: pixel_to_view_max,
    })
    table[UnitSuffix.REM] = {UnitSuffix.PIXEL: rem_to_pixel, UnitSuffix.REM: no_convert}
    table[UnitSuffix.EM] = {UnitSuffix.PIXEL: em_to_pixel, UnitSuffix.EM: no_convert}
    table[UnitSuffix.VIEW_WIDTH] = {
        UnitSuffix.PIXEL: view_width_to_pixel, UnitSuffix.VIEW_WIDTH: no_convert,
    }
    table[UnitSuffix.VIEW_HEIGHT] = {
        UnitSuffix.PIXEL: view_height_to_pixel, UnitSuffix.VIEW_HEIGHT: no_convert,
    }
    table[UnitSuffix.VIEW_MIN] = {
        UnitSuffix.PIXEL: view_min_to_pixel, UnitSuffix.VIEW_MIN: no_convert,
    }
    table[UnitSuffix.VIEW_MAX] = {
        UnitSuffix.PIXEL: view_max_to_pixel, UnitSuffix.VIEW_MAX: no_convert,
    }
    table[UnitSuffix.PERCENT] = {
        UnitSuffix.PERCENT: no_convert, UnitSuffix.MAGNIFICATION: percent_to_magnification,
    }
    table[UnitSuffix.MAGNIFICATION] = {
        UnitSuffix.PERCENT: magnification_to_percent, UnitSuffix.MAGNIFICATION: no_convert,
    }
    return MappingProxyType({
        source: MappingProxyType(targets) for source, targets in table.items()
    })


CONVERTERS = _build()

# Stable order for diagnostics and listings
_SUFFIX_ORDER = list(UnitSuffix)


def supported_targets(source: UnitSuffix | str) -> tuple[UnitSuffix, ...]:
    """Targets reachable from a source unit, in UnitSuffix declaration order."""
    try:
        targets = CONVERTERS.get(UnitSuffix(source), {})
    except ValueError:
        return ()
    return tuple(sorted(targets, key=_SUFFIX_ORDER.index))
