"""Reference pixel values (font size, viewport) resolved lazily per conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union, runtime_checkable

import structlog

from app.core.converter.grammar import ABSOLUTE_SUFFIXES, is_unit_value, split_unit_value
from app.utils.units import convert_absolute

logger = structlog.get_logger(__name__)


@runtime_checkable
class ElementLike(Protocol):
    """Minimal view of a rendered element: computed font size and box size."""

    font_size: Optional[str]
    client_width: float
    client_height: float
    parent: Optional["ElementLike"]


@dataclass(frozen=True)
class Viewport:
    width: float | None = None
    height: float | None = None


class Measurer(Protocol):
    """Host capability that reads live values from a rendered document."""

    def measure_font_size_pixels(self, element: ElementLike | None = None) -> float | None: ...

    def measure_viewport_pixels(self) -> Viewport: ...


class ElementMeasurer:
    """Measures element-like objects; the viewport and root font size are fixed at construction.

    An element's font size is its ``font_size`` string converted to pixels.
    Only absolute lengths can be resolved; relative or unitless sizes are
    reported as ``None``.
    Without an element, the root font size is reported (``None`` if unset).
    """

    def __init__(self, viewport: Viewport | None = None, root_font_size: str | None = None):
        self.viewport = viewport or Viewport()
        self.root_font_size = root_font_size

    def measure_font_size_pixels(self, element: ElementLike | None = None) -> float | None:
        font_size = self.root_font_size if element is None else getattr(element, "font_size", None)
        if font_size is None:
            return None
        if not is_unit_value(font_size):
            logger.debug("unmeasurable_font_size", font_size=font_size)
            return None
        parsed = split_unit_value(font_size)
        if parsed.unit_suffix not in ABSOLUTE_SUFFIXES:
            logger.debug("relative_font_size", font_size=font_size)
            return None
        return convert_absolute(parsed.value, parsed.unit_suffix.value, "px")

    def measure_viewport_pixels(self) -> Viewport:
        return self.viewport


NULL_MEASURER = ElementMeasurer()


@dataclass(frozen=True)
class ConversionOptions:
    rem: Union[str, ElementLike, None] = None
    em: Union[str, ElementLike, None] = None
    view_width: float | None = None
    view_height: float | None = None


@dataclass(frozen=True)
class DefaultOptions:
    rem: float = 16.0
    em: float = 16.0
    view_width: float = 1080.0
    view_height: float = 1920.0


DEFAULT_OPTIONS = DefaultOptions()


@dataclass(frozen=True)
class ContextAccessors:
    rem_pixel_value: Callable[[], float]
    em_pixel_value: Callable[[], float]
    view_width_pixel_value: Callable[[], float]
    view_height_pixel_value: Callable[[], float]


def _font_size_accessor(
    override: Union[str, ElementLike, None],
    measurer: Measurer,
    default: float,
) -> Callable[[], float]:
    def resolve() -> float:
        if isinstance(override, str):
            return split_unit_value(override).value
        measured = measurer.measure_font_size_pixels(override)
        return default if measured is None else measured
    return resolve


def _viewport_accessor(
    override: float | None,
    measurer: Measurer,
    dimension: str,
    default: float,
) -> Callable[[], float]:
    def resolve() -> float:
        if override is not None:
            return override
        measured = getattr(measurer.measure_viewport_pixels(), dimension)
        return default if measured is None else measured
    return resolve


def build_context(
    options: ConversionOptions | None = None,
    measurer: Measurer | None = None,
) -> ContextAccessors:
    """Bind accessors to one call's options. Nothing is resolved until an accessor runs."""
    options = options or ConversionOptions()
    measurer = measurer or NULL_MEASURER
    return ContextAccessors(
        rem_pixel_value=_font_size_accessor(options.rem, measurer, DEFAULT_OPTIONS.rem),
        em_pixel_value=_font_size_accessor(options.em, measurer, DEFAULT_OPTIONS.em),
        view_width_pixel_value=_viewport_accessor(
            options.view_width, measurer, "width", DEFAULT_OPTIONS.view_width,
        ),
        view_height_pixel_value=_viewport_accessor(
            options.view_height, measurer, "height", DEFAULT_OPTIONS.view_height,
        ),
    )
