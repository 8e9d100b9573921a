"""Tests for lazy context resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from app.core.converter.context import (
    DEFAULT_OPTIONS,
    ConversionOptions,
    ElementLike,
    ElementMeasurer,
    NULL_MEASURER,
    Viewport,
    build_context,
)
from app.core.converter.errors import InvalidValue


@dataclass
class Element:
    font_size: Optional[str] = None
    client_width: float = 0.0
    client_height: float = 0.0
    parent: Optional["Element"] = None


class RecordingMeasurer:
    """Counts calls and returns fixed values."""

    def __init__(self, font_size=None, viewport=Viewport()):
        self.font_size = font_size
        self.viewport = viewport
        self.font_calls = []
        self.viewport_calls = 0

    def measure_font_size_pixels(self, element=None):
        self.font_calls.append(element)
        return self.font_size

    def measure_viewport_pixels(self):
        self.viewport_calls += 1
        return self.viewport


class TestDefaults:
    def test_default_values(self):
        ctx = build_context()
        assert ctx.rem_pixel_value() == 16
        assert ctx.em_pixel_value() == 16
        assert ctx.view_width_pixel_value() == 1080
        assert ctx.view_height_pixel_value() == 1920

    def test_default_options_are_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.rem = 10


class TestOverrides:
    def test_string_font_sizes(self):
        ctx = build_context(ConversionOptions(rem="10px", em="1.5rem"))
        assert ctx.rem_pixel_value() == 10
        # only the magnitude of the override is used
        assert ctx.em_pixel_value() == 1.5

    def test_viewport_overrides(self):
        ctx = build_context(ConversionOptions(view_width=320, view_height=640))
        assert ctx.view_width_pixel_value() == 320
        assert ctx.view_height_pixel_value() == 640

    def test_zero_viewport_override_is_used(self):
        ctx = build_context(ConversionOptions(view_width=0))
        assert ctx.view_width_pixel_value() == 0

    def test_override_beats_measurer(self):
        measurer = RecordingMeasurer(font_size=30, viewport=Viewport(800, 600))
        ctx = build_context(ConversionOptions(rem="10px", view_width=100), measurer)
        assert ctx.rem_pixel_value() == 10
        assert ctx.view_width_pixel_value() == 100
        assert measurer.font_calls == []
        assert measurer.viewport_calls == 0

    def test_invalid_string_raises_on_access(self):
        ctx = build_context(ConversionOptions(rem="big"))
        with pytest.raises(InvalidValue):
            ctx.rem_pixel_value()


class TestMeasurer:
    def test_element_is_measured(self):
        element = Element(font_size="20px")
        ctx = build_context(ConversionOptions(em=element))
        assert ctx.em_pixel_value() == 20

    def test_element_without_font_size_falls_back(self):
        ctx = build_context(ConversionOptions(rem=Element()))
        assert ctx.rem_pixel_value() == 16

    def test_no_override_asks_measurer_for_root(self):
        measurer = RecordingMeasurer(font_size=18)
        ctx = build_context(None, measurer)
        assert ctx.rem_pixel_value() == 18
        assert measurer.font_calls == [None]

    def test_partial_viewport_measurement(self):
        measurer = RecordingMeasurer(viewport=Viewport(width=800))
        ctx = build_context(None, measurer)
        assert ctx.view_width_pixel_value() == 800
        assert ctx.view_height_pixel_value() == 1920

    def test_element_passed_through(self):
        element = Element(font_size="12px")
        measurer = RecordingMeasurer(font_size=None)
        ctx = build_context(ConversionOptions(rem=element), measurer)
        assert ctx.rem_pixel_value() == 16
        assert measurer.font_calls == [element]


class TestLaziness:
    def test_nothing_resolved_on_build(self):
        measurer = RecordingMeasurer()
        build_context(ConversionOptions(rem="not-valid"), measurer)
        assert measurer.font_calls == []
        assert measurer.viewport_calls == 0

    def test_resolved_on_every_call(self):
        measurer = RecordingMeasurer(font_size=20)
        ctx = build_context(None, measurer)
        ctx.em_pixel_value()
        ctx.em_pixel_value()
        assert len(measurer.font_calls) == 2


class TestElementMeasurer:
    def test_root_font_size(self):
        measurer = ElementMeasurer(root_font_size="18px")
        assert measurer.measure_font_size_pixels() == 18

    def test_malformed_font_size(self):
        measurer = ElementMeasurer()
        assert measurer.measure_font_size_pixels(Element(font_size="medium")) is None

    def test_viewport(self):
        measurer = ElementMeasurer(viewport=Viewport(1280, 720))
        assert measurer.measure_viewport_pixels() == Viewport(1280, 720)

    def test_absolute_font_size_in_pixels(self):
        measurer = ElementMeasurer()
        assert measurer.measure_font_size_pixels(Element(font_size="1in")) == 96
        assert measurer.measure_font_size_pixels(Element(font_size="12pt")) == 16

    def test_absolute_root_font_size_in_pixels(self):
        assert ElementMeasurer(root_font_size="12pt").measure_font_size_pixels() == 16

    @pytest.mark.parametrize("font_size", ["2rem", "1.5em", "50%", "12", "10vw"])
    def test_relative_font_size_unresolved(self, font_size):
        assert ElementMeasurer().measure_font_size_pixels(Element(font_size=font_size)) is None
        assert ElementMeasurer(root_font_size=font_size).measure_font_size_pixels() is None

    def test_relative_element_font_size_falls_back(self):
        ctx = build_context(ConversionOptions(em=Element(font_size="2rem")))
        assert ctx.em_pixel_value() == 16

    def test_null_measurer(self):
        assert NULL_MEASURER.measure_font_size_pixels() is None
        assert NULL_MEASURER.measure_viewport_pixels() == Viewport()

    def test_element_satisfies_protocol(self):
        assert isinstance(Element(), ElementLike)
