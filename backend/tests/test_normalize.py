"""Tests for normalize_to_pixel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import pytest
from app.core.converter.normalize import normalize_to_pixel


@dataclass
class Element:
    font_size: Optional[str] = None
    client_width: float = 0.0
    client_height: float = 0.0
    parent: Optional["Element"] = None


class TestInvalid:
    @pytest.mark.parametrize("text", ["not-a-unit", "", "-5px", "auto"])
    def test_nan(self, text):
        assert math.isnan(normalize_to_pixel(text))

    def test_invalid_text_with_bad_direction(self):
        assert math.isnan(normalize_to_pixel("not-a-unit", direction="x"))

    def test_bad_direction_for_percent(self):
        with pytest.raises(ValueError):
            normalize_to_pixel("50%", direction="x")

    def test_direction_ignored_for_lengths(self):
        assert normalize_to_pixel("10px", direction="x") == 10


class TestPassThrough:
    def test_pixels(self):
        assert normalize_to_pixel("10px") == 10

    def test_unitless(self):
        assert normalize_to_pixel("12.5") == 12.5


class TestPercent:
    def test_no_element(self):
        assert normalize_to_pixel("50%") == 0

    def test_element_without_parent(self):
        assert normalize_to_pixel("50%", Element()) == 0

    def test_parent_height(self):
        element = Element(parent=Element(client_width=400, client_height=200))
        assert normalize_to_pixel("50%", element, "h") == 100

    def test_width_direction_uses_parent_height(self):
        # width direction still reads the parent's height
        element = Element(parent=Element(client_width=400, client_height=200))
        assert normalize_to_pixel("50%", element, "w") == 100


class TestViaConversion:
    @pytest.mark.parametrize("text,expected", [
        ("1in", 96),
        ("2.54cm", 96),
        ("25.4mm", 96),
        ("101.6Q", 96),
        ("6pc", 96),
        ("72pt", 96),
        ("2rem", 32),
        ("2em", 32),
        ("50vw", 540),
        ("50vh", 960),
        ("10vmin", 108),
        ("10vmax", 192),
    ])
    def test_default_context(self, text, expected):
        assert normalize_to_pixel(text) == pytest.approx(expected)

    def test_element_font_size_not_used(self):
        element = Element(font_size="10px")
        assert normalize_to_pixel("2em", element) == 32
