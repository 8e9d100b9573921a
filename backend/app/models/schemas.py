"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator

from app.core.converter.context import ConversionOptions


class ElementModel(BaseModel):
    """JSON stand-in for a rendered element (satisfies ElementLike)."""

    font_size: Optional[str] = None
    client_width: float = 0.0
    client_height: float = 0.0
    parent: Optional[ElementModel] = None

    @field_validator("client_width", "client_height")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            raise ValueError("Element size must be a finite, non-negative number")
        return v


class OptionsModel(BaseModel):
    rem: Union[str, ElementModel, None] = None
    em: Union[str, ElementModel, None] = None
    view_width: Optional[float] = None
    view_height: Optional[float] = None

    @field_validator("view_width", "view_height")
    @classmethod
    def must_be_finite(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            raise ValueError("Viewport size must be a finite number")
        return v

    def to_options(self) -> ConversionOptions:
        return ConversionOptions(
            rem=self.rem,
            em=self.em,
            view_width=self.view_width,
            view_height=self.view_height,
        )


class ConvertRequest(BaseModel):
    value: str
    to_unit: str
    options: Optional[OptionsModel] = None


class ConvertResponse(BaseModel):
    value: str
    to_unit: str
    result: str


class NormalizeRequest(BaseModel):
    value: str
    element: Optional[ElementModel] = None
    direction: Literal["w", "h"] = "w"


class NormalizeResponse(BaseModel):
    value: str
    pixels: Optional[float] = None  # null when the value is not a unit value


class ValidateRequest(BaseModel):
    value: str


class ValidateResponse(BaseModel):
    valid: bool
    magnitude: Optional[float] = None
    unit: Optional[str] = None


class UnitsResponse(BaseModel):
    units: dict[str, list[str]]
