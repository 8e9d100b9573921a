"""Conversion endpoints — convert, normalize and validate unit values."""

import math

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.models.schemas import (
    ConvertRequest,
    ConvertResponse,
    NormalizeRequest,
    NormalizeResponse,
    ValidateRequest,
    ValidateResponse,
)
from app.core.converter.context import ElementMeasurer, Viewport
from app.core.converter.engine import convert_units
from app.core.converter.errors import InvalidValue, UnsupportedConversion
from app.core.converter.grammar import is_unit_value, split_unit_value
from app.core.converter.normalize import normalize_to_pixel

router = APIRouter(tags=["convert"])


def host_measurer() -> ElementMeasurer:
    """Measurer for the server host: viewport and root font size come from settings."""
    return ElementMeasurer(
        viewport=Viewport(width=settings.viewport_width, height=settings.viewport_height),
        root_font_size=settings.root_font_size,
    )


def _check_length(value: str) -> None:
    if len(value) > settings.max_value_length:
        raise HTTPException(422, detail={
            "message": f"Value exceeds {settings.max_value_length} characters",
        })


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest):
    """Convert a unit value to another unit suffix."""
    _check_length(req.value)
    options = req.options.to_options() if req.options is not None else None
    try:
        result = convert_units(req.value, req.to_unit, options, host_measurer())
    except InvalidValue as e:
        raise HTTPException(422, detail={"message": str(e), "value": e.value})
    except UnsupportedConversion as e:
        raise HTTPException(400, detail={
            "message": str(e),
            "source": e.source,
            "target": e.target,
            "supported": list(e.supported),
        })
    return ConvertResponse(value=req.value, to_unit=req.to_unit, result=result)


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(req: NormalizeRequest):
    """Resolve a unit value to pixels. ``pixels`` is null for invalid values."""
    _check_length(req.value)
    pixels = normalize_to_pixel(req.value, req.element, req.direction)
    return NormalizeResponse(value=req.value, pixels=None if math.isnan(pixels) else pixels)


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest):
    """Check a value against the unit grammar."""
    if not is_unit_value(req.value):
        return ValidateResponse(valid=False)
    parsed = split_unit_value(req.value)
    return ValidateResponse(valid=True, magnitude=parsed.value, unit=parsed.unit_suffix.value)
