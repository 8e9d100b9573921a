"""Units endpoint — lists the conversion graph."""

from fastapi import APIRouter

from app.models.schemas import UnitsResponse
from app.core.converter.converters import CONVERTERS, supported_targets

router = APIRouter(tags=["units"])


@router.get("/units", response_model=UnitsResponse)
async def list_units():
    """Every source unit with the target units it converts to."""
    return UnitsResponse(units={
        source.value: [target.value for target in supported_targets(source)]
        for source in CONVERTERS
    })
