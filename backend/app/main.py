"""CSS Unit Converter — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.logging_config import configure_logging
from app.api.routes_convert import router as convert_router
from app.api.routes_units import router as units_router

configure_logging(settings.debug)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Convert CSS length and ratio values between unit suffixes.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(convert_router, prefix="/api")
app.include_router(units_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
