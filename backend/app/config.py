from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CSSUNITS_")

    app_name: str = "CSS Unit Converter"
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    viewport_width: float | None = None  # px, host viewport reported to conversions
    viewport_height: float | None = None  # px
    root_font_size: str | None = None  # CSS length, e.g. "18px"
    max_value_length: int = 64  # characters


settings = Settings()
