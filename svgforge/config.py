"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgforge.brand.config import DEFAULT_BRAND_CONFIG


class Settings(BaseSettings):
    svgforge_env: str = "development"
    svgforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Brand policy JSON (allowed shapes, colors, layouts, size bounds)
    brand_config_path: str = str(DEFAULT_BRAND_CONFIG)

    # Upper bound on documents per /api/batch request
    max_batch_size: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
