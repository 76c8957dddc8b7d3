"""FastAPI dependency injection."""

from __future__ import annotations

from svgforge.brand.config import BrandConfig, load_brand_config
from svgforge.config import settings
from svgforge.engine.generator import Generator, get_generator


def get_settings():
    return settings


def get_brand_config() -> BrandConfig:
    return load_brand_config(settings.brand_config_path)


def get_engine() -> Generator:
    return get_generator()
