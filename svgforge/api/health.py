"""Health check + meta endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from svgforge import __version__
from svgforge.brand.config import BrandConfig
from svgforge.dependencies import get_brand_config
from svgforge.engine.registry import get_registry
from svgforge.models.responses import HealthResponse, ShapeInfo
from svgforge.shapes.registry import get_shape_registry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        compositions_registered=get_registry().count,
        shapes_registered=get_shape_registry().count,
    )


@router.get("/shapes", response_model=list[ShapeInfo])
async def shapes() -> list[ShapeInfo]:
    return [ShapeInfo(**entry) for entry in get_shape_registry().describe()]


@router.get("/config")
async def brand_config(brand: BrandConfig = Depends(get_brand_config)) -> dict[str, Any]:
    return brand.to_dict()
