"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    compositions_registered: int = 0
    shapes_registered: int = 0


class ShapeInfo(BaseModel):
    name: str
    description: str = ""


class BatchItem(BaseModel):
    index: int
    svg: str
    rules: dict[str, Any] = Field(default_factory=dict)
    shapes_dropped: int = 0


class BatchResponse(BaseModel):
    success: bool = True
    count: int = 0
    results: list[BatchItem] = Field(default_factory=list)
