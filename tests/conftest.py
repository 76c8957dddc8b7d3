"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from svgforge.brand.config import load_brand_config
from svgforge.engine.rules import GenerationRules

FIXED_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

BRAND_COLORS = ["#fec042", "#f27d39", "#2b2d42"]

STRATEGIES = ["grid", "radial", "random", "wave", "spiral", "cluster", "fractal"]


def make_rules(
    composition: str = "grid",
    *,
    width: float = 400,
    height: float = 400,
    shapes: tuple[str, ...] = ("circle", "rect", "triangle"),
    colors: tuple[str, ...] = ("#111111", "#222222", "#333333"),
    seed: int = 42,
    **params,
) -> GenerationRules:
    return GenerationRules(
        width=width,
        height=height,
        composition=composition,
        seed=seed,
        shapes=shapes,
        colors=colors,
        params=params,
    )


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def brand():
    return load_brand_config()


@pytest.fixture
def grid_rules() -> GenerationRules:
    return make_rules("grid", rows=3, cols=3)
