"""Clamp and default raw rules against the brand configuration."""

from __future__ import annotations

import logging
import random
from typing import Any

from svgforge.brand.config import BrandConfig

logger = logging.getLogger(__name__)

_MAX_RANDOM_SEED = 10000

# Wire keys capped by BrandConfig.max_count
_COUNT_KEYS = (
    "count", "rows", "cols", "clusterCount", "shapesPerCluster", "maxPlacementAttempts",
)


def _filter_vocab(requested: Any, allowed: list[str], what: str) -> list[str]:
    if isinstance(requested, str):
        requested = [requested]
    if not isinstance(requested, list):
        return list(allowed)
    kept = [item for item in requested if item in allowed]
    if len(kept) < len(requested):
        logger.debug("Dropped %d %s outside the brand vocabulary", len(requested) - len(kept), what)
    if not kept:
        return allowed[:2]
    return kept


def _cap(out: dict[str, Any], key: str, limit: int) -> None:
    value = out.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > limit:
        logger.info("Clamped %s from %s to %s", key, value, limit)
        out[key] = limit


def validate_rules(rules: dict[str, Any], brand: BrandConfig) -> dict[str, Any]:
    """Return a copy of the wire-format ``rules`` that the engine can run.

    Missing dimensions and seed are defaulted, the composition must be a
    brand layout (else the first layout), shapes and colors are filtered to
    the brand vocabulary (empty → the first two entries, missing → all),
    minSize/maxSize are clamped to the brand bounds, and shape counts,
    fractal depth and child count are capped by the brand complexity limits.
    """
    out = dict(rules)

    out["width"] = rules.get("width") or brand.default_width
    out["height"] = rules.get("height") or brand.default_height

    if out.get("composition") not in brand.layout_names:
        out["composition"] = brand.layout_names[0]

    out["shapes"] = _filter_vocab(rules.get("shapes"), brand.shape_names, "shapes")
    out["colors"] = _filter_vocab(rules.get("colors"), brand.color_values, "colors")

    if out.get("seed") is None:
        out["seed"] = random.randrange(_MAX_RANDOM_SEED)

    if out.get("minSize"):
        out["minSize"] = max(brand.min_size, min(brand.max_size, out["minSize"]))
    if out.get("maxSize"):
        out["maxSize"] = max(
            out.get("minSize") or brand.min_size,
            min(brand.max_size, out["maxSize"]),
        )

    for key in _COUNT_KEYS:
        _cap(out, key, brand.max_count)
    _cap(out, "maxDepth", brand.max_depth)
    _cap(out, "childCount", brand.max_child_count)

    return out
