"""Brand configuration — the vocabulary and bounds generation requests are clamped to.

Loaded once from JSON and passed explicitly to ``validate_rules``; never
mutated after construction.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_BRAND_CONFIG = Path(__file__).resolve().parent.parent / "data" / "brand_config.json"

DEFAULT_MAX_COUNT = 500
DEFAULT_MAX_DEPTH = 5
DEFAULT_MAX_CHILD_COUNT = 6


class BrandConfigError(Exception):
    """Brand configuration file is missing or malformed."""


@dataclass(frozen=True)
class NamedEntry:
    name: str
    description: str = ""


@dataclass(frozen=True)
class ColorEntry:
    name: str
    value: str


@dataclass(frozen=True)
class BrandConfig:
    default_width: float
    default_height: float
    min_size: float
    max_size: float
    layouts: tuple[NamedEntry, ...]
    shapes: tuple[NamedEntry, ...]
    colors: tuple[ColorEntry, ...]
    # Upper bounds on how many shapes one request can ask for
    max_count: int = DEFAULT_MAX_COUNT
    max_depth: int = DEFAULT_MAX_DEPTH
    max_child_count: int = DEFAULT_MAX_CHILD_COUNT

    @property
    def layout_names(self) -> list[str]:
        return [entry.name for entry in self.layouts]

    @property
    def shape_names(self) -> list[str]:
        return [entry.name for entry in self.shapes]

    @property
    def color_values(self) -> list[str]:
        return [entry.value for entry in self.colors]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BrandConfig:
        try:
            dims = data["defaultDimensions"]
            bounds = data["sizeConstraints"]
            limits = data.get("complexityLimits") or {}
            config = cls(
                default_width=float(dims["width"]),
                default_height=float(dims["height"]),
                min_size=float(bounds["minSize"]),
                max_size=float(bounds["maxSize"]),
                layouts=tuple(NamedEntry(lay["name"], lay.get("description", "")) for lay in data["layouts"]),
                shapes=tuple(NamedEntry(s["name"], s.get("description", "")) for s in data["shapes"]),
                colors=tuple(ColorEntry(c.get("name", c["value"]), c["value"]) for c in data["colors"]),
                max_count=int(limits.get("maxCount", DEFAULT_MAX_COUNT)),
                max_depth=int(limits.get("maxDepth", DEFAULT_MAX_DEPTH)),
                max_child_count=int(limits.get("maxChildCount", DEFAULT_MAX_CHILD_COUNT)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise BrandConfigError(f"Invalid brand configuration: {e!r}") from e

        if not (config.layouts and config.shapes and config.colors):
            raise BrandConfigError("Brand configuration needs layouts, shapes and colors")
        return config

    def to_dict(self) -> dict[str, Any]:
        return {
            "defaultDimensions": {"width": self.default_width, "height": self.default_height},
            "sizeConstraints": {"minSize": self.min_size, "maxSize": self.max_size},
            "complexityLimits": {
                "maxCount": self.max_count,
                "maxDepth": self.max_depth,
                "maxChildCount": self.max_child_count,
            },
            "layouts": [{"name": lay.name, "description": lay.description} for lay in self.layouts],
            "shapes": [{"name": s.name, "description": s.description} for s in self.shapes],
            "colors": [{"name": c.name, "value": c.value} for c in self.colors],
        }


@lru_cache(maxsize=8)
def load_brand_config(path: str | Path = DEFAULT_BRAND_CONFIG) -> BrandConfig:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise BrandConfigError(f"Cannot load brand configuration from {path}: {e}") from e

    config = BrandConfig.from_dict(data)
    logger.info(
        "Loaded brand configuration from %s (%d shapes, %d colors, %d layouts)",
        path, len(config.shapes), len(config.colors), len(config.layouts),
    )
    return config
