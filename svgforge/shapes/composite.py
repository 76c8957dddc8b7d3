"""Pluggable multi-color composite shapes.

Composite kinds take an ordered list of fills, one per slot. A caller that
supplies fewer colors than ``color_slots`` gets the list backfilled with its
last color; a caller that supplies none gets the kind's default palette.
"""

from __future__ import annotations

from svgforge.shapes.base import ShapeRenderer
from svgforge.shapes.registry import shape_kind


class ConcentricCircles(ShapeRenderer):
    """Stack of concentric circles, outermost first."""

    # Radius of each ring as a fraction of size
    ring_ratios: tuple[float, ...] = ()

    @property
    def color_slots(self) -> int:  # type: ignore[override]
        return len(self.ring_ratios)

    def primitives(self, x, y, size, fills):
        return [
            {"tag": "circle", "cx": x, "cy": y, "r": size * ratio, "fill": fill}
            for ratio, fill in zip(self.ring_ratios, fills)
        ]


@shape_kind(
    "concentricCircles1",
    description="Four concentric circles with yellow outer ring, orange middle, dark inner, white center",
)
class ConcentricCircles1(ConcentricCircles):
    ring_ratios = (0.5, 0.391, 0.25, 0.123)
    default_palette = ("#fec042", "#f27d39", "#2b2d42", "#fff7e4")
