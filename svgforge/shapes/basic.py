"""Built-in single-color shape kinds.

``size`` is the characteristic dimension of every kind: the outer diameter
for round shapes and the side or bounding width for polygons.
"""

from __future__ import annotations

import math

from svgforge.shapes.base import Element, ShapeRenderer, regular_polygon
from svgforge.shapes.registry import shape_kind

# Background color used for the cut-out half of crescent and donut
CUTOUT_COLOR = "white"


def _circle(x: float, y: float, r: float, fill: str) -> Element:
    return {"tag": "circle", "cx": x, "cy": y, "r": r, "fill": fill}


def _square(x: float, y: float, size: float, fill: str) -> Element:
    return {
        "tag": "rect",
        "x": x - size / 2,
        "y": y - size / 2,
        "width": size,
        "height": size,
        "fill": fill,
    }


@shape_kind("circle", description="Filled circle, diameter = size")
class Circle(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [_circle(x, y, size / 2, fills[0])]


@shape_kind("rect", description="Axis-aligned square of side = size")
class Rect(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [_square(x, y, size, fills[0])]


@shape_kind("roundedRect", description="Square with corner radius size/5")
class RoundedRect(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        elem = _square(x, y, size, fills[0])
        elem.update(rx=size / 5, ry=size / 5)
        return [elem]


@shape_kind("triangle", description="Equilateral triangle pointing up")
class Triangle(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        h = size * math.sqrt(3) / 2
        pts = [(x, y - h / 2), (x - size / 2, y + h / 2), (x + size / 2, y + h / 2)]
        return [{"tag": "polygon", "points": pts, "fill": fills[0]}]


@shape_kind("hexagon", description="Regular hexagon, circumradius size/2")
class Hexagon(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [{"tag": "polygon", "points": regular_polygon(x, y, size / 2, 6), "fill": fills[0]}]


@shape_kind("pentagon", description="Regular pentagon pointing up")
class Pentagon(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        pts = regular_polygon(x, y, size / 2, 5, offset=-math.pi / 2)
        return [{"tag": "polygon", "points": pts, "fill": fills[0]}]


@shape_kind("star", description="Five-pointed star")
class Star(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        outer = size / 2
        inner = size / 5
        pts = []
        for i in range(10):
            r = outer if i % 2 == 0 else inner
            angle = math.pi / 5 * i - math.pi / 2
            pts.append((x + r * math.cos(angle), y + r * math.sin(angle)))
        return [{"tag": "polygon", "points": pts, "fill": fills[0]}]


@shape_kind("diamond", description="Square rotated 45 degrees")
class Diamond(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        h = size / 2
        pts = [(x, y - h), (x + h, y), (x, y + h), (x - h, y)]
        return [{"tag": "polygon", "points": pts, "fill": fills[0]}]


@shape_kind("ellipse", description="Ellipse, 3:2 aspect")
class Ellipse(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [{"tag": "ellipse", "cx": x, "cy": y, "rx": size / 2, "ry": size / 3, "fill": fills[0]}]


@shape_kind("arrow", description="Arrow pointing up")
class Arrow(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        head = size / 3
        half_len = size / 4
        shaft = size / 12
        neck = y - half_len + head / 2
        pts = [
            (x, y - half_len),
            (x + head / 2, neck),
            (x + shaft, neck),
            (x + shaft, y + half_len),
            (x - shaft, y + half_len),
            (x - shaft, neck),
            (x - head / 2, neck),
        ]
        return [{"tag": "polygon", "points": pts, "fill": fills[0]}]


@shape_kind("heart", description="Heart drawn with two cubic curves")
class Heart(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        s = size / 30
        d = [
            "M", x, y + 10 * s,
            "C", x, y + 7 * s, x - 15 * s, y - 13 * s, x, y - 5 * s,
            "C", x + 15 * s, y - 13 * s, x, y + 7 * s, x, y + 10 * s,
            "Z",
        ]
        return [{"tag": "path", "d": d, "fill": fills[0]}]


# ------------------------------------------------------------------
# Multi-primitive kinds (wrapped in a group)
# ------------------------------------------------------------------

@shape_kind("cross", description="Plus sign, bar width size/4")
class Cross(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        bar = size / 4
        return [
            {"tag": "rect", "x": x - bar / 2, "y": y - size / 2, "width": bar, "height": size, "fill": fills[0]},
            {"tag": "rect", "x": x - size / 2, "y": y - bar / 2, "width": size, "height": bar, "fill": fills[0]},
        ]


@shape_kind("crescent", description="Circle with an offset cut-out")
class Crescent(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [
            _circle(x, y, size / 2, fills[0]),
            _circle(x + size / 4, y, size / 2, CUTOUT_COLOR),
        ]


@shape_kind("donut", description="Ring, inner radius half the outer")
class Donut(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        return [
            _circle(x, y, size / 2, fills[0]),
            _circle(x, y, size / 4, CUTOUT_COLOR),
        ]


@shape_kind("cloud", description="Four overlapping circles")
class Cloud(ShapeRenderer):
    def primitives(self, x, y, size, fills):
        r = size / 4
        return [
            _circle(x - size / 4, y, r, fills[0]),
            _circle(x, y - size / 6, r, fills[0]),
            _circle(x + size / 4, y, r, fills[0]),
            _circle(x, y + size / 6, r, fills[0]),
        ]
