"""ShapeRenderer — the common interface every shape kind implements.

A renderer turns (center, size, fill, rotation) into one SVG element dict.
Single-primitive shapes carry the rotation transform themselves; shapes
made of several primitives are wrapped in a ``g`` element that carries it.
"""

from __future__ import annotations

import abc
import math
from collections.abc import Sequence
from typing import Any, Union

from svgforge.svg.serializer import format_number

Fill = Union[str, Sequence[str], None]
Element = dict[str, Any]


def rotate_attr(rotation: float, x: float, y: float) -> str:
    return (
        f"rotate({format_number(rotation)}, {format_number(x)}, {format_number(y)})"
    )


class ShapeRenderer(abc.ABC):
    """One implementation per shape kind. Rendering is pure."""

    name: str = ""
    description: str = ""
    # Number of distinct colors the shape draws with
    color_slots: int = 1
    # Used when no fill is supplied at all
    default_palette: tuple[str, ...] = ("#000000",)

    @abc.abstractmethod
    def primitives(self, x: float, y: float, size: float, fills: list[str]) -> list[Element]:
        """Return the shape's primitives, unrotated, in draw order."""

    def resolve_fills(self, fill: Fill) -> list[str]:
        """Expand ``fill`` to exactly ``color_slots`` colors.

        A single color fills every slot; a short list is backfilled with its
        last color; no fill at all uses ``default_palette``.
        """
        if isinstance(fill, str):
            return [fill] * self.color_slots
        colors = list(fill or ())
        if not colors:
            colors = list(self.default_palette)
        if len(colors) < self.color_slots:
            colors.extend([colors[-1]] * (self.color_slots - len(colors)))
        return colors[: self.color_slots]

    def render(
        self, x: float, y: float, size: float, fill: Fill, rotation: float = 0.0,
    ) -> Element:
        prims = self.primitives(x, y, size, self.resolve_fills(fill))
        if len(prims) == 1:
            elem = dict(prims[0])
            if rotation:
                elem["transform"] = rotate_attr(rotation, x, y)
            return elem

        group: Element = {"tag": "g"}
        if rotation:
            group["transform"] = rotate_attr(rotation, x, y)
        group["children"] = prims
        return group


def regular_polygon(
    x: float, y: float, radius: float, sides: int, offset: float = 0.0,
) -> list[tuple[float, float]]:
    return [
        (
            x + radius * math.cos(2 * math.pi * i / sides + offset),
            y + radius * math.sin(2 * math.pi * i / sides + offset),
        )
        for i in range(sides)
    ]
