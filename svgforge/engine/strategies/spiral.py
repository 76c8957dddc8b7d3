"""spiral — N shapes along an Archimedean spiral.

angle = 2*pi*turns*i/N + rotation, radius = start_radius + spacing*angle/(2*pi).
"""

from __future__ import annotations

import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition


@composition("spiral", description="Shapes along an Archimedean spiral")
def spiral(ctx: CompositionContext) -> None:
    count = ctx.count_param("count", 30)
    cx = ctx.param("center_x", ctx.width / 2)
    cy = ctx.param("center_y", ctx.height / 2)
    start_radius = ctx.param("start_radius", 20)
    spacing = ctx.param("spacing", 15)
    turns = ctx.param("turns", 3)
    offset = math.radians(ctx.param("rotation", 0.0))
    min_size = ctx.param("min_size", 10)
    max_size = ctx.param("max_size", 40)
    size_mode = ctx.param("size_distribution")
    rotation_mode = ctx.param("rotation_type")
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")

    for i in range(count):
        progress = i / count
        angle = 2 * math.pi * turns * progress + offset
        radius = start_radius + spacing * angle / (2 * math.pi)

        x = cx + radius * math.cos(angle)
        y = cy + radius * math.sin(angle)

        # "radius" policies follow progress outward along the arm
        where = DistributionContext(linear_index=i, progress=progress, radius=progress)
        kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
        color_idx = ctx.color_index(color_policy, where)

        if size_mode == "decreasing":
            size = max_size - progress * (max_size - min_size)
        elif size_mode == "increasing":
            size = min_size + progress * (max_size - min_size)
        else:
            size = min_size + ctx.random() * (max_size - min_size)

        if rotation_mode == "spiral":
            rotation = math.degrees(angle) + ctx.param("rotation_offset", 0.0)
        elif rotation_mode == "random":
            rotation = ctx.random_rotation()
        else:
            rotation = ctx.param("shape_rotation", 0.0)

        ctx.place(kind, x, y, size, color_idx, rotation)
