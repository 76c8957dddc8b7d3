"""fractal — a shape with child_count children around it, repeated to max_depth.

Children sit at evenly spaced angles, ``distance_factor * size`` from the
parent, scaled by ``scale_factor``. Walked with an explicit stack in
pre-order, so output order matches the natural recursive definition.
Shape count is sum(child_count**d for d in 0..max_depth).
"""

from __future__ import annotations

import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition

_ROOT_CHILDREN = 5
_INNER_CHILDREN = 3


@composition("fractal", description="Recursive shapes around a parent, depth-bounded")
def fractal(ctx: CompositionContext) -> None:
    cx = ctx.param("center_x", ctx.width / 2)
    cy = ctx.param("center_y", ctx.height / 2)
    max_depth = ctx.count_param("max_depth", 4)
    initial_size = ctx.param("initial_size", min(ctx.width, ctx.height) * 0.4)
    scale_factor = ctx.param("scale_factor", 0.5)
    distance_factor = ctx.param("distance_factor", 0.8)
    child_count = ctx.param("child_count")
    shape_policy = "depth" if ctx.flag("depth_shapes") else ctx.param("shape_distribution")
    color_policy = "depth" if ctx.flag("depth_colors") else ctx.param("color_distribution")

    stack: list[tuple[float, float, float, int]] = [(cx, cy, initial_size, 0)]
    n = 0
    while stack:
        x, y, size, depth = stack.pop()

        where = DistributionContext(linear_index=n, depth=depth)
        kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
        color_idx = ctx.color_index(color_policy, where)
        ctx.place(kind, x, y, size, color_idx)
        n += 1

        if depth >= max_depth:
            continue

        if child_count is not None:
            children = max(0, int(child_count))
        else:
            children = _ROOT_CHILDREN if depth == 0 else _INNER_CHILDREN
        distance = size * distance_factor
        child_size = size * scale_factor

        # reversed so the first child is popped first
        for i in reversed(range(children)):
            angle = 2 * math.pi * i / children
            stack.append((
                x + distance * math.cos(angle),
                y + distance * math.sin(angle),
                child_size,
                depth + 1,
            ))
