"""radial — N shapes evenly spaced by angle around a center.

Radius per shape is fixed, random, or interpolated from min_radius to
max_radius (linear or exponential) over the index. An optional center
shape is placed first.
"""

from __future__ import annotations

import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition


def _radius_at(ctx: CompositionContext, i: int, count: int, min_r: float, max_r: float) -> float:
    mode = ctx.param("radius_distribution")
    t = i / (count - 1) if count > 1 else 0.0

    if mode == "exponential" and min_r > 0 and max_r > 0:
        factor = math.log(max_r / min_r) / (count - 1) if count > 1 else 0.0
        return min_r * math.exp(factor * i)
    if mode in ("linear", "exponential"):
        # exponential growth from a non-positive radius is undefined; interpolate linearly
        return min_r + (max_r - min_r) * t

    fixed = ctx.param("radius")
    if fixed is not None:
        return fixed
    spread = ctx.random() if ctx.flag("random_radius") else 0.8
    return min_r + (max_r - min_r) * spread


def _rotation(ctx: CompositionContext, angle: float) -> float:
    mode = ctx.param("rotation_type")
    offset = ctx.param("rotation_offset", 0.0)
    if mode == "radial":
        return math.degrees(angle) + offset
    if mode == "tangent":
        return math.degrees(angle) + 90 + offset
    if mode == "random":
        return ctx.random_rotation()
    return ctx.param("rotation", 0.0)


@composition("radial", description="Shapes evenly spaced on a circle")
def radial(ctx: CompositionContext) -> None:
    count = ctx.count_param("count", 8)
    cx = ctx.param("center_x", ctx.width / 2)
    cy = ctx.param("center_y", ctx.height / 2)
    min_r = ctx.param("min_radius", 0.0)
    max_r = ctx.param("max_radius", min(ctx.width, ctx.height) * 0.4)
    start_angle = ctx.param("start_angle", 0.0)
    size_variation = ctx.param("size_variation", 0.3)
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")

    center_shape = ctx.param("center_shape")
    if center_shape:
        ctx.place(
            center_shape, cx, cy,
            ctx.param("center_size", max_r * 0.3),
            color=ctx.param("center_color", ctx.colors[0]),
        )

    for i in range(count):
        angle = start_angle + 2 * math.pi * i / count
        radius = _radius_at(ctx, i, count, min_r, max_r)

        x = cx + radius * math.cos(angle)
        y = cy + radius * math.sin(angle)

        span = max_r - min_r
        where = DistributionContext(
            linear_index=i,
            radius=(radius - min_r) / span if span else 0.0,
            progress=i / (count - 1) if count > 1 else 0.0,
        )
        kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
        color_idx = ctx.color_index(color_policy, where)

        base_size = ctx.param("size", radius * 0.4)
        if ctx.flag("size_by_radius"):
            size = base_size * (radius / max_r) if max_r else base_size
        else:
            size = ctx.uniform(base_size * (1 - size_variation), base_size * (1 + size_variation))

        ctx.place(kind, x, y, size, color_idx, _rotation(ctx, angle))
