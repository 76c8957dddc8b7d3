"""wave — N shapes along x, y displaced by a sine wave."""

from __future__ import annotations

import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition


@composition("wave", description="Shapes following a sine wave across the canvas")
def wave(ctx: CompositionContext) -> None:
    count = ctx.count_param("count", 15)
    waves = ctx.param("waves", 2)
    amplitude = ctx.param("wave_height", min(ctx.height / 4, 100))
    padding_x = ctx.param("padding_x", 50)
    center_y = ctx.param("center_y", ctx.height / 2)
    phase = ctx.param("phase_shift", 0.0)
    min_size = ctx.param("min_size", 20)
    max_size = ctx.param("max_size", 60)
    size_mode = ctx.param("size_distribution")
    rotation_mode = ctx.param("rotation_type")
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")

    span = ctx.width - 2 * padding_x
    slope_span = span if span > 0 else ctx.width

    for i in range(count):
        progress = i / (count - 1) if count > 1 else 0.0
        x = padding_x + progress * span

        theta = phase + progress * 2 * math.pi * waves
        offset = math.sin(theta)
        y = center_y + offset * amplitude
        height = (offset + 1) / 2

        where = DistributionContext(linear_index=i, progress=progress, wave_height=height)
        kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
        color_idx = ctx.color_index(color_policy, where)

        if size_mode == "wave":
            size = min_size + height * (max_size - min_size)
        elif size_mode == "progress":
            size = min_size + progress * (max_size - min_size)
        else:
            size = min_size + ctx.random() * (max_size - min_size)

        if rotation_mode == "wave":
            # dy/dx of the same sine at this x
            slope = amplitude * 2 * math.pi * waves * math.cos(theta) / slope_span
            rotation = math.degrees(math.atan(slope))
        elif rotation_mode == "random":
            rotation = ctx.random_rotation()
        else:
            rotation = ctx.param("rotation", 0.0)

        ctx.place(kind, x, y, size, color_idx, rotation)
