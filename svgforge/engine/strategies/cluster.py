"""cluster — K cluster centers, each surrounded by M scattered shapes.

With ``cluster_shapes`` / ``cluster_colors`` every cluster pins a dominant
shape / color (palette entry ``cluster_index % len``), used for 80% of its
members.
"""

from __future__ import annotations

import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition

_DOMINANT_PROBABILITY = 0.8


@composition("cluster", description="Groups of shapes around random centers")
def cluster(ctx: CompositionContext) -> None:
    cluster_count = ctx.count_param("cluster_count", 3)
    per_cluster = ctx.count_param("shapes_per_cluster", 10)
    radius = ctx.param("cluster_radius", 100)
    min_size = ctx.param("min_size", 10)
    max_size = ctx.param("max_size", 50)
    pin_shapes = ctx.flag("cluster_shapes")
    pin_colors = ctx.flag("cluster_colors")
    rotate = ctx.flag("enable_rotation")
    size_mode = ctx.param("size_distribution")
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")

    centers = []
    for _ in range(cluster_count):
        x = radius + ctx.random() * (ctx.width - 2 * radius)
        y = radius + ctx.random() * (ctx.height - 2 * radius)
        centers.append((x, y))

    total = cluster_count * per_cluster
    n = 0
    for c, (ccx, ccy) in enumerate(centers):
        for _ in range(per_cluster):
            distance = ctx.random() * radius
            angle = ctx.random() * 2 * math.pi
            x = ccx + distance * math.cos(angle)
            y = ccy + distance * math.sin(angle)

            where = DistributionContext(
                linear_index=n,
                progress=n / total,
                distance=distance / radius if radius else 0.0,
            )
            if pin_shapes and ctx.random() < _DOMINANT_PROBABILITY:
                kind = ctx.shapes[c % len(ctx.shapes)]
            else:
                kind = ctx.shapes[ctx.shape_index(shape_policy, where)]

            if pin_colors and ctx.random() < _DOMINANT_PROBABILITY:
                color_idx = c % len(ctx.colors)
            else:
                color_idx = ctx.color_index(color_policy, where)

            if size_mode == "distance" and radius:
                size = max_size - (distance / radius) * (max_size - min_size)
            else:
                size = min_size + ctx.random() * (max_size - min_size)

            rotation = ctx.random_rotation() if rotate else 0.0
            ctx.place(kind, x, y, size, color_idx, rotation)
            n += 1
