"""random — N shapes scattered inside a padded rectangle.

With ``avoid_overlap`` a candidate position is resampled until its center
is at least half the sum of both diameters plus ``min_distance`` away from
every accepted shape. After ``max_placement_attempts`` failures the shape
is dropped (counted on the composition, never placed overlapping).

Draws per shape: shape, color, size (1-3 draws by distribution), rotation
(when enabled), then two per position attempt.
"""

from __future__ import annotations

import logging
import math

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition

logger = logging.getLogger(__name__)

_MIN_LOG_ARG = 1e-12


def _sample_size(ctx: CompositionContext, min_size: float, max_size: float) -> float:
    mode = ctx.param("size_distribution", "uniform")
    span = max_size - min_size

    if mode == "normal":
        # Box-Muller, mapped so +-3 sigma covers the range
        u1 = max(ctx.random(), _MIN_LOG_ARG)
        u2 = ctx.random()
        z = math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)
        mean = (max_size + min_size) / 2
        std = span / 6
        return max(min_size, min(max_size, mean + z * std))
    if mode == "bimodal":
        if ctx.random() < 0.5:
            return min_size + ctx.random() * span * 0.3
        return max_size - ctx.random() * span * 0.3
    return min_size + ctx.random() * span


@composition("random", description="Random scatter with optional collision avoidance")
def scatter(ctx: CompositionContext) -> None:
    count = ctx.count_param("count", 20)
    padding = ctx.param("padding", 50)
    min_size = ctx.param("min_size", 20)
    max_size = ctx.param("max_size", 80)
    min_distance = ctx.param("min_distance", 5)
    max_attempts = max(1, int(ctx.param("max_placement_attempts", 50)))
    avoid_overlap = ctx.flag("avoid_overlap")
    rotate = ctx.flag("enable_rotation")
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")

    span_x = ctx.width - 2 * padding
    span_y = ctx.height - 2 * padding
    placed: list[tuple[float, float, float]] = []

    for i in range(count):
        where = DistributionContext(linear_index=i, progress=i / count)
        kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
        color_idx = ctx.color_index(color_policy, where)
        size = _sample_size(ctx, min_size, max_size)
        rotation = ctx.random_rotation() if rotate else 0.0

        position = None
        for _ in range(max_attempts):
            x = padding + ctx.random() * span_x
            y = padding + ctx.random() * span_y
            if not avoid_overlap or all(
                math.hypot(x - ox, y - oy) >= size / 2 + osize / 2 + min_distance
                for ox, oy, osize in placed
            ):
                position = (x, y)
                break

        if position is None:
            logger.debug("random: no free position for shape %d after %d attempts", i, max_attempts)
            ctx.drop()
            continue

        if avoid_overlap:
            placed.append((position[0], position[1], size))
        ctx.place(kind, position[0], position[1], size, color_idx, rotation)
