"""grid — rows x cols cells, one shape centered per cell.

Draws per cell: sparsity check (when sparsity > 0), shape, color, size,
rotation (when enabled).
"""

from __future__ import annotations

from svgforge.engine.context import CompositionContext
from svgforge.engine.distribution import DistributionContext
from svgforge.engine.registry import composition


@composition("grid", description="Rows x columns, one shape centered per cell")
def grid(ctx: CompositionContext) -> None:
    rows = ctx.count_param("rows", 4)
    cols = ctx.count_param("cols", 4)
    if rows == 0 or cols == 0:
        return

    cell_w = ctx.width / cols
    cell_h = ctx.height / rows
    padding = ctx.param("padding", 0.2)  # fraction of the cell
    sparsity = ctx.param("sparsity", 0.0)
    size_variation = ctx.param("size_variation", 0.3)
    shape_policy = ctx.param("shape_distribution")
    color_policy = ctx.param("color_distribution")
    rotate = ctx.flag("enable_rotation")

    max_size = min(cell_w, cell_h) * (1 - padding)
    min_size = max_size * 0.4
    base_size = (max_size + min_size) / 2

    for row in range(rows):
        for col in range(cols):
            x = col * cell_w + cell_w / 2
            y = row * cell_h + cell_h / 2

            if sparsity and ctx.random() < sparsity:
                continue

            where = DistributionContext(linear_index=row * cols + col, row=row, col=col)
            kind = ctx.shapes[ctx.shape_index(shape_policy, where)]
            color_idx = ctx.color_index(color_policy, where)

            size = base_size + (ctx.random() - 0.5) * max_size * size_variation
            rotation = ctx.random_rotation() if rotate else 0.0

            ctx.place(kind, x, y, max(size, 0.0), color_idx, rotation)
