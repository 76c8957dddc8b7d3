"""Distribution policies — pick an index into the shape or color palette.

Shared by every strategy so "color by sequence" means the same thing in a
grid as in a spiral. Only ``random`` (and unknown names, which behave like
it) consume a draw from the stream.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from svgforge.engine.random_stream import SeededRandom

RANDOM = "random"


@dataclass(frozen=True)
class DistributionContext:
    """Position of the shape being placed. Normalized fields are in [0, 1]."""

    linear_index: int = 0
    row: int = 0
    col: int = 0
    depth: int = 0
    radius: float = 0.0
    progress: float = 0.0
    wave_height: float = 0.0
    distance: float = 0.0


def _scaled(value: float, length: int) -> int:
    value = min(max(value, 0.0), 1.0)
    return min(int(math.floor(value * length)), length - 1)


_POLICIES = {
    "sequence": lambda ctx, n: ctx.linear_index % n,
    "row": lambda ctx, n: ctx.row % n,
    "column": lambda ctx, n: ctx.col % n,
    "depth": lambda ctx, n: ctx.depth % n,
    "radius": lambda ctx, n: _scaled(ctx.radius, n),
    "progress": lambda ctx, n: _scaled(ctx.progress, n),
    "wave": lambda ctx, n: _scaled(ctx.wave_height, n),
    "waveHeight": lambda ctx, n: _scaled(ctx.wave_height, n),
    "distance": lambda ctx, n: _scaled(ctx.distance, n),
}

POLICY_NAMES = (RANDOM, *_POLICIES)


def select_index(
    policy: str | None,
    length: int,
    context: DistributionContext,
    stream: SeededRandom,
) -> int:
    """Index in [0, length) chosen under ``policy``; unknown names act as random."""
    if length <= 0:
        raise ValueError("cannot select from an empty palette")
    fn = _POLICIES.get(policy or RANDOM)
    if fn is None:
        return stream.index(length)
    return fn(context, length)
