"""CompositionContext — the mutable state object one strategy run works on.

Owns the run's SeededRandom and collects ShapeInstances in z-order. A
context is created per ``compose`` call and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from svgforge.engine.distribution import DistributionContext, select_index
from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.rules import GenerationRules
from svgforge.shapes.registry import ShapeKindRegistry, get_shape_registry

FillSpec = Union[str, tuple[str, ...]]


@dataclass(frozen=True)
class ShapeInstance:
    kind: str
    x: float
    y: float
    size: float
    fill: FillSpec
    rotation: float = 0.0


@dataclass
class Composition:
    """Output of one strategy run."""

    strategy: str
    instances: list[ShapeInstance] = field(default_factory=list)
    # Shapes the strategy gave up on (random strategy retry budget)
    dropped: int = 0

    @property
    def count(self) -> int:
        return len(self.instances)


@dataclass
class CompositionContext:
    rules: GenerationRules
    stream: SeededRandom
    composition: Composition
    shape_registry: ShapeKindRegistry = field(default_factory=get_shape_registry)

    # -- rules access ------------------------------------------------

    @property
    def width(self) -> float:
        return self.rules.width

    @property
    def height(self) -> float:
        return self.rules.height

    @property
    def shapes(self) -> tuple[str, ...]:
        return self.rules.shapes

    @property
    def colors(self) -> tuple[str, ...]:
        return self.rules.colors

    def param(self, name: str, default: Any = None) -> Any:
        """Strategy parameter, or ``default`` when missing or None."""
        value = self.rules.params.get(name)
        return default if value is None else value

    def count_param(self, name: str, default: int) -> int:
        return max(0, int(self.param(name, default)))

    def flag(self, name: str) -> bool:
        return bool(self.param(name, False))

    # -- random helpers ----------------------------------------------

    def random(self) -> float:
        return self.stream.next()

    def uniform(self, lo: float, hi: float) -> float:
        return self.stream.uniform(lo, hi)

    def random_rotation(self) -> float:
        return 360 * self.stream.next()

    def shape_index(self, policy: str | None, context: DistributionContext) -> int:
        return select_index(policy, len(self.shapes), context, self.stream)

    def color_index(self, policy: str | None, context: DistributionContext) -> int:
        return select_index(policy, len(self.colors), context, self.stream)

    # -- output ------------------------------------------------------

    def fill_for(self, kind: str, color_index: int) -> FillSpec:
        """Resolve the fill for a shape.

        With ``palette_fill`` enabled, multi-color kinds get the palette
        rotated to start at ``color_index``; otherwise the single color.
        """
        colors = self.colors
        color = colors[color_index % len(colors)]
        if not self.flag("palette_fill"):
            return color
        slots = self.shape_registry.get(kind).color_slots
        if slots <= 1:
            return color
        n = len(colors)
        return tuple(colors[(color_index + k) % n] for k in range(min(slots, n)))

    def place(
        self,
        kind: str,
        x: float,
        y: float,
        size: float,
        color_index: int | None = None,
        rotation: float = 0.0,
        color: str | None = None,
    ) -> ShapeInstance:
        """Append a shape. Pass either a palette ``color_index`` or a raw ``color``."""
        if color is not None:
            fill: FillSpec = color
        else:
            fill = self.fill_for(kind, color_index or 0)
        inst = ShapeInstance(kind=kind, x=x, y=y, size=size, fill=fill, rotation=rotation)
        self.composition.instances.append(inst)
        return inst

    def drop(self) -> None:
        self.composition.dropped += 1
