"""Document assembler — rules in, SVG text out."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from svgforge.engine.config import EngineConfig
from svgforge.engine.context import Composition, CompositionContext, ShapeInstance
from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.registry import CompositionRegistry, get_registry
from svgforge.engine.rules import GenerationRules
from svgforge.shapes.base import Element
from svgforge.shapes.registry import ShapeKindRegistry, get_shape_registry
from svgforge.svg.serializer import serialize_svg

import svgforge.engine.strategies  # noqa: F401  (registers strategies)
import svgforge.shapes  # noqa: F401  (registers shape kinds)

logger = logging.getLogger(__name__)


class Generator:
    """Runs one composition strategy per call and wraps the result in an SVG canvas."""

    def __init__(
        self,
        registry: CompositionRegistry | None = None,
        shape_registry: ShapeKindRegistry | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.shape_registry = shape_registry or get_shape_registry()
        self.config = config or EngineConfig()

    def compose(self, rules: GenerationRules) -> Composition:
        """Run the strategy named by ``rules.composition`` (default on unknown)."""
        rules.check()
        spec = self.registry.resolve(rules.composition)
        ctx = CompositionContext(
            rules=rules,
            stream=SeededRandom(rules.seed),
            composition=Composition(strategy=spec.name),
            shape_registry=self.shape_registry,
        )
        spec.fn(ctx)
        return ctx.composition

    def render(self, instances: list[ShapeInstance]) -> list[Element]:
        return [
            self.shape_registry.render(s.kind, s.x, s.y, s.size, s.fill, s.rotation)
            for s in instances
        ]

    def generate(
        self,
        rules: GenerationRules,
        *,
        generated_at: datetime | None = None,
    ) -> str:
        """Return the SVG document for ``rules``.

        ``generated_at`` is written into the metadata block; pass a fixed
        value to get byte-identical output across calls.
        """
        start = time.perf_counter()
        result = self.compose(rules)
        svg = self.to_svg(rules, result, generated_at=generated_at)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Generated %s: %d shapes (%d dropped) in %.1fms",
            result.strategy,
            result.count,
            result.dropped,
            elapsed,
        )
        return svg

    def to_svg(
        self,
        rules: GenerationRules,
        result: Composition,
        *,
        generated_at: datetime | None = None,
    ) -> str:
        stamp = generated_at or datetime.now(timezone.utc)
        return serialize_svg(
            self.render(result.instances),
            rules.width,
            rules.height,
            metadata={
                "generator": self.config.generator,
                "generatedAt": stamp.isoformat(),
            },
            precision=self.config.precision,
            xml_declaration=self.config.xml_declaration,
        )


_default_generator: Generator | None = None


def get_generator() -> Generator:
    global _default_generator
    if _default_generator is None:
        _default_generator = Generator()
    return _default_generator


def compose(rules: GenerationRules) -> Composition:
    return get_generator().compose(rules)


def generate(rules: GenerationRules, *, generated_at: datetime | None = None) -> str:
    return get_generator().generate(rules, generated_at=generated_at)
