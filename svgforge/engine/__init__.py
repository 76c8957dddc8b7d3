"""svgforge procedural composition engine."""

from svgforge.engine.context import Composition, CompositionContext, ShapeInstance
from svgforge.engine.generator import Generator, compose, generate
from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.registry import composition, get_registry
from svgforge.engine.rules import GenerationRules, RulesError
from svgforge.engine.variation import VariationSpec, apply_variations, derive_batch

__all__ = [
    "Composition",
    "CompositionContext",
    "ShapeInstance",
    "Generator",
    "compose",
    "generate",
    "SeededRandom",
    "composition",
    "get_registry",
    "GenerationRules",
    "RulesError",
    "VariationSpec",
    "apply_variations",
    "derive_batch",
]
