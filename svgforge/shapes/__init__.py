"""Shape kinds — importing this package registers every built-in kind."""

from svgforge.shapes.base import ShapeRenderer
from svgforge.shapes.registry import ShapeKindRegistry, get_shape_registry, shape_kind
from svgforge.shapes import basic, composite  # noqa: F401  (registration side effects)

__all__ = [
    "ShapeRenderer",
    "ShapeKindRegistry",
    "get_shape_registry",
    "shape_kind",
]
