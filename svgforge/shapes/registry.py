"""Shape-kind registry — every shape kind is a ShapeRenderer registered via decorator.

Usage:
    @shape_kind("hexagon", description="Regular hexagon")
    class Hexagon(ShapeRenderer):
        def primitives(self, x, y, size, fills):
            ...

Adding a new shape kind = writing one class with the decorator. The dispatch
code never changes.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from svgforge.shapes.base import Element, Fill, ShapeRenderer

logger = logging.getLogger(__name__)

DEFAULT_SHAPE = "circle"

R = TypeVar("R", bound=type[ShapeRenderer])


class ShapeKindRegistry:
    """Process-wide, read-mostly map from shape id to renderer."""

    def __init__(self, default: str = DEFAULT_SHAPE) -> None:
        self._renderers: dict[str, ShapeRenderer] = {}
        self.default = default

    def register(self, renderer: ShapeRenderer) -> None:
        if not renderer.name:
            raise ValueError(f"{type(renderer).__name__} has no shape name")
        if renderer.name in self._renderers:
            raise ValueError(f"Duplicate shape kind: {renderer.name}")
        self._renderers[renderer.name] = renderer
        logger.debug("Registered shape kind %s", renderer.name)

    def get(self, kind: str) -> ShapeRenderer:
        """Return the renderer for ``kind``, falling back to the default kind."""
        renderer = self._renderers.get(kind)
        if renderer is None:
            logger.debug("Unknown shape kind %r, using %s", kind, self.default)
            renderer = self._renderers[self.default]
        return renderer

    def __contains__(self, kind: str) -> bool:
        return kind in self._renderers

    def render(
        self, kind: str, x: float, y: float, size: float, fill: Fill, rotation: float = 0.0,
    ) -> Element:
        return self.get(kind).render(x, y, size, fill, rotation)

    def names(self) -> list[str]:
        return list(self._renderers)

    def describe(self) -> list[dict[str, str]]:
        return [
            {"name": r.name, "description": r.description}
            for r in self._renderers.values()
        ]

    @property
    def count(self) -> int:
        return len(self._renderers)


# Module-level singleton
_registry = ShapeKindRegistry()


def get_shape_registry() -> ShapeKindRegistry:
    return _registry


def shape_kind(name: str, *, description: str = "") -> Callable[[R], R]:
    """Class decorator: instantiate and register a ShapeRenderer."""

    def decorator(cls: R) -> R:
        cls.name = name
        if description:
            cls.description = description
        _registry.register(cls())
        return cls

    return decorator
