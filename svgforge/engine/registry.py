"""Composition registry — every strategy is a standalone function registered via decorator.

Usage:
    @composition("grid", description="Rows x columns, one shape per cell")
    def grid(ctx: CompositionContext) -> None:
        for row in range(rows):
            ctx.place(...)

Adding a new strategy = creating one module with the decorator and importing
it from ``svgforge.engine.strategies``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from svgforge.engine.config import DEFAULT_COMPOSITION

if TYPE_CHECKING:
    from svgforge.engine.context import CompositionContext

logger = logging.getLogger(__name__)

StrategyFn = Callable[["CompositionContext"], None]


@dataclass
class StrategySpec:
    name: str
    fn: StrategyFn
    description: str = ""


class CompositionRegistry:
    """Singleton registry of all composition strategies."""

    def __init__(self, default: str = DEFAULT_COMPOSITION) -> None:
        self._strategies: dict[str, StrategySpec] = {}
        self.default = default

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate composition strategy: {spec.name}")
        self._strategies[spec.name] = spec
        logger.debug("Registered composition %s", spec.name)

    def get(self, name: str) -> StrategySpec:
        return self._strategies[name]

    def resolve(self, name: str | None) -> StrategySpec:
        """Strategy for ``name``; unknown or empty names fall back to the default."""
        spec = self._strategies.get(name or "")
        if spec is None:
            logger.info("Unknown composition %r, falling back to %s", name, self.default)
            spec = self._strategies[self.default]
        return spec

    def names(self) -> list[str]:
        return list(self._strategies)

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = CompositionRegistry()


def get_registry() -> CompositionRegistry:
    return _registry


def composition(name: str, *, description: str = ""):
    """Decorator to register a composition strategy."""

    def decorator(fn: StrategyFn) -> StrategyFn:
        _registry.register(StrategySpec(name=name, fn=fn, description=description))
        return fn

    return decorator
