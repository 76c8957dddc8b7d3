"""Tests for the composition strategy registry."""

from __future__ import annotations

import pytest

from svgforge.engine.registry import CompositionRegistry, StrategySpec, get_registry
from tests.conftest import STRATEGIES


def _noop(ctx):
    return None


def test_builtin_strategies_registered():
    registry = get_registry()
    assert sorted(registry.names()) == sorted(STRATEGIES)
    assert registry.count == 7


def test_duplicate_registration_rejected():
    registry = CompositionRegistry(default="a")
    registry.register(StrategySpec(name="a", fn=_noop))
    with pytest.raises(ValueError):
        registry.register(StrategySpec(name="a", fn=_noop))


def test_resolve_falls_back_to_default():
    registry = CompositionRegistry(default="a")
    registry.register(StrategySpec(name="a", fn=_noop))
    registry.register(StrategySpec(name="b", fn=_noop))
    assert registry.resolve("b").name == "b"
    assert registry.resolve("missing").name == "a"
    assert registry.resolve(None).name == "a"


def test_get_unknown_raises():
    with pytest.raises(KeyError):
        CompositionRegistry().get("nope")
