"""Variation engine — derive related rule sets from a base for batch generation.

A VariationSpec names numeric fields to perturb, palette entries to add or
remove, and optionally a replacement composition. Applying it never mutates
the base rules.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.rules import GenerationRules, RulesError, as_names, to_snake

logger = logging.getLogger(__name__)

KINDS = ("range", "increment", "factor")

# Fraction used by "range" when the variation gives no value
DEFAULT_RANGE = 0.2

_LIST_KEYS = {"add_shapes", "remove_shapes", "add_colors", "remove_colors"}
_NUMERIC_FIELDS = ("width", "height", "seed")


class _Draws(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class NumericVariation:
    kind: str
    value: float | None = None

    def apply(self, base: float, draws: _Draws) -> float:
        if self.kind == "range":
            frac = DEFAULT_RANGE if self.value is None else self.value
            lo = base * (1 - frac)
            hi = base * (1 + frac)
            return lo + draws.random() * (hi - lo)
        if self.kind == "increment":
            return base + (self.value or 0)
        if self.kind == "factor":
            return base * (1 if self.value is None else self.value)
        raise RulesError(f"unknown variation kind {self.kind!r}")


@dataclass(frozen=True)
class VariationSpec:
    numeric: dict[str, NumericVariation] = field(default_factory=dict)
    add_shapes: tuple[str, ...] = ()
    remove_shapes: tuple[str, ...] = ()
    add_colors: tuple[str, ...] = ()
    remove_colors: tuple[str, ...] = ()
    composition: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.numeric or self.add_shapes or self.remove_shapes
            or self.add_colors or self.remove_colors or self.composition
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> VariationSpec:
        """Parse the flat wire format.

        ``{"rows": {"type": "range", "value": 0.2}, "addShapes": ["star"],
        "composition": "spiral"}`` — numeric descriptors accept ``type`` or
        ``kind``. Descriptors with an unknown kind are ignored.
        """
        numeric: dict[str, NumericVariation] = {}
        lists: dict[str, tuple[str, ...]] = {}
        composition = None

        for key, value in (data or {}).items():
            name = to_snake(key)
            if name in _LIST_KEYS:
                lists[name] = as_names(value)
            elif name == "composition":
                composition = value or None
            elif isinstance(value, Mapping):
                kind = value.get("kind") or value.get("type")
                if kind not in KINDS:
                    logger.warning("Ignoring variation %s with kind %r", key, kind)
                    continue
                numeric[name] = NumericVariation(kind=kind, value=value.get("value"))

        return cls(numeric=numeric, composition=composition, **lists)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _vary(base: Any, variation: NumericVariation, draws: _Draws) -> Any:
    result = variation.apply(base, draws)
    if isinstance(base, int):
        return int(round(result))
    return result


def _vary_list(
    base: tuple[str, ...], remove: tuple[str, ...], add: tuple[str, ...], what: str,
) -> tuple[str, ...]:
    kept = [item for item in base if item not in remove]
    out = tuple(kept) + tuple(add)
    if not out:
        logger.warning("Variation would empty %s; keeping base list", what)
        return base
    return out


def apply_variations(
    base: GenerationRules,
    spec: VariationSpec,
    draws: _Draws | None = None,
) -> GenerationRules:
    """Return new rules derived from ``base``; ``base`` is left untouched.

    ``range`` variations draw from ``draws`` (a SeededRandom for reproducible
    batches, a fresh ``random.Random`` otherwise). Fields named in ``spec``
    but absent from the base, or not numeric, are skipped.
    """
    if spec.is_empty:
        return base
    draws = draws or random.Random()

    changes: dict[str, Any] = {}
    params = dict(base.params)

    for name, variation in spec.numeric.items():
        if name in _NUMERIC_FIELDS:
            changes[name] = _vary(getattr(base, name), variation, draws)
        elif _is_number(params.get(name)):
            params[name] = _vary(params[name], variation, draws)
        else:
            logger.debug("Variation for %s skipped: no numeric base value", name)

    changes["params"] = params
    changes["shapes"] = _vary_list(base.shapes, spec.remove_shapes, spec.add_shapes, "shapes")
    changes["colors"] = _vary_list(base.colors, spec.remove_colors, spec.add_colors, "colors")
    if spec.composition:
        changes["composition"] = spec.composition

    return base.replace(**changes)


def derive_batch(
    base: GenerationRules, spec: VariationSpec, count: int,
) -> list[GenerationRules]:
    """``count`` reproducible members; member i draws from SeededRandom(base.seed + i)."""
    return [apply_variations(base, spec, SeededRandom(base.seed + i)) for i in range(count)]
