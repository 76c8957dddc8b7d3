"""GenerationRules — the immutable input of one generation call."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from svgforge.engine.config import DEFAULT_COMPOSITION

_TOP_LEVEL = ("width", "height", "composition", "seed", "shapes", "colors")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class RulesError(ValueError):
    """Caller contract violation: the rules cannot be composed."""


def to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def to_camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def as_names(value: Any) -> tuple[str, ...]:
    """Name list from the wire; a bare string is one name."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class GenerationRules:
    width: float
    height: float
    shapes: tuple[str, ...]
    colors: tuple[str, ...]
    composition: str = DEFAULT_COMPOSITION
    seed: int = 0
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shapes", as_names(self.shapes))
        object.__setattr__(self, "colors", as_names(self.colors))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __reduce__(self):
        # mappingproxy does not pickle; rebuild from a plain dict
        return (
            type(self),
            (self.width, self.height, self.shapes, self.colors,
             self.composition, self.seed, dict(self.params)),
        )

    def check(self) -> None:
        """Raise RulesError if a strategy cannot run on these rules."""
        if not self.shapes:
            raise RulesError("rules.shapes must not be empty")
        if not self.colors:
            raise RulesError("rules.colors must not be empty")
        if not (self.width > 0 and self.height > 0):
            raise RulesError(
                f"canvas must have positive size, got {self.width}x{self.height}"
            )

    def replace(self, **changes: Any) -> GenerationRules:
        values = {
            "width": self.width,
            "height": self.height,
            "shapes": self.shapes,
            "colors": self.colors,
            "composition": self.composition,
            "seed": self.seed,
            "params": dict(self.params),
        }
        values.update(changes)
        return GenerationRules(**values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GenerationRules:
        """Build rules from the camelCase wire format.

        Keys other than the top-level fields are collected into ``params``
        under their snake_case name.
        """
        if data.get("shapes") is None or data.get("colors") is None:
            raise RulesError("rules must define 'shapes' and 'colors'")
        params = {to_snake(k): v for k, v in data.items() if k not in _TOP_LEVEL}
        try:
            width = float(data["width"])
            height = float(data["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise RulesError(f"rules need numeric 'width' and 'height': {e}") from e
        return cls(
            width=width,
            height=height,
            shapes=as_names(data["shapes"]),
            colors=as_names(data["colors"]),
            composition=data.get("composition") or DEFAULT_COMPOSITION,
            seed=int(data.get("seed") or 0),
            params=params,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "width": self.width,
            "height": self.height,
            "composition": self.composition,
            "seed": self.seed,
            "shapes": list(self.shapes),
            "colors": list(self.colors),
        }
        out.update({to_camel(k): v for k, v in self.params.items()})
        return out
