"""Tests for the variation engine."""

from __future__ import annotations

import pytest

from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.variation import (
    NumericVariation,
    VariationSpec,
    apply_variations,
    derive_batch,
)
from tests.conftest import make_rules


def test_base_is_not_mutated():
    base = make_rules("grid", rows=4, cols=4)
    spec = VariationSpec(
        numeric={"rows": NumericVariation("increment", 2)},
        add_shapes=("star",),
    )
    derived = apply_variations(base, spec)
    assert base.params["rows"] == 4
    assert base.shapes == ("circle", "rect", "triangle")
    assert derived is not base


def test_empty_spec_returns_equal_rules():
    base = make_rules("grid", rows=4)
    assert apply_variations(base, VariationSpec()) == base


def test_increment_keeps_int():
    base = make_rules("grid", rows=4)
    derived = apply_variations(base, VariationSpec(numeric={"rows": NumericVariation("increment", 2)}))
    assert derived.params["rows"] == 6
    assert isinstance(derived.params["rows"], int)


def test_factor_on_width():
    base = make_rules("grid", width=100.0)
    derived = apply_variations(base, VariationSpec(numeric={"width": NumericVariation("factor", 1.5)}))
    assert derived.width == 150.0


def test_range_stays_within_bounds():
    base = make_rules("random", max_size=100.0)
    spec = VariationSpec(numeric={"max_size": NumericVariation("range", 0.2)})
    for i in range(50):
        value = apply_variations(base, spec, SeededRandom(i)).params["max_size"]
        assert 80 <= value <= 120


def test_range_default_fraction():
    base = make_rules("random", max_size=100.0)
    spec = VariationSpec(numeric={"max_size": NumericVariation("range")})
    value = apply_variations(base, spec, SeededRandom(3)).params["max_size"]
    assert 80 <= value <= 120


def test_missing_field_is_skipped():
    base = make_rules("grid", rows=4)
    spec = VariationSpec(numeric={"spacing": NumericVariation("increment", 5)})
    derived = apply_variations(base, spec)
    assert "spacing" not in derived.params


def test_shape_remove_then_add():
    base = make_rules("grid", shapes=("circle", "rect"))
    spec = VariationSpec(add_shapes=("star", "circle"), remove_shapes=("rect",))
    assert apply_variations(base, spec).shapes == ("circle", "star", "circle")


def test_color_lists_vary_colors():
    base = make_rules("grid", colors=("#111111", "#222222"))
    spec = VariationSpec(add_colors=("#abcdef",), remove_colors=("#111111",))
    derived = apply_variations(base, spec)
    assert derived.colors == ("#222222", "#abcdef")
    assert derived.shapes == base.shapes


def test_emptying_a_list_keeps_base():
    base = make_rules("grid", shapes=("circle",))
    derived = apply_variations(base, VariationSpec(remove_shapes=("circle",)))
    assert derived.shapes == ("circle",)


def test_composition_override():
    base = make_rules("grid")
    assert apply_variations(base, VariationSpec(composition="spiral")).composition == "spiral"


def test_from_dict_wire_format():
    spec = VariationSpec.from_dict({
        "rows": {"type": "increment", "value": 1},
        "maxSize": {"kind": "factor", "value": 2},
        "addShapes": ["star"],
        "removeColors": ["#000"],
        "composition": "wave",
    })
    assert spec.numeric == {
        "rows": NumericVariation("increment", 1),
        "max_size": NumericVariation("factor", 2),
    }
    assert spec.add_shapes == ("star",)
    assert spec.remove_colors == ("#000",)
    assert spec.composition == "wave"


def test_from_dict_ignores_unknown_kind():
    spec = VariationSpec.from_dict({"rows": {"type": "jitter", "value": 3}})
    assert spec.is_empty


def test_from_dict_none():
    assert VariationSpec.from_dict(None).is_empty


def test_derive_batch_is_reproducible():
    base = make_rules("random", seed=10, max_size=80.0)
    spec = VariationSpec(numeric={"max_size": NumericVariation("range", 0.5)})
    a = derive_batch(base, spec, 4)
    b = derive_batch(base, spec, 4)
    assert a == b
    assert len({r.params["max_size"] for r in a}) == 4


def test_unknown_kind_on_apply_raises():
    with pytest.raises(ValueError):
        NumericVariation("jitter", 1).apply(10, SeededRandom(1))


def test_from_dict_bare_string_list():
    spec = VariationSpec.from_dict({"addShapes": "star", "removeColors": "#000"})
    assert spec.add_shapes == ("star",)
    assert spec.remove_colors == ("#000",)
