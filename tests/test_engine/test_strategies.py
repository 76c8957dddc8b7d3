"""Geometry and determinism checks for each composition strategy."""

from __future__ import annotations

import math

import pytest

from svgforge.engine.generator import compose, generate
from tests.conftest import FIXED_TIME, STRATEGIES, make_rules


def _xy(result):
    return [(round(s.x, 6), round(s.y, 6)) for s in result.instances]


# ---- grid ----

def test_grid_cell_centers():
    rules = make_rules(
        "grid", width=100, height=100, shapes=("circle",), colors=("#fff",), rows=2, cols=2,
    )
    result = compose(rules)
    assert _xy(result) == [(25, 25), (75, 25), (25, 75), (75, 75)]
    assert all(s.fill == "#fff" for s in result.instances)

    svg = generate(rules, generated_at=FIXED_TIME)
    assert svg.count("<circle") == 4


def test_grid_full_sparsity_is_empty():
    result = compose(make_rules("grid", rows=3, cols=3, sparsity=1.0))
    assert result.count == 0


def test_grid_zero_rows_is_empty():
    assert compose(make_rules("grid", rows=0, cols=5)).count == 0


def test_grid_sequence_colors():
    rules = make_rules("grid", rows=1, cols=4, color_distribution="sequence")
    fills = [s.fill for s in compose(rules).instances]
    assert fills == ["#111111", "#222222", "#333333", "#111111"]


def test_grid_sizes_within_cell():
    rules = make_rules("grid", rows=4, cols=4, width=400, height=400, padding=0.2)
    for s in compose(rules).instances:
        assert 0 <= s.size <= 100


# ---- radial ----

def test_radial_fixed_radius():
    rules = make_rules("radial", count=12, radius=50)
    result = compose(rules)
    assert result.count == 12
    for s in result.instances:
        assert math.hypot(s.x - 200, s.y - 200) == pytest.approx(50)


def test_radial_first_shape_at_start_angle():
    rules = make_rules("radial", count=4, radius=100)
    first = compose(rules).instances[0]
    assert (first.x, first.y) == pytest.approx((300, 200))


def test_radial_center_shape_first():
    rules = make_rules("radial", count=6, center_shape="star", center_color="#abcdef")
    result = compose(rules)
    assert result.count == 7
    center = result.instances[0]
    assert center.kind == "star"
    assert center.fill == "#abcdef"
    assert (center.x, center.y) == (200, 200)


def test_radial_linear_radius():
    rules = make_rules(
        "radial", count=5, min_radius=20, max_radius=100, radius_distribution="linear",
    )
    radii = [math.hypot(s.x - 200, s.y - 200) for s in compose(rules).instances]
    assert radii == pytest.approx([20, 40, 60, 80, 100])


def test_radial_exponential_radius():
    rules = make_rules(
        "radial", count=3, min_radius=10, max_radius=90, radius_distribution="exponential",
    )
    radii = [math.hypot(s.x - 200, s.y - 200) for s in compose(rules).instances]
    assert radii == pytest.approx([10, 30, 90])


def test_radial_exponential_from_zero_is_linear():
    rules = make_rules(
        "radial", count=3, min_radius=0, max_radius=100, radius_distribution="exponential",
    )
    radii = [math.hypot(s.x - 200, s.y - 200) for s in compose(rules).instances]
    assert radii == pytest.approx([0, 50, 100], abs=1e-9)


def test_radial_single_shape():
    rules = make_rules("radial", count=1, min_radius=30, max_radius=60, radius_distribution="linear")
    result = compose(rules)
    assert result.count == 1
    assert math.hypot(result.instances[0].x - 200, result.instances[0].y - 200) == pytest.approx(30)


def test_radial_tangent_rotation():
    rules = make_rules("radial", count=4, radius=50, rotation_type="tangent")
    rotations = [s.rotation for s in compose(rules).instances]
    assert rotations == pytest.approx([90, 180, 270, 360])


# ---- random ----

def test_random_places_all_without_overlap_check():
    rules = make_rules("random", width=500, height=500, count=10, padding=50)
    result = compose(rules)
    assert result.count == 10
    assert result.dropped == 0
    for s in result.instances:
        assert 50 <= s.x <= 450
        assert 50 <= s.y <= 450
        assert 20 <= s.size <= 80


def test_random_avoid_overlap_keeps_distance():
    rules = make_rules(
        "random", width=2000, height=2000, count=10, avoid_overlap=True, min_distance=5,
    )
    result = compose(rules)
    assert result.count + result.dropped == 10
    shapes = result.instances
    for i, a in enumerate(shapes):
        for b in shapes[i + 1:]:
            assert math.hypot(a.x - b.x, a.y - b.y) >= a.size / 2 + b.size / 2 + 5


def test_random_avoid_overlap_places_all_on_large_canvas():
    rules = make_rules(
        "random", width=2000, height=2000, count=10, avoid_overlap=True, min_distance=0,
    )
    result = compose(rules)
    assert result.count == 10
    assert result.dropped == 0
    shapes = result.instances
    for i, a in enumerate(shapes):
        for b in shapes[i + 1:]:
            assert math.hypot(a.x - b.x, a.y - b.y) >= a.size / 2 + b.size / 2


def test_random_drops_shapes_that_cannot_fit():
    rules = make_rules(
        "random",
        width=200,
        height=200,
        padding=0,
        min_size=300,
        max_size=300,
        count=5,
        avoid_overlap=True,
        max_placement_attempts=10,
    )
    result = compose(rules)
    assert result.count == 1
    assert result.dropped == 4


@pytest.mark.parametrize("mode", ["uniform", "normal", "bimodal"])
def test_random_size_distributions_in_range(mode):
    rules = make_rules("random", count=40, min_size=10, max_size=50, size_distribution=mode)
    for s in compose(rules).instances:
        assert 10 <= s.size <= 50


# ---- wave ----

def test_wave_x_positions():
    rules = make_rules("wave", width=500, count=5, padding_x=50)
    xs = [s.x for s in compose(rules).instances]
    assert xs == pytest.approx([50, 150, 250, 350, 450])


def test_wave_y_within_amplitude():
    rules = make_rules("wave", width=500, height=400, count=20, wave_height=60)
    for s in compose(rules).instances:
        assert 140 - 1e-9 <= s.y <= 260 + 1e-9


def test_wave_single_shape():
    rules = make_rules("wave", count=1, padding_x=50)
    result = compose(rules)
    assert result.count == 1
    assert result.instances[0].x == 50


def test_wave_rotation_follows_slope():
    rules = make_rules(
        "wave", width=500, count=3, waves=1, wave_height=50, padding_x=50, rotation_type="wave",
    )
    first = compose(rules).instances[0]
    expected = math.degrees(math.atan(50 * 2 * math.pi / 400))
    assert first.rotation == pytest.approx(expected)


# ---- spiral ----

def test_spiral_first_point():
    rules = make_rules("spiral", width=400, height=400)
    first = compose(rules).instances[0]
    assert (first.x, first.y) == pytest.approx((220, 200))


def test_spiral_decreasing_sizes():
    rules = make_rules("spiral", count=10, size_distribution="decreasing")
    sizes = [s.size for s in compose(rules).instances]
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[0] == 40


# ---- cluster ----

def test_cluster_count_and_bounds():
    rules = make_rules("cluster", cluster_count=4, shapes_per_cluster=6)
    result = compose(rules)
    assert result.count == 24
    for s in result.instances:
        assert 0 <= s.x <= 400
        assert 0 <= s.y <= 400


def test_cluster_distance_sizes():
    rules = make_rules("cluster", size_distribution="distance", min_size=10, max_size=50)
    for s in compose(rules).instances:
        assert 10 <= s.size <= 50


def test_cluster_progress_policy():
    rules = make_rules(
        "cluster", cluster_count=1, shapes_per_cluster=9, shape_distribution="progress",
    )
    kinds = [s.kind for s in compose(rules).instances]
    assert kinds == ["circle"] * 3 + ["rect"] * 3 + ["triangle"] * 3


# ---- fractal ----

@pytest.mark.parametrize(
    "params,expected",
    [
        ({"max_depth": 0}, 1),
        ({"max_depth": 1, "child_count": 3}, 4),
        ({"max_depth": 2, "child_count": 3}, 13),
        ({"max_depth": 1}, 6),
        ({"max_depth": 2}, 21),
    ],
)
def test_fractal_counts(params, expected):
    assert compose(make_rules("fractal", **params)).count == expected


def test_fractal_pre_order():
    rules = make_rules("fractal", max_depth=2, child_count=2, initial_size=100)
    sizes = [s.size for s in compose(rules).instances]
    assert sizes == [100, 50, 25, 25, 50, 25, 25]


def test_fractal_depth_colors():
    rules = make_rules("fractal", max_depth=2, child_count=2, depth_colors=True)
    fills = [s.fill for s in compose(rules).instances]
    assert fills == ["#111111", "#222222", "#333333", "#333333", "#222222", "#333333", "#333333"]


def test_fractal_first_child_offset():
    rules = make_rules("fractal", max_depth=1, child_count=4, initial_size=100, distance_factor=0.8)
    child = compose(rules).instances[1]
    assert (child.x, child.y) == pytest.approx((280, 200))


# ---- all strategies ----

@pytest.mark.parametrize("name", STRATEGIES)
def test_single_entry_palettes(name):
    rules = make_rules(name, shapes=("hexagon",), colors=("#123456",), count=5)
    result = compose(rules)
    assert result.strategy == name
    for s in result.instances:
        assert s.kind == "hexagon"
        assert s.fill == "#123456"


@pytest.mark.parametrize("name", STRATEGIES)
def test_same_seed_same_layout(name):
    a = compose(make_rules(name, seed=7))
    b = compose(make_rules(name, seed=7))
    assert a.instances == b.instances
