from dataclasses import replace

import pytest

from core.config import TowerDefaults
from core.param_builder import (
    default_spec,
    apply_query_params,
    build_spec_from_row,
    validate_tower_spec,
    resolve_waist,
    with_auto_waist,
)
from builders.build_modules.hyperboloid_helpers import calculate_waist_geometry


def test_default_spec_matches_defaults():
    spec = default_spec()
    d = TowerDefaults()
    assert spec.height == d.height == 300
    assert spec.base_radius == 60 and spec.top_radius == 5
    assert spec.section_count == 6 and spec.strut_count == 24 and spec.ring_count == 4
    assert spec.twist_angle == 50
    assert spec.show_rings and spec.auto_waist


def test_default_spec_partition_override():
    assert default_spec(partition_mode="weighted").partition_mode == "weighted"


def test_query_params_override(tower_spec):
    spec = apply_query_params(tower_spec, "?height=250&twistAngle=40&sectionCount=4")
    assert spec.height == 250.0
    assert spec.twist_angle == 40.0
    assert spec.section_count == 4
    assert isinstance(spec.section_count, int)
    assert spec.base_radius == tower_spec.base_radius


def test_query_params_ignore_bad_values(tower_spec):
    spec = apply_query_params(tower_spec, "height=abc&strutCount=10&colour=red&ringCount=")
    assert spec == tower_spec


def test_query_params_ignore_non_finite_values(tower_spec):
    """inf and overflowing numbers are skipped like any other unusable value."""
    spec = apply_query_params(tower_spec, "?sectionCount=inf&height=1e400&ringCount=-inf&topRadius=nan")
    assert spec == tower_spec


def test_query_params_keep_finite_values_next_to_non_finite(tower_spec):
    spec = apply_query_params(tower_spec, "?sectionCount=inf&ringCount=3")
    assert spec.section_count == tower_spec.section_count
    assert spec.ring_count == 3


def test_query_params_without_question_mark(tower_spec):
    spec = apply_query_params(tower_spec, "baseRadius=70&topRadius=12.5&ringCount=6")
    assert (spec.base_radius, spec.top_radius, spec.ring_count) == (70.0, 12.5, 6)


def test_spec_is_immutable(tower_spec):
    with pytest.raises(AttributeError):
        tower_spec.height = 10


def test_build_spec_from_row_mixed_names():
    row = {
        "Tower ID": "T1",
        "height": 200,
        "baseRadius": 40,
        "top_radius": 10.0,
        "sectionCount": 3.0,
        "showRings": "false",
        "partition_mode": "Weighted",
    }
    spec = build_spec_from_row(row)
    assert spec.height == 200.0
    assert spec.base_radius == 40.0
    assert spec.top_radius == 10.0
    assert spec.section_count == 3
    assert spec.show_rings is False
    assert spec.partition_mode == "weighted"
    # untouched fields keep their defaults
    assert spec.strut_count == TowerDefaults().strut_count


def test_build_spec_from_row_rejects_unparseable():
    with pytest.raises(ValueError):
        build_spec_from_row({"height": "tall"})


def test_build_spec_from_row_ignores_derived_properties():
    """Columns named after read-only properties are not spec fields."""
    spec = build_spec_from_row({"twist_radians": "1.0", "height": "200"})
    assert spec.height == 200.0
    assert spec.twist_angle == TowerDefaults().twist_angle


def test_build_spec_from_row_validates():
    with pytest.raises(ValueError):
        build_spec_from_row({"ring_count": 0})


@pytest.mark.parametrize("overrides", [
    dict(height=0.0),
    dict(height=float("inf")),
    dict(base_radius=-1.0),
    dict(section_count=0),
    dict(strut_count=0),
    dict(strut_radius=0.0),
    dict(twist_angle=float("nan")),
    dict(partition_mode="spiral"),
])
def test_validate_rejects_bad_specs(tower_spec, overrides):
    with pytest.raises(ValueError):
        validate_tower_spec(replace(tower_spec, **overrides))


def test_validate_returns_spec(tower_spec):
    assert validate_tower_spec(tower_spec) is tower_spec


def test_resolve_waist_auto(tower_spec):
    waist = resolve_waist(tower_spec)
    assert waist == calculate_waist_geometry(60, 5, tower_spec.twist_radians)


def test_resolve_waist_manual_clamped(tower_spec):
    spec = replace(tower_spec, auto_waist=False, waist_radius=-3.0, waist_position=1.5)
    waist = resolve_waist(spec)
    assert waist.waist_position == 1.0
    assert waist.waist_radius == 0.0


def test_resolve_waist_manual_missing_values_fall_back(tower_spec):
    spec = replace(tower_spec, auto_waist=False, waist_radius=None)
    assert resolve_waist(spec) == calculate_waist_geometry(60, 5, tower_spec.twist_radians)


def test_with_auto_waist_fills_fields(tower_spec):
    spec = with_auto_waist(tower_spec)
    expected = calculate_waist_geometry(60, 5, tower_spec.twist_radians)
    assert spec.waist_radius == expected.waist_radius
    assert spec.waist_position == expected.waist_position


def test_with_auto_waist_keeps_manual_values(tower_spec):
    spec = replace(tower_spec, auto_waist=False, waist_radius=12.0, waist_position=0.3)
    assert with_auto_waist(spec) is spec
