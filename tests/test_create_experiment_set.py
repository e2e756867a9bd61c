import pytest

from create_experiment_set import sample_tower_designs, PARAM_RANGES, INT_RANGES
from core.param_builder import build_spec_from_row


def test_sample_shape_and_columns():
    df = sample_tower_designs(n=8, seed=1)
    assert len(df) == 8
    assert df.columns[0] == "Tower ID"
    for name in list(PARAM_RANGES) + list(INT_RANGES):
        assert name in df.columns


def test_sample_within_bounds():
    df = sample_tower_designs(n=20, seed=3)
    for name, (lo, hi) in PARAM_RANGES.items():
        assert df[name].between(lo, hi).all()
    for name, (lo, hi) in INT_RANGES.items():
        assert df[name].between(lo, hi).all()
    assert (df["strut_count"] % 2 == 0).all()
    assert set(df["partition_mode"]) <= {"uniform", "weighted"}


def test_sample_reproducible():
    assert sample_tower_designs(n=5, seed=7).equals(sample_tower_designs(n=5, seed=7))


def test_sampled_rows_build_valid_specs():
    df = sample_tower_designs(n=6, seed=11)
    for row in df.to_dict(orient="records"):
        spec = build_spec_from_row(row)
        assert spec.section_count >= 1


def test_sample_requires_positive_n():
    with pytest.raises(ValueError):
        sample_tower_designs(n=0)
