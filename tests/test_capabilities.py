import pytest

from noisegrid.capabilities import (
    DISTANCE,
    KIND_TABLE,
    SIGNED,
    is_cell_distance,
    is_cell_value,
    is_cellular,
    is_simplex_family,
    kind_spec,
    normalization_policy,
    supports,
    supports_tiling,
)
from noisegrid.config import NOISE_KINDS


def test_one_row_per_kind():
    assert set(KIND_TABLE) == set(NOISE_KINDS)


def test_distance_policy_kinds():
    distance = {k for k in NOISE_KINDS if normalization_policy(k) == DISTANCE}
    assert distance == {
        "cell_distance",
        "cell_distance_sq",
        "fast_cell_distance",
        "fast_cell_distance_sq",
    }
    assert normalization_policy("cell_value") == SIGNED
    assert normalization_policy("fast_cell_value") == SIGNED


def test_supports_dimension_and_precision():
    assert supports("simplex", 4, True)
    assert supports("value_cubic", 3, False)
    assert not supports("value_cubic", 4, False)
    assert supports("fast_cell_distance", 2, False)
    assert not supports("fast_cell_distance", 2, True)
    assert not supports("fast_cell_distance", 4, False)


def test_supports_tiling_needs_2d_view_and_4d_kernel():
    assert supports_tiling("perlin", 2)
    assert not supports_tiling("perlin", 3)
    assert not supports_tiling("value_cubic", 2)
    assert not supports_tiling("fast_cell_value", 2)


def test_family_predicates():
    assert is_simplex_family("open_simplex_2s")
    assert not is_simplex_family("perlin")
    assert is_cellular("fast_cell_value")
    assert is_cell_value("cell_value")
    assert not is_cell_value("cell_distance")
    assert is_cell_distance("fast_cell_distance_sq")
    assert not is_cell_distance("value")


def test_unknown_kind():
    with pytest.raises(ValueError):
        kind_spec("worley")
