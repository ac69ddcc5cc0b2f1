import numpy as np
import pytest

from noisefn.core import (
    corner_offsets,
    cubic_weights,
    fade,
    grad_table,
    hash_to_signed,
    lerp,
    make_permutation,
    split_coords,
)


def test_fade_endpoints():
    t = np.array([0.0, 1.0], dtype=np.float64)
    out = fade(t)
    assert out[0] == 0.0
    assert out[1] == 1.0


def test_lerp_basic():
    a = np.array([0.0, 10.0])
    b = np.array([10.0, 20.0])
    t = np.array([0.0, 0.5])
    out = lerp(a, b, t)
    assert np.allclose(out, np.array([0.0, 15.0]))


def test_cubic_weights_partition_of_unity():
    t = np.linspace(0.0, 1.0, 11)
    w = cubic_weights(t)
    assert np.allclose(sum(w), 1.0)
    # At t=0 the curve passes through the lattice value at offset 0.
    assert np.allclose([wi[0] for wi in w], [0.0, 1.0, 0.0, 0.0])


def test_permutation_is_seeded_and_read_only():
    p0 = make_permutation(0)
    assert p0.shape == (512,)
    assert np.array_equal(np.sort(p0[:256]), np.arange(256))
    assert np.array_equal(p0[:256], p0[256:])
    assert np.array_equal(p0, make_permutation(0))
    assert not np.array_equal(p0, make_permutation(1))
    with pytest.raises(ValueError):
        p0[0] = 1


def test_corner_offsets_counts():
    assert len(corner_offsets(2)) == 4
    assert len(corner_offsets(4)) == 16
    assert len(corner_offsets(3, (-1, 0, 1))) == 27


def test_hash_to_signed_range():
    out = hash_to_signed(np.array([0, 255]))
    assert np.allclose(out, [-1.0, 1.0])


def test_split_coords_rejects_bad_trailing_axis():
    with pytest.raises(ValueError):
        split_coords(np.zeros((4, 5)))
    cell, frac, dim = split_coords(np.array([[1.25, -0.5]]))
    assert dim == 2
    assert np.array_equal(cell, [[1, -1]])
    assert np.allclose(frac, [[0.25, 0.5]])


@pytest.mark.parametrize("dim", [2, 3, 4])
def test_gradient_tables_are_unit_length(dim):
    for name in ("lattice", "sphere"):
        g = grad_table(dim, name)
        assert g.shape[1] == dim
        assert np.allclose(np.linalg.norm(g, axis=1), 1.0)
    with pytest.raises(ValueError):
        grad_table(dim, "nope")
