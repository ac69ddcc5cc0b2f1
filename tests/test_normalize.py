import numpy as np
import pytest

from noisegrid.config import NOISE_KINDS
from noisegrid.normalize import POLICY_BY_KIND, normalize, normalize_into, to_bytes


def test_policy_table_is_exhaustive():
    assert set(POLICY_BY_KIND) == set(NOISE_KINDS)


@pytest.mark.parametrize("kind", ["value", "perlin", "simplex", "cell_value", "fast_cell_value"])
def test_signed_kinds_map_minus_one_to_one(kind):
    assert normalize(-1.0, kind) == 0
    assert normalize(0.0, kind) == 127
    assert normalize(1.0, kind) == 255


@pytest.mark.parametrize("kind", ["cell_distance", "fast_cell_distance_sq"])
def test_distance_kinds_map_zero_to_one(kind):
    assert normalize(0.0, kind) == 0
    assert normalize(0.5, kind) == 127
    assert normalize(1.0, kind) == 255


def test_out_of_range_and_non_finite_values_clamp():
    out = to_bytes(np.array([-3.0, 3.0, np.nan, np.inf, -np.inf]), "simplex")
    assert out.dtype == np.uint8
    assert list(out) == [0, 255, 0, 255, 0]
    assert normalize(7.5, "cell_distance") == 255
    assert normalize(-0.2, "cell_distance") == 0


def test_unknown_kind():
    with pytest.raises(ValueError):
        normalize(0.0, "billow")


def test_normalize_into_writes_every_channel():
    values = np.array([-1.0, 0.0, 1.0], dtype=np.float32)
    pixels = np.zeros((3, 3), dtype=np.uint8)
    normalize_into(values, pixels, "value")
    assert np.array_equal(pixels, [[0, 0, 0], [127, 127, 127], [255, 255, 255]])

    gray = np.zeros(3, dtype=np.uint8)
    normalize_into(values, gray, "value")
    assert np.array_equal(gray, [0, 127, 255])

    with pytest.raises(ValueError):
        normalize_into(values, np.zeros((2, 3), dtype=np.uint8), "value")
