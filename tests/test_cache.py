import numpy as np
import pytest

from noisegrid.cache import SENTINEL_RGB, ValueCache


def test_new_cache_is_empty_and_dirty():
    cache = ValueCache()
    assert cache.size == 0
    assert cache.values.shape == (0,)
    assert cache.pixels.shape == (0, 3)
    assert cache.is_dirty()


def test_resize_allocates_sentinel_pixels():
    cache = ValueCache()
    assert cache.resize(6)
    assert cache.values.shape == (6,)
    assert cache.values.dtype == np.float32
    assert cache.pixels.shape == (6, 3)
    assert (cache.pixels == np.array(SENTINEL_RGB, dtype=np.uint8)).all()
    assert np.array_equal(cache.gray(), [255] * 6)


def test_resize_to_same_size_keeps_buffers():
    cache = ValueCache()
    cache.resize(4)
    values = cache.values
    cache.values[:] = 1.5
    assert not cache.resize(4)
    assert cache.values is values
    assert cache.allocations == 1
    assert np.all(cache.values == 1.5)


def test_resize_to_zero_and_back():
    cache = ValueCache()
    cache.resize(9)
    assert cache.resize(0)
    assert cache.values.shape == (0,)
    assert cache.resize(9)
    assert cache.allocations == 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ValueCache().resize(-1)


def test_dirty_flag():
    cache = ValueCache()
    cache.clear_dirty()
    assert not cache.is_dirty()
    cache.mark_dirty()
    assert cache.is_dirty()
