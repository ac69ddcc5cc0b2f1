from dataclasses import replace

import numpy as np
import pytest

from noisegrid.capabilities import supports
from noisegrid.config import NOISE_KINDS, NoiseConfig
from noisegrid.resolver import Sampler, Unsupported, resolve


def _coords(dim: int) -> np.ndarray:
    rng = np.random.default_rng(11)
    return rng.uniform(-1.0, 1.0, size=(32, dim))


@pytest.mark.parametrize("kind", sorted(NOISE_KINDS))
@pytest.mark.parametrize("dimension", [2, 3, 4])
@pytest.mark.parametrize("simd", [False, True])
def test_resolve_matches_capabilities(kind, dimension, simd):
    out = resolve(NoiseConfig(kind=kind), dimension, simd)
    if supports(kind, dimension, simd):
        assert isinstance(out, Sampler)
        assert out.dimension == dimension
        assert out.wide == simd
        values = out(_coords(dimension))
        assert values.shape == (32,)
        assert np.isfinite(values).all()
    else:
        assert isinstance(out, Unsupported)
        assert out.reason in ("dimension", "precision")


def test_unsupported_reasons():
    out = resolve(NoiseConfig(kind="value_cubic"), 4, False)
    assert out.reason == "dimension"
    assert out.message == "dimension not available for this noise type"
    out = resolve(NoiseConfig(kind="fast_cell_value"), 2, True)
    assert out.reason == "precision"
    assert out.message == "precision not available for this noise type"


def test_sampler_is_deterministic():
    config = NoiseConfig(kind="open_simplex_2", fractal="fbm", seed=42)
    a = resolve(config, 3, False)
    b = resolve(replace(config), 3, False)
    p = _coords(3)
    assert np.array_equal(a(p), b(p))


def test_sampler_single_point_returns_float():
    sampler = resolve(NoiseConfig(), 2, False)
    v = sampler(np.array([0.25, -0.5]))
    assert isinstance(v, float)
    assert np.isclose(v, sampler(np.array([[0.25, -0.5]]))[0])


def test_sampler_rejects_wrong_dimension():
    sampler = resolve(NoiseConfig(), 3, False)
    with pytest.raises(ValueError):
        sampler(np.zeros((4, 2)))


def test_irrelevant_fields_are_ignored():
    base = NoiseConfig(kind="perlin", tileable=False)
    noisy = replace(
        base,
        jitter=0.2,
        distance_fn="manhattan",
        value_index=3,
        improve="xz",
        octaves=7,
        ping_pong_strength=0.7,
    )
    p = _coords(3)
    assert np.array_equal(resolve(base, 3, False)(p), resolve(noisy, 3, False)(p))


def test_improve_only_changes_simplex_3d():
    p = _coords(3)
    a = resolve(NoiseConfig(kind="simplex", improve="none"), 3, False)(p)
    b = resolve(NoiseConfig(kind="simplex", improve="xz"), 3, False)(p)
    assert not np.allclose(a, b)


def test_tileable_is_effective_only_where_supported():
    assert resolve(NoiseConfig(kind="perlin", tileable=True), 2, False).tileable
    assert not resolve(NoiseConfig(kind="perlin", tileable=False), 2, False).tileable
    assert not resolve(NoiseConfig(kind="perlin", tileable=True), 3, False).tileable
    assert not resolve(NoiseConfig(kind="value_cubic", tileable=True), 2, False).tileable


def test_tiled_sampler_is_periodic():
    config = NoiseConfig(kind="simplex", frequency=2.0, tile_width=0.5, tile_height=0.5)
    sampler = resolve(config, 2, True)
    p = _coords(2)
    assert np.allclose(sampler(p), sampler(p + 1.0))


def test_unknown_dimension_raises():
    with pytest.raises(ValueError):
        resolve(NoiseConfig(), 5, False)
