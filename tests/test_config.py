import pytest

from noisegrid.config import (
    DEFAULT_CONFIG,
    DEFAULT_SETTINGS,
    DEFAULT_VIEWPORT,
    NoiseConfig,
    Viewport,
)


def test_module_defaults_are_built_at_import():
    assert DEFAULT_CONFIG.kind == "simplex"
    assert DEFAULT_VIEWPORT.resolution == 295
    assert DEFAULT_SETTINGS.config == NoiseConfig()


def test_unknown_tags_rejected():
    with pytest.raises(ValueError):
        NoiseConfig(kind="worley")
    with pytest.raises(ValueError):
        NoiseConfig(fractal="billow")
    with pytest.raises(ValueError):
        Viewport(dimension=5)
    with pytest.raises(ValueError):
        NoiseConfig(distance_indices=(0, 1, 2))


def test_distance_indices_normalized_to_int_pair():
    assert NoiseConfig(distance_indices=[2, 3]).distance_indices == (2, 3)
