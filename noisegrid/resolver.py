from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from noisefn import improve_3d, layered, torus_coords
from noisefn.fractal import Kernel

from noisegrid.capabilities import (
    WIDE,
    is_simplex_family,
    kind_spec,
    precision,
    supports_tiling,
)
from noisegrid.config import DIMENSIONS, NoiseConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unsupported:
    """The requested (kind, dimension, precision) has no evaluator."""

    kind: str
    dimension: int
    simd: bool
    reason: str

    @property
    def message(self) -> str:
        return f"{self.reason} not available for this noise type"


@dataclass(frozen=True)
class Sampler:
    """A pure function from coordinates to noise values.

    Accepts one coordinate vector of length `dimension` (returns a float) or
    a stacked array shaped (..., dimension) (returns an array shaped (...)).
    `wide` marks the batched evaluator; `tileable` whether the field was
    wrapped onto a torus to tile. The grid's coordinate mapping follows the
    requested `NoiseConfig.tileable`, not this flag.
    """

    dimension: int
    wide: bool
    tileable: bool
    fn: Callable[[np.ndarray], np.ndarray]

    def __call__(self, coords: np.ndarray) -> np.ndarray | float:
        pts = np.asarray(coords, dtype=np.float64)
        if pts.shape[-1:] != (self.dimension,):
            raise ValueError(
                f"expected coordinates with trailing axis {self.dimension}, got {pts.shape}"
            )
        if pts.ndim == 1:
            return float(self.fn(pts[None, :])[0])
        return self.fn(pts)


def _fractal_fn(kernel: Kernel, config: NoiseConfig) -> Callable[[np.ndarray], np.ndarray]:
    seed = int(config.seed)
    fractal = str(config.fractal)
    octaves = int(config.octaves)
    lacunarity = float(config.lacunarity)
    gain = float(config.gain)
    weighted_strength = float(config.weighted_strength)
    ping_pong_strength = float(config.ping_pong_strength)

    def sample(p: np.ndarray) -> np.ndarray:
        return layered(
            kernel,
            p,
            seed=seed,
            fractal=fractal,
            octaves=octaves,
            lacunarity=lacunarity,
            gain=gain,
            weighted_strength=weighted_strength,
            ping_pong_strength=ping_pong_strength,
        )

    return sample


def resolve(config: NoiseConfig, dimension: int, simd: bool) -> Sampler | Unsupported:
    """Resolve `config` into a sampler for `dimension` and the precision mode.

    Returns `Unsupported` (never raises) when the kind has no evaluator for
    the dimension or the precision. Parameters outside the kind's relevant
    subset are not read.
    """

    dimension = int(dimension)
    if dimension not in DIMENSIONS:
        raise ValueError(f"unknown dimension: {dimension!r}")

    spec = kind_spec(config.kind)
    mode = precision(simd)
    if dimension not in spec.dims:
        logger.info("no %dD evaluator for %s", dimension, config.kind)
        return Unsupported(config.kind, dimension, bool(simd), "dimension")
    if mode not in spec.precisions:
        logger.info("no %s evaluator for %s", mode, config.kind)
        return Unsupported(config.kind, dimension, bool(simd), "precision")

    layered_fn = _fractal_fn(spec.bind(config), config)
    frequency = float(config.frequency)

    if bool(config.tileable) and supports_tiling(config.kind, dimension):
        # Tile extent in viewport units is tile size times frequency.
        period_x = float(config.tile_width) * frequency
        period_y = float(config.tile_height) * frequency

        def fn(p: np.ndarray) -> np.ndarray:
            return layered_fn(
                torus_coords(p, period_x=period_x, period_y=period_y, frequency=frequency)
            )

        return Sampler(dimension, mode == WIDE, True, fn)

    if dimension == 3 and is_simplex_family(config.kind):
        improve = str(config.improve)

        def fn(p: np.ndarray) -> np.ndarray:
            return layered_fn(improve_3d(p * frequency, improve))

    else:

        def fn(p: np.ndarray) -> np.ndarray:
            return layered_fn(p * frequency)

    return Sampler(dimension, mode == WIDE, False, fn)
