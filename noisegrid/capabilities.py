"""Per-kind capability table.

One row per noise kind: which dimensions and precision modes have an
evaluator, how raw output maps to display intensity, and how to bind the
kind's kernel from a config. The resolver, the normalizer and the settings
form all read this table; adding a kind means adding a row here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable

from noisefn import (
    cell_distance,
    cell_value,
    open_simplex_2,
    open_simplex_2s,
    perlin_noise,
    simplex_noise,
    value_cubic_noise,
    value_noise,
)
from noisefn.fractal import Kernel

from noisegrid.config import NOISE_KINDS, NoiseConfig

SIGNED = "signed"
DISTANCE = "distance"

SCALAR = "scalar"
WIDE = "wide"

ALL_DIMS = frozenset({2, 3, 4})
PLANAR_DIMS = frozenset({2, 3})
BOTH_PRECISIONS = frozenset({SCALAR, WIDE})
SCALAR_ONLY = frozenset({SCALAR})


@dataclass(frozen=True)
class KindSpec:
    family: str
    dims: frozenset[int]
    precisions: frozenset[str]
    policy: str
    bind: Callable[[NoiseConfig], Kernel]


def _plain(kernel: Kernel) -> Callable[[NoiseConfig], Kernel]:
    return lambda config: kernel


def _cell_value(fast: bool) -> Callable[[NoiseConfig], Kernel]:
    def bind(config: NoiseConfig) -> Kernel:
        return partial(
            cell_value,
            jitter=float(config.jitter),
            distance_fn=str(config.distance_fn),
            value_index=int(config.value_index),
            fast=fast,
        )

    return bind


def _cell_distance(fast: bool, squared: bool) -> Callable[[NoiseConfig], Kernel]:
    def bind(config: NoiseConfig) -> Kernel:
        return partial(
            cell_distance,
            jitter=float(config.jitter),
            distance_fn=str(config.distance_fn),
            distance_indices=tuple(config.distance_indices),
            return_type=str(config.distance_return_type),
            squared=squared,
            fast=fast,
        )

    return bind


KIND_TABLE: dict[str, KindSpec] = {
    "value": KindSpec("value", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _plain(value_noise)),
    "value_cubic": KindSpec(
        "value", PLANAR_DIMS, BOTH_PRECISIONS, SIGNED, _plain(value_cubic_noise)
    ),
    "perlin": KindSpec("gradient", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _plain(perlin_noise)),
    "simplex": KindSpec("simplex", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _plain(simplex_noise)),
    "open_simplex_2": KindSpec(
        "simplex", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _plain(open_simplex_2)
    ),
    "open_simplex_2s": KindSpec(
        "simplex", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _plain(open_simplex_2s)
    ),
    "cell_value": KindSpec("cellular", ALL_DIMS, BOTH_PRECISIONS, SIGNED, _cell_value(False)),
    "cell_distance": KindSpec(
        "cellular", ALL_DIMS, BOTH_PRECISIONS, DISTANCE, _cell_distance(False, False)
    ),
    "cell_distance_sq": KindSpec(
        "cellular", ALL_DIMS, BOTH_PRECISIONS, DISTANCE, _cell_distance(False, True)
    ),
    "fast_cell_value": KindSpec(
        "cellular", PLANAR_DIMS, SCALAR_ONLY, SIGNED, _cell_value(True)
    ),
    "fast_cell_distance": KindSpec(
        "cellular", PLANAR_DIMS, SCALAR_ONLY, DISTANCE, _cell_distance(True, False)
    ),
    "fast_cell_distance_sq": KindSpec(
        "cellular", PLANAR_DIMS, SCALAR_ONLY, DISTANCE, _cell_distance(True, True)
    ),
}

if set(KIND_TABLE) != set(NOISE_KINDS):
    raise RuntimeError("KIND_TABLE must have exactly one row per noise kind")


def kind_spec(kind: str) -> KindSpec:
    try:
        return KIND_TABLE[str(kind)]
    except KeyError:
        raise ValueError(f"unknown noise kind: {kind!r}") from None


def precision(simd: bool) -> str:
    return WIDE if bool(simd) else SCALAR


def supports(kind: str, dimension: int, simd: bool) -> bool:
    spec = kind_spec(kind)
    return int(dimension) in spec.dims and precision(simd) in spec.precisions


def supports_tiling(kind: str, dimension: int) -> bool:
    """Tiling wraps a 2D view onto a 4D torus, so it needs a 4D evaluator."""
    return int(dimension) == 2 and 4 in kind_spec(kind).dims


def normalization_policy(kind: str) -> str:
    return kind_spec(kind).policy


def is_cellular(kind: str) -> bool:
    return kind_spec(kind).family == "cellular"


def is_simplex_family(kind: str) -> bool:
    return kind_spec(kind).family == "simplex"


def is_cell_value(kind: str) -> bool:
    return is_cellular(kind) and kind_spec(kind).policy == SIGNED


def is_cell_distance(kind: str) -> bool:
    return is_cellular(kind) and kind_spec(kind).policy == DISTANCE
