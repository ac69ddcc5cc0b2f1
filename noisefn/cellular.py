from __future__ import annotations

import numpy as np

from .core import corner_offsets, hash_lattice, hash_to_signed, make_permutation, split_coords

DISTANCE_FNS = ("euclidean", "euclidean_squared", "manhattan", "hybrid", "chebyshev")
RETURN_TYPES = ("index0", "index0_add_1", "index0_sub_1", "index0_mul_1", "index0_div_1")

# Number of ranked neighbours tracked (cell indices I0..I3).
TRACKED = 4
FAST_TRACKED = 2

# Reduced jitter span of the fast lattice, so feature points stay well inside
# their cell and the 3^dim search never misses a closer point.
FAST_JITTER = 0.43701595


def _distance(delta: np.ndarray, distance_fn: str) -> np.ndarray:
    if distance_fn == "euclidean":
        return np.sqrt(np.sum(delta * delta, axis=-1))
    if distance_fn == "euclidean_squared":
        return np.sum(delta * delta, axis=-1)
    if distance_fn == "manhattan":
        return np.sum(np.abs(delta), axis=-1)
    if distance_fn == "hybrid":
        return np.sum(np.abs(delta), axis=-1) + np.sum(delta * delta, axis=-1)
    if distance_fn == "chebyshev":
        return np.max(np.abs(delta), axis=-1)
    raise ValueError(f"unknown distance function: {distance_fn}")


def nearest_features(
    p: np.ndarray,
    *,
    seed: int,
    jitter: float,
    distance_fn: str,
    fast: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """Ranked distances and hashed values of the nearest feature points.

    Returns (distances, values), both shaped (..., k) and sorted by distance,
    where k is 4 (or 2 on the fast lattice).
    """

    cell, frac, dim = split_coords(p)
    perm = make_permutation(int(seed))
    jitter = float(jitter) * (FAST_JITTER if fast else 0.5)
    keep = FAST_TRACKED if fast else TRACKED

    shape = frac.shape[:-1]
    best_d = np.full(shape + (keep,), np.inf, dtype=np.float64)
    best_v = np.zeros(shape + (keep,), dtype=np.float64)

    for offset in corner_offsets(dim, (-1, 0, 1)):
        cells = [(cell[..., a] + c) & 255 for a, c in enumerate(offset)]
        h = hash_lattice(perm, cells)
        feature = np.stack(
            [
                c + 0.5 + jitter * hash_to_signed(perm[(h + 31 * (a + 1)) & 511])
                for a, c in enumerate(offset)
            ],
            axis=-1,
        )
        d = _distance(feature - frac, distance_fn)
        v = hash_to_signed(perm[(h + 211) & 511])

        all_d = np.concatenate([best_d, d[..., None]], axis=-1)
        all_v = np.concatenate([best_v, v[..., None]], axis=-1)
        rank = np.argsort(all_d, axis=-1, kind="stable")[..., :keep]
        best_d = np.take_along_axis(all_d, rank, axis=-1)
        best_v = np.take_along_axis(all_v, rank, axis=-1)

    return best_d, best_v


def _clamp_index(index: int, fast: bool) -> int:
    index = int(index)
    if index < 0 or index >= TRACKED:
        raise ValueError(f"cell index must be in 0..{TRACKED - 1}")
    return min(index, FAST_TRACKED - 1) if fast else index


def cell_value(
    p: np.ndarray,
    *,
    seed: int = 0,
    jitter: float = 1.0,
    distance_fn: str = "euclidean",
    value_index: int = 0,
    fast: bool = False,
) -> np.ndarray:
    """Hashed value in [-1, 1] of the `value_index`-th nearest feature point."""

    _, values = nearest_features(
        p, seed=seed, jitter=jitter, distance_fn=distance_fn, fast=fast
    )
    return values[..., _clamp_index(value_index, fast)]


def cell_distance(
    p: np.ndarray,
    *,
    seed: int = 0,
    jitter: float = 1.0,
    distance_fn: str = "euclidean",
    distance_indices: tuple[int, int] = (0, 1),
    return_type: str = "index0",
    squared: bool = False,
    fast: bool = False,
) -> np.ndarray:
    """Non-negative cellular distance output, nominally within [0, 1]."""

    return_type = str(return_type)
    if return_type not in RETURN_TYPES:
        raise ValueError(f"unknown distance return type: {return_type}")

    distances, _ = nearest_features(
        p, seed=seed, jitter=jitter, distance_fn=distance_fn, fast=fast
    )
    i0 = _clamp_index(distance_indices[0], fast)
    i1 = _clamp_index(distance_indices[1], fast)
    d0 = distances[..., i0]
    d1 = distances[..., i1]
    if squared:
        d0 = d0 * d0
        d1 = d1 * d1

    if return_type == "index0":
        return d0
    if return_type == "index0_add_1":
        return (d0 + d1) * 0.5
    if return_type == "index0_sub_1":
        return np.abs(d1 - d0)
    if return_type == "index0_mul_1":
        return d0 * d1 * 0.5
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.where(d1 > 0.0, d0 / d1, 0.0)
    return ratio
